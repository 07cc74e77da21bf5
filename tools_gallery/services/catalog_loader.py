from __future__ import annotations

import logging
from typing import Tuple

from tools_gallery.core.entry import Catalog, Entry
from tools_gallery.core.exceptions import CatalogSourceError
from tools_gallery.core.fallback import fallback_catalog
from tools_gallery.core.parser import parse_catalog
from tools_gallery.services.sources import CatalogSource

logger = logging.getLogger(__name__)


class CatalogLoader:
    """
    Fetches the dataset from a CatalogSource and parses it.

    load() never raises: any failure (unreachable source, blank text, nothing
    parseable) installs the built-in fallback catalog and is logged.
    """

    def __init__(self, source: CatalogSource):
        self._source = source
        self._catalog: Catalog = Catalog.empty()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._catalog.categories

    async def load(self) -> Tuple[Entry, ...]:
        source_name = self._source.describe()
        try:
            raw_text = await self._source.fetch_text()
            if not raw_text or not raw_text.strip():
                raise CatalogSourceError(f"Empty response from {source_name}")

            catalog = parse_catalog(raw_text)
            if not catalog.entries:
                raise CatalogSourceError(f"No valid entries in {source_name}")
        except CatalogSourceError as e:
            logger.warning(
                "Catalog load failed; using fallback dataset",
                extra={"source": source_name, "error": str(e)},
            )
            return self._install_fallback()
        except Exception:
            # any source failure degrades to the fallback
            logger.exception(
                "Unexpected error while loading catalog; using fallback dataset",
                extra={"source": source_name},
            )
            return self._install_fallback()

        self._catalog = catalog
        logger.info(
            "Catalog loaded",
            extra={
                "source": source_name,
                "n_entries": len(catalog.entries),
                "n_categories": len(catalog.categories),
            },
        )
        return self._catalog.entries

    def _install_fallback(self) -> Tuple[Entry, ...]:
        self._catalog = fallback_catalog()
        return self._catalog.entries
