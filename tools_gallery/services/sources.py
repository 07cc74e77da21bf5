from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import httpx

from tools_gallery.config.io import is_remote
from tools_gallery.core.exceptions import CatalogSourceError


class CatalogSource(ABC):
    """
    Abstract provider of raw dataset text (HTTP, local file, in-memory, etc.).
    """

    @abstractmethod
    def describe(self) -> str:
        """Human-readable location, used in log records."""
        pass

    @abstractmethod
    async def fetch_text(self) -> str:
        """
        Return the full dataset text.

        Raises:
            CatalogSourceError: if the text cannot be produced
        """
        pass


class HttpCatalogSource(CatalogSource):
    """
    Fetches the dataset over HTTP(S).

    timeout=None disables httpx timeouts entirely: a hung server hangs the fetch.
    """

    def __init__(
        self,
        url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    def describe(self) -> str:
        return self.url

    async def fetch_text(self) -> str:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise CatalogSourceError(f"Could not fetch {self.url}: {e}") from e
        return response.text


class LocalFileCatalogSource(CatalogSource):
    """
    Reads the dataset from the local filesystem as UTF-8 (a leading BOM is dropped).
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    async def fetch_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogSourceError(f"Could not read {self.path}: {e}") from e


class StaticCatalogSource(CatalogSource):
    """
    Serves a fixed string. Handy for embedding a dataset or for tests.
    """

    def __init__(self, text: str, label: str = "<static>"):
        self.text = text
        self.label = label

    def describe(self) -> str:
        return self.label

    async def fetch_text(self) -> str:
        return self.text


def source_from_location(location: str, timeout: Optional[float] = None) -> CatalogSource:
    if is_remote(location):
        return HttpCatalogSource(location, timeout=timeout)
    return LocalFileCatalogSource(location)
