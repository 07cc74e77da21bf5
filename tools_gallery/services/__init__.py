from .catalog_loader import CatalogLoader
from .sources import (
    CatalogSource,
    HttpCatalogSource,
    LocalFileCatalogSource,
    StaticCatalogSource,
    source_from_location,
)

__all__ = [
    "CatalogLoader",
    "CatalogSource",
    "HttpCatalogSource",
    "LocalFileCatalogSource",
    "StaticCatalogSource",
    "source_from_location",
]
