from dataclasses import dataclass
from pathlib import Path

from tools_gallery.config.model import GlobalConfig
from tools_gallery.core.entry import Catalog


@dataclass
class AppConfig:
    """
    Shared state for the Dash app, passed into layout and callback
    registration instead of module-level globals. The catalog is loaded once
    at startup and never mutated by callbacks.
    """
    config_root: Path
    global_config: GlobalConfig
    catalog: Catalog

    def validate(self) -> None:
        """Ensure the catalog is usable before the app starts."""
        if not self.catalog.entries:
            raise RuntimeError("AppConfig.catalog must contain at least one entry.")
