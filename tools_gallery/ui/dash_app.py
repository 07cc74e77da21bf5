from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from tools_gallery.config.io import load_global_config
from tools_gallery.services.catalog_loader import CatalogLoader
from tools_gallery.services.sources import CatalogSource, source_from_location
from tools_gallery.ui.layout.build_layout import build_layout
from tools_gallery.ui.callbacks.callbacks_filters import register_filter_callbacks
from tools_gallery.ui.callbacks.callbacks_render import register_render_callbacks

logger = logging.getLogger(__name__)


def create_dash_app(
    config_root: Path | str = Path("config"),
    source: Optional[CatalogSource] = None,
) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config = load_global_config(config_root)

    # 2) Load Catalog (single await at startup; falls back on any failure)
    if source is None:
        source = source_from_location(global_config.source, timeout=global_config.fetch_timeout)
    loader = CatalogLoader(source)
    asyncio.run(loader.load())

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        catalog=loader.catalog,
    )
    ctx.validate()

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )

    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app
