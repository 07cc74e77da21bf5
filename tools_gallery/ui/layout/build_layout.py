from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from tools_gallery.ui.ids import IDs
from tools_gallery.ui.layout.build_filter_panel import build_filter_panel
from tools_gallery.ui.layout.build_navbar import build_navbar

if TYPE_CHECKING:
    from tools_gallery.ui.config import AppConfig


def build_layout(ctx: "AppConfig"):
    navbar = build_navbar(ctx.global_config)
    filter_panel = build_filter_panel(ctx.catalog.categories)

    return dbc.Container(
        fluid=True,
        className="tg-root",
        children=[
            navbar,

            dcc.Store(id=IDs.Store.FILTER_STATE, storage_type="session"),

            filter_panel,
            html.Div(id=IDs.Control.RESULT_COUNT, className="text-muted small my-2"),
            dcc.Loading(html.Div(id=IDs.Control.TOOLS_CONTAINER)),
        ],
    )
