from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

import dash
from dash import Input, Output

from tools_gallery.core.entry import Catalog, Entry
from tools_gallery.core.filter_engine import FilterEngine
from tools_gallery.core.filter_state import FilterState
from tools_gallery.ui.helpers import build_tool_cards, result_count_text
from tools_gallery.ui.ids import IDs

if TYPE_CHECKING:
    from tools_gallery.ui.config import AppConfig

logger = logging.getLogger(__name__)


def compute_view(catalog: Catalog, fs_data: Optional[dict[str, Any]]) -> Tuple[Entry, ...]:
    """
    Current view for a serialised FilterState. Each call builds its own engine,
    so concurrent browser sessions never share filter state.
    """
    engine = FilterEngine(catalog)
    if not fs_data:
        return engine.current_view

    try:
        state = FilterState.from_dict(fs_data)
    except Exception:
        logger.exception("Invalid filter state in render callback: %r", fs_data)
        return engine.current_view

    return engine.apply(state)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # FilterState -> tool cards
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TOOLS_CONTAINER, "children"),
        Output(IDs.Control.RESULT_COUNT, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
    )
    def update_tools_from_state(fs_data: dict[str, Any] | None):
        view = compute_view(ctx.catalog, fs_data)
        return build_tool_cards(view), result_count_text(len(view), len(ctx.catalog.entries))
