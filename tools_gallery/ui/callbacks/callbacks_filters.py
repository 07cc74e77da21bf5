from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

import dash
from dash import Input, Output

from tools_gallery.core.filter_state import (
    FilterState,
    normalise_category,
    normalise_search_term,
)
from tools_gallery.ui.ids import IDs

if TYPE_CHECKING:
    from tools_gallery.ui.config import AppConfig

logger = logging.getLogger(__name__)


def filter_state_from_controls(search_value: Optional[str], category: Optional[str]) -> Dict[str, Any]:
    """
    Translate raw control values into the serialised FilterState kept in the store.
    """
    state = FilterState(
        search_term=normalise_search_term(search_value),
        selected_category=normalise_category(category),
    )
    return state.to_dict()


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Search box / search button / category -> FilterState store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Control.SEARCH_BTN, "n_clicks"),
        Input(IDs.Control.CATEGORY_SELECT, "value"),
    )
    def update_filter_state(search_value: str | None, _n_clicks, category: str | None):
        data = filter_state_from_controls(search_value, category)
        logger.debug("filter_state_changed", extra=data)
        return data

    # ---------------------------------------------------------
    # Reset: clearing the controls re-triggers update_filter_state
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Control.CATEGORY_SELECT, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filters(_n_clicks):
        return "", None
