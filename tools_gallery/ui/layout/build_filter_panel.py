from __future__ import annotations

from typing import Sequence

import dash_bootstrap_components as dbc
from dash import dcc

from tools_gallery.ui.helpers import get_category_options
from tools_gallery.ui.ids import IDs


def build_filter_panel(categories: Sequence[str]) -> dbc.Card:
    return dbc.Card(
        dbc.CardBody(
            dbc.Row(
                [
                    dbc.Col(
                        dbc.InputGroup(
                            [
                                # value only updates on Enter / blur
                                dbc.Input(
                                    id=IDs.Control.SEARCH_INPUT,
                                    type="search",
                                    placeholder="Search by name, description or category",
                                    debounce=True,
                                ),
                                dbc.Button("Search", id=IDs.Control.SEARCH_BTN, color="primary"),
                            ],
                        ),
                        md=6,
                    ),
                    dbc.Col(
                        dcc.Dropdown(
                            id=IDs.Control.CATEGORY_SELECT,
                            options=get_category_options(categories),
                            placeholder="All categories",
                            clearable=True,
                        ),
                        md=4,
                    ),
                    dbc.Col(
                        dbc.Button(
                            "Reset",
                            id=IDs.Control.RESET_BTN,
                            color="secondary",
                            outline=True,
                            className="w-100",
                        ),
                        md=2,
                    ),
                ],
                className="g-2 align-items-center",
            ),
        ),
        className="tg-filter-panel mt-3",
    )
