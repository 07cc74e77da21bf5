from __future__ import annotations

from typing import Iterable, List, Sequence

import dash_bootstrap_components as dbc
from dash import html

from tools_gallery.core.entry import Entry

UNCATEGORIZED_LABEL = "Uncategorized"
NO_DESCRIPTION_LABEL = "No description"
EMPTY_VIEW_MESSAGE = "No matching tools found"
FALLBACK_GLYPH = "🛠️"

DEFAULT_ICON_BY_CATEGORY = {
    "AI创新工具": "🔧",
    "AI绘画工具": "🎨",
    "AI视频工具": "🎬",
    "AI音频工具": "🎵",
    "AI学习资源": "📚",
    "AI办公工具": "📊",
    "AI搜索引擎": "🔍",
    "AI编程工具": "💻",
    "AI写作工具": "✍️",
    "AI营销工具": "📈",
}

PREVIEW_CHARS = 60


def default_icon(category: str) -> str:
    return DEFAULT_ICON_BY_CATEGORY.get(category, FALLBACK_GLYPH)


def get_category_options(categories: Iterable[str]) -> List[dict]:
    return [{"label": c, "value": c} for c in sorted(categories)]


def _preview(text: str, limit: int = PREVIEW_CHARS) -> str:
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "…"


def build_tool_card(entry: Entry) -> dbc.Card:
    icon_url = entry.icon_url.strip()
    if icon_url:
        icon = html.Img(src=icon_url, alt=entry.name, className="tool-icon-img")
    else:
        icon = html.Div(default_icon(entry.category), className="fallback-icon")

    description = entry.description or NO_DESCRIPTION_LABEL

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Div(icon, className="tool-icon me-3"),
                        html.Div(
                            [
                                html.Div(entry.name, className="tool-name fw-semibold"),
                                html.Small(
                                    entry.category or UNCATEGORIZED_LABEL,
                                    className="tool-category text-muted",
                                ),
                            ],
                            className="tool-info",
                        ),
                    ],
                    className="d-flex align-items-center",
                ),
            ),
            dbc.CardBody(
                html.Details(
                    [
                        html.Summary(_preview(description), className="tool-description"),
                        html.P(description, className="tool-description-full mt-2 mb-0"),
                    ],
                ),
            ),
            dbc.CardFooter(
                dbc.Button(
                    "Visit website",
                    href=entry.official_url or None,
                    target="_blank",
                    external_link=True,
                    disabled=not entry.official_url,
                    color="primary",
                    size="sm",
                    className="visit-btn",
                ),
            ),
        ],
        className="tool-card h-100",
    )


def build_tool_cards(entries: Sequence[Entry]):
    """
    Cards for the current view, or the empty-state message when nothing matches.
    """
    if not entries:
        return html.Div(EMPTY_VIEW_MESSAGE, className="no-results text-muted text-center my-5")

    return dbc.Row(
        [
            dbc.Col(build_tool_card(entry), xs=12, sm=6, lg=4, xl=3, className="mb-3")
            for entry in entries
        ],
        className="gx-3",
    )


def result_count_text(n_shown: int, n_total: int) -> str:
    if n_shown == n_total:
        return f"{n_total} tools"
    return f"{n_shown} of {n_total} tools"
