from __future__ import annotations

__all__ = ["IDs"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        # Filter bar
        SEARCH_INPUT = "search-input"
        SEARCH_BTN = "search-btn"
        CATEGORY_SELECT = "category-select"
        RESET_BTN = "reset-filters-btn"

        # Gallery
        TOOLS_CONTAINER = "tools-container"
        RESULT_COUNT = "result-count"
