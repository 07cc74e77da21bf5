from __future__ import annotations

import logging
from typing import Optional, Tuple

from tools_gallery.core.entry import Catalog, Entry
from tools_gallery.core.filter_state import (
    FilterState,
    normalise_category,
    normalise_search_term,
)

logger = logging.getLogger(__name__)


def matches_search(entry: Entry, term: str) -> bool:
    """Case-insensitive substring match on name, description or category."""
    if not term:
        return True
    return (
        term in entry.name.lower()
        or term in entry.description.lower()
        or term in entry.category.lower()
    )


def matches_category(entry: Entry, category: Optional[str]) -> bool:
    if category is None:
        return True
    return entry.category == category


class FilterEngine:
    """
    Owns one loaded Catalog and the filter state applied to it.

    Design Notes:
    - The Catalog is immutable; reload() swaps it wholesale
    - The current view is recomputed from the full collection on every change, so it
      is always a subsequence of the collection in collection order
    - Search and category predicates are ANDed
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._state = FilterState()
        self._view: Tuple[Entry, ...] = catalog.entries

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------
    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._catalog.entries

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._catalog.categories

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def current_view(self) -> Tuple[Entry, ...]:
        return self._view

    # -------------------------------------------------------------------------
    # Filter operations
    # -------------------------------------------------------------------------
    def set_search_term(self, term: Optional[str]) -> Tuple[Entry, ...]:
        self._state = FilterState(
            search_term=normalise_search_term(term),
            selected_category=self._state.selected_category,
        )
        return self._recompute()

    def set_category(self, category: Optional[str]) -> Tuple[Entry, ...]:
        self._state = FilterState(
            search_term=self._state.search_term,
            selected_category=normalise_category(category),
        )
        return self._recompute()

    def reset(self) -> Tuple[Entry, ...]:
        self._state = FilterState()
        return self._recompute()

    def apply(self, state: FilterState) -> Tuple[Entry, ...]:
        """
        Replace both predicates at once, e.g. from a state carried by the UI store.
        """
        self._state = FilterState(
            search_term=normalise_search_term(state.search_term),
            selected_category=normalise_category(state.selected_category),
        )
        return self._recompute()

    def reload(self, catalog: Catalog) -> Tuple[Entry, ...]:
        """
        Swap in a freshly loaded Catalog, keeping the current filter state.
        """
        self._catalog = catalog
        logger.info(
            "Filter engine reloaded",
            extra={"n_entries": len(catalog.entries), "n_categories": len(catalog.categories)},
        )
        return self._recompute()

    def _recompute(self) -> Tuple[Entry, ...]:
        term = self._state.search_term
        category = self._state.selected_category
        self._view = tuple(
            entry
            for entry in self._catalog.entries
            if matches_category(entry, category) and matches_search(entry, term)
        )
        return self._view
