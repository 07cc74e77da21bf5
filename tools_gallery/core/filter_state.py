from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user selection/filters.

    Fields:

    - search_term: lower-cased, trimmed free text; empty means no text restriction
    - selected_category: exact category label, or None for all categories
    """

    search_term: str = ""
    selected_category: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.search_term and self.selected_category is None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        return cls(
            search_term=normalise_search_term(data.get("search_term")),
            selected_category=normalise_category(data.get("selected_category")),
        )


def normalise_search_term(term: Optional[str]) -> str:
    return (term or "").strip().lower()


def normalise_category(category: Optional[str]) -> Optional[str]:
    return category or None
