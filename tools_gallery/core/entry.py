from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, NamedTuple, Tuple


@dataclass(frozen=True)
class Entry:
    """
    One catalog item.

    Fields:

    - category: category label, may be empty (rendered as uncategorized)
    - name: display name, always non-empty once inside a Catalog
    - description: free text shown on the card
    - official_url: link opened when the card is clicked
    - icon_url: remote logo; the renderer supplies a glyph when empty
    - local_icon: reserved, not used by filtering
    """

    category: str
    name: str
    description: str = ""
    official_url: str = ""
    icon_url: str = ""
    local_icon: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Entry:
        return cls(
            category=data.get("category") or "",
            name=data.get("name") or "",
            description=data.get("description") or "",
            official_url=data.get("official_url") or "",
            icon_url=data.get("icon_url") or "",
            local_icon=data.get("local_icon") or "",
        )


class Catalog(NamedTuple):
    """
    Result of one parse or load: the ordered entries and the distinct
    categories in first-seen order. Unpacks as (entries, categories).
    """

    entries: Tuple[Entry, ...]
    categories: Tuple[str, ...]

    @classmethod
    def empty(cls) -> Catalog:
        return cls(entries=(), categories=())
