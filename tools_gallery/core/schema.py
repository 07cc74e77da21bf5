from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Sequence


@dataclass(frozen=True)
class FieldPositions:
    """
    Positional index of each Entry field within a data row.
    """
    category: int
    name: int
    description: int
    official_url: int
    icon_url: int
    local_icon: int

    def pick(self, fields: Sequence[str]) -> Dict[str, str]:
        """
        Map a split row onto Entry field names. Indices past the end of the
        row resolve to an empty string.
        """
        def at(index: int) -> str:
            return fields[index] if index < len(fields) else ""

        return {
            "category": at(self.category),
            "name": at(self.name),
            "description": at(self.description),
            "official_url": at(self.official_url),
            "icon_url": at(self.icon_url),
            "local_icon": at(self.local_icon),
        }


class ColumnLayout(Enum):
    """
    Known dataset layouts.

    - CURRENT: category, name, description, official url, icon url, local icon
    - LEGACY: datasets produced before the schema change; column 3 is unused
      and the link columns sit one position to the right. The remap is kept
      exactly as-is for compatibility.
    """
    CURRENT = FieldPositions(0, 1, 2, 3, 4, 5)
    LEGACY = FieldPositions(0, 1, 2, 4, 5, 6)

    @property
    def positions(self) -> FieldPositions:
        return self.value


# Header field count -> layout. Any count not listed is treated as LEGACY.
LAYOUT_BY_FIELD_COUNT: Dict[int, ColumnLayout] = {
    6: ColumnLayout.CURRENT,
}


def layout_for_field_count(field_count: int) -> ColumnLayout:
    return LAYOUT_BY_FIELD_COUNT.get(field_count, ColumnLayout.LEGACY)
