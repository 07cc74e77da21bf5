"""
Core domain layer: catalog entries, column layouts, the dataset parser,
filter state and the filter engine
"""

from .entry import Catalog, Entry
from .filter_engine import FilterEngine
from .filter_state import FilterState
from .parser import parse_catalog, split_line
from .schema import ColumnLayout, layout_for_field_count

__all__ = [
    "Catalog",
    "Entry",
    "FilterEngine",
    "FilterState",
    "parse_catalog",
    "split_line",
    "ColumnLayout",
    "layout_for_field_count",
]
