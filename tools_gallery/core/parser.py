from __future__ import annotations

from typing import Dict, List

from tools_gallery.core.entry import Catalog, Entry
from tools_gallery.core.schema import layout_for_field_count

QUOTE = '"'
SEPARATOR = ","


def split_line(line: str) -> List[str]:
    """
    Split one dataset row into trimmed fields.

    A double quote toggles quoted mode and is dropped from the output; a comma
    only separates fields outside quoted mode. There is no escaping, so a
    literal quote cannot appear inside a field and a field cannot span lines.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == SEPARATOR and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def parse_catalog(raw_text: str) -> Catalog:
    """
    Parse raw dataset text into a Catalog.

    The first non-blank line is the header; its field count picks the column
    layout. Rows with fewer fields than the header, or with an empty name, are
    dropped without raising. Categories are collected in first-seen order.

    :param raw_text: the full dataset text
    :return: Catalog(entries, categories)
    """
    lines = [line.strip() for line in raw_text.strip().split("\n")]
    if not lines[0]:
        return Catalog.empty()

    header = split_line(lines[0])
    positions = layout_for_field_count(len(header)).positions

    entries: List[Entry] = []
    categories: Dict[str, None] = {}

    for line in lines[1:]:
        if not line:
            continue

        fields = split_line(line)
        if len(fields) < len(header):
            continue

        entry = Entry(**positions.pick(fields))
        if not entry.name.strip():
            continue

        entries.append(entry)
        if entry.category.strip():
            categories.setdefault(entry.category, None)

    return Catalog(entries=tuple(entries), categories=tuple(categories))
