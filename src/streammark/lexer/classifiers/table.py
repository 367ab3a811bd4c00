"""GFM table line classifiers."""

import re

_TABLE_ROW = re.compile(r"^\|(.+)\|$")
_TABLE_SEPARATOR = re.compile(r"^\|?\s*:?-+:?\s*(\|\s*:?-+:?\s*)*\|?$")


def is_table_row(stripped: str) -> bool:
    """Check for a ``| ... |`` row with at least one character between pipes."""
    return _TABLE_ROW.match(stripped) is not None


def is_table_separator(stripped: str) -> bool:
    """Check for a separator row such as ``|---|:--:|``.

    Outer pipes are optional, so a bare ``---`` also qualifies when it
    directly follows a header row.
    """
    return _TABLE_SEPARATOR.match(stripped) is not None


def split_table_cells(stripped: str) -> list[str]:
    """Split a row on pipes, dropping the outer pipes and trimming each cell."""
    return [cell.strip() for cell in stripped[1:-1].split("|")]


def parse_alignments(stripped: str) -> tuple[str | None, ...]:
    """Extract column alignments from a separator row.

    ``:--`` is left, ``:-:`` is center, ``--:`` is right, ``---`` is None.
    """
    line = stripped
    if line.startswith("|"):
        line = line[1:]
    if line.endswith("|"):
        line = line[:-1]

    alignments: list[str | None] = []
    for part in line.split("|"):
        part = part.strip()
        has_left_colon = part.startswith(":")
        has_right_colon = len(part) > 1 and part.endswith(":")
        if has_left_colon and has_right_colon:
            alignments.append("center")
        elif has_left_colon:
            alignments.append("left")
        elif has_right_colon:
            alignments.append("right")
        else:
            alignments.append(None)
    return tuple(alignments)
