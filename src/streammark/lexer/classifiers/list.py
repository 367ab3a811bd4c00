"""List item classifiers.

Ordered and unordered markers are classified separately: the block scanner
never merges an ordered run with an unordered one.
"""

import re
from typing import NamedTuple

_ORDERED_ITEM = re.compile(r"^(\d{1,9})\.\s+(.*)$")
_UNORDERED_ITEM = re.compile(r"^[-*+]\s+(.*)$")
_TASK_BOX = re.compile(r"^\[([ xX])\]\s*(.*)$")


class OrderedItem(NamedTuple):
    number: int
    content: str


class TaskBox(NamedTuple):
    checked: bool
    content: str


def classify_ordered_item(stripped: str) -> OrderedItem | None:
    """Classify ``1. text``. The number is kept as written, not renumbered.

    Markers are limited to 9 digits, so int() never sees an unbounded run.
    """
    match = _ORDERED_ITEM.match(stripped)
    if match is None:
        return None
    return OrderedItem(number=int(match.group(1)), content=match.group(2))


def classify_unordered_item(stripped: str) -> str | None:
    """Return the content of a ``- text`` / ``* text`` / ``+ text`` line."""
    match = _UNORDERED_ITEM.match(stripped)
    if match is None:
        return None
    return match.group(1)


def classify_task_box(content: str) -> TaskBox | None:
    """Detect a GFM checkbox at the start of list item content.

    Returns:
        TaskBox with the checkbox stripped from the content, or None.
    """
    match = _TASK_BOX.match(content)
    if match is None:
        return None
    return TaskBox(checked=match.group(1) in "xX", content=match.group(2))
