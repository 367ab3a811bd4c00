"""ATX heading classifier."""

from typing import NamedTuple

from streammark.charsets import WHITESPACE


class HeadingLine(NamedTuple):
    level: int
    content: str


def classify_heading(stripped: str) -> HeadingLine | None:
    """Classify a stripped line as an ATX heading.

    Headings are 1-6 # characters followed by at least one space or tab.
    The content is everything after that whitespace.

    Returns:
        HeadingLine if valid heading, None otherwise.
    """
    level = 0
    while level < len(stripped) and stripped[level] == "#":
        level += 1

    if level == 0 or level > 6:
        return None

    # Must be followed by whitespace
    if level >= len(stripped) or stripped[level] not in WHITESPACE:
        return None

    return HeadingLine(level=level, content=stripped[level:].lstrip())
