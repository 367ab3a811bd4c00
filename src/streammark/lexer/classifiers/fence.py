"""Fenced code line classifier.

Shared by the block scanner and the block splitter so that both agree on
which lines open or close a code fence. heal() uses a looser prefix check
(any line starting with ```), since it only needs fence parity.
"""

from typing import NamedTuple


class FenceLine(NamedTuple):
    """A ``` fence line.

    Attributes:
        count: Number of backticks in the fence run (3 or more)
        language: First word of the info string ("" when absent)

    """

    count: int
    language: str


def classify_fence(stripped: str) -> FenceLine | None:
    """Classify a whitespace-stripped line as a code fence.

    A fence is a run of 3+ backticks optionally followed by an info string.
    Backtick fences cannot have backticks in the info string, so a line like
    ```inline``` is prose, not a fence.

    Returns:
        FenceLine if the line is a fence, None otherwise.
    """
    if not stripped.startswith("```"):
        return None

    count = 0
    while count < len(stripped) and stripped[count] == "`":
        count += 1

    info = stripped[count:].strip()
    if "`" in info:
        return None

    return FenceLine(count=count, language=info.split()[0] if info else "")


def is_fence_line(line: str) -> bool:
    """Check whether a raw (unstripped) line is a code fence."""
    return classify_fence(line.strip()) is not None
