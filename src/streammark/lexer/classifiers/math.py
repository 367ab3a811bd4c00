"""Math block ($$) line classifier."""

from enum import Enum, auto
from typing import NamedTuple


class MathFence(Enum):
    """Shape of a line that starts with $$."""

    SINGLE_LINE = auto()  # $$ x^2 $$
    OPEN = auto()  # $$ alone
    OPEN_WITH_CONTENT = auto()  # $$ x^2 (continues on later lines)


class MathLine(NamedTuple):
    shape: MathFence
    content: str


def classify_math_open(stripped: str) -> MathLine | None:
    """Classify a stripped line outside a math block.

    A single-line block needs content between its delimiters, so $$$$ opens
    a block (as a streamed $$ healed to $$$$ would) instead of closing one.

    Returns:
        MathLine if the line starts with $$, None otherwise.
    """
    if not stripped.startswith("$$"):
        return None
    if stripped == "$$":
        return MathLine(MathFence.OPEN, "")
    if len(stripped) > 4 and stripped.endswith("$$"):
        return MathLine(MathFence.SINGLE_LINE, stripped[2:-2].strip())
    return MathLine(MathFence.OPEN_WITH_CONTENT, stripped[2:].strip())


def closes_math_block(stripped: str) -> bool:
    """Check whether a stripped line inside a math block closes it.

    Both a bare $$ and content ending in $$ close the block.
    """
    return stripped.endswith("$$")
