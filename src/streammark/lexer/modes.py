"""Block scanner operating modes.

Lists and tables are not modes: they are greedy look-ahead loops entered
from DEFAULT that consume their whole contiguous run before returning.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanMode(Enum):
    """Block scanner operating modes.

    - DEFAULT: Between blocks, dispatching on each line
    - CODE_BLOCK: Inside a ``` fence, lines are literal
    - MATH_BLOCK: Inside a $$ fence, lines are accumulated

    """

    DEFAULT = auto()
    CODE_BLOCK = auto()
    MATH_BLOCK = auto()
