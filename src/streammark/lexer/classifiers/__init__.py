"""Line classifiers for the streammark block scanner.

Each classifier is a pure function over a single (usually stripped) line
that returns a small NamedTuple describing the match, or None. Classifiers
never look at neighbouring lines; look-ahead belongs to the block scanner.
"""

from streammark.lexer.classifiers.fence import FenceLine, classify_fence, is_fence_line
from streammark.lexer.classifiers.heading import HeadingLine, classify_heading
from streammark.lexer.classifiers.image import ImageLine, classify_standalone_image
from streammark.lexer.classifiers.list import (
    OrderedItem,
    TaskBox,
    classify_ordered_item,
    classify_task_box,
    classify_unordered_item,
)
from streammark.lexer.classifiers.math import (
    MathFence,
    MathLine,
    classify_math_open,
    closes_math_block,
)
from streammark.lexer.classifiers.quote import classify_block_quote
from streammark.lexer.classifiers.table import (
    is_table_row,
    is_table_separator,
    parse_alignments,
    split_table_cells,
)
from streammark.lexer.classifiers.thematic import is_horizontal_rule

__all__ = [
    "FenceLine",
    "HeadingLine",
    "ImageLine",
    "MathFence",
    "MathLine",
    "OrderedItem",
    "TaskBox",
    "classify_block_quote",
    "classify_fence",
    "classify_heading",
    "classify_math_open",
    "classify_ordered_item",
    "classify_standalone_image",
    "classify_task_box",
    "classify_unordered_item",
    "closes_math_block",
    "is_fence_line",
    "is_horizontal_rule",
    "is_table_row",
    "is_table_separator",
    "parse_alignments",
    "split_table_cells",
]
