"""Coarse splitting of markdown into independently parseable blocks.

Hosts that re-render on every streamed chunk can split the document,
memoize each block's parse (see streammark.cache), and re-parse only the
trailing block that is still growing.

Rules:
- Blank lines separate blocks
- A fenced code region is one block, blank lines included
- A $$ math region is one block; it closes on a line ending with $$
- A self-contained single-line $$ ... $$ is its own block
- An unterminated code or math region extends to the end of the text

"""

from __future__ import annotations

from streammark.lexer.classifiers.fence import is_fence_line
from streammark.lexer.classifiers.math import MathFence, classify_math_open, closes_math_block


def split_into_blocks(text: str) -> list[str]:
    """Split text into block strings.

    Args:
        text: Markdown source

    Returns:
        Block strings in document order, joined from their source lines
        with newlines. Blank-only separators are not returned.

    Example:
        >>> split_into_blocks("# Title\\n\\nBody")
        ['# Title', 'Body']

    """
    blocks: list[str] = []
    current: list[str] = []
    in_code = False
    in_math = False

    def flush() -> None:
        if current:
            blocks.append("\n".join(current))
            current.clear()

    for line in text.split("\n"):
        stripped = line.strip()

        if in_code:
            current.append(line)
            if is_fence_line(line):
                in_code = False
                flush()
            continue

        if in_math:
            current.append(line)
            if closes_math_block(stripped):
                in_math = False
                flush()
            continue

        if is_fence_line(line):
            flush()
            current.append(line)
            in_code = True
            continue

        math = classify_math_open(stripped)
        if math is not None:
            flush()
            current.append(line)
            if math.shape is MathFence.SINGLE_LINE:
                flush()
            else:
                in_math = True
            continue

        if not stripped:
            flush()
            continue

        current.append(line)

    flush()
    return blocks


__all__ = ["split_into_blocks"]
