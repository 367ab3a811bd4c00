"""Healing of incomplete streamed markdown.

While a model streams text, the document is a prefix of its final form:
``**bold`` arrives before its closing ``**``. heal() appends the minimal
closing markup so the prefix parses as if it were complete.

Only the last line is inspected for inline markers. Earlier lines are
already on screen, and re-healing them on every new chunk would make them
flicker. Two checks look at the whole text:

- Code fence parity: inside an open ``` block nothing is healed, because
  markup characters there are literal code. Any line starting with ```
  counts, even one the block scanner would reject as a fence (```a`b).
- Math fence parity: $$ at the start of a line anywhere in the text.

Healing only ever appends (after optionally dropping one trailing space),
so two texts that share everything up to their last newline heal to
outputs that share that same prefix.

Thread Safety:
heal() is a pure function.

"""

from __future__ import annotations

import re

from streammark.utils.logger import get_logger, preview

logger = get_logger(__name__)

_MATH_FENCE = re.compile(r"(?:^|(?<=\n))\$\$")


def heal(text: str) -> str:
    """Close unterminated inline markup at the end of streamed text.

    Args:
        text: The full document so far (not a delta)

    Returns:
        Text with closers appended. Unchanged inside an open code fence.

    Example:
        >>> heal("This is **bold")
        'This is **bold**'
        >>> heal("Use `code")
        'Use `code`'

    """
    if not text:
        return text

    lines = text.split("\n")
    if sum(1 for line in lines if _is_fence_marker(line)) % 2:
        return text

    # A single trailing space is noise; two or more is a hard line break
    result = text[:-1] if text.endswith(" ") and not text.endswith("  ") else text
    last_line = result.rsplit("\n", 1)[-1]

    closers: list[str] = []
    closers.extend(_bold_closers(last_line))
    if not _is_fence_marker(last_line) and last_line.count("`") % 2:
        closers.append("`")
    if _count_pairs(last_line, "~~") % 2:
        closers.append("~~")
    if _has_open_link_target(last_line):
        closers.append(")")
    if len(_MATH_FENCE.findall(result)) % 2:
        closers.append("$$")
    if _count_single_dollars(last_line) % 2:
        closers.append("$")

    if closers:
        logger.debug("Healing %s, appending %r", preview(result), closers)
    return result + "".join(closers)


def _is_fence_marker(line: str) -> bool:
    return line.strip().startswith("```")


def _bold_closers(line: str) -> list[str]:
    """Closers for unbalanced ** and __ delimiters on a line.

    Delimiters that belong to a ***/___ triple run are skipped. When both
    families are open, the one opened last is closed first.
    """
    open_at: dict[str, int] = {}
    for marker in ("**", "__"):
        positions = _bold_positions(line, marker[0])
        if len(positions) % 2:
            open_at[marker] = positions[-1]
    return sorted(open_at, key=open_at.__getitem__, reverse=True)


def _bold_positions(line: str, char: str) -> list[int]:
    """Offsets of doubled delimiters not adjacent to a third one."""
    positions: list[int] = []
    i = 0
    while i < len(line) - 1:
        if line[i] == char and line[i + 1] == char:
            prev_same = i > 0 and line[i - 1] == char
            next_same = i + 2 < len(line) and line[i + 2] == char
            if not prev_same and not next_same:
                positions.append(i)
                i += 2
                continue
        i += 1
    return positions


def _count_pairs(line: str, pair: str) -> int:
    """Count non-overlapping occurrences of a two-character delimiter."""
    count = 0
    i = 0
    while i < len(line) - 1:
        if line[i : i + 2] == pair:
            count += 1
            i += 2
        else:
            i += 1
    return count


def _has_open_link_target(line: str) -> bool:
    """True when the last [ opens a ``[label](url`` with no closing paren.

    A bare ``[label`` is left alone: the intended target is unknown, so it
    renders as literal text until the model writes it.
    """
    bracket = line.rfind("[")
    if bracket == -1:
        return False
    target = line.find("](", bracket)
    if target == -1:
        return False
    return ")" not in line[target + 2 :]


def _count_single_dollars(line: str) -> int:
    """Count $ characters with no $ immediately before or after."""
    count = 0
    for i, char in enumerate(line):
        if char != "$":
            continue
        if i > 0 and line[i - 1] == "$":
            continue
        if i + 1 < len(line) and line[i + 1] == "$":
            continue
        count += 1
    return count


__all__ = ["heal"]
