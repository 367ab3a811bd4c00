"""Inline match collection.

Each span family is scanned independently over the whole input and every
match is recorded with its [start, end) offsets. Families are collected in
precedence order; together with a stable sort by start offset this decides
which of two matches starting at the same offset survives overlap
resolution.

Precedence:
bold-italic > bold > italic > strikethrough > code > image > link > math

Thread Safety:
All functions are pure; matches are immutable NamedTuples.

"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import NamedTuple

from streammark.config import ParseConfig
from streammark.parsing.inline import patterns
from streammark.tokens import LinkMeta, TokenKind


class InlineMatch(NamedTuple):
    """A candidate inline span.

    Attributes:
        start: Offset of the first character of the span
        end: Offset one past the last character of the span
        kind: Token kind the span becomes
        content: Captured text with delimiters stripped
        metadata: LinkMeta for links and images, else None

    """

    start: int
    end: int
    kind: TokenKind
    content: str
    metadata: LinkMeta | None = None


def _delimited(pattern: re.Pattern[str], text: str, kind: TokenKind) -> Iterator[InlineMatch]:
    """Matches of a pattern whose content is in group 1 or group 2."""
    for m in pattern.finditer(text):
        yield InlineMatch(m.start(), m.end(), kind, m.group(1) or m.group(2))


def _italic(pattern: re.Pattern[str], text: str) -> Iterator[InlineMatch]:
    """Italic matches, stepping one character past each match start.

    The context characters around the span overlap with neighbouring
    candidates, so the search restarts just after the previous match began
    rather than after its end.
    """
    pos = 0
    while (m := pattern.search(text, pos)) is not None:
        yield InlineMatch(m.start(1), m.end(1), TokenKind.ITALIC, m.group(2))
        pos = m.start() + 1


def _images(text: str) -> Iterator[InlineMatch]:
    for m in patterns.IMAGE.finditer(text):
        yield InlineMatch(m.start(), m.end(), TokenKind.IMAGE, m.group(1), LinkMeta(m.group(2)))


def _links(text: str) -> Iterator[InlineMatch]:
    for m in patterns.LINK.finditer(text):
        # [alt](url) preceded by ! is an image
        if m.start() > 0 and text[m.start() - 1] == "!":
            continue
        yield InlineMatch(m.start(), m.end(), TokenKind.LINK, m.group(1), LinkMeta(m.group(2)))


def _math(text: str) -> Iterator[InlineMatch]:
    for m in patterns.MATH.finditer(text):
        # A neighbouring $ means this is part of a $$ block delimiter
        if m.start() > 0 and text[m.start() - 1] == "$":
            continue
        if m.end() < len(text) and text[m.end()] == "$":
            continue
        yield InlineMatch(m.start(), m.end(), TokenKind.MATH_INLINE, m.group(1))


def collect_matches(text: str, config: ParseConfig) -> list[InlineMatch]:
    """Collect every candidate span of every enabled family, in precedence order.

    The result is unsorted and may contain overlapping matches.
    """
    matches: list[InlineMatch] = []
    matches.extend(_delimited(patterns.BOLD_ITALIC, text, TokenKind.BOLD_ITALIC))
    matches.extend(_delimited(patterns.BOLD, text, TokenKind.BOLD))
    matches.extend(_italic(patterns.ITALIC_STAR, text))
    matches.extend(_italic(patterns.ITALIC_UNDERSCORE, text))
    if config.strikethrough_enabled:
        matches.extend(_delimited(patterns.STRIKETHROUGH, text, TokenKind.STRIKETHROUGH))
    matches.extend(_delimited(patterns.CODE, text, TokenKind.CODE_INLINE))
    matches.extend(_images(text))
    matches.extend(_links(text))
    if config.math_enabled:
        matches.extend(_math(text))
    return matches


def resolve_overlaps(matches: list[InlineMatch]) -> list[InlineMatch]:
    """Keep the earliest-starting matches that do not overlap.

    Single left-to-right sweep over matches stably sorted by start offset:
    a match is kept only if it starts at or after the end of the last kept
    match. Ties on start go to the family collected first.
    """
    kept: list[InlineMatch] = []
    last_end = 0
    for match in sorted(matches, key=lambda m: m.start):
        if match.start >= last_end:
            kept.append(match)
            last_end = match.end
    return kept


__all__ = ["InlineMatch", "collect_matches", "resolve_overlaps"]
