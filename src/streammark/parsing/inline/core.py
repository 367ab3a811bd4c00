"""Core inline formatting for streammark.

Turns one line of leaf-block text into an ordered, gap-free sequence of
inline tokens in four phases:

1. Collect candidate matches of every span family (matches.py)
2. Resolve overlaps with a single sweep over matches sorted by start
3. Emit text tokens for the gaps between kept matches
4. Merge trailing punctuation into preceding spans (punctuation.py)

Invariant: ``"".join(t.raw for t in format_inline(text)) == text``.

Link labels are not parsed recursively; a link's content is its literal
label text.

Thread Safety:
Pure function over its input and the active ParseConfig.

"""

from __future__ import annotations

from streammark.config import ParseConfig, get_parse_config
from streammark.charsets import INLINE_TRIGGERS
from streammark.parsing.inline.matches import InlineMatch, collect_matches, resolve_overlaps
from streammark.parsing.inline.punctuation import merge_punctuation
from streammark.tokens import Token, text_token


def format_inline(text: str, config: ParseConfig | None = None) -> tuple[Token, ...]:
    """Tokenize inline markup in a single block of text.

    Args:
        text: Leaf block content (heading text, paragraph line, cell, ...)
        config: Feature switches; defaults to the active context config

    Returns:
        Tuple of inline tokens covering the whole input. Empty input
        yields an empty tuple.

    Example:
        >>> [t.kind.value for t in format_inline("a **b** c")]
        ['text', 'bold', 'text']

    """
    if not text:
        return ()

    # Fast path: nothing that could open a span
    if len(text) < 3 or INLINE_TRIGGERS.isdisjoint(text):
        return (text_token(text),)

    if config is None:
        config = get_parse_config()

    kept = resolve_overlaps(collect_matches(text, config))
    if not kept:
        return (text_token(text),)

    tokens = _build_tokens(text, kept)
    if config.merge_punctuation:
        tokens = merge_punctuation(tokens)
    return tuple(tokens)


def _build_tokens(text: str, kept: list[InlineMatch]) -> list[Token]:
    """Interleave kept matches with text tokens for the gaps between them."""
    tokens: list[Token] = []
    pos = 0
    for match in kept:
        if match.start > pos:
            tokens.append(text_token(text[pos : match.start]))
        tokens.append(
            Token(
                kind=match.kind,
                raw=text[match.start : match.end],
                content=match.content,
                metadata=match.metadata,
            )
        )
        pos = match.end

    if pos < len(text):
        tokens.append(text_token(text[pos:]))
    return tokens


__all__ = ["format_inline"]
