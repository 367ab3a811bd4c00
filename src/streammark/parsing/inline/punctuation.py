"""Punctuation merging for inline token sequences.

Layout engines wrap between tokens. A comma or period left in the text
token after a link or bold span can end up alone at the start of the next
line. Moving it (plus at most one following space) into the preceding span
keeps it attached.

    [site](https://site.com), next   ->   link("site, ") + text("next")
    [site](https://site.com) and     ->   link("site") + text(" and")

"""

from __future__ import annotations

from dataclasses import replace

from streammark.charsets import TRAILING_PUNCTUATION
from streammark.tokens import Token, TokenKind, text_token

# Kinds that absorb trailing punctuation
MERGEABLE_KINDS: frozenset[TokenKind] = frozenset(
    {TokenKind.BOLD, TokenKind.ITALIC, TokenKind.BOLD_ITALIC, TokenKind.LINK}
)


def _leading_punctuation(text: str) -> int:
    """Length of the punctuation run at the start of text, plus one space."""
    end = 0
    while end < len(text) and text[end] in TRAILING_PUNCTUATION:
        end += 1
    if end and end < len(text) and text[end] == " ":
        end += 1
    return end


def merge_punctuation(tokens: list[Token]) -> list[Token]:
    """Absorb leading punctuation of text tokens into preceding spans.

    Both ``content`` and ``raw`` of the span grow by the absorbed text, so
    the raw extents still cover the input exactly. A text token emptied by
    the merge is dropped.
    """
    merged: list[Token] = []
    for token in tokens:
        if merged and token.kind is TokenKind.TEXT and merged[-1].kind in MERGEABLE_KINDS:
            cut = _leading_punctuation(token.content)
            if cut:
                taken = token.content[:cut]
                prev = merged[-1]
                merged[-1] = replace(prev, raw=prev.raw + taken, content=prev.content + taken)
                rest = token.content[cut:]
                if rest:
                    merged.append(text_token(rest))
                continue
        merged.append(token)
    return merged


__all__ = ["MERGEABLE_KINDS", "merge_punctuation"]
