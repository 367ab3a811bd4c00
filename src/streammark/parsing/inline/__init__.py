"""Inline formatting for streammark.

Public entry point is format_inline(); the phases live in their own
modules so each can be tested in isolation.

"""

from streammark.parsing.inline.core import format_inline
from streammark.parsing.inline.matches import InlineMatch, collect_matches, resolve_overlaps
from streammark.parsing.inline.punctuation import merge_punctuation

__all__ = [
    "InlineMatch",
    "collect_matches",
    "format_inline",
    "merge_punctuation",
    "resolve_overlaps",
]
