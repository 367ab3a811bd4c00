"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from streammark.charsets import INLINE_TRIGGERS

    if not INLINE_TRIGGERS.intersection(text):  # nothing to format
        ...
"""

# Characters that can start an inline span; text without any of them is
# returned as a single text token
INLINE_TRIGGERS: frozenset[str] = frozenset("*_`~[$")

# Punctuation absorbed into a preceding bold/italic/link span so that a
# wrapped line never starts with a dangling comma or period
TRAILING_PUNCTUATION: frozenset[str] = frozenset(",.;:!?)…")

# Horizontal rule characters
THEMATIC_BREAK_CHARS: frozenset[str] = frozenset("-*_")

# ASCII whitespace
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")
