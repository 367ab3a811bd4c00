"""Compiled inline patterns, one per span family.

Every pattern requires at least one interior character, so zero-length
matches are impossible. Compiled once at import; no state is shared
between calls beyond the pattern objects themselves.
"""

import re

BOLD_ITALIC = re.compile(r"\*\*\*([^*]+)\*\*\*|___([^_]+)___")
BOLD = re.compile(r"\*\*([^*]+)\*\*|__([^_]+)__")

# Italic patterns carry one character of context on each side so that a
# single delimiter belonging to ** or __ is never taken as italic. Group 1
# is the span itself, group 2 its content.
ITALIC_STAR = re.compile(r"(?:^|[^*])(\*([^*]+)\*)(?:[^*]|$)")
ITALIC_UNDERSCORE = re.compile(r"(?:^|[^_])(_([^_]+)_)(?:[^_]|$)")

STRIKETHROUGH = re.compile(r"~~([^~]+)~~")
CODE = re.compile(r"`([^`]+)`")
IMAGE = re.compile(r"!\[([^\]]*)\]\(([^)]+)\)")
LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
MATH = re.compile(r"\$([^$\n]+)\$")
