"""Horizontal rule classifier."""

from streammark.charsets import THEMATIC_BREAK_CHARS


def is_horizontal_rule(stripped: str) -> bool:
    """Check whether a stripped line is a horizontal rule.

    A rule is 3 or more characters drawn only from -, * and _.
    Mixed runs such as -*- are accepted; spaces are not.
    """
    if len(stripped) < 3:
        return False
    return all(c in THEMATIC_BREAK_CHARS for c in stripped)
