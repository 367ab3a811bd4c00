"""Block quote classifier."""


def classify_block_quote(stripped: str) -> str | None:
    """Return the quoted content of a > line, or None if not a quote.

    Whitespace after the marker is dropped.
    """
    if not stripped.startswith(">"):
        return None
    return stripped[1:].lstrip()
