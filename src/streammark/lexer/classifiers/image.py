"""Standalone image line classifier."""

import re
from typing import NamedTuple

_STANDALONE_IMAGE = re.compile(r"^!\[([^\]]*)\]\(([^)]+)\)$")


class ImageLine(NamedTuple):
    alt: str
    url: str


def classify_standalone_image(stripped: str) -> ImageLine | None:
    """Classify a line that consists of exactly one ``![alt](url)``."""
    match = _STANDALONE_IMAGE.match(stripped)
    if match is None:
        return None
    return ImageLine(alt=match.group(1), url=match.group(2))
