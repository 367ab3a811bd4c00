"""Utility modules for streammark.

Provides:
- hashing: hash_str for cache keys
- logger: get_logger and preview for logging
"""

from streammark.utils.hashing import hash_str
from streammark.utils.logger import get_logger, preview

__all__ = [
    "get_logger",
    "hash_str",
    "preview",
]
