"""Content-addressed parse cache for streammark.

Provides (content_hash, config_hash) -> ParsedMarkdown caching so a host
re-rendering a stream does not re-parse blocks that have stopped changing.
Pair with split_into_blocks() to memoize per-block parses; only the last,
still-growing block misses.

Thread Safety:
    DictParseCache is not thread-safe. For parallel parsing, use a cache
    implementation with internal locking (e.g. threading.Lock around get/put).

Example:
    >>> from streammark import parse, DictParseCache
    >>> cache = DictParseCache()
    >>> first = parse("# Hello", cache=cache)
    >>> second = parse("# Hello", cache=cache)  # Cache hit, no re-parse
    >>> first is second
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from streammark.utils.hashing import hash_str

if TYPE_CHECKING:
    from streammark.config import ParseConfig
    from streammark.tokens import ParsedMarkdown


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches.

    Cache key is (content_hash, config_hash). Cached value is ParsedMarkdown,
    which is immutable and safe to share across threads.
    """

    def get(self, content_hash: str, config_hash: str) -> ParsedMarkdown | None:
        """Return cached result if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, result: ParsedMarkdown) -> None:
        """Store result in cache."""
        ...


class DictParseCache:
    """In-memory parse cache using a dict.

    Not thread-safe. Unbounded: a long-lived host should clear() it when a
    conversation or document is discarded.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], ParsedMarkdown] = {}

    def __len__(self) -> int:
        return len(self._data)

    def get(self, content_hash: str, config_hash: str) -> ParsedMarkdown | None:
        """Return cached result if present, else None."""
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, result: ParsedMarkdown) -> None:
        """Store result in cache."""
        self._data[(content_hash, config_hash)] = result

    def clear(self) -> None:
        self._data.clear()


def hash_content(source: str) -> str:
    """Compute SHA256 hash of source for cache key.

    Args:
        source: Markdown source text

    Returns:
        Hex digest of SHA256 hash
    """
    return hash_str(source)


def hash_config(config: ParseConfig, streaming: bool) -> str:
    """Compute hash of the options that affect a parse result.

    The streaming flag is part of the key: healed and unhealed parses of
    the same text differ.

    Args:
        config: ParseConfig to hash
        streaming: Whether the parse heals its input first

    Returns:
        Hex digest of config hash
    """
    parts = (
        str(config.tables_enabled),
        str(config.math_enabled),
        str(config.strikethrough_enabled),
        str(config.task_lists_enabled),
        str(config.mermaid_enabled),
        str(config.merge_punctuation),
        str(streaming),
    )
    return hash_str("|".join(parts))


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
