"""ContextVar-based parse configuration for streammark.

Provides context-local configuration using Python's ContextVars (PEP 567).
Every feature defaults to enabled; disabling one makes its syntax fall
through to the next rule (e.g. tables become paragraphs).

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from streammark import parse
    from streammark.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(tables_enabled=False)):
        result = parse("| a | b |\\n|---|---|")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Holds feature switches only. No parse state is ever stored here, so a
    parse call remains a pure function of its input and the active config.

    Attributes:
        tables_enabled: Recognize GFM pipe tables
        math_enabled: Recognize $$ math blocks and $inline$ math
        strikethrough_enabled: Recognize ~~strikethrough~~
        task_lists_enabled: Recognize - [ ] / - [x] task items
        mermaid_enabled: Emit mermaid tokens for ```mermaid fences
        merge_punctuation: Absorb trailing punctuation into preceding
            bold/italic/link spans

    """

    tables_enabled: bool = True
    math_enabled: bool = True
    strikethrough_enabled: bool = True
    task_lists_enabled: bool = True
    mermaid_enabled: bool = True
    merge_punctuation: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({"math_enabled": False, "theme": "dark"})
            >>> config.math_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "streammark_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (context-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default (all features enabled) configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(math_enabled=False)):
        ...     result = parse("$$x$$")
        >>> # Previous config restored here

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
