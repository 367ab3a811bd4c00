"""
streammark — Incremental Markdown Tokenizer for Streamed Text

Turns a growing prefix of markdown (token-streamed LLM output) into an
immutable token tree that is visually stable at every intermediate state
and converges to a full parse once the stream completes.

Quick Start:
    >>> from streammark import parse
    >>> result = parse("This is **bold")
    >>> result.tokens[0].children[1]
    Token(bold, 'bold')

    >>> # Unterminated fences are reported, not errors
    >>> parse("```py\\nprint(1)").is_complete
    False

Pipeline:
    heal (streaming only) -> BlockScanner (line state machine)
        -> format_inline (per leaf block)

Per-block memoization:
    >>> from streammark import DictParseCache, parse, split_into_blocks
    >>> cache = DictParseCache()
    >>> results = [parse(block, cache=cache) for block in split_into_blocks(text)]

Installation:
    pip install streammark           # Core tokenizer (zero deps)
"""

from streammark.cache import DictParseCache, ParseCache, hash_config, hash_content
from streammark.chunking import split_into_blocks
from streammark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from streammark.errors import SerializationError, StreammarkError
from streammark.heal import heal
from streammark.parsing import BlockScanner, format_inline, scan
from streammark.tokens import (
    CodeBlockMeta,
    LinkMeta,
    ListItemMeta,
    MathBlockMeta,
    ParsedMarkdown,
    TableCellMeta,
    TableRowMeta,
    Token,
    TokenKind,
    TokenMeta,
)
from streammark.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def parse(
    text: str,
    streaming: bool = True,
    *,
    cache: ParseCache | None = None,
) -> ParsedMarkdown:
    """Parse markdown text into block tokens.

    Args:
        text: The full document so far (not a delta)
        streaming: Heal unterminated inline markup on the last line before
            scanning. Pass False once the stream has finished.
        cache: Optional content-addressed parse cache. When provided, checks
            cache before parsing; on miss, parses and stores result.

    Returns:
        ParsedMarkdown. is_complete is False iff the text ends inside an
        open code or math block.

    Example:
        >>> result = parse("# Hello *World*", streaming=False)
        >>> result.tokens[0].kind
        <TokenKind.HEADING1: 'heading1'>
        >>> [t.kind.value for t in result.tokens[0].children]
        ['text', 'italic']

    """
    config = get_parse_config()

    if cache is not None:
        content_hash = hash_content(text)
        config_hash = hash_config(config, streaming)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            logger.debug("Parse cache hit (%d chars)", len(text))
            return cached

    source = heal(text) if streaming else text
    result = BlockScanner(source, config).scan()

    if cache is not None:
        cache.put(content_hash, config_hash, result)

    return result


__all__ = [
    # Core API
    "parse",
    "heal",
    "format_inline",
    "scan",
    "split_into_blocks",
    "BlockScanner",
    # Tokens
    "Token",
    "TokenKind",
    "TokenMeta",
    "ParsedMarkdown",
    "CodeBlockMeta",
    "MathBlockMeta",
    "LinkMeta",
    "ListItemMeta",
    "TableRowMeta",
    "TableCellMeta",
    # Configuration
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Caching
    "ParseCache",
    "DictParseCache",
    "hash_content",
    "hash_config",
    # Errors
    "StreammarkError",
    "SerializationError",
    "__version__",
]
