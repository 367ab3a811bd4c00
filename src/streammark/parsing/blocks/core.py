"""Line-oriented block scanner.

Splits text into lines and runs a small state machine over them:

- DEFAULT: dispatch each line to the first matching block rule
- CODE_BLOCK / MATH_BLOCK: accumulate lines until the closing fence
  (a ``` fence inside MATH_BLOCK opens a code block; math resumes after it)

Dispatch order in DEFAULT (first match wins):
1. ``` fence            -> open code block
2. $$ fence             -> math block (single line, or open)
3. ---, ***, ___        -> horizontal-rule
4. # .. ######          -> heading1..heading6
5. > quote              -> blockquote
6. 1. item (run)        -> list-ordered
7. - item (run)         -> list-unordered
8. | row | + separator  -> table
9. blank                -> skipped
10. ![alt](url) alone   -> image
11. anything else       -> paragraph

Every step advances the line cursor by at least one line, so scanning is
linear in the number of lines.

Thread Safety:
BlockScanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from streammark.config import ParseConfig, get_parse_config
from streammark.lexer.classifiers import (
    classify_block_quote,
    classify_fence,
    classify_heading,
    classify_math_open,
    classify_ordered_item,
    classify_standalone_image,
    classify_unordered_item,
    is_horizontal_rule,
)
from streammark.lexer.modes import ScanMode
from streammark.parsing.blocks.fence import FenceParsingMixin
from streammark.parsing.blocks.list import ListParsingMixin
from streammark.parsing.blocks.table import TableParsingMixin
from streammark.parsing.inline import format_inline
from streammark.tokens import LinkMeta, ParsedMarkdown, Token, TokenKind


class BlockScanner(
    FenceParsingMixin,
    ListParsingMixin,
    TableParsingMixin,
):
    """State-machine block scanner.

    Usage:
        >>> scanner = BlockScanner("# Title\\n\\nBody")
        >>> result = scanner.scan()
        >>> [t.kind.value for t in result.tokens]
        ['heading1', 'paragraph']

    """

    __slots__ = (
        "_lines",
        "_pos",
        "_mode",
        "_config",
        "_tokens",
        # Open code fence state
        "_block_start",
        "_fence_language",
        "_buffer",
        # Open math block state (survives a nested code fence)
        "_math_open",
        "_math_raw",
        "_math_buffer",
    )

    def __init__(self, source: str, config: ParseConfig | None = None) -> None:
        """Initialize scanner with source text.

        Args:
            source: Markdown text (healed or raw)
            config: Feature switches; defaults to the active context config
        """
        self._lines: list[str] = source.split("\n")
        self._pos = 0
        self._mode = ScanMode.DEFAULT
        self._config = config if config is not None else get_parse_config()
        self._tokens: list[Token] = []

        self._block_start = 0
        self._fence_language = ""
        self._buffer: list[str] = []

        self._math_open = False
        self._math_raw: list[str] = []
        self._math_buffer: list[str] = []

    def scan(self) -> ParsedMarkdown:
        """Scan all lines into block tokens.

        Returns:
            ParsedMarkdown whose is_complete is False iff the input ended
            inside an open code or math block.
        """
        line_count = len(self._lines)
        while self._pos < line_count:
            line = self._lines[self._pos]
            if self._mode is ScanMode.CODE_BLOCK:
                self._scan_code_line(line)
            elif self._mode is ScanMode.MATH_BLOCK:
                self._scan_math_line(line)
            else:
                self._scan_block_line(line)

        is_complete = self._mode is ScanMode.DEFAULT
        if not is_complete:
            self._flush_unterminated()

        return ParsedMarkdown(tokens=tuple(self._tokens), is_complete=is_complete)

    def _scan_block_line(self, line: str) -> None:
        """Dispatch one line in DEFAULT mode."""
        stripped = line.strip()

        fence = classify_fence(stripped)
        if fence is not None:
            self._open_code_block(fence)
            return

        if self._config.math_enabled:
            math = classify_math_open(stripped)
            if math is not None:
                self._open_math_block(math, line)
                return

        if is_horizontal_rule(stripped):
            self._emit(Token(kind=TokenKind.HORIZONTAL_RULE, raw=line, content=""))
            return

        heading = classify_heading(stripped)
        if heading is not None:
            self._emit(self._leaf(TokenKind.heading(heading.level), line, heading.content))
            return

        quoted = classify_block_quote(stripped)
        if quoted is not None:
            self._emit(self._leaf(TokenKind.BLOCKQUOTE, line, quoted))
            return

        if classify_ordered_item(stripped) is not None:
            self._scan_ordered_list()
            return

        if classify_unordered_item(stripped) is not None:
            self._scan_unordered_list()
            return

        if self._at_table_start(stripped):
            self._scan_table()
            return

        if not stripped:
            self._pos += 1
            return

        image = classify_standalone_image(stripped)
        if image is not None:
            self._emit(
                Token(kind=TokenKind.IMAGE, raw=line, content=image.alt, metadata=LinkMeta(image.url))
            )
            return

        self._emit(self._leaf(TokenKind.PARAGRAPH, line, stripped))

    def _leaf(self, kind: TokenKind, line: str, content: str) -> Token:
        """Block token whose children are the inline tokens of its content."""
        return Token(
            kind=kind,
            raw=line,
            content=content,
            children=format_inline(content, self._config),
        )

    def _emit(self, token: Token) -> None:
        """Append a single-line block token and advance past its line."""
        self._tokens.append(token)
        self._pos += 1


def scan(text: str, config: ParseConfig | None = None) -> tuple[Token, ...]:
    """Scan text into top-level block tokens.

    Use BlockScanner directly (or parse()) when the completeness flag is
    needed as well.
    """
    return BlockScanner(text, config).scan().tokens


__all__ = ["BlockScanner", "scan"]
