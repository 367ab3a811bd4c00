"""Code and math fence handling for the block scanner.

Fenced regions are the only persistent scanner states. Lines inside a code
block are accumulated verbatim and never dispatched to other block rules.

A ``` fence line is recognized even inside an open math block: the code
block opens on top of the math block, and the math block resumes once the
code fence closes. Math state is therefore kept apart from code state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from streammark.lexer.classifiers import (
    FenceLine,
    MathFence,
    MathLine,
    classify_fence,
)
from streammark.lexer.modes import ScanMode
from streammark.tokens import CodeBlockMeta, MathBlockMeta, Token, TokenKind
from streammark.utils.logger import get_logger, preview

if TYPE_CHECKING:
    from streammark.config import ParseConfig

logger = get_logger(__name__)


class FenceParsingMixin:
    """Mixin for ``` code blocks and $$ math blocks.

    Required Host Attributes:
        - _lines: list[str]
        - _pos: int
        - _mode: ScanMode
        - _config: ParseConfig
        - _tokens: list[Token]
        - _block_start: int
        - _fence_language: str
        - _buffer: list[str]
        - _math_open: bool
        - _math_raw: list[str]
        - _math_buffer: list[str]

    """

    _lines: list[str]
    _pos: int
    _mode: ScanMode
    _config: ParseConfig
    _tokens: list[Token]
    _block_start: int
    _fence_language: str
    _buffer: list[str]
    _math_open: bool
    _math_raw: list[str]
    _math_buffer: list[str]

    # =========================================================================
    # Code blocks
    # =========================================================================

    def _open_code_block(self, fence: FenceLine) -> None:
        self._mode = ScanMode.CODE_BLOCK
        self._block_start = self._pos
        self._fence_language = fence.language
        self._buffer = []
        self._pos += 1

    def _scan_code_line(self, line: str) -> None:
        """Accumulate one line inside a code block, or close it on a fence."""
        if classify_fence(line.strip()) is None:
            self._buffer.append(line)
            self._pos += 1
            return

        language = self._fence_language
        is_mermaid = self._config.mermaid_enabled and language.lower() == "mermaid"
        self._tokens.append(
            Token(
                kind=TokenKind.MERMAID if is_mermaid else TokenKind.CODE_BLOCK,
                raw=self._source_lines(self._block_start, self._pos + 1),
                content="\n".join(self._buffer),
                metadata=CodeBlockMeta(language=language),
            )
        )
        # Back to the math block the code fence interrupted, if any
        self._mode = ScanMode.MATH_BLOCK if self._math_open else ScanMode.DEFAULT
        self._pos += 1

    # =========================================================================
    # Math blocks
    # =========================================================================

    def _open_math_block(self, math: MathLine, line: str) -> None:
        """Handle a $$ line seen outside a math block."""
        if math.shape is MathFence.SINGLE_LINE:
            self._tokens.append(
                Token(
                    kind=TokenKind.MATH_BLOCK,
                    raw=line,
                    content=math.content,
                    metadata=MathBlockMeta(),
                )
            )
        else:
            self._mode = ScanMode.MATH_BLOCK
            self._math_open = True
            self._math_raw = [line]
            self._math_buffer = (
                [math.content] if math.shape is MathFence.OPEN_WITH_CONTENT else []
            )
        self._pos += 1

    def _scan_math_line(self, line: str) -> None:
        """Accumulate one line inside a math block.

        A ``` fence opens a code block on top of the math block. Otherwise
        $$ at line end closes the block; other $$-led lines are kept trimmed.
        """
        stripped = line.strip()
        fence = classify_fence(stripped)
        if fence is not None:
            self._open_code_block(fence)
            return

        self._math_raw.append(line)
        if stripped == "$$":
            self._close_math_block()
        elif stripped.endswith("$$"):
            self._math_buffer.append(stripped[:-2])
            self._close_math_block()
        elif stripped.startswith("$$"):
            self._math_buffer.append(stripped)
        else:
            self._math_buffer.append(line)
        self._pos += 1

    def _close_math_block(self) -> None:
        self._tokens.append(
            Token(
                kind=TokenKind.MATH_BLOCK,
                raw="\n".join(self._math_raw),
                content="\n".join(self._math_buffer).strip(),
                metadata=MathBlockMeta(),
            )
        )
        self._math_open = False
        self._mode = ScanMode.DEFAULT

    # =========================================================================
    # End of input
    # =========================================================================

    def _flush_unterminated(self) -> None:
        """Emit fenced blocks still open at end of input as incomplete.

        An open code block is flushed first, then an open math block it may
        have interrupted. An open mermaid fence is emitted as a plain code
        block: a partial diagram cannot be rendered yet.
        """
        if self._mode is ScanMode.CODE_BLOCK:
            raw = self._source_lines(self._block_start, len(self._lines))
            logger.debug(
                "Unterminated code block at end of input (line %d): %s",
                self._block_start + 1,
                preview(raw),
            )
            self._tokens.append(
                Token(
                    kind=TokenKind.CODE_BLOCK,
                    raw=raw,
                    content="\n".join(self._buffer),
                    metadata=CodeBlockMeta(language=self._fence_language, is_incomplete=True),
                )
            )

        if self._math_open:
            raw = "\n".join(self._math_raw)
            logger.debug("Unterminated math block at end of input: %s", preview(raw))
            self._tokens.append(
                Token(
                    kind=TokenKind.MATH_BLOCK,
                    raw=raw,
                    content="\n".join(self._math_buffer).strip(),
                    metadata=MathBlockMeta(is_incomplete=True),
                )
            )

    def _source_lines(self, start: int, end: int) -> str:
        return "\n".join(self._lines[start:end])
