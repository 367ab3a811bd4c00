"""Token model shared by every stage of streammark.

A single recursive Token type represents both block-level and inline
structure. Kind-specific extras live in small frozen metadata classes
instead of an untyped dict, so each kind's valid fields are known.

Token Hierarchy (by kind):
heading1..heading6, paragraph, blockquote, table-cell, list-item
    children: inline tokens
list-ordered, list-unordered
    children: list-item
table
    children: table-row -> table-cell
code-block, mermaid, math-block, horizontal-rule, image
    leaf blocks (no children)

Thread Safety:
All tokens are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Closed set of token kinds.

    Values are the wire names used by serialization and host renderers.

    """

    # Block kinds
    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    HEADING4 = "heading4"
    HEADING5 = "heading5"
    HEADING6 = "heading6"
    PARAGRAPH = "paragraph"
    CODE_BLOCK = "code-block"
    BLOCKQUOTE = "blockquote"
    LIST_ORDERED = "list-ordered"
    LIST_UNORDERED = "list-unordered"
    LIST_ITEM = "list-item"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    HORIZONTAL_RULE = "horizontal-rule"
    MATH_BLOCK = "math-block"
    MERMAID = "mermaid"

    # Inline kinds (IMAGE is also emitted as a standalone block)
    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold-italic"
    STRIKETHROUGH = "strikethrough"
    CODE_INLINE = "code-inline"
    LINK = "link"
    IMAGE = "image"
    MATH_INLINE = "math-inline"

    @classmethod
    def heading(cls, level: int) -> TokenKind:
        """Return the heading kind for a level in 1..6."""
        return _HEADINGS[level - 1]

    @property
    def level(self) -> int | None:
        """Heading level (1-6), or None for non-heading kinds."""
        if self in _HEADINGS:
            return _HEADINGS.index(self) + 1
        return None

    @property
    def is_inline(self) -> bool:
        return self in _INLINE_KINDS


_HEADINGS = (
    TokenKind.HEADING1,
    TokenKind.HEADING2,
    TokenKind.HEADING3,
    TokenKind.HEADING4,
    TokenKind.HEADING5,
    TokenKind.HEADING6,
)

_INLINE_KINDS = frozenset(
    {
        TokenKind.TEXT,
        TokenKind.BOLD,
        TokenKind.ITALIC,
        TokenKind.BOLD_ITALIC,
        TokenKind.STRIKETHROUGH,
        TokenKind.CODE_INLINE,
        TokenKind.LINK,
        TokenKind.IMAGE,
        TokenKind.MATH_INLINE,
    }
)


# =============================================================================
# Metadata variants
# =============================================================================


@dataclass(frozen=True, slots=True)
class CodeBlockMeta:
    """Metadata for code-block and mermaid tokens.

    Attributes:
        language: First word of the fence info string ("" when absent)
        is_incomplete: True when the fence was still open at end of input

    """

    language: str = ""
    is_incomplete: bool = False


@dataclass(frozen=True, slots=True)
class MathBlockMeta:
    """Metadata for math-block tokens."""

    is_incomplete: bool = False


@dataclass(frozen=True, slots=True)
class LinkMeta:
    """Target of a link or image."""

    url: str


@dataclass(frozen=True, slots=True)
class ListItemMeta:
    """Metadata for list-item tokens.

    Attributes:
        number: Marker number of an ordered item, taken as written
        is_task: Item started with a GFM checkbox
        is_checked: Checkbox was ticked ([x] or [X])

    """

    number: int | None = None
    is_task: bool = False
    is_checked: bool = False


@dataclass(frozen=True, slots=True)
class TableRowMeta:
    is_header: bool = False
    is_separator: bool = False


@dataclass(frozen=True, slots=True)
class TableCellMeta:
    """Metadata for table-cell tokens.

    Attributes:
        is_header: Cell belongs to the header row
        align: Column alignment from the separator row
            ("left", "center", "right", or None)

    """

    is_header: bool = False
    align: str | None = None


TokenMeta = CodeBlockMeta | MathBlockMeta | LinkMeta | ListItemMeta | TableRowMeta | TableCellMeta


# =============================================================================
# Token
# =============================================================================


@dataclass(frozen=True, slots=True)
class Token:
    """A parsed unit of markdown, block or inline.

    Attributes:
        kind: Role of the token
        raw: Original source substring the token was derived from
        content: Semantic text with markup stripped
        children: Ordered child tokens (empty for leaves)
        metadata: Kind-specific extras, or None

    """

    kind: TokenKind
    raw: str
    content: str
    children: tuple[Token, ...] = ()
    metadata: TokenMeta | None = None

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        content = self.content
        if len(content) > 20:
            content = content[:17] + "..."
        suffix = f", children={len(self.children)}" if self.children else ""
        return f"Token({self.kind.value}, {content!r}{suffix})"

    @property
    def url(self) -> str | None:
        """Link or image target (convenience accessor)."""
        if isinstance(self.metadata, LinkMeta):
            return self.metadata.url
        return None

    @property
    def language(self) -> str | None:
        """Code fence language (convenience accessor)."""
        if isinstance(self.metadata, CodeBlockMeta):
            return self.metadata.language
        return None

    def walk(self) -> Iterator[Token]:
        """Yield this token and all descendants, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True, slots=True)
class ParsedMarkdown:
    """Result of a parse call.

    Attributes:
        tokens: Top-level block tokens
        is_complete: False iff input ended inside an open code or math block

    """

    tokens: tuple[Token, ...]
    is_complete: bool


def text_token(text: str) -> Token:
    """Create a plain text token whose raw and content are both ``text``."""
    return Token(kind=TokenKind.TEXT, raw=text, content=text)


__all__ = [
    "CodeBlockMeta",
    "LinkMeta",
    "ListItemMeta",
    "MathBlockMeta",
    "ParsedMarkdown",
    "TableCellMeta",
    "TableRowMeta",
    "Token",
    "TokenKind",
    "TokenMeta",
    "text_token",
]
