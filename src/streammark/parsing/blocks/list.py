"""List scanning for the block scanner.

A list is one token per contiguous run of same-type item lines. The run is
consumed greedily so that streaming re-parses keep producing one list token
instead of per-line fragments. Ordered and unordered runs are never merged,
even when adjacent with no blank line between them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from streammark.lexer.classifiers import (
    classify_ordered_item,
    classify_task_box,
    classify_unordered_item,
)
from streammark.parsing.inline import format_inline
from streammark.tokens import ListItemMeta, Token, TokenKind

if TYPE_CHECKING:
    from streammark.config import ParseConfig


class ListParsingMixin:
    """Mixin for ordered and unordered lists.

    Required Host Attributes:
        - _lines: list[str]
        - _pos: int
        - _config: ParseConfig
        - _tokens: list[Token]

    """

    _lines: list[str]
    _pos: int
    _config: ParseConfig
    _tokens: list[Token]

    def _scan_ordered_list(self) -> None:
        """Consume a run of ``N. item`` lines into one list-ordered token."""
        items: list[Token] = []
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            item = classify_ordered_item(line.strip())
            if item is None:
                break
            items.append(
                Token(
                    kind=TokenKind.LIST_ITEM,
                    raw=line,
                    content=item.content,
                    children=format_inline(item.content, self._config),
                    metadata=ListItemMeta(number=item.number),
                )
            )
            self._pos += 1

        self._tokens.append(_list_token(TokenKind.LIST_ORDERED, items))

    def _scan_unordered_list(self) -> None:
        """Consume a run of ``- item`` lines into one list-unordered token.

        Task syntax ([ ], [x], [X]) is detected before inline formatting and
        stripped from the item content.
        """
        items: list[Token] = []
        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            content = classify_unordered_item(line.strip())
            if content is None:
                break

            is_task = is_checked = False
            if self._config.task_lists_enabled:
                box = classify_task_box(content)
                if box is not None:
                    is_task, is_checked, content = True, box.checked, box.content

            items.append(
                Token(
                    kind=TokenKind.LIST_ITEM,
                    raw=line,
                    content=content,
                    children=format_inline(content, self._config),
                    metadata=ListItemMeta(is_task=is_task, is_checked=is_checked),
                )
            )
            self._pos += 1

        self._tokens.append(_list_token(TokenKind.LIST_UNORDERED, items))


def _list_token(kind: TokenKind, items: list[Token]) -> Token:
    return Token(
        kind=kind,
        raw="\n".join(item.raw for item in items),
        content="",
        children=tuple(items),
    )
