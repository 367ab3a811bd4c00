"""GFM table scanning for the block scanner.

A table starts at a ``| ... |`` line whose next line is a separator row.
The separator is consumed but never becomes a token; body rows continue
while lines keep matching the row pattern.

    | A | B |     <- header row (is_header=True)
    |---|--:|     <- separator (alignments only)
    | 1 | 2 |     <- body rows
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from streammark.lexer.classifiers import (
    is_table_row,
    is_table_separator,
    parse_alignments,
    split_table_cells,
)
from streammark.parsing.inline import format_inline
from streammark.tokens import TableCellMeta, TableRowMeta, Token, TokenKind

if TYPE_CHECKING:
    from streammark.config import ParseConfig


class TableParsingMixin:
    """Mixin for GFM pipe tables.

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

    def _at_table_start(self, stripped: str) -> bool:
        """Check the current line is a header row followed by a separator."""
        if not self._config.tables_enabled or not is_table_row(stripped):
            return False
        following = self._pos + 1
        return following < len(self._lines) and is_table_separator(
            self._lines[following].strip()
        )

    def _scan_table(self) -> None:
        """Consume header, separator and body rows into one table token."""
        start = self._pos
        header_line = self._lines[start]
        alignments = parse_alignments(self._lines[start + 1].strip())

        rows = [self._table_row(header_line, alignments, is_header=True)]
        self._pos += 2

        while self._pos < len(self._lines):
            line = self._lines[self._pos]
            if not is_table_row(line.strip()):
                break
            rows.append(self._table_row(line, alignments, is_header=False))
            self._pos += 1

        self._tokens.append(
            Token(
                kind=TokenKind.TABLE,
                raw="\n".join(self._lines[start : self._pos]),
                content="",
                children=tuple(rows),
            )
        )

    def _table_row(
        self, line: str, alignments: tuple[str | None, ...], *, is_header: bool
    ) -> Token:
        cells = tuple(
            Token(
                kind=TokenKind.TABLE_CELL,
                raw=cell,
                content=cell,
                children=format_inline(cell, self._config),
                metadata=TableCellMeta(
                    is_header=is_header,
                    align=alignments[i] if i < len(alignments) else None,
                ),
            )
            for i, cell in enumerate(split_table_cells(line.strip()))
        )
        return Token(
            kind=TokenKind.TABLE_ROW,
            raw=line,
            content="",
            children=cells,
            metadata=TableRowMeta(is_header=is_header),
        )
