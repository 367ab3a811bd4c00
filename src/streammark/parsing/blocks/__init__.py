"""Block-level scanning for streammark.

The scanner is split into mixins by concern, composed in core.py:
- FenceParsingMixin: ``` code blocks and $$ math blocks
- ListParsingMixin: ordered and unordered lists, task items
- TableParsingMixin: GFM pipe tables

"""

from streammark.parsing.blocks.core import BlockScanner, scan

__all__ = ["BlockScanner", "scan"]
