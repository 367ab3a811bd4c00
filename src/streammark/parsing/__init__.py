"""Parsing stages for streammark.

Subpackages:
- inline: span-level tokens within a single block of text
- blocks: line state machine producing the top-level token tree

"""

from streammark.parsing.blocks import BlockScanner, scan
from streammark.parsing.inline import format_inline

__all__ = ["BlockScanner", "format_inline", "scan"]
