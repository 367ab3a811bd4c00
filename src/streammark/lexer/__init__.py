"""Line-level classification for the streammark block scanner.

Architecture:
lexer/
├── __init__.py          # Re-exports ScanMode
├── modes.py             # ScanMode enum
└── classifiers/         # Pure per-line classifiers
    ├── fence.py         # ``` fences (shared with heal and chunking)
    ├── math.py          # $$ fences
    ├── thematic.py      # Horizontal rules
    ├── heading.py       # ATX headings
    ├── quote.py         # Block quotes
    ├── list.py          # Ordered/unordered items, task boxes
    ├── table.py         # Table rows, separators, alignment
    └── image.py         # Standalone image lines

"""

from streammark.lexer.modes import ScanMode

__all__ = ["ScanMode"]
