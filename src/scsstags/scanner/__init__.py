"""Modular state-machine scanner for scsstags.

This package provides a line-at-a-time scanner. The state and any
unterminated declaration are returned from each line and passed into the
next, so a scan can be resumed at any line boundary.

Architecture:
scanner/
├── __init__.py          # Re-exports LineScanner, ScanState, scan_line, ...
├── core.py              # LineScanner (mixin composition), scan_line, scan_lines, finish
├── modes.py             # ScanState enum, at-rule keyword table
├── charsets.py          # Character classification sets
└── scanners/            # State-specific scanners
    ├── neutral.py       # Top-level dispatch
    ├── declaration.py   # Selector / class / id accumulation
    ├── directive.py     # @media, @import, @namespace, @page, @font-face
    └── body.py          # Comments, strings, rule bodies

Usage:
    >>> from scsstags.scanner import scan_lines
    >>> for tag in scan_lines([".foo, .bar { color: red; }"]):
    ...     print(tag)
Tag(CLASS, 'foo', line 1)
Tag(CLASS, 'bar', line 1)

"""

from scsstags.scanner.core import (
    LineResult,
    LineScanner,
    TagScanner,
    PendingDeclaration,
    finish,
    scan_line,
    scan_lines,
)
from scsstags.scanner.modes import ScanState

__all__ = [
    "LineResult",
    "LineScanner",
    "TagScanner",
    "PendingDeclaration",
    "ScanState",
    "finish",
    "scan_line",
    "scan_lines",
]
