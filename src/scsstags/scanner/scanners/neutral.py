"""Neutral state scanner mixin (top-level dispatch)."""

from __future__ import annotations

from scsstags.scanner.charsets import ALNUM, COMMENT_SLASH, COMMENT_STAR
from scsstags.scanner.modes import ScanState
from scsstags.tags import TagKind


class NeutralScannerMixin:
    """Mixin providing top-level classification.

    Looks at the first significant character and decides what starts
    there: a selector, class or id declaration, an at-rule, or a comment.

    """

    # These will be set by the LineScanner class
    _line: str
    _pos: int
    _state: ScanState

    def _preceding(self) -> str:
        """Character before the cursor on this line ('' at line start)."""
        raise NotImplementedError

    def _begin_declaration(self, start: int, kind: TagKind) -> None:
        """Scan a declaration. Implemented by DeclarationScannerMixin."""
        raise NotImplementedError

    def _scan_at_rule(self) -> None:
        """Classify an at-rule. Implemented by DirectiveScannerMixin."""
        raise NotImplementedError

    def _scan_neutral(self) -> None:
        pos = self._pos
        char = self._line[pos]

        if char in ALNUM:
            self._begin_declaration(pos, TagKind.SELECTOR)
        elif char == ".":
            self._begin_declaration(pos + 1, TagKind.CLASS)
        elif char == "#":
            self._begin_declaration(pos + 1, TagKind.ID)
        elif char == "@":
            self._scan_at_rule()
        elif char == COMMENT_STAR and self._preceding() == COMMENT_SLASH:
            self._state = ScanState.IN_COMMENT
            self._pos = pos + 1
        else:
            self._pos = pos + 1
