"""Skipping scanners for comments, strings and rule bodies.

None of these states produce tags. They only watch for the character
that ends them.
"""

from __future__ import annotations

from scsstags.scanner.charsets import BODY_CLOSE, COMMENT_SLASH, COMMENT_STAR, ESCAPE
from scsstags.scanner.modes import STRING_QUOTES, ScanState


class BodyScannerMixin:
    """Mixin providing comment, string and rule body scanning logic."""

    # These will be set by the LineScanner class
    _line: str
    _pos: int
    _state: ScanState

    def _preceding(self) -> str:
        """Character before the cursor on this line ('' at line start)."""
        raise NotImplementedError

    def _scan_comment(self) -> None:
        """Leave the comment on a ``/`` that directly follows a ``*``."""
        if self._line[self._pos] == COMMENT_SLASH and self._preceding() == COMMENT_STAR:
            self._state = ScanState.NEUTRAL
        self._pos += 1

    def _scan_string(self) -> None:
        """Leave the string on its closing quote unless it is escaped.

        Strings only occur inside rule bodies, so that is where they return.
        """
        if (
            self._line[self._pos] == STRING_QUOTES[self._state]
            and self._preceding() != ESCAPE
        ):
            self._state = ScanState.IN_RULE_BODY
        self._pos += 1

    def _scan_rule_body(self) -> None:
        char = self._line[self._pos]
        if char == BODY_CLOSE:
            self._state = ScanState.NEUTRAL
        elif char == "'":
            self._state = ScanState.IN_SINGLE_QUOTE_STRING
        elif char == '"':
            self._state = ScanState.IN_DOUBLE_QUOTE_STRING
        self._pos += 1
