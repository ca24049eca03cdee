"""At-rule scanner mixin.

Handles ``@keyword`` classification in NEUTRAL and the two directive
states that skip forward to a delimiter: ``@media`` preludes (to ``{``)
and ``@import``/``@namespace`` statements (to ``;``).
"""

from __future__ import annotations

from scsstags.scanner.charsets import BODY_OPEN, WHITESPACE
from scsstags.scanner.modes import AT_RULE_STATES, ScanState
from scsstags.utils.logger import get_logger

logger = get_logger(__name__)


class DirectiveScannerMixin:
    """Mixin providing at-rule scanning logic."""

    # These will be set by the LineScanner class
    _line: str
    _line_len: int
    _pos: int
    _lineno: int
    _state: ScanState

    def _scan_at_rule(self) -> None:
        """Read the keyword after ``@`` and enter its state.

        The keyword is the run of non-whitespace characters after the
        ``@``, matched case-sensitively. An unknown keyword leaves the
        scanner in NEUTRAL with the cursor just past the keyword, so the
        rest of the line is scanned as top-level text.
        """
        line = self._line
        line_len = self._line_len
        start = self._pos + 1
        end = start
        while end < line_len and line[end] not in WHITESPACE:
            end += 1

        keyword = line[start:end]
        self._pos = end

        state = AT_RULE_STATES.get(keyword)
        if state is None:
            logger.debug("Unrecognized at-rule @%s on line %d", keyword, self._lineno)
            return
        self._state = state

    def _scan_media_directive(self) -> None:
        """Skip the ``@media`` prelude up to its opening brace."""
        self._skip_past(BODY_OPEN)

    def _scan_import_directive(self) -> None:
        """Skip an ``@import`` or ``@namespace`` statement up to ``;``."""
        self._skip_past(";")

    def _skip_past(self, delimiter: str) -> None:
        idx = self._line.find(delimiter, self._pos)
        if idx == -1:
            # Not on this line; stay in the directive state
            self._pos = self._line_len
            return
        self._pos = idx + 1
        self._state = ScanState.NEUTRAL
