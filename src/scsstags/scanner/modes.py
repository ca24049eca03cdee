"""Scanner states and at-rule keyword table.

This module defines the finite state machine states for the scanner.
Exactly one state is active at any time; it is the only information
carried from one character to the next (and from one line to the next)
besides a pending declaration.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanState(Enum):
    """Scanner states.

    - NEUTRAL: Top level, looking for the next declaration or at-rule
    - IN_COMMENT: Inside a ``/* ... */`` comment
    - IN_SINGLE_QUOTE_STRING / IN_DOUBLE_QUOTE_STRING: Quoted string in a rule body
    - IN_RULE_BODY: Inside ``{ ... }`` (also ``@page`` and ``@font-face`` bodies)
    - IN_MEDIA_DIRECTIVE: ``@media`` prelude, up to its ``{``
    - IN_IMPORT_OR_NAMESPACE_DIRECTIVE: ``@import``/``@namespace``, up to ``;``
    - TERMINATED: Input ended inside a declaration; nothing more is scanned

    """

    NEUTRAL = auto()
    IN_COMMENT = auto()
    IN_SINGLE_QUOTE_STRING = auto()
    IN_DOUBLE_QUOTE_STRING = auto()
    IN_RULE_BODY = auto()
    IN_MEDIA_DIRECTIVE = auto()
    IN_IMPORT_OR_NAMESPACE_DIRECTIVE = auto()
    TERMINATED = auto()


# At-rule keywords (case-sensitive) and the state each one enters.
# Any other keyword leaves the scanner in NEUTRAL.
AT_RULE_STATES: dict[str, ScanState] = {
    "media": ScanState.IN_MEDIA_DIRECTIVE,
    "import": ScanState.IN_IMPORT_OR_NAMESPACE_DIRECTIVE,
    "namespace": ScanState.IN_IMPORT_OR_NAMESPACE_DIRECTIVE,
    "page": ScanState.IN_RULE_BODY,
    "font-face": ScanState.IN_RULE_BODY,
}

# Closing quote for each string state
STRING_QUOTES: dict[ScanState, str] = {
    ScanState.IN_SINGLE_QUOTE_STRING: "'",
    ScanState.IN_DOUBLE_QUOTE_STRING: '"',
}
