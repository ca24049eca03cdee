"""Declaration scanner mixin.

Accumulates one selector, class or id clause and emits it as a Tag.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scsstags.scanner.charsets import (
    BODY_OPEN,
    CLAUSE_SEPARATOR,
    DECLARATION_CHARS,
    WHITESPACE_CHARS,
)
from scsstags.scanner.modes import ScanState
from scsstags.tags import Tag, TagKind

if TYPE_CHECKING:
    from scsstags.scanner.core import PendingDeclaration


class DeclarationScannerMixin:
    """Mixin providing declaration accumulation and tag emission.

    A declaration runs until a ``,`` (next clause), a ``{`` (rule body)
    or any character outside the declaration set. Reaching the end of
    the line leaves the declaration pending; the next line resumes it.

    """

    # These will be set by the LineScanner class
    _line: str
    _line_len: int
    _pos: int
    _lineno: int
    _state: ScanState
    _buffer: list[str]
    _kind: TagKind | None
    _tags: list[Tag]
    _pending: PendingDeclaration | None

    def _make_pending(self, kind: TagKind, text: str) -> PendingDeclaration:
        """Create a pending declaration. Implemented by LineScanner."""
        raise NotImplementedError

    def _begin_declaration(self, start: int, kind: TagKind) -> None:
        """Start a new declaration of ``kind`` at ``start``.

        ``start`` is past the ``.`` or ``#`` sigil for classes and ids;
        selectors start on their first character.
        """
        self._kind = kind
        self._buffer = []
        self._pos = start
        self._scan_declaration()

    def _resume_declaration(self, pending: PendingDeclaration) -> None:
        """Continue a declaration carried over from the previous line."""
        self._kind = pending.kind
        # The physical line break is part of the clause text
        self._buffer = [pending.text, "\n"]
        self._pos = 0
        self._scan_declaration()

    def _scan_declaration(self) -> None:
        line = self._line
        line_len = self._line_len
        buffer = self._buffer
        pos = self._pos

        while pos < line_len:
            char = line[pos]
            if char == CLAUSE_SEPARATOR:
                self._emit_declaration()
                self._pos = pos + 1
                self._state = ScanState.NEUTRAL
                return
            if char == BODY_OPEN:
                self._emit_declaration()
                self._pos = pos + 1
                self._state = ScanState.IN_RULE_BODY
                return
            if char not in DECLARATION_CHARS:
                # Left for the dispatcher to look at in NEUTRAL
                self._emit_declaration()
                self._pos = pos
                self._state = ScanState.NEUTRAL
                return
            buffer.append(char)
            pos += 1

        # End of line: carry the clause over to the next line
        assert self._kind is not None
        self._pos = pos
        self._pending = self._make_pending(self._kind, "".join(buffer))
        self._buffer = []
        self._kind = None

    def _emit_declaration(self) -> None:
        """Emit the buffered declaration and clear the buffer."""
        assert self._kind is not None
        self._tags.append(make_tag("".join(self._buffer), self._kind, self._lineno))
        self._buffer = []
        self._kind = None


def make_tag(text: str, kind: TagKind, lineno: int = 0) -> Tag:
    """Finalize declaration text into a Tag.

    Class and id names lose trailing whitespace (``.name {`` is the usual
    spelling). Selectors are kept exactly as written, so ``p > span {``
    yields ``"p > span "``.
    """
    if kind is not TagKind.SELECTOR:
        text = text.rstrip(WHITESPACE_CHARS)
    return Tag(text, kind, lineno)
