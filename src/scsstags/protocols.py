"""Protocols for scsstags.

Defines the contracts for the scanner's two collaborators: where lines
come from and where tags go.
"""

from __future__ import annotations

from typing import Protocol

from scsstags.tags import TagKind


class LineSource(Protocol):
    """Supplies physical source lines one at a time."""

    def next_line(self) -> str | None:
        """Return the next line without its terminator, or None at end of input."""
        ...


class TagSink(Protocol):
    """Receives one call per recognized declaration.

    The return value, if any, is ignored.

    """

    def emit(self, name: str, kind: TagKind) -> None:
        """Record a tag."""
        ...
