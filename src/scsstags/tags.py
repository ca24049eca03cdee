"""Tag and TagKind definitions for the scsstags scanner.

The scanner produces one Tag per recognized declaration. Each Tag pairs
the declared name with its TagKind.

Thread Safety:
Tag is frozen (immutable) and safe to share across threads.
TagKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scsstags.errors import UnknownKindError


class TagKind(Enum):
    """Kinds of tags emitted by the scanner.

    Each member carries ctags-style kind metadata: a one-letter code,
    the singular kind name and a plural description.

    """

    CLASS = ("c", "class", "classes")  # .name
    SELECTOR = ("s", "selector", "selectors")  # div, p > span
    ID = ("i", "id", "identities")  # #name

    @property
    def letter(self) -> str:
        """One-letter kind code (``c``, ``s``, ``i``)."""
        return self.value[0]

    @property
    def kind_name(self) -> str:
        """Singular kind name."""
        return self.value[1]

    @property
    def description(self) -> str:
        """Plural description, as shown in kind listings."""
        return self.value[2]

    @classmethod
    def from_letter(cls, letter: str) -> TagKind:
        """Resolve a kind from its one-letter code.

        Raises:
            UnknownKindError: If no kind uses that letter.
        """
        for kind in cls:
            if kind.letter == letter:
                return kind
        raise UnknownKindError(letter)

    @classmethod
    def from_name(cls, name: str) -> TagKind:
        """Resolve a kind from its singular name or one-letter code.

        Raises:
            UnknownKindError: If nothing matches.
        """
        for kind in cls:
            if name in (kind.kind_name, kind.letter):
                return kind
        raise UnknownKindError(name)


@dataclass(frozen=True, slots=True)
class Tag:
    """A tag produced by the scanner.

    Attributes:
        name: The declared name, without its leading ``.`` or ``#``
        kind: The TagKind of the declaration
        lineno: Line (1-indexed) on which the declaration ended; 0 if unknown

    """

    name: str
    kind: TagKind
    lineno: int = 0

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Tag({self.kind.name}, {self.name!r}, line {self.lineno})"
