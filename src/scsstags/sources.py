"""In-memory line sources and tag sinks, and the run() driver.

run() connects any LineSource to any TagSink. TextLineSource and
TagCollector are the in-memory implementations used by the convenience
API and the tests.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from scsstags.config import ScanConfig
from scsstags.protocols import LineSource, TagSink
from scsstags.scanner.core import TagScanner
from scsstags.scanner.modes import ScanState
from scsstags.tags import Tag, TagKind


def split_lines(text: str) -> list[str]:
    """Split text into physical lines, stripping their terminators.

    Only ``\\n`` ends a line; a ``\\r`` directly before it is dropped too.
    Other characters that str.splitlines() treats as breaks (``\\v``,
    ``\\f``, ``\\x1c``-``\\x1e``, ``\\x85``, ``\\u2028``, ``\\u2029``) stay
    inside the line. A final ``\\n`` does not start an extra empty line.

    Example:
        >>> split_lines(".a,\\r\\n.b {}\\n")
        ['.a,', '.b {}']
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class TextLineSource:
    """LineSource over an in-memory string or an iterable of lines.

    Strings are split with split_lines(), so lines end only at ``\\n``
    (optionally preceded by ``\\r``).

    """

    __slots__ = ("_lines",)

    def __init__(self, text: str | Iterable[str]) -> None:
        if isinstance(text, str):
            text = split_lines(text)
        self._lines: Iterator[str] = iter(text)

    def next_line(self) -> str | None:
        return next(self._lines, None)


class TagCollector:
    """TagSink that keeps every emitted tag in a list."""

    __slots__ = ("tags",)

    def __init__(self) -> None:
        self.tags: list[Tag] = []

    def emit(self, name: str, kind: TagKind) -> None:
        self.tags.append(Tag(name, kind))

    def clear(self) -> None:
        self.tags.clear()

    def __len__(self) -> int:
        return len(self.tags)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags)


def run(source: LineSource, sink: TagSink, *, config: ScanConfig | None = None) -> ScanState:
    """Scan every line from ``source`` and emit tags into ``sink``.

    Lines are pulled until ``source.next_line()`` returns None. A
    declaration that spans lines pulls the following line before its tag
    is emitted.

    Args:
        source: Line supplier
        sink: Tag receiver, called as ``sink.emit(name, kind)``
        config: Scan configuration (defaults to the active context config)

    Returns:
        The final ScanState. TERMINATED means input ended inside a
        declaration (its tag was still emitted).
    """
    scanner = TagScanner(config)
    for line in iter(source.next_line, None):
        for tag in scanner.feed(line):
            sink.emit(tag.name, tag.kind)
    for tag in scanner.close():
        sink.emit(tag.name, tag.kind)
    return scanner.state
