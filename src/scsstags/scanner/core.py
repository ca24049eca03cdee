"""Line-at-a-time state machine scanner for stylesheet tags.

Each physical line is scanned by a fresh LineScanner. Everything that
must survive a line break is returned explicitly in a LineResult: the
ScanState and, when a declaration runs past the end of the line, a
PendingDeclaration. Feeding both back into the next scan_line() call
resumes the scan exactly where it stopped.

Thread Safety:
LineScanner instances are single-use. Create one per line.
scan_line() is a pure function of its arguments.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from scsstags.config import ScanConfig, get_scan_config
from scsstags.scanner.charsets import WHITESPACE
from scsstags.scanner.modes import ScanState
from scsstags.scanner.scanners import (
    BodyScannerMixin,
    DeclarationScannerMixin,
    DirectiveScannerMixin,
    NeutralScannerMixin,
    make_tag,
)
from scsstags.tags import Tag, TagKind
from scsstags.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class PendingDeclaration:
    """A declaration that reached the end of its line unterminated.

    Attributes:
        kind: Kind of the declaration being accumulated
        text: Characters accumulated so far

    """

    kind: TagKind
    text: str


@dataclass(frozen=True, slots=True)
class LineResult:
    """Outcome of scanning one line.

    Attributes:
        state: State to carry into the next line
        tags: Tags emitted on this line, in order
        pending: Unterminated declaration to resume on the next line

    """

    state: ScanState
    tags: tuple[Tag, ...] = ()
    pending: PendingDeclaration | None = None


class LineScanner(
    # Order matters: implementations must precede the mixins that stub them
    DeclarationScannerMixin,
    DirectiveScannerMixin,
    BodyScannerMixin,
    NeutralScannerMixin,
):
    """Scanner for a single physical line.

    Usage:
        >>> result = LineScanner(".foo, .bar {", ScanState.NEUTRAL).scan()
        >>> result.tags
        (Tag(CLASS, 'foo', line 0), Tag(CLASS, 'bar', line 0))
        >>> result.state
        <ScanState.IN_RULE_BODY: 5>

    """

    __slots__ = (
        "_line",
        "_line_len",
        "_pos",
        "_lineno",
        "_state",
        "_incoming",  # Pending declaration handed in by the caller
        "_pending",  # Pending declaration handed back to the caller
        "_buffer",
        "_kind",
        "_tags",
    )

    def __init__(
        self,
        line: str,
        state: ScanState,
        pending: PendingDeclaration | None = None,
        lineno: int = 0,
    ) -> None:
        """Initialize scanner for one line.

        Args:
            line: Physical line with its terminator stripped
            state: State carried over from the previous line
            pending: Declaration carried over from the previous line
            lineno: Line number recorded on emitted tags (1-indexed, 0 if unknown)
        """
        self._line = line
        self._line_len = len(line)
        self._pos = 0
        self._lineno = lineno
        self._state = state
        self._incoming = pending
        self._pending: PendingDeclaration | None = None
        self._buffer: list[str] = []
        self._kind: TagKind | None = None
        self._tags: list[Tag] = []

    def scan(self) -> LineResult:
        """Scan the whole line.

        Returns:
            LineResult with the state, tags and pending declaration to
            thread into the next line.
        """
        if self._state is ScanState.TERMINATED:
            return LineResult(ScanState.TERMINATED)

        if self._incoming is not None:
            self._resume_declaration(self._incoming)

        line_len = self._line_len
        while self._pending is None and self._pos < line_len:
            self._skip_whitespace()
            if self._pos >= line_len:
                break
            self._dispatch_state()

        return LineResult(self._state, tuple(self._tags), self._pending)

    def _dispatch_state(self) -> None:
        """Dispatch the current character to the scanner for the active state."""
        state = self._state
        if state is ScanState.NEUTRAL:
            self._scan_neutral()
        elif state is ScanState.IN_COMMENT:
            self._scan_comment()
        elif state is ScanState.IN_SINGLE_QUOTE_STRING or state is ScanState.IN_DOUBLE_QUOTE_STRING:
            self._scan_string()
        elif state is ScanState.IN_RULE_BODY:
            self._scan_rule_body()
        elif state is ScanState.IN_MEDIA_DIRECTIVE:
            self._scan_media_directive()
        elif state is ScanState.IN_IMPORT_OR_NAMESPACE_DIRECTIVE:
            self._scan_import_directive()
        else:
            # TERMINATED is only produced by finish(), never mid-line
            raise AssertionError(f"Unhandled scan state: {state}")

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _skip_whitespace(self) -> None:
        line = self._line
        line_len = self._line_len
        pos = self._pos
        while pos < line_len and line[pos] in WHITESPACE:
            pos += 1
        self._pos = pos

    def _preceding(self) -> str:
        """Character immediately before the cursor on this line.

        Returns:
            The previous character, or '' at the start of the line. An empty
            lookback never matches a comment or escape character.
        """
        if self._pos == 0:
            return ""
        return self._line[self._pos - 1]

    def _make_pending(self, kind: TagKind, text: str) -> PendingDeclaration:
        return PendingDeclaration(kind, text)


def scan_line(
    state: ScanState,
    line: str,
    pending: PendingDeclaration | None = None,
    *,
    lineno: int = 0,
) -> LineResult:
    """Advance the scanner across one physical line.

    Args:
        state: State carried over from the previous line (NEUTRAL for the first)
        line: Physical line with its terminator stripped
        pending: Unterminated declaration from the previous line, if any
        lineno: Line number recorded on emitted tags

    Returns:
        LineResult to thread into the next call.

    Example:
        >>> result = scan_line(ScanState.NEUTRAL, "#header { margin: 0; }")
        >>> result.tags
        (Tag(ID, 'header', line 0),)
        >>> result.state
        <ScanState.NEUTRAL: 1>
    """
    return LineScanner(line, state, pending, lineno).scan()


def finish(pending: PendingDeclaration | None, *, lineno: int = 0) -> LineResult:
    """Flush a pending declaration at end of input.

    Input that ends inside a declaration still yields one tag for what
    was gathered, and the scan is TERMINATED.

    Args:
        pending: Declaration left open by the last scan_line() call
        lineno: Line number recorded on the flushed tag

    Returns:
        LineResult in TERMINATED with the flushed tag, or an empty NEUTRAL
        result when nothing was pending.
    """
    if pending is None:
        return LineResult(ScanState.NEUTRAL)
    logger.debug("Input ended inside a %s declaration; flushing", pending.kind.kind_name)
    return LineResult(ScanState.TERMINATED, (make_tag(pending.text, pending.kind, lineno),))


class TagScanner:
    """Drives scan_line() over successive lines of one input.

    Holds the state and pending declaration between lines and filters
    tags by the kinds enabled in its ScanConfig.

    Usage:
        >>> scanner = TagScanner()
        >>> scanner.feed(".foo,")
        [Tag(CLASS, 'foo', line 1)]
        >>> scanner.feed("p")
        []
        >>> scanner.close()
        [Tag(SELECTOR, 'p', line 2)]
        >>> scanner.state
        <ScanState.TERMINATED: 8>

    """

    __slots__ = ("state", "pending", "lineno", "_config")

    def __init__(self, config: ScanConfig | None = None) -> None:
        """Initialize scanner at the start of an input.

        Args:
            config: Scan configuration (defaults to the active context config)
        """
        self.state = ScanState.NEUTRAL
        self.pending: PendingDeclaration | None = None
        self.lineno = 0
        self._config = config if config is not None else get_scan_config()

    @property
    def done(self) -> bool:
        """True once the scan is TERMINATED."""
        return self.state is ScanState.TERMINATED

    def feed(self, line: str) -> list[Tag]:
        """Scan the next physical line.

        Returns:
            Tags of enabled kinds emitted on this line.
        """
        self.lineno += 1
        result = scan_line(self.state, line, self.pending, lineno=self.lineno)
        self.state, self.pending = result.state, result.pending
        return self._enabled(result.tags)

    def close(self) -> list[Tag]:
        """Signal end of input, flushing any pending declaration.

        Returns:
            The flushed tag, if a declaration was open and its kind is enabled.
        """
        if self.pending is None:
            return []
        result = finish(self.pending, lineno=self.lineno)
        self.state, self.pending = result.state, None
        return self._enabled(result.tags)

    def _enabled(self, tags: tuple[Tag, ...]) -> list[Tag]:
        config = self._config
        kept = []
        for tag in tags:
            if config.is_enabled(tag.kind):
                kept.append(tag)
            else:
                logger.debug("Dropping %s tag %r (kind disabled)", tag.kind.kind_name, tag.name)
        return kept


def scan_lines(lines: Iterable[str], *, config: ScanConfig | None = None) -> Iterator[Tag]:
    """Scan a sequence of physical lines, yielding tags in source order.

    Args:
        lines: Lines with their terminators stripped
        config: Scan configuration (defaults to the active context config)

    Yields:
        Tag objects for every declaration of an enabled kind.
    """
    scanner = TagScanner(config)
    for line in lines:
        yield from scanner.feed(line)
    yield from scanner.close()
