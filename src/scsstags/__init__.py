"""
scsstags — Tag scanner for CSS and SCSS stylesheets

Extracts selectors, class names and ids from stylesheet source in a
single pass, skipping comments, strings, rule bodies and at-rules.

Quick Start:
    >>> from scsstags import find_tags
    >>> find_tags(".foo, .bar { color: red; }")
    [Tag(CLASS, 'foo', line 1), Tag(CLASS, 'bar', line 1)]

    >>> # Feed lines from anywhere, collect tags anywhere
    >>> from scsstags import TagCollector, TextLineSource, run
    >>> sink = TagCollector()
    >>> run(TextLineSource("#header { margin: 0; }"), sink)
    <ScanState.NEUTRAL: 1>
    >>> sink.tags
    [Tag(ID, 'header', line 0)]

Only some kinds:
    >>> from scsstags import ScanConfig
    >>> find_tags("p, .x {}", config=ScanConfig.from_dict({"kinds": "c"}))
    [Tag(CLASS, 'x', line 1)]
"""

from collections.abc import Iterator

from scsstags.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from scsstags.errors import ConfigError, ScssTagsError, UnknownKindError
from scsstags.protocols import LineSource, TagSink
from scsstags.scanner import (
    LineResult,
    LineScanner,
    PendingDeclaration,
    ScanState,
    TagScanner,
    finish,
    scan_line,
    scan_lines,
)
from scsstags.sources import TagCollector, TextLineSource, run, split_lines
from scsstags.tags import Tag, TagKind

__version__ = "0.1.0"


def scan_text(text: str, *, config: ScanConfig | None = None) -> Iterator[Tag]:
    """Scan stylesheet text, yielding tags in source order.

    Args:
        text: Stylesheet source; lines end at ``\\n`` or ``\\r\\n``
        config: Scan configuration (defaults to the active context config)

    Yields:
        Tag objects, one per declaration of an enabled kind.
    """
    return scan_lines(split_lines(text), config=config)


def find_tags(text: str, *, config: ScanConfig | None = None) -> list[Tag]:
    """Scan stylesheet text and return all tags.

    Example:
        >>> find_tags("@import url(x.css);\\n.after {}\\n")
        [Tag(CLASS, 'after', line 2)]
    """
    return list(scan_text(text, config=config))


__all__ = [
    # Scanning
    "find_tags",
    "scan_text",
    "scan_lines",
    "scan_line",
    "finish",
    "run",
    "split_lines",
    "LineScanner",
    "TagScanner",
    "LineResult",
    "PendingDeclaration",
    "ScanState",
    # Tags
    "Tag",
    "TagKind",
    # Collaborators
    "LineSource",
    "TagSink",
    "TextLineSource",
    "TagCollector",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "ScssTagsError",
    "ConfigError",
    "UnknownKindError",
    "__version__",
]
