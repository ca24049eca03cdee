"""ContextVar-based scan configuration for scsstags.

Provides context-local configuration using Python's ContextVars (PEP 567).
Scanning functions read the active config unless one is passed explicitly.

Usage:
    from scsstags.config import ScanConfig, scan_config_context
    from scsstags.tags import TagKind

    with scan_config_context(ScanConfig(enabled_kinds=frozenset({TagKind.CLASS}))):
        tags = find_tags(source)  # only classes

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from scsstags.errors import ConfigError
from scsstags.tags import TagKind

_ALL_KINDS: frozenset[TagKind] = frozenset(TagKind)


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        enabled_kinds: Tag kinds that are reported. Disabled kinds are still
            scanned (they drive the state machine) but their tags are dropped.

    """

    enabled_kinds: frozenset[TagKind] = _ALL_KINDS

    def is_enabled(self, kind: TagKind) -> bool:
        """Check whether tags of this kind are reported."""
        return kind in self.enabled_kinds

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from dictionary.

        The ``kinds`` key accepts either a string of kind letters
        (``"cs"``, like ctags ``--kinds-<lang>``) or an iterable of kind
        names and letters. Unknown keys are silently ignored.

        Raises:
            UnknownKindError: If a kind letter or name is not recognized.
            ConfigError: If ``kinds`` is neither a string nor an iterable.

        Example:
            >>> ScanConfig.from_dict({"kinds": "ci"}).enabled_kinds == {
            ...     TagKind.CLASS, TagKind.ID
            ... }
            True

        """
        kinds = config_dict.get("kinds")
        if kinds is None:
            return cls()
        return cls(enabled_kinds=_parse_kinds(kinds))


def _parse_kinds(kinds: str | Iterable[str]) -> frozenset[TagKind]:
    if isinstance(kinds, str):
        return frozenset(TagKind.from_letter(letter) for letter in kinds)
    try:
        names = iter(kinds)
    except TypeError as exc:
        raise ConfigError(
            f"kinds must be a string of letters or an iterable of names, got {kinds!r}"
        ) from exc
    return frozenset(TagKind.from_name(name) for name in names)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get the scan configuration for the current context."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set the scan configuration for the current context."""
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration (all kinds enabled)."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ScanConfig to use within the context.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
