"""Exception classes for scsstags.

Scanning itself never raises: malformed stylesheets degrade silently.
These exceptions cover misuse of the public API, such as configuring
a tag kind that does not exist.
"""

from __future__ import annotations


class ScssTagsError(Exception):
    """Base exception for all scsstags errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(ScssTagsError):
    """Invalid scan configuration."""

    pass


class UnknownKindError(ConfigError):
    """A tag kind letter or name that matches no TagKind.

    Raised by TagKind lookups and by ScanConfig.from_dict().
    """

    def __init__(self, kind: object) -> None:
        """Initialize with the offending kind value.

        Args:
            kind: The letter, name or other value that failed to resolve
        """
        self.kind = kind
        super().__init__(f"Unknown tag kind: {kind!r}")
