"""State-specific scanners for the scsstags line scanner.

Each scanner is a mixin that provides scanning logic for one or more
scanner states (NEUTRAL, declarations, at-rules, skipped regions).
"""

from __future__ import annotations

from scsstags.scanner.scanners.body import BodyScannerMixin
from scsstags.scanner.scanners.declaration import DeclarationScannerMixin, make_tag
from scsstags.scanner.scanners.directive import DirectiveScannerMixin
from scsstags.scanner.scanners.neutral import NeutralScannerMixin

__all__ = [
    "BodyScannerMixin",
    "DeclarationScannerMixin",
    "DirectiveScannerMixin",
    "NeutralScannerMixin",
    "make_tag",
]
