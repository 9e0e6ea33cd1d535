"""Tisp lexical front end."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tisp.scanner import ScanResult

__version__ = "0.1.0"


def scan(source: str) -> ScanResult:
    """Scan Tisp source into tokens and lexical errors."""
    from tisp.scanner import scan as _scan

    return _scan(source)
