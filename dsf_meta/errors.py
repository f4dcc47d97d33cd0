"""
Error types raised while reading DSF metadata.

    TagError (base)
    ├── FormatError - the stream is not a DSF file (signature mismatch)
    ├── ReadError   - short read, rejected seek or failing stream
    └── DecodeError - the embedded tag block could not be decoded

Every error records the phase that failed: ``"header"``, ``"seek"`` or
``"decode"``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

HEADER = "header"
SEEK = "seek"
DECODE = "decode"


class TagError(Exception):
    """Base exception for all dsf-meta errors."""

    def __init__(self, message: str, *, phase: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.message = message
        self.phase = phase
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message} ({self.phase})"
        return f"{self.message} ({self.phase})"


class FormatError(TagError):
    """Raised when the container signature does not match."""


class ReadError(TagError):
    """Raised on short reads, rejected seeks and underlying stream failures."""


class DecodeError(TagError):
    """Raised when the embedded metadata decoder rejects the tag block."""
