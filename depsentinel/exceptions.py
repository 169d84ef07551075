"""Custom exceptions for the depsentinel inventory agent."""

from __future__ import annotations


class InventoryError(Exception):
    """Base exception for all inventory errors."""


class ArchiveError(InventoryError):
    """Base for errors tied to a single archive path."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ArchiveMissingError(ArchiveError):
    """Raised when a registered archive no longer exists on disk."""


class ArchiveOpenError(ArchiveError):
    """Raised when an archive exists but cannot be opened or read as a zip."""


class ResourceCloseError(ArchiveError):
    """Raised when closing an opened archive fails."""


class MetadataParseError(InventoryError):
    """Raised when a pom.properties or manifest source is malformed or unreadable."""

    def __init__(self, source: str, detail: str, line_no: int | None = None):
        self.source = source
        self.line_no = line_no
        where = f"{source} line {line_no}" if line_no is not None else source
        super().__init__(f"{where}: {detail}")


class ConfigurationError(InventoryError):
    """Raised when a setting has an invalid value."""
