"""Migration exceptions: discovery, per-file failures, project metadata."""

from pathlib import Path

from .base import JsToTsError


class MigrationError(JsToTsError):
    """Base class for errors raised while migrating source files."""

    pass


class NoSourceFilesError(MigrationError):
    """Raised when discovery finds nothing to migrate."""

    def __init__(self, path: Path):
        super().__init__("No JavaScript files found to migrate", details={"path": str(path)})
        self.path = path


class FileAccessError(MigrationError):
    """Raised when a file cannot be read, written or removed."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class FileMigrationError(MigrationError):
    """Raised when a single file fails to migrate. The batch continues."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Failed to migrate {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class MetadataError(JsToTsError):
    """Base class for tsconfig.json / package.json failures."""

    pass


class MetadataWriteError(MetadataError):
    """Raised when a project metadata file cannot be written."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot write project metadata: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ManifestParseError(MetadataError):
    """Raised when an existing package.json is not valid JSON."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot parse manifest: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
