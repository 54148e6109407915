"""Exception hierarchy for js-to-ts."""

from .base import JsToTsError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)
from .migration import (
    FileAccessError,
    FileMigrationError,
    ManifestParseError,
    MetadataError,
    MetadataWriteError,
    MigrationError,
    NoSourceFilesError,
)

__all__ = [
    "JsToTsError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "MigrationError",
    "NoSourceFilesError",
    "FileAccessError",
    "FileMigrationError",
    "MetadataError",
    "MetadataWriteError",
    "ManifestParseError",
]
