"""Base exception for js-to-ts.

Every error the tool raises on purpose derives from JsToTsError and falls
into one of three families:

- configuration (``ConfigurationError``): an invalid config file or
  ``JS2TS_*`` value, or a target path that does not exist. Raised before
  any file is touched.
- migration (``MigrationError``): ``NoSourceFilesError`` when nothing
  matches, and the per-file ``FileAccessError`` and ``FileMigrationError``
  when a single source file cannot be read or replaced. ``migrate`` logs
  a per-file failure, lists the file in ``failed_files`` and carries on.
- metadata (``MetadataError``): ``tsconfig.json`` or ``package.json``
  could not be parsed or written. These abort the run.

The CLI prints any JsToTsError that reaches it as a one-line message and
exits 1. Anything else is logged with a traceback and also exits 1.
"""

from typing import Dict, Optional


class JsToTsError(Exception):
    """Root of the js-to-ts error families.

    ``details`` holds the path, field or value involved and is appended to
    the message as ``key=value`` pairs.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        pairs = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({pairs})"
