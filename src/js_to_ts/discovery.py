"""Find the JavaScript files a command should work on."""

from __future__ import annotations

from fnmatch import fnmatch
from pathlib import Path
from typing import Optional

from .config import MigrationConfig
from .exceptions import InvalidPathError
from .logging_config import get_logger

logger = get_logger(__name__)


def should_skip_file(filepath: Path, root: Path, config: MigrationConfig) -> bool:
    """
    Check if a file is excluded by directory name or file name pattern.

    Hidden files and anything inside a hidden directory are always skipped.

    Args:
        filepath: Candidate file
        root: Directory discovery started from
        config: Supplies exclude_dirs and exclude_patterns
    """
    relative = filepath.relative_to(root)
    if any(part.startswith(".") for part in relative.parts):
        return True
    if any(part in config.exclude_dirs for part in relative.parts[:-1]):
        return True
    return any(fnmatch(filepath.name, pattern) for pattern in config.exclude_patterns)


def discover_source_files(
    target: Path, recursive: bool = False, config: Optional[MigrationConfig] = None
) -> list[Path]:
    """
    Return the source files under ``target``, sorted.

    A directory is scanned (one level, or all levels when ``recursive``)
    for files ending in ``config.source_suffix``. A file path is returned
    as-is when it carries the source suffix, otherwise the result is empty.

    Raises:
        InvalidPathError: If target does not exist
    """
    config = config or MigrationConfig()
    root = target.resolve()

    if not root.exists():
        raise InvalidPathError(root, "Path does not exist")

    if not root.is_dir():
        return [root] if root.name.endswith(config.source_suffix) else []

    pattern = f"*{config.source_suffix}"
    candidates = root.rglob(pattern) if recursive else root.glob(pattern)

    files = sorted(
        path
        for path in candidates
        if path.is_file() and not should_skip_file(path, root, config)
    )
    logger.debug(f"Discovered {len(files)} file(s) under {root}")
    return files
