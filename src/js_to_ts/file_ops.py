"""
File operations for js-to-ts.

Every OS-level failure is re-raised as FileAccessError so callers can
decide whether to skip the file or abort.
"""

from pathlib import Path

from .exceptions import FileAccessError


def safe_read_file(filepath: Path, encoding: str = "utf-8") -> str:
    """
    Read a text file.

    Raises:
        FileAccessError: If file cannot be read or decoded
    """
    try:
        with open(filepath, encoding=encoding) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")


def safe_write_file(filepath: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write a text file, creating the parent directory if needed.

    Raises:
        FileAccessError: If file cannot be written
    """
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding=encoding) as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(filepath, f"Write failed: {e}")


def safe_delete_file(filepath: Path) -> None:
    """
    Remove a file.

    Raises:
        FileAccessError: If file cannot be removed
    """
    try:
        filepath.unlink()
    except OSError as e:
        raise FileAccessError(filepath, f"Delete failed: {e}")
