"""Migrate a file or directory of JavaScript to TypeScript."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .config import MigrationConfig
from .discovery import discover_source_files
from .exceptions import (
    FileAccessError,
    FileMigrationError,
    InvalidPathError,
    NoSourceFilesError,
)
from .file_ops import safe_delete_file, safe_read_file, safe_write_file
from .logging_config import get_logger
from .package_updater import update_package_json
from .tables import ProjectType
from .transformer import transform_source
from .tsconfig import generate_tsconfig

logger = get_logger(__name__)


@dataclass(frozen=True)
class MigrateOptions:
    dry_run: bool = False
    recursive: bool = False
    skip_config: bool = False
    skip_package: bool = False
    project_type: Union[str, ProjectType] = ProjectType.NODE


@dataclass
class MigrateResult:
    """Outcome of a migrate run.

    ``success`` stays True when individual files fail; those are listed in
    ``failed_files``. A failed run never lists migrated files.
    """

    success: bool
    migrated_files: list[Path] = field(default_factory=list)
    error: Optional[str] = None
    failed_files: list[Path] = field(default_factory=list)
    previews: dict[Path, str] = field(default_factory=dict)

    @classmethod
    def failure(cls, error: str) -> "MigrateResult":
        return cls(success=False, error=error)


def target_path_for(source: Path, config: MigrationConfig) -> Path:
    return source.with_name(source.name[: -len(config.source_suffix)] + config.target_suffix)


def preview(content: str, limit: int) -> str:
    """First ``limit`` characters, with an ellipsis when truncated."""
    return content[:limit] + ("..." if len(content) > limit else "")


def migrate(
    target: Union[str, Path],
    options: Optional[MigrateOptions] = None,
    config: Optional[MigrationConfig] = None,
) -> MigrateResult:
    """Transform every source file under ``target`` and update project metadata.

    Path and discovery problems come back as a failed result. A file that
    cannot be read, written or removed is logged and skipped. Metadata
    errors (MetadataError) propagate.
    """
    options = options or MigrateOptions()
    config = config or MigrationConfig()
    absolute = Path(target).resolve()

    if not absolute.exists():
        return MigrateResult.failure(f"Path does not exist: {absolute}")

    project_root = absolute if absolute.is_dir() else absolute.parent

    if absolute.is_file() and not absolute.name.endswith(config.source_suffix):
        return MigrateResult.failure(
            f"Target file must be a JavaScript file ({config.source_suffix})"
        )

    try:
        files = discover_source_files(absolute, recursive=options.recursive, config=config)
        if not files:
            raise NoSourceFilesError(absolute)
    except (InvalidPathError, NoSourceFilesError) as e:
        return MigrateResult.failure(e.message)

    logger.info(f"Found {len(files)} JavaScript file(s) to migrate")

    result = MigrateResult(success=True)
    for source in files:
        try:
            target_file, content = _migrate_file(source, options.dry_run, config)
        except FileMigrationError as e:
            logger.error(str(e))
            result.failed_files.append(source)
            continue

        result.migrated_files.append(target_file)
        if options.dry_run:
            result.previews[target_file] = preview(content, config.preview_chars)

    if not options.dry_run:
        _update_metadata(project_root, options, config)

    return result


def _migrate_file(source: Path, dry_run: bool, config: MigrationConfig) -> tuple[Path, str]:
    """Transform one file. Returns the target path and the new content.

    Raises:
        FileMigrationError: If the file cannot be read, written or removed
    """
    target_file = target_path_for(source, config)
    try:
        content = transform_source(safe_read_file(source), str(source))
        if dry_run:
            logger.info(f"[DRY RUN] Would migrate: {source} -> {target_file}")
        else:
            safe_write_file(target_file, content)
            safe_delete_file(source)
            logger.info(f"Migrated: {source} -> {target_file}")
    except FileAccessError as e:
        raise FileMigrationError(source, e.reason) from e
    return target_file, content


def _update_metadata(project_root: Path, options: MigrateOptions, config: MigrationConfig) -> None:
    if not options.skip_config:
        if not (project_root / config.tsconfig_name).exists():
            logger.info(f"Generating {config.tsconfig_name}")
            generate_tsconfig(project_root, options.project_type, filename=config.tsconfig_name)

    if not options.skip_package:
        logger.info(f"Updating {config.manifest_name} with TypeScript dependencies")
        update_package_json(project_root, options.project_type, filename=config.manifest_name)
