"""Generate tsconfig.json for a migrated project."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from .exceptions import MetadataWriteError
from .logging_config import get_logger
from .tables import TSCONFIG_EXCLUDE, TSCONFIG_INCLUDE, ProjectType, compiler_options_for

logger = get_logger(__name__)

TSCONFIG_NAME = "tsconfig.json"


def build_tsconfig(project_type: Union[str, ProjectType, None]) -> dict[str, Any]:
    """Return the tsconfig document for a project type (unknown types use node)."""
    return {
        "compilerOptions": compiler_options_for(project_type).to_dict(),
        "include": list(TSCONFIG_INCLUDE),
        "exclude": list(TSCONFIG_EXCLUDE),
    }


def tsconfig_template(project_type: Union[str, ProjectType, None]) -> str:
    """Render the tsconfig document as the text written to disk."""
    return json.dumps(build_tsconfig(project_type), indent=2) + "\n"


def generate_tsconfig(
    project_path: Path,
    project_type: Union[str, ProjectType, None] = ProjectType.NODE,
    filename: str = TSCONFIG_NAME,
) -> Path:
    """Write tsconfig.json into ``project_path``, replacing any existing file.

    Raises:
        MetadataWriteError: If the file cannot be written
    """
    tsconfig_path = Path(project_path) / filename
    try:
        tsconfig_path.write_text(tsconfig_template(project_type), encoding="utf-8")
    except OSError as e:
        raise MetadataWriteError(tsconfig_path, str(e))

    logger.info(f"Generated {filename} at {tsconfig_path}")
    return tsconfig_path
