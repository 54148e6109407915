"""Create or update package.json with TypeScript tooling.

Updates are additive: existing dependency versions and scripts are never
overwritten, so running the updater on its own output changes nothing.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Mapping, Union

from .exceptions import ManifestParseError, MetadataWriteError
from .logging_config import get_logger
from .tables import (
    BUILD_DIR,
    DEFAULT_SCRIPTS,
    TYPE_PACKAGE_VERSION,
    TYPE_PACKAGES,
    ProjectType,
    dev_dependencies_for,
)

logger = get_logger(__name__)

MANIFEST_NAME = "package.json"

_NODE_START = re.compile(r"node\s+(\S+\.js)")


def required_type_packages(dependencies: Mapping[str, str]) -> list[str]:
    """List the companion @types packages for the given runtime dependencies."""
    return [TYPE_PACKAGES[dep] for dep in dependencies if dep in TYPE_PACKAGES]


def new_manifest(project_path: Path, project_type: Union[str, ProjectType, None]) -> dict[str, Any]:
    return {
        "name": Path(project_path).resolve().name,
        "version": "1.0.0",
        "main": f"{BUILD_DIR}/index.js",
        "scripts": dict(DEFAULT_SCRIPTS),
        "dependencies": {},
        "devDependencies": dict(dev_dependencies_for(project_type)),
    }


def merge_manifest(
    manifest: dict[str, Any], project_type: Union[str, ProjectType, None]
) -> dict[str, Any]:
    """Add missing TypeScript tooling to ``manifest`` in place and return it."""
    if not isinstance(manifest.get("devDependencies"), dict):
        manifest["devDependencies"] = {}
    dev_deps = manifest["devDependencies"]

    for dep, version in dev_dependencies_for(project_type).items():
        if not dev_deps.get(dep):
            dev_deps[dep] = version
            logger.info(f"Added devDependency: {dep}@{version}")

    dependencies = manifest.get("dependencies")
    if not isinstance(dependencies, dict):
        dependencies = {}
    for types_package in required_type_packages(dependencies):
        if not dev_deps.get(types_package):
            dev_deps[types_package] = TYPE_PACKAGE_VERSION
            logger.info(f"Added type definitions: {types_package}")

    if not isinstance(manifest.get("scripts"), dict):
        manifest["scripts"] = {}
    scripts = manifest["scripts"]
    if not scripts.get("build"):
        scripts["build"] = DEFAULT_SCRIPTS["build"]

    main = manifest.get("main")
    if isinstance(main, str) and main.endswith(".js"):
        if not main.startswith((f"{BUILD_DIR}/", f"./{BUILD_DIR}/")):
            manifest["main"] = f"{BUILD_DIR}/{Path(main).name}"

    start = scripts.get("start")
    if isinstance(start, str) and "node " in start and f"{BUILD_DIR}/" not in start:
        scripts["start"] = _NODE_START.sub(rf"node {BUILD_DIR}/\1", start, count=1)

    if not scripts.get("dev"):
        scripts["dev"] = DEFAULT_SCRIPTS["dev"]

    return manifest


def update_package_json(
    project_path: Path,
    project_type: Union[str, ProjectType, None] = ProjectType.NODE,
    filename: str = MANIFEST_NAME,
) -> dict[str, Any]:
    """Create package.json if missing, otherwise merge TypeScript defaults into it.

    Raises:
        ManifestParseError: If an existing package.json is not a JSON object
        MetadataWriteError: If package.json cannot be read or written
    """
    manifest_path = Path(project_path) / filename

    if not manifest_path.exists():
        logger.info(f"No {filename} found, creating one")
        manifest = new_manifest(project_path, project_type)
    else:
        try:
            manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ManifestParseError(manifest_path, str(e))
        except OSError as e:
            raise MetadataWriteError(manifest_path, f"Read failed: {e}")
        if not isinstance(manifest, dict):
            raise ManifestParseError(manifest_path, "top-level value is not an object")
        merge_manifest(manifest, project_type)

    try:
        manifest_path.write_text(
            json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )
    except OSError as e:
        raise MetadataWriteError(manifest_path, str(e))

    logger.info(f"Updated {filename} at {manifest_path}")
    return manifest
