"""Configuration loading for js-to-ts.

Configuration sources are merged in priority order:
    1. Defaults (defined in MigrationConfig)
    2. Global config (~/.js-to-ts.toml)
    3. Project config (./js-to-ts.toml)
    4. Explicit config file
    5. Environment variables (JS2TS_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(preview_chars=200)
    >>> config.preview_chars
    200
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .logging_config import get_logger
from .tables import ProjectType

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "JS2TS_"
CONFIG_FILENAME = "js-to-ts.toml"

logger = get_logger(__name__)


@dataclass(frozen=True)
class MigrationConfig:
    """Settings shared by migrate, init and analyze.

    Attributes:
        project_type: Project type used for tsconfig.json and package.json defaults
        source_suffix: Extension of files to migrate
        target_suffix: Extension written in place of source_suffix
        preview_chars: Characters of transformed content shown in dry-run
        exclude_dirs: Directory names skipped at any depth during discovery
        exclude_patterns: File name globs skipped during discovery
        tsconfig_name: Compiler configuration file name
        manifest_name: Dependency manifest file name
        verbosity: Logging verbosity level
    """

    project_type: str = ProjectType.NODE.value
    source_suffix: str = ".js"
    target_suffix: str = ".ts"
    preview_chars: int = 500
    exclude_dirs: list[str] = field(default_factory=lambda: ["node_modules", "dist", "build"])
    exclude_patterns: list[str] = field(default_factory=lambda: ["*.config.js", "*.conf.js"])
    tsconfig_name: str = "tsconfig.json"
    manifest_name: str = "package.json"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        project_type = ProjectType.parse(self.project_type)
        if (
            not isinstance(self.project_type, ProjectType)
            and project_type.value != str(self.project_type).strip().lower()
        ):
            logger.warning(
                f"Unknown project type '{self.project_type}' "
                f"(expected one of {', '.join(ProjectType.values())}), using 'node'"
            )
        # Frozen dataclass: normalise in place via object.__setattr__
        object.__setattr__(self, "project_type", project_type.value)
        for key in ("source_suffix", "target_suffix"):
            value = getattr(self, key)
            if not value.startswith("."):
                raise InvalidConfigError(key, value, "must start with '.'")
        if self.source_suffix == self.target_suffix:
            raise InvalidConfigError(
                "target_suffix", self.target_suffix, "must differ from source_suffix"
            )
        if self.preview_chars < 1:
            raise InvalidConfigError("preview_chars", self.preview_chars, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet/normal/verbose")


def load_config(config_file: Optional[Path] = None, **overrides) -> MigrationConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset options keep lower-priority values.

    Returns:
        Validated MigrationConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILENAME}"
    if global_config.exists():
        try:
            merged.update(_load_toml_file(global_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid global config '{global_config}': {e}")

    project_config = Path.cwd() / CONFIG_FILENAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except Exception as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return MigrationConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from JS2TS_* environment variables.

    List fields (exclude_dirs, exclude_patterns) accept comma-separated
    values.
    """
    type_hints = get_type_hints(MigrationConfig)

    result: dict[str, Any] = {}

    for field_name in MigrationConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin is list:
        return [item.strip() for item in value.split(",") if item.strip()]

    if type_hint is int:
        return int(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            # Fallback to tomli for Python 3.9-3.10
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
