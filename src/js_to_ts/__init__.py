"""
js-to-ts - migrate CommonJS JavaScript projects to TypeScript

Rewrites require() calls, export assignments and function signatures with
regex passes, then generates tsconfig.json and updates package.json. The
analyze mode estimates migration effort without touching any file.
"""

__version__ = "1.0.0"

from .analyzer import AnalysisResult, FileAnalysis, analyze_files, analyze_source
from .inference import infer_type_from_value
from .migrator import MigrateOptions, MigrateResult, migrate
from .package_updater import required_type_packages, update_package_json
from .tables import ProjectType
from .transformer import transform_source
from .tsconfig import generate_tsconfig, tsconfig_template

__all__ = [
    "migrate",  # Main entry point
    "MigrateOptions",
    "MigrateResult",
    "analyze_files",
    "analyze_source",
    "AnalysisResult",
    "FileAnalysis",
    "transform_source",
    "infer_type_from_value",
    "generate_tsconfig",
    "tsconfig_template",
    "update_package_json",
    "required_type_packages",
    "ProjectType",
]
