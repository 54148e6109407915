"""Per-project-type defaults for tsconfig.json and package.json.

Every table is a read-only mapping built once at import time. Lookups go
through ``ProjectType.parse`` so unknown project types fall back to
``node``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


class ProjectType(str, Enum):
    """Project flavours with distinct TypeScript defaults."""

    NODE = "node"
    NESTJS = "nestjs"
    REACT = "react"
    ANGULAR = "angular"

    @classmethod
    def parse(cls, value: Union[str, "ProjectType", None]) -> "ProjectType":
        """Map a free-form project type to a member, defaulting to NODE."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NODE

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass(frozen=True)
class CompilerOptions:
    """The ``compilerOptions`` block of a generated tsconfig.json."""

    target: str
    module: str
    lib: tuple[str, ...]
    out_dir: str = "./dist"
    root_dir: str = "./src"
    strict: bool = True
    es_module_interop: bool = True
    skip_lib_check: bool = True
    force_consistent_casing_in_file_names: bool = True
    resolve_json_module: bool = True
    declaration: bool = True
    source_map: bool = True
    experimental_decorators: Optional[bool] = None
    emit_decorator_metadata: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        """Render as tsconfig camelCase keys. Unset decorator flags are omitted."""
        options: dict[str, Any] = {
            "target": self.target,
            "module": self.module,
            "lib": list(self.lib),
            "outDir": self.out_dir,
            "rootDir": self.root_dir,
            "strict": self.strict,
            "esModuleInterop": self.es_module_interop,
            "skipLibCheck": self.skip_lib_check,
            "forceConsistentCasingInFileNames": self.force_consistent_casing_in_file_names,
            "resolveJsonModule": self.resolve_json_module,
            "declaration": self.declaration,
            "sourceMap": self.source_map,
        }
        if self.experimental_decorators is not None:
            options["experimentalDecorators"] = self.experimental_decorators
        if self.emit_decorator_metadata is not None:
            options["emitDecoratorMetadata"] = self.emit_decorator_metadata
        return options


COMPILER_OPTIONS: Mapping[ProjectType, CompilerOptions] = MappingProxyType(
    {
        ProjectType.NODE: CompilerOptions(
            target="ES2020",
            module="commonjs",
            lib=("ES2020",),
        ),
        ProjectType.NESTJS: CompilerOptions(
            target="ES2022",
            module="commonjs",
            lib=("ES2022",),
            root_dir="./",
            strict=False,
            force_consistent_casing_in_file_names=False,
            experimental_decorators=True,
            emit_decorator_metadata=True,
        ),
        ProjectType.REACT: CompilerOptions(
            target="ES2020",
            module="ESNext",
            lib=("DOM", "DOM.Iterable", "ESNext"),
            declaration=False,
        ),
        ProjectType.ANGULAR: CompilerOptions(
            target="ES2022",
            module="ES2022",
            lib=("ES2022", "DOM"),
            declaration=False,
            experimental_decorators=True,
            emit_decorator_metadata=True,
        ),
    }
)

_TYPESCRIPT = ("typescript", "^5.3.3")
_TYPES_NODE = ("@types/node", "^20.10.0")
_TS_NODE = ("ts-node", "^10.9.2")

DEV_DEPENDENCIES: Mapping[ProjectType, Mapping[str, str]] = MappingProxyType(
    {
        ProjectType.NODE: MappingProxyType(dict([_TYPESCRIPT, _TYPES_NODE, _TS_NODE])),
        ProjectType.NESTJS: MappingProxyType(
            dict([_TYPESCRIPT, _TYPES_NODE, _TS_NODE, ("@nestjs/cli", "^10.0.0")])
        ),
        ProjectType.REACT: MappingProxyType(
            dict(
                [
                    _TYPESCRIPT,
                    ("@types/react", "^18.2.0"),
                    ("@types/react-dom", "^18.2.0"),
                    _TYPES_NODE,
                ]
            )
        ),
        ProjectType.ANGULAR: MappingProxyType(dict([_TYPESCRIPT, _TYPES_NODE])),
    }
)

# Runtime dependency -> companion type declaration package
TYPE_PACKAGES: Mapping[str, str] = MappingProxyType(
    {
        "express": "@types/express",
        "socket.io": "@types/socket.io",
        "winston": "@types/winston",
        "cors": "@types/cors",
        "lodash": "@types/lodash",
        "jest": "@types/jest",
        "mocha": "@types/mocha",
        "chai": "@types/chai",
    }
)

TYPE_PACKAGE_VERSION = "*"

TSCONFIG_INCLUDE: tuple[str, ...] = ("src/**/*",)
TSCONFIG_EXCLUDE: tuple[str, ...] = ("node_modules", "dist", "build")

DEFAULT_SCRIPTS: Mapping[str, str] = MappingProxyType(
    {
        "build": "tsc",
        "start": "node dist/index.js",
        "dev": "ts-node src/index.ts",
    }
)

BUILD_DIR = "dist"


def compiler_options_for(project_type: Union[str, ProjectType, None]) -> CompilerOptions:
    return COMPILER_OPTIONS[ProjectType.parse(project_type)]


def dev_dependencies_for(project_type: Union[str, ProjectType, None]) -> Mapping[str, str]:
    return DEV_DEPENDENCIES[ProjectType.parse(project_type)]
