"""Estimate how much work a JavaScript to TypeScript migration will be.

The counts come from regexes, not a parser, and the complexity buckets are
a rough proxy for effort:

    score = 0.01 * lines + 2 * functions + 5 * classes
    low < 10 <= medium < 30 <= high

A project is ``high`` when more than 30% of its files are high, ``medium``
when more than half are medium or high, and ``low`` otherwise.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional

from .config import MigrationConfig
from .discovery import discover_source_files
from .file_ops import safe_read_file
from .logging_config import get_logger

logger = get_logger(__name__)

Complexity = Literal["low", "medium", "high"]

_COMMONJS_IMPORT = re.compile(r"require\s*\(")
_ES6_IMPORT = re.compile(r"""import\s+.*\s+from\s+['"][^'"]+['"]""")
_FUNCTION_DECL = re.compile(r"function\s+\w+\s*\([^)]*\)")
_ARROW_ASSIGNMENT = re.compile(r"(?:const|let|var)\s+\w+\s*=\s*(?:async\s*)?\([^)]*\)\s*=>")
_CLASS_DECL = re.compile(r"class\s+\w+")

LOW_THRESHOLD = 10
HIGH_THRESHOLD = 30
HIGH_FILE_RATIO = 0.3
MEDIUM_FILE_RATIO = 0.5


@dataclass(frozen=True)
class FileAnalysis:
    """Counts and complexity bucket for one file."""

    path: str
    lines: int
    commonjs_imports: int
    es6_imports: int
    functions: int
    classes: int
    complexity: Complexity


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregate counts over every analyzed file."""

    total_files: int
    total_lines: int
    complexity: Complexity
    commonjs_imports: int
    es6_imports: int
    untyped_functions: int
    files: tuple[FileAnalysis, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["files"] = [asdict(f) for f in self.files]
        return data


def complexity_score(lines: int, functions: int, classes: int) -> float:
    return lines * 0.01 + functions * 2 + classes * 5


def file_complexity(lines: int, functions: int, classes: int) -> Complexity:
    """Bucket a single file's score. Boundaries belong to the higher bucket."""
    score = complexity_score(lines, functions, classes)
    if score < LOW_THRESHOLD:
        return "low"
    if score < HIGH_THRESHOLD:
        return "medium"
    return "high"


def overall_complexity(files: list[FileAnalysis] | tuple[FileAnalysis, ...]) -> Complexity:
    """Bucket a set of files. An empty set is ``low``."""
    if not files:
        return "low"

    high_count = sum(1 for f in files if f.complexity == "high")
    medium_count = sum(1 for f in files if f.complexity == "medium")

    if high_count > len(files) * HIGH_FILE_RATIO:
        return "high"
    if medium_count + high_count > len(files) * MEDIUM_FILE_RATIO:
        return "medium"
    return "low"


def analyze_source(content: str, path: str) -> FileAnalysis:
    """Scan one file's text."""
    lines = len(content.split("\n"))
    functions = len(_FUNCTION_DECL.findall(content)) + len(_ARROW_ASSIGNMENT.findall(content))
    classes = len(_CLASS_DECL.findall(content))

    return FileAnalysis(
        path=path,
        lines=lines,
        commonjs_imports=len(_COMMONJS_IMPORT.findall(content)),
        es6_imports=len(_ES6_IMPORT.findall(content)),
        functions=functions,
        classes=classes,
        complexity=file_complexity(lines, functions, classes),
    )


def analyze_files(
    target: Path, recursive: bool = False, config: Optional[MigrationConfig] = None
) -> AnalysisResult:
    """Analyze every source file under ``target``.

    Raises:
        InvalidPathError: If target does not exist
        FileAccessError: If a discovered file cannot be read
    """
    files = discover_source_files(target, recursive=recursive, config=config)

    analyses = []
    for filepath in files:
        analysis = analyze_source(safe_read_file(filepath), str(filepath))
        logger.debug(f"{filepath}: {analysis.complexity} ({analysis.functions} functions)")
        analyses.append(analysis)

    return AnalysisResult(
        total_files=len(analyses),
        total_lines=sum(a.lines for a in analyses),
        complexity=overall_complexity(analyses),
        commonjs_imports=sum(a.commonjs_imports for a in analyses),
        es6_imports=sum(a.es6_imports for a in analyses),
        untyped_functions=sum(a.functions for a in analyses),
        files=tuple(analyses),
    )
