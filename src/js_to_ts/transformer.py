"""Regex passes that rewrite CommonJS JavaScript into TypeScript.

The pipeline is four independent text passes run in a fixed order:

    1. require() calls become ES module imports
    2. function parameters get type annotations
    3. module.exports / exports.x become export statements
    4. ``const ...port... = ...`` bindings get a ``number | string`` annotation

There is no parsing. Text that does not match a pattern passes through
unchanged, so the output is a starting point for manual clean-up rather
than guaranteed-valid TypeScript.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from .inference import infer_type_from_value

# Order matters: each pattern is applied to the whole text before the next
# one, so the more specific require() shapes must run first.
_CHAINED_REQUIRE = re.compile(
    r"""const\s+(\w+)\s*=\s*require\s*\(\s*['"]([^'"]+)['"]\s*\)\s*\(\s*\)\s*;"""
)
_METHOD_CALL_REQUIRE = re.compile(
    r"""const\s+(\w+)\s*=\s*require\s*\(\s*['"]([^'"]+)['"]\s*\)\.(\w+)\s*\(\s*([^)]*)\s*\)\s*;"""
)
_SIMPLE_REQUIRE = re.compile(
    r"""const\s+(\w+)\s*=\s*require\s*\(\s*['"]([^'"]+)['"]\s*\)(?:\.(\w+))?;?"""
)
_DESTRUCTURED_REQUIRE = re.compile(
    r"""const\s*\{\s*([^}]+)\s*\}\s*=\s*require\s*\(\s*['"]([^'"]+)['"]\s*\);?"""
)

_FUNCTION_DECL = re.compile(r"function\s+(\w+)\s*\(([^)]*)\)\s*\{")
_ARROW_BLOCK = re.compile(r"const\s+(\w+)\s*=\s*\(([^)]*)\)\s*=>\s*\{")
_ARROW_EXPRESSION = re.compile(r"const\s+(\w+)\s*=\s*\(([^)]*)\)\s*=>\s*([^{])")

_MODULE_EXPORTS = re.compile(r"module\.exports\s*=\s*(\{[^}]+\}|\w+);?")
_PROPERTY_EXPORT = re.compile(r"(?:module\.)?exports\.(\w+)\s*=\s*([^;]+);")

_PORT_BINDING = re.compile(r"const\s+(\w*[Pp]ort\w*)\s*=\s*([^;\n]+);")

_NON_IDENTIFIER = re.compile(r"[^a-zA-Z0-9]")


def transform_source(content: str, path: Optional[str] = None) -> str:
    """Run every pass over ``content`` and return the TypeScript text.

    ``path`` is accepted for callers that log per file; the passes never
    look at it.
    """
    transformed = content
    for step in PIPELINE:
        transformed = step(transformed)
    return transformed


def transform_requires(content: str) -> str:
    """Rewrite ``const x = require('m')`` style loads as imports."""

    def chained(match: re.Match) -> str:
        var_name, module_path = match.group(1), match.group(2)
        return (
            f"import {var_name}Factory from '{module_path}';\n"
            f"const {var_name} = {var_name}Factory();"
        )

    def method_call(match: re.Match) -> str:
        var_name, module_path, method, args = match.groups()
        import_name = f"{_NON_IDENTIFIER.sub('_', module_path)}Module"
        return (
            f"import {import_name} from '{module_path}';\n"
            f"const {var_name} = {import_name}.{method}({args});"
        )

    def simple(match: re.Match) -> str:
        var_name, module_path, prop = match.groups()
        if prop:
            return f"import {{ {prop} as {var_name} }} from '{module_path}';"
        return f"import {var_name} from '{module_path}';"

    def destructured(match: re.Match) -> str:
        names = [name.strip() for name in match.group(1).split(",")]
        names = [name for name in names if name]
        return f"import {{ {', '.join(names)} }} from '{match.group(2)}';"

    transformed = _CHAINED_REQUIRE.sub(chained, content)
    transformed = _METHOD_CALL_REQUIRE.sub(method_call, transformed)
    transformed = _SIMPLE_REQUIRE.sub(simple, transformed)
    transformed = _DESTRUCTURED_REQUIRE.sub(destructured, transformed)
    return transformed


def annotate_params(params: str) -> str:
    """Annotate a comma-separated parameter list.

    >>> annotate_params("x, y=5")
    'x: unknown, y: number = 5'
    """
    if not params.strip():
        return ""

    annotated = []
    for param in params.split(","):
        param = param.strip()
        if not param or ":" in param:
            annotated.append(param)
        elif "=" in param:
            name, _, default = param.partition("=")
            name, default = name.strip(), default.strip()
            annotated.append(f"{name}: {infer_type_from_value(default)} = {default}")
        else:
            annotated.append(f"{param}: unknown")
    return ", ".join(annotated)


def annotate_functions(content: str) -> str:
    """Type function parameters and mark block-bodied functions as returning void."""
    transformed = _FUNCTION_DECL.sub(
        lambda m: f"function {m.group(1)}({annotate_params(m.group(2))}): void {{",
        content,
    )
    transformed = _ARROW_BLOCK.sub(
        lambda m: f"const {m.group(1)} = ({annotate_params(m.group(2))}): void => {{",
        transformed,
    )
    # Block-bodied arrows already read "): void =>" and no longer match.
    transformed = _ARROW_EXPRESSION.sub(
        lambda m: f"const {m.group(1)} = ({annotate_params(m.group(2))}) => {m.group(3)}",
        transformed,
    )
    return transformed


def transform_exports(content: str) -> str:
    """Rewrite CommonJS export assignments as ES export statements."""

    def bulk(match: re.Match) -> str:
        exported = match.group(1)
        if exported.startswith("{"):
            items = [item.strip() for item in exported[1:-1].split(",")]
            return f"export {{ {', '.join(item for item in items if item)} }};"
        return f"export default {exported};"

    transformed = _MODULE_EXPORTS.sub(bulk, content)
    transformed = _PROPERTY_EXPORT.sub(
        lambda m: f"export const {m.group(1)} = {m.group(2)};", transformed
    )
    return transformed


def annotate_variables(content: str) -> str:
    """Annotate ``port``-like constants as ``number | string``."""
    return _PORT_BINDING.sub(
        lambda m: f"const {m.group(1)}: number | string = {m.group(2)};", content
    )


PIPELINE: tuple[Callable[[str], str], ...] = (
    transform_requires,
    annotate_functions,
    transform_exports,
    annotate_variables,
)
