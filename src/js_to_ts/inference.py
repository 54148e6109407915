"""Guess a TypeScript type from the text of a default parameter value."""

import re

_DIGITS = re.compile(r"[0-9]+")
_QUOTED = re.compile(r"""['"].*['"]""")


def infer_type_from_value(value: str) -> str:
    """Return a type label for a literal default value.

    Rules are checked in order and the first match wins; anything
    unrecognised is ``unknown``.

    >>> infer_type_from_value("5")
    'number'
    >>> infer_type_from_value("'hi'")
    'string'
    """
    if value in ("true", "false"):
        return "boolean"
    if _DIGITS.fullmatch(value):
        return "number"
    if _QUOTED.fullmatch(value):
        return "string"
    if value == "null":
        return "null"
    if value == "undefined":
        return "undefined"
    if value.startswith("["):
        return "unknown[]"
    if value.startswith("{"):
        return "Record<string, unknown>"
    return "unknown"
