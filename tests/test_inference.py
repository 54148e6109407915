"""Tests for default-value type inference."""

import pytest

from js_to_ts.inference import infer_type_from_value


class TestInferTypeFromValue:
    """Rules are checked in order; the first match wins."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("true", "boolean"),
            ("false", "boolean"),
            ("0", "number"),
            ("8080", "number"),
            ("'hello'", "string"),
            ('"hello"', "string"),
            ("''", "string"),
            ("null", "null"),
            ("undefined", "undefined"),
            ("[]", "unknown[]"),
            ("[1, 2]", "unknown[]"),
            ("{}", "Record<string, unknown>"),
            ("{ a: 1 }", "Record<string, unknown>"),
        ],
    )
    def test_literal_shapes(self, value, expected):
        assert infer_type_from_value(value) == expected

    @pytest.mark.parametrize("value", ["3.14", "-1", "someVar", "new Map()", "", "'open"])
    def test_unrecognised_values_are_unknown(self, value):
        """Anything outside the known literal shapes falls through to unknown."""
        assert infer_type_from_value(value) == "unknown"

    def test_boolean_checked_before_string(self):
        """A quoted 'true' is a string, bare true is a boolean."""
        assert infer_type_from_value("'true'") == "string"
        assert infer_type_from_value("true") == "boolean"

    def test_deterministic(self):
        """Same input always yields the same label."""
        results = {infer_type_from_value("[x]") for _ in range(5)}
        assert results == {"unknown[]"}
