"""Tests for per-project-type lookup tables."""

import pytest

from js_to_ts.tables import (
    COMPILER_OPTIONS,
    DEV_DEPENDENCIES,
    TYPE_PACKAGES,
    ProjectType,
    compiler_options_for,
    dev_dependencies_for,
)


class TestProjectType:
    """Free-form strings map onto a closed set with a node fallback."""

    @pytest.mark.parametrize("value", ["node", "nestjs", "react", "angular"])
    def test_known_types(self, value):
        assert ProjectType.parse(value).value == value

    def test_case_and_whitespace(self):
        assert ProjectType.parse(" React ") is ProjectType.REACT

    @pytest.mark.parametrize("value", ["vue", "", None])
    def test_unknown_falls_back_to_node(self, value):
        assert ProjectType.parse(value) is ProjectType.NODE

    def test_member_passes_through(self):
        assert ProjectType.parse(ProjectType.ANGULAR) is ProjectType.ANGULAR


class TestCompilerOptions:
    """Compiler option records per project type."""

    def test_every_type_has_options(self):
        assert set(COMPILER_OPTIONS) == set(ProjectType)
        assert set(DEV_DEPENDENCIES) == set(ProjectType)

    def test_node_defaults(self):
        options = compiler_options_for("node").to_dict()
        assert options["target"] == "ES2020"
        assert options["module"] == "commonjs"
        assert options["lib"] == ["ES2020"]
        assert options["rootDir"] == "./src"
        assert options["strict"] is True
        assert "experimentalDecorators" not in options

    def test_decorator_types(self):
        for project_type in ("nestjs", "angular"):
            options = compiler_options_for(project_type).to_dict()
            assert options["experimentalDecorators"] is True
            assert options["emitDecoratorMetadata"] is True

    def test_nestjs_is_lenient(self):
        options = compiler_options_for("nestjs").to_dict()
        assert options["strict"] is False
        assert options["rootDir"] == "./"

    def test_react_targets_the_browser(self):
        options = compiler_options_for("react").to_dict()
        assert options["lib"] == ["DOM", "DOM.Iterable", "ESNext"]
        assert options["declaration"] is False

    def test_key_order(self):
        keys = list(compiler_options_for("angular").to_dict())
        assert keys[:3] == ["target", "module", "lib"]
        assert keys[-2:] == ["experimentalDecorators", "emitDecoratorMetadata"]


class TestDependencyTables:
    """Dev-dependency defaults and @types companions."""

    def test_node_dev_dependencies(self):
        assert dict(dev_dependencies_for("node")) == {
            "typescript": "^5.3.3",
            "@types/node": "^20.10.0",
            "ts-node": "^10.9.2",
        }

    def test_nestjs_adds_cli(self):
        assert dev_dependencies_for("nestjs")["@nestjs/cli"] == "^10.0.0"

    def test_unknown_type_uses_node(self):
        assert dev_dependencies_for("svelte") == dev_dependencies_for("node")

    def test_type_packages(self):
        assert TYPE_PACKAGES["express"] == "@types/express"
        assert "react" not in TYPE_PACKAGES

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            TYPE_PACKAGES["koa"] = "@types/koa"
        with pytest.raises(TypeError):
            DEV_DEPENDENCIES[ProjectType.NODE]["typescript"] = "^4.0.0"
