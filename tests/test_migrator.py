"""Tests for the migrate workflow."""

import json

import pytest

from js_to_ts.config import MigrationConfig
from js_to_ts.exceptions import FileAccessError, ManifestParseError
from js_to_ts.migrator import MigrateOptions, migrate, preview, target_path_for
from js_to_ts.transformer import transform_source


def _snapshot(directory):
    return {p: p.read_bytes() for p in sorted(directory.rglob("*")) if p.is_file()}


class TestMigrateSingleFile:
    """A single .js file is replaced by its .ts counterpart."""

    def test_writes_ts_and_removes_js(self, tmp_path, sample_source):
        source = tmp_path / "server.js"
        source.write_text(sample_source)

        result = migrate(source)

        assert result.success
        assert result.migrated_files == [tmp_path / "server.ts"]
        assert not source.exists()
        assert (tmp_path / "server.ts").read_text() == transform_source(sample_source)

    def test_generates_metadata_next_to_file(self, tmp_path, sample_source):
        source = tmp_path / "server.js"
        source.write_text(sample_source)

        migrate(source)

        assert (tmp_path / "tsconfig.json").exists()
        manifest = json.loads((tmp_path / "package.json").read_text())
        assert manifest["devDependencies"]["typescript"] == "^5.3.3"

    def test_non_source_file_rejected(self, tmp_path):
        readme = tmp_path / "README.md"
        readme.write_text("# docs\n")

        result = migrate(readme)

        assert not result.success
        assert "JavaScript file" in result.error
        assert result.migrated_files == []
        assert readme.exists()


class TestMigrateDirectory:
    """Directory migration, recursion and metadata."""

    def test_top_level_only(self, project_dir):
        result = migrate(project_dir)

        assert result.success
        assert result.migrated_files == [project_dir / "server.ts", project_dir / "util.ts"]
        assert (project_dir / "lib" / "db.js").exists()

    def test_recursive(self, project_dir):
        result = migrate(project_dir, MigrateOptions(recursive=True))

        assert len(result.migrated_files) == 3
        db = (project_dir / "lib" / "db.ts").read_text()
        assert db == "const dbPort: number | string = 5432;\n"

    def test_skip_metadata(self, project_dir):
        migrate(project_dir, MigrateOptions(skip_config=True, skip_package=True))

        assert not (project_dir / "tsconfig.json").exists()
        assert not (project_dir / "package.json").exists()

    def test_existing_tsconfig_kept(self, project_dir):
        (project_dir / "tsconfig.json").write_text('{"custom": true}')

        migrate(project_dir)

        assert json.loads((project_dir / "tsconfig.json").read_text()) == {"custom": True}

    def test_project_type_passed_to_metadata(self, project_dir):
        migrate(project_dir, MigrateOptions(project_type="nestjs"))

        tsconfig = json.loads((project_dir / "tsconfig.json").read_text())
        assert tsconfig["compilerOptions"]["experimentalDecorators"] is True
        manifest = json.loads((project_dir / "package.json").read_text())
        assert manifest["name"] == "project"
        assert "@nestjs/cli" in manifest["devDependencies"]


class TestMigrateFailures:
    """Path problems fail the run; per-file problems skip the file."""

    def test_missing_path(self, tmp_path):
        result = migrate(tmp_path / "missing")

        assert not result.success
        assert "Path does not exist" in result.error
        assert result.migrated_files == []

    def test_empty_directory(self, tmp_path):
        before = _snapshot(tmp_path)

        result = migrate(tmp_path)

        assert not result.success
        assert result.error == "No JavaScript files found to migrate"
        assert result.migrated_files == []
        assert _snapshot(tmp_path) == before

    def test_only_excluded_files(self, tmp_path):
        (tmp_path / "webpack.config.js").write_text("module.exports = {};\n")

        result = migrate(tmp_path)

        assert not result.success
        assert (tmp_path / "webpack.config.js").exists()

    def test_failed_file_skipped_but_run_succeeds(self, project_dir, monkeypatch):
        from js_to_ts import migrator

        real_write = migrator.safe_write_file

        def flaky_write(filepath, content):
            if filepath.name == "server.ts":
                raise FileAccessError(filepath, "disk full")
            real_write(filepath, content)

        monkeypatch.setattr(migrator, "safe_write_file", flaky_write)

        result = migrate(project_dir)

        assert result.success
        assert result.failed_files == [project_dir / "server.js"]
        assert result.migrated_files == [project_dir / "util.ts"]
        assert (project_dir / "server.js").exists()

    def test_undecodable_file_skipped(self, tmp_path):
        (tmp_path / "bad.js").write_bytes(b"\xff\xfe\x00bad = require('x');\n")
        (tmp_path / "good.js").write_text("const x = require('x');\n", encoding="utf-8")

        result = migrate(tmp_path)

        assert result.success
        assert result.failed_files == [tmp_path / "bad.js"]
        assert result.migrated_files == [tmp_path / "good.ts"]
        assert (tmp_path / "bad.js").exists()
        assert not (tmp_path / "bad.ts").exists()
        assert (tmp_path / "package.json").exists()

    def test_metadata_errors_propagate(self, project_dir):
        (project_dir / "package.json").write_text("{ broken")

        with pytest.raises(ManifestParseError):
            migrate(project_dir)


class TestDryRun:
    """Dry-run computes previews and touches nothing."""

    def test_no_writes_or_deletes(self, tmp_path, sample_source):
        source = tmp_path / "server.js"
        source.write_text(sample_source)
        before = _snapshot(tmp_path)

        result = migrate(source, MigrateOptions(dry_run=True))

        assert result.success
        assert _snapshot(tmp_path) == before
        assert result.migrated_files == [tmp_path / "server.ts"]

    def test_preview_is_first_500_characters(self, tmp_path):
        source = tmp_path / "big.js"
        source.write_text("// padding\n" * 100)

        result = migrate(source, MigrateOptions(dry_run=True))

        text = result.previews[tmp_path / "big.ts"]
        assert text == ("// padding\n" * 100)[:500] + "..."

    def test_short_preview_not_truncated(self, tmp_path):
        source = tmp_path / "tiny.js"
        source.write_text("const x = require('foo');")

        result = migrate(source, MigrateOptions(dry_run=True))

        assert result.previews[tmp_path / "tiny.ts"] == "import x from 'foo';"

    def test_preview_length_from_config(self, tmp_path):
        source = tmp_path / "a.js"
        source.write_text("x" * 50)

        result = migrate(source, MigrateOptions(dry_run=True), MigrationConfig(preview_chars=10))

        assert result.previews[tmp_path / "a.ts"] == "x" * 10 + "..."


class TestHelpers:
    """Small helpers used by migrate."""

    def test_target_path(self, tmp_path):
        config = MigrationConfig()
        assert target_path_for(tmp_path / "a.b.js", config) == tmp_path / "a.b.ts"

    def test_preview_exact_limit(self):
        assert preview("abc", 3) == "abc"
