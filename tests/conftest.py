"""Shared test fixtures for js-to-ts."""

import logging
import os

import pytest

SAMPLE_SERVER = """const express = require('express');
const { join, resolve } = require('path');
const PORT = process.env.PORT || 3000;

function greet(name, greeting = 'Hello') {
  return greeting + ', ' + name;
}

const handler = (req, res) => {
  res.send(greet(req.query.name));
};

module.exports = { greet, handler };
"""


@pytest.fixture
def sample_source():
    """A small CommonJS Express module."""
    return SAMPLE_SERVER


@pytest.fixture
def project_dir(tmp_path):
    """Project directory with two top-level modules and one nested module."""
    project = tmp_path / "project"
    project.mkdir()
    (project / "server.js").write_text(SAMPLE_SERVER, encoding="utf-8")
    (project / "util.js").write_text("exports.VERSION = '1.0';\n", encoding="utf-8")
    (project / "lib").mkdir()
    (project / "lib" / "db.js").write_text("const dbPort = 5432;\n", encoding="utf-8")
    return project


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path_factory):
    """Keep config discovery away from the developer's home and environment."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("JS2TS_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo the level and file handlers a command installs."""
    yield
    logging.getLogger("js_to_ts").setLevel(logging.NOTSET)
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
