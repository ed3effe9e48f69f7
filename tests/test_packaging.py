"""Tests for the installed entry points."""

import importlib
from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def test_console_script_runs_server():
    with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
        scripts = tomllib.load(f)["project"]["scripts"]

    assert scripts == {"shortlink": "shortlink.main:run"}
    module_name, attr = scripts["shortlink"].split(":")
    assert callable(getattr(importlib.import_module(module_name), attr))
