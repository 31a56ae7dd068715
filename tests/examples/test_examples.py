"""Tests for the scripts in the examples/ directory."""

from __future__ import annotations

import importlib.util
import pathlib

import pytest

from mappath import from_yaml_file

PROJECT_ROOT = pathlib.Path(__file__).resolve().parent.parent.parent


def _load_example(relative_path: str):
    """Load a Python module from a path relative to PROJECT_ROOT using importlib."""
    full_path = PROJECT_ROOT / relative_path
    spec = importlib.util.spec_from_file_location(full_path.stem, str(full_path))
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


class TestNestedAccess:
    def test_summarize(self):
        mod = _load_example("examples/nested_access.py")
        summary = mod.summarize(from_yaml_file(mod.SERVICE_FILE))
        assert summary == {
            "name": "inventory",
            "debug": False,
            "timeout": 2.5,
            "retries": 3,
            "first_port": 8080,
            "tags": ["api", "internal", "7"],
        }

    def test_main_prints(self, capsys: pytest.CaptureFixture[str]):
        mod = _load_example("examples/nested_access.py")
        mod.main()
        assert "name: 'inventory'" in capsys.readouterr().out


class TestListAccess:
    def test_listeners(self):
        mod = _load_example("examples/list_access.py")
        assert mod.listeners(from_yaml_file(mod.SERVICE_FILE)) == ["0.0.0.0:8080", "127.0.0.1:8443 (tls)"]

    def test_main_reports_non_numeric_tags(self, capsys: pytest.CaptureFixture[str]):
        mod = _load_example("examples/list_access.py")
        mod.main()
        assert "tags are not numeric" in capsys.readouterr().out
