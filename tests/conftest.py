"""Shared pytest fixtures for all tests; markers live in pyproject.toml."""

import pytest


@pytest.fixture(autouse=True)
def _isolate_cli_env(monkeypatch):
    """Keep developer debug flags from changing CLI error handling."""
    for name in ("MODELICA_FORMAT_VERBOSE", "MODELICA_FORMAT_DEBUG", "MODELICA_FORMAT_RERAISE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_file(tmp_path):
    """Write ``content`` to ``tmp_path / name`` and return the path."""

    def _write(name: str, content: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
