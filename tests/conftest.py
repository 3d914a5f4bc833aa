"""Pytest configuration and fixtures"""

from pathlib import Path

import pytest

from flowgen.config import GeneratorConfig


@pytest.fixture
def jobs_dir(tmp_path: Path) -> Path:
    """An empty jobs directory inside a temporary project root."""
    path = tmp_path / "jobs"
    path.mkdir()
    return path


@pytest.fixture
def write_job(jobs_dir: Path):
    """Write a file into the jobs directory and return its path."""

    def _write(name: str, content: str) -> Path:
        path = jobs_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def python_config(tmp_path: Path, jobs_dir: Path) -> GeneratorConfig:
    return GeneratorConfig(jobs_dir=jobs_dir, output=tmp_path / "flow.py")


@pytest.fixture
def go_config(tmp_path: Path, jobs_dir: Path) -> GeneratorConfig:
    return GeneratorConfig(jobs_dir=jobs_dir, target="go", output=tmp_path / "flow.go")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any FLOWGEN_* overrides from the environment."""
    from flowgen.config import ENV_FIELDS

    for var in ENV_FIELDS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.delenv("FLOWGEN_LOG_LEVEL", raising=False)
