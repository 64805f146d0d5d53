"""Shared test fixtures for ccost."""

from pathlib import Path

import pytest


@pytest.fixture
def projects_dir(tmp_path) -> Path:
    """Create an empty Claude projects directory."""
    projects = tmp_path / ".claude" / "projects"
    projects.mkdir(parents=True)
    return projects


@pytest.fixture
def settings_path(tmp_path) -> Path:
    """Path for an isolated settings file (not created)."""
    return tmp_path / "config" / "settings.json"
