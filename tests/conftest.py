"""Pytest fixtures for enclave tests."""

import pytest

from enclave.types import Point, Rect

# Corner lists of the reference enclosure scenario
OUTER_CORNERS = [Point(1, 2), Point(1, 7), Point(5, 2), Point(5, 7)]
INNER_CORNERS = [Point(2, 4), Point(2, 6), Point(3, 4), Point(3, 6)]


@pytest.fixture
def outer_rect() -> Rect:
    """x in [1, 5], y in [2, 7]."""
    return Rect.from_points(OUTER_CORNERS)


@pytest.fixture
def inner_rect() -> Rect:
    """x in [2, 3], y in [4, 6]."""
    return Rect.from_points(INNER_CORNERS)


@pytest.fixture
def unit_square() -> Rect:
    """[0, 1] x [0, 1]."""
    return Rect.from_center_size(Point(0.5, 0.5), Point(1.0, 1.0))


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run in an empty project directory with no user config.

    The directory is marked as a git root so the upward config search stops
    there.  Returns the project directory.
    """
    project = tmp_path / "project"
    project.mkdir()
    (project / ".git").mkdir()

    user_config = tmp_path / "home" / ".config" / "enclave" / "config.toml"
    monkeypatch.setattr("enclave.config.USER_CONFIG_PATH", user_config)
    monkeypatch.chdir(project)
    return project
