"""Pytest fixtures for scenestep tests."""

import pytest

from scenestep.engine import SceneManager
from scenestep.models import Manifest
from scenestep.stage import Stage


@pytest.fixture
def manifest():
    """Three-line scene with one character and one background."""
    return Manifest(
        project_name="demo",
        dialogue=[
            {"speaker": "A", "line": "hi"},
            {"speaker": "B", "line": "yo"},
            {"speaker": "A", "line": "bye"},
        ],
        characters=[
            {"name": "ava", "sprite": "start.png", "expressions": ["sprite0", None, "sprite2"]},
        ],
        backgrounds=[
            {
                "name": "sky",
                "texture": "dusk.png",
                "color": "#ffffffff",
                "values": [
                    {},
                    {"color": "#000000ff"},
                    {"suppress": True},
                ],
            },
        ],
        history={"path": "saves", "file_name": "demo"},
    )


@pytest.fixture
def stage(manifest):
    """In-memory surfaces for the manifest."""
    return Stage.for_manifest(manifest)


@pytest.fixture
def manager(manifest, stage, tmp_path):
    """Manager persisting under a temporary data directory, not yet initialized."""
    return SceneManager.from_manifest(manifest, stage, data_dir=tmp_path)


@pytest.fixture
def history_path(tmp_path):
    return tmp_path / "saves" / "demo.txt"
