"""Tests for manifest and color models."""

import pytest
from pydantic import ValidationError

from scenestep.models import BackgroundSlot, Color, Manifest


def test_color_parses_hex_with_and_without_alpha():
    assert Color.model_validate("#ff8000") == Color(r=255, g=128, b=0, a=255)
    assert Color.model_validate("#ff800080").a == 128


def test_color_parses_channel_list():
    assert Color.model_validate([1, 2, 3]) == Color(r=1, g=2, b=3, a=255)


def test_color_rejects_bad_input():
    with pytest.raises(ValidationError):
        Color.model_validate("#12")
    with pytest.raises(ValidationError):
        Color.model_validate([1, 2])
    with pytest.raises(ValidationError):
        Color(r=300)


def test_color_same_as_compares_every_channel():
    assert Color(r=1, g=2, b=3, a=4).same_as(Color(r=1, g=2, b=3, a=4))
    assert not Color(r=1, g=2, b=3, a=4).same_as(Color(r=1, g=2, b=3, a=5))


def test_background_slot_use_color_follows_color_when_omitted():
    assert BackgroundSlot(color="#000000").uses_color
    assert not BackgroundSlot().uses_color
    assert not BackgroundSlot(color="#000000", use_color=False).uses_color


def test_manifest_yaml_round_trip(tmp_path, manifest):
    path = tmp_path / "scene.yaml"
    manifest.to_yaml(path)

    loaded = Manifest.from_yaml(path)
    assert loaded == manifest
    assert "#000000ff" in path.read_text()


def test_manifest_rejects_negative_start(tmp_path):
    path = tmp_path / "scene.yaml"
    path.write_text("project_name: x\nstart_position: -1\n")
    with pytest.raises(ValidationError):
        Manifest.from_yaml(path)
