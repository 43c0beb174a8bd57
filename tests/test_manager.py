"""Tests for the scene manager."""

import pytest

from scenestep.engine import SceneManager
from scenestep.errors import ConfigurationError
from scenestep.models import Manifest
from scenestep.stage import Stage


def test_three_shows_walk_the_scene(manager, stage, history_path):
    manager.initialize()
    assert stage.images["ava"].sprite == "sprite0"
    assert (stage.speaker.text, stage.speech.text) == ("A", "hi")

    manager.show(advance=True)
    assert manager.current_position == 1
    assert stage.images["ava"].sprite == "sprite0"
    assert (stage.speaker.text, stage.speech.text) == ("B", "yo")

    manager.show(advance=True)
    assert manager.current_position == 2
    assert stage.images["ava"].sprite == "sprite2"
    assert (stage.speaker.text, stage.speech.text) == ("A", "bye")

    assert history_path.read_text() == "2\nTrue\nTrue\nTrue\n"


def test_background_follows_position(manager, stage):
    manager.initialize()
    sky = stage.raw_images["sky"]
    assert sky.texture == "dusk.png"

    manager.show()
    assert sky.color.hex == "#000000ff"
    assert sky.texture == "dusk.png"

    manager.show()
    assert sky.texture is None
    assert sky.color.hex == "#000000ff"

    manager.retreat()
    manager.retreat()
    assert sky.texture == "dusk.png"
    assert sky.color.hex == "#ffffffff"


def test_initialize_marks_first_position_and_saves(manager, history_path):
    manager.initialize()
    assert manager.current_is_visited
    assert history_path.read_text() == "0\nTrue\nFalse\nFalse\n"


def test_show_at_end_stays_put(manager):
    manager.initialize()
    for _ in range(5):
        manager.show()
    assert manager.current_position == 2


def test_history_restores_position_on_restart(manifest, tmp_path, history_path):
    first = SceneManager.from_manifest(manifest, Stage.for_manifest(manifest), data_dir=tmp_path)
    first.initialize()
    first.show()

    stage = Stage.for_manifest(manifest)
    second = SceneManager.from_manifest(manifest, stage, data_dir=tmp_path)
    second.initialize()

    assert second.current_position == 1
    assert stage.speech.text == "yo"
    assert second.state.visited == [True, True, False]


def test_tick_scroll_forward_only_onto_seen_positions(manager):
    manager.initialize()

    assert manager.tick(-1.0) is False
    assert manager.current_position == 0

    manager.show()
    assert manager.tick(1.0) is True
    assert manager.current_position == 0
    assert manager.tick(1.0) is False

    assert manager.tick(-1.0) is True
    assert manager.current_position == 1
    assert manager.tick(-1.0) is False
    assert manager.tick(0.0) is False


def test_retreat_does_not_mark_new_positions(manager):
    manager.initialize()
    manager.show()
    manager.show()
    manager.retreat()
    assert manager.state.visited == [True, True, True]
    assert manager.current_position == 1


def test_trigger_advances_only_while_enabled(manager, stage):
    manager.initialize()
    manager.enable()
    stage.trigger.fire()
    assert manager.current_position == 1

    manager.teardown()
    stage.trigger.fire()
    assert manager.current_position == 1


def test_missing_speech_surface_is_fatal(manifest, tmp_path):
    stage = Stage.for_manifest(manifest)
    stage.speech = None
    manager = SceneManager.from_manifest(manifest, stage, data_dir=tmp_path)

    with pytest.raises(ConfigurationError):
        manager.initialize()


def test_empty_dialogue_is_fatal(tmp_path):
    manifest = Manifest(project_name="empty")
    with pytest.raises(ConfigurationError):
        SceneManager.from_manifest(manifest, Stage.for_manifest(manifest), data_dir=tmp_path)


def test_entity_without_surface_is_skipped(manifest, tmp_path):
    stage = Stage.for_manifest(manifest)
    del stage.images["ava"]
    manager = SceneManager.from_manifest(manifest, stage, data_dir=tmp_path)

    manager.initialize()
    manager.show()
    assert manager.current_position == 1


def test_unwritable_history_is_not_fatal(manifest, tmp_path, caplog):
    blocker = tmp_path / "blocked"
    blocker.write_text("not a directory")
    manager = SceneManager.from_manifest(manifest, Stage.for_manifest(manifest), data_dir=blocker)

    manager.initialize()
    manager.show()

    assert manager.current_position == 1
    assert "Could not save history" in caplog.text


def test_without_persistence_nothing_is_written(manifest, tmp_path):
    manager = SceneManager.from_manifest(manifest, Stage.for_manifest(manifest), persist=False)
    manager.initialize()
    manager.show()
    assert manager.history is None
    assert list(tmp_path.iterdir()) == []


def test_corrupt_history_bytes_do_not_abort_startup(manager, stage, history_path):
    history_path.parent.mkdir(parents=True)
    history_path.write_bytes(b"1\nTrue\n\xff\xfe\nTrue\n")

    manager.initialize()

    assert manager.current_position == 1
    assert stage.speech.text == "yo"
    assert manager.state.visited == [True, True, True]
