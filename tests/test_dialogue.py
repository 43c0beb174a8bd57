"""Tests for the dialogue track and speech area."""

import logging

import pytest

from scenestep.engine import DialogueTrack, SpeechArea
from scenestep.errors import ConfigurationError
from scenestep.models import DialogueLine
from scenestep.stage import TextBox

LINES = [DialogueLine(speaker="A", line="hi"), DialogueLine(speaker="B", line="yo")]


def test_at_returns_stored_pair():
    track = DialogueTrack(LINES)
    assert track.at(1) == ("B", "yo")


def test_at_out_of_bounds_keeps_current_speaker():
    track = DialogueTrack(LINES, out_of_bounds_message="gone")
    assert track.at(5, "B") == ("B", "gone")
    assert track.at(-1, "A") == ("A", "gone")


def test_default_out_of_bounds_message_comes_from_config():
    track = DialogueTrack(LINES)
    _, line = track.at(2)
    assert "outside the bounds" in line


def test_empty_speaker_and_line_are_warned(caplog):
    track = DialogueTrack([DialogueLine(speaker="", line="")])

    with caplog.at_level(logging.WARNING):
        assert track.at(0) == ("", "")

    messages = [record.getMessage() for record in caplog.records]
    assert any("No speaker text at scene position 0" in m for m in messages)
    assert any("No speech text at scene position 0" in m for m in messages)


def test_speech_area_requires_both_surfaces():
    area = SpeechArea(DialogueTrack(LINES), TextBox(name="speaker"), None)
    with pytest.raises(ConfigurationError):
        area.initialize()


def test_speech_area_requires_dialogue():
    area = SpeechArea(DialogueTrack([]), TextBox(name="speaker"), TextBox(name="speech"))
    with pytest.raises(ConfigurationError):
        area.initialize()


def test_speech_area_writes_only_changes():
    speaker = TextBox(name="speaker")
    speech = TextBox(name="speech")
    area = SpeechArea(DialogueTrack([DialogueLine(speaker="A", line="hi"),
                                     DialogueLine(speaker="A", line="again")]),
                      speaker, speech)

    assert area.show(0) is True
    assert area.show(0) is False
    area.show(1)

    assert speaker.writes == 1
    assert speech.writes == 2
    assert speech.text == "again"
