"""Tests for environment-driven configuration."""

from pathlib import Path

from scenestep.config import DEFAULT_OUT_OF_BOUNDS_MESSAGE, Config


def test_defaults(monkeypatch):
    monkeypatch.delenv("SCENESTEP_DATA_DIR", raising=False)
    monkeypatch.delenv("SCENESTEP_OUT_OF_BOUNDS_MESSAGE", raising=False)

    cfg = Config()
    assert cfg.data_dir == Path(".")
    assert cfg.out_of_bounds_message == DEFAULT_OUT_OF_BOUNDS_MESSAGE


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SCENESTEP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("SCENESTEP_OUT_OF_BOUNDS_MESSAGE", "The end.")

    cfg = Config()
    assert cfg.data_dir == tmp_path
    assert cfg.out_of_bounds_message == "The end."
