"""Manifest data model."""

from typing import List
from pathlib import Path
from pydantic import BaseModel, Field
import yaml

from .scene import BackgroundSpec, CharacterSpec, DialogueLine


class HistorySettings(BaseModel):
    """Where progress for this manifest is persisted."""

    path: str = Field(default="history", description="Directory under the data dir")
    file_name: str = Field(default="history", description="File name without extension")


class Manifest(BaseModel):
    """Scene manifest: dialogue plus the visuals that change alongside it."""

    project_name: str = Field(..., description="Project name")
    start_position: int = Field(default=0, ge=0, description="Position shown on first run")
    dialogue: List[DialogueLine] = Field(default_factory=list, description="Dialogue per position")
    characters: List[CharacterSpec] = Field(default_factory=list, description="Characters")
    backgrounds: List[BackgroundSpec] = Field(default_factory=list, description="Backgrounds")
    history: HistorySettings = Field(default_factory=HistorySettings, description="History file")

    class Config:
        """Pydantic config."""
        frozen = False

    @classmethod
    def from_yaml(cls, path: Path) -> "Manifest":
        """Load manifest from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    def to_yaml(self, path: Path) -> None:
        """Save manifest to YAML file."""
        with open(path, "w") as f:
            yaml.safe_dump(self.model_dump(), f, default_flow_style=False, sort_keys=False)
