"""Configuration management."""

import os
from pathlib import Path
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_OUT_OF_BOUNDS_MESSAGE = "Error: You've gone outside the bounds of the speech array!"


class Config(BaseModel):
    """Application configuration."""

    # Paths
    data_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("SCENESTEP_DATA_DIR", ".")),
        description="Base directory that history paths are composed under"
    )

    # Dialogue
    out_of_bounds_message: str = Field(
        default_factory=lambda: os.getenv(
            "SCENESTEP_OUT_OF_BOUNDS_MESSAGE", DEFAULT_OUT_OF_BOUNDS_MESSAGE
        ),
        description="Line shown when dialogue is requested past the end of the track"
    )

    class Config:
        """Pydantic config."""
        frozen = False


# Global config instance
config = Config()
