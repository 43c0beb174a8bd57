"""Scene content models: dialogue lines and visual entity configuration."""

from typing import Any, List, Optional
from pydantic import BaseModel, Field, model_validator

from .color import Color, WHITE


class DialogueLine(BaseModel):
    """Speaker/line pair shown at one scene position."""

    speaker: str = Field(default="", description="Name of the speaker")
    line: str = Field(default="", description="Text spoken at this position")

    class Config:
        """Pydantic config."""
        frozen = True


class CharacterSpec(BaseModel):
    """An on-screen actor whose sprite changes per scene position."""

    name: str = Field(..., description="Character identifier, matches a stage image")
    sprite: Optional[str] = Field(None, description="Sprite displayed at startup")
    expressions: List[Optional[str]] = Field(
        default_factory=list,
        description="Sprite per scene position; null keeps the previous one"
    )


class BackgroundSlot(BaseModel):
    """Texture/color override for one scene position."""

    texture: Optional[str] = Field(None, description="Texture to show")
    suppress: bool = Field(default=False, description="Show no texture at all")
    color: Optional[Color] = Field(None, description="Tint color")
    use_color: Optional[bool] = Field(
        None, description="Whether this slot's color is authoritative"
    )

    class Config:
        """Pydantic config."""
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def _default_use_color(cls, data: Any) -> Any:
        # An omitted flag follows whether a color was given at all.
        if isinstance(data, dict) and data.get("use_color") is None:
            data = {**data, "use_color": data.get("color") is not None}
        return data

    @property
    def uses_color(self) -> bool:
        return bool(self.use_color) and self.color is not None


class BackgroundSpec(BaseModel):
    """A background visual whose texture and color change per scene position."""

    name: str = Field(..., description="Background identifier, matches a stage raw image")
    texture: Optional[str] = Field(None, description="Texture displayed at startup")
    color: Color = Field(default=WHITE, description="Color displayed at startup")
    values: List[BackgroundSlot] = Field(
        default_factory=list, description="Overrides per scene position"
    )
