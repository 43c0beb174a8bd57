"""RGBA color model."""

from typing import Any
from pydantic import BaseModel, Field, model_serializer, model_validator


class Color(BaseModel):
    """A 32-bit RGBA color.

    Accepts ``"#rrggbb"``, ``"#rrggbbaa"``, a 3/4-item sequence or a mapping
    of channels. Serializes back to ``"#rrggbbaa"`` so manifests stay readable.
    """

    r: int = Field(default=255, ge=0, le=255, description="Red channel")
    g: int = Field(default=255, ge=0, le=255, description="Green channel")
    b: int = Field(default=255, ge=0, le=255, description="Blue channel")
    a: int = Field(default=255, ge=0, le=255, description="Alpha channel")

    class Config:
        """Pydantic config."""
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, str):
            return cls._from_hex(data)
        if isinstance(data, (list, tuple)):
            if len(data) not in (3, 4):
                raise ValueError(f"Color needs 3 or 4 channels, got {len(data)}")
            return dict(zip("rgba", data))
        return data

    @staticmethod
    def _from_hex(value: str) -> dict:
        digits = value.strip().lstrip("#")
        if len(digits) == 6:
            digits += "ff"
        if len(digits) != 8:
            raise ValueError(f"Invalid hex color: {value!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, 8, 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {value!r}") from None
        return dict(zip("rgba", channels))

    @model_serializer
    def _to_hex(self) -> str:
        return self.hex

    @property
    def hex(self) -> str:
        """Return the color as ``#rrggbbaa``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def same_as(self, other: "Color") -> bool:
        """Compare all four channels."""
        return (
            self.a == other.a
            and self.b == other.b
            and self.g == other.g
            and self.r == other.r
        )


WHITE = Color(r=255, g=255, b=255, a=255)
