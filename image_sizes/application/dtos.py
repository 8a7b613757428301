"""
Transfer objects for web and messaging layers.

``SizeDTO`` validates an inbound Size payload with pydantic using the same
contract as the JSON codec: tokens are normalized (unknown tokens become
the empty UNKNOWN token), dimensions are strict integers in 0..MAX_DIMENSION, and
extra keys are ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from image_sizes.domain.orientation import Orientation
from image_sizes.domain.scale import Scale
from image_sizes.domain.size import MAX_DIMENSION, Size


class SizeDTO(BaseModel):
    """Wire representation of a Size."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    orientation: str = Field("", description="Orientation token, '' when unknown")
    scale: str = Field("", description="Scale token, '' when unknown")
    width: int = Field(
        ..., ge=0, le=MAX_DIMENSION, strict=True, description="Width in pixels"
    )
    height: int = Field(
        ..., ge=0, le=MAX_DIMENSION, strict=True, description="Height in pixels"
    )

    @field_validator("orientation", mode="before")
    @classmethod
    def normalize_orientation(cls, value: Any) -> str:
        return Orientation.from_token(value).to_token()

    @field_validator("scale", mode="before")
    @classmethod
    def normalize_scale(cls, value: Any) -> str:
        return Scale.from_token(value).to_token()

    @classmethod
    def from_domain(cls, size: Size) -> "SizeDTO":
        return cls(**size.to_dict())

    def to_domain(self) -> Size:
        return Size(
            Orientation.from_token(self.orientation),
            Scale.from_token(self.scale),
            self.width,
            self.height,
        )
