"""Image fit parameters and output schemas."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from ...common.schema_job import BaseJobParams, TaskOutput
from ...utils.media_types import ImageFormat
from .algo.color import DEFAULT_BG_COLOR, hex_to_rgb


class ResizeOptions(BaseModel):
    """Options for a single fit/fill resize.

    Attributes:
        width: Target width in pixels (None = derived from height and the source ratio)
        height: Target height in pixels (None = derived from width and the source ratio)
        fit: If True, pad with bg_color to keep the whole source in view;
             if False, crop the source to fill the canvas (default: True)
        watermark_file: Optional PNG overlaid on the centre of the result
        bg_color: Canvas and rotation fill colour as #RRGGBB (default: #ffffff)

    The camelCase keys ``watermarkFile`` and ``bgColor`` are accepted too.
    Unknown keys are rejected.
    """

    width: PositiveInt | None = None
    height: PositiveInt | None = None
    fit: bool = True
    watermark_file: Path | None = Field(default=None, alias="watermarkFile")
    bg_color: str = Field(default=DEFAULT_BG_COLOR, alias="bgColor")

    model_config: ClassVar[ConfigDict] = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
    )

    @field_validator("bg_color")
    @classmethod
    def validate_bg_color(cls, v: str) -> str:
        """Reject anything hex_to_rgb cannot parse."""
        _ = hex_to_rgb(v)
        return v

    @property
    def background_rgb(self) -> tuple[int, int, int]:
        return hex_to_rgb(self.bg_color)


class ImageFitParams(BaseJobParams):
    """Parameters for the image fit task.

    Attributes:
        input_path: Path to the source image (GIF, JPEG or PNG)
        output_path: Path of the resized image, written in the source format
        options: Resize options
    """

    options: ResizeOptions = Field(default_factory=ResizeOptions)


class ImageFitOutput(TaskOutput):
    output_path: str = Field(description="Path of the written image")
    format: ImageFormat = Field(description="Format of both source and output")
    width: int = Field(description="Output width in pixels")
    height: int = Field(description="Output height in pixels")
    watermarked: bool = Field(default=False, description="Whether a watermark was applied")
