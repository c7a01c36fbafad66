"""Image fit plugin."""

from .errors import CorruptImageError, ImageFitError, InvalidColorError, UnsupportedFormatError
from .schema import ImageFitOutput, ImageFitParams, ResizeOptions
from .task import ImageFitTask

__all__ = [
    "ImageFitTask",
    "ImageFitParams",
    "ImageFitOutput",
    "ResizeOptions",
    "ImageFitError",
    "UnsupportedFormatError",
    "CorruptImageError",
    "InvalidColorError",
]
