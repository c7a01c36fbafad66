from typing_extensions import override


class ImageFitError(Exception):
    """Base class for failures raised while fitting an image."""

    def __init__(self, message: str = "Image fit failed."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message}"


class UnsupportedFormatError(ImageFitError):
    """Source signature is not GIF, JPEG or PNG."""


class CorruptImageError(ImageFitError):
    """Source signature is supported but the decoder rejected the content."""


class InvalidColorError(ImageFitError, ValueError):
    """Colour string is not of the form #RRGGBB."""
