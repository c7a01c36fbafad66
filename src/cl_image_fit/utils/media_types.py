from enum import StrEnum
from pathlib import Path

import magic

# libmagic only needs the leading bytes to recognise raster signatures
SIGNATURE_BYTES = 2048


class ImageFormat(StrEnum):
    GIF = "gif"
    JPEG = "jpeg"
    PNG = "png"

    @classmethod
    def from_mime(cls, file_type: str) -> "ImageFormat | None":
        if file_type == "image/gif":
            return ImageFormat.GIF
        elif file_type in ("image/jpeg", "image/pjpeg"):
            return ImageFormat.JPEG
        elif file_type == "image/png":
            return ImageFormat.PNG
        else:
            return None

    @property
    def pil_format(self) -> str:
        return self.value.upper()


def detect_mime(data: bytes) -> str:
    # Create a Magic object
    mime = magic.Magic(mime=True)

    file_type = mime.from_buffer(data)
    if not file_type:
        file_type = "application/octet-stream"
    return file_type


def determine_image_format(path: str | Path) -> ImageFormat | None:
    """Classify a file as GIF, JPEG or PNG from its signature, ignoring the extension."""
    with open(path, "rb") as f:
        head = f.read(SIGNATURE_BYTES)
    if not head:
        return None
    return ImageFormat.from_mime(detect_mime(head))
