"""EXIF auto-orientation for decoded images."""

import logging

from PIL import ExifTags, Image

logger = logging.getLogger(__name__)

# orientation tag value -> counter-clockwise rotation in degrees
ROTATIONS: dict[int, int] = {
    3: 180,
    6: -90,
    8: 90,
}


def read_orientation(image: Image.Image) -> int | None:
    """Return the EXIF orientation tag, or None when absent or unreadable."""
    try:
        orientation = image.getexif().get(ExifTags.Base.Orientation)
        return int(orientation) if orientation is not None else None
    except (ValueError, TypeError, KeyError, OSError, SyntaxError) as exc:
        logger.debug(f"Could not read EXIF orientation: {exc}")
        return None


def apply_orientation(
    image: Image.Image,
    orientation: int | None,
    fill: tuple[int, ...],
) -> Image.Image:
    """Rotate ``image`` upright for orientation 3, 6 or 8; other values are a no-op."""
    angle = ROTATIONS.get(orientation) if orientation is not None else None
    if angle is None:
        return image
    logger.debug(f"Applying EXIF orientation {orientation} (rotate {angle})")
    return image.rotate(angle, expand=True, fillcolor=fill)
