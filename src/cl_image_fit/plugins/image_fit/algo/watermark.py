"""Centred PNG watermark overlay."""

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ....utils.media_types import ImageFormat, determine_image_format
from .geometry import round_half_up
from .pixels import to_rgba

logger = logging.getLogger(__name__)


def watermark_size(
    canvas_size: tuple[int, int],
    watermark_size: tuple[int, int],
) -> tuple[int, int]:
    """Native watermark size, shrunk to a third of the canvas width when wider."""
    canvas_w, _ = canvas_size
    wm_w, wm_h = watermark_size

    display_w = min(canvas_w / 3, wm_w)
    display_h = display_w * wm_h / wm_w

    return max(1, round_half_up(display_w)), max(1, round_half_up(display_h))


def add_watermark(canvas: Image.Image, watermark_path: str | Path) -> bool:
    """
    Blend a PNG watermark onto the centre of ``canvas`` in place.

    Args:
        canvas: Destination image, modified in place
        watermark_path: Path to a PNG file, transparency is honoured

    Returns:
        True if the watermark was applied, False if it was skipped because the
        file is missing, not a PNG, or unreadable
    """
    watermark_path = Path(watermark_path)
    if not watermark_path.is_file():
        logger.debug(f"Watermark not found, skipping: {watermark_path}")
        return False

    if determine_image_format(watermark_path) != ImageFormat.PNG:
        logger.warning(f"Watermark is not a PNG, skipping: {watermark_path}")
        return False

    try:
        with Image.open(watermark_path) as img:
            watermark = to_rgba(img)
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        logger.warning(f"Unreadable watermark {watermark_path}: {exc}")
        return False

    width, height = watermark_size(canvas.size, watermark.size)

    # Centre on the canvas
    dst_x = int((canvas.width - width) / 2)
    dst_y = int((canvas.height - height) / 2)

    stamp = watermark.resize((width, height), Image.Resampling.LANCZOS)
    canvas.paste(stamp, (dst_x, dst_y), stamp)
    return True
