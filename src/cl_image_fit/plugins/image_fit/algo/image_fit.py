"""Pure image fit computation logic (single file)."""

import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from ....utils.media_types import ImageFormat, determine_image_format
from ....utils.profiling import timed
from ..errors import CorruptImageError
from ..schema import ResizeOptions
from .geometry import compute_placement, resolve_target_size, round_half_up
from .orientation import apply_orientation, read_orientation
from .pixels import to_rgba
from .watermark import add_watermark

logger = logging.getLogger(__name__)


class ImageFitStatus(StrEnum):
    OK = "ok"
    UNSUPPORTED_FORMAT = "unsupported_format"


@dataclass(frozen=True)
class ImageFitResult:
    status: ImageFitStatus
    format: ImageFormat | None = None
    size: tuple[int, int] | None = None
    watermarked: bool = False

    @property
    def ok(self) -> bool:
        return self.status == ImageFitStatus.OK


def _decode(input_path: Path) -> Image.Image:
    try:
        with Image.open(input_path) as img:
            img.load()
            return to_rgba(img)
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise CorruptImageError(f"Cannot decode {input_path}: {exc}") from exc


def _read_jpeg_orientation(input_path: Path) -> int | None:
    try:
        with Image.open(input_path) as img:
            return read_orientation(img)
    except (UnidentifiedImageError, OSError) as exc:
        logger.debug(f"Could not read EXIF from {input_path}: {exc}")
        return None


@timed
def image_fit(
    *,
    input_path: str | Path,
    output_path: str | Path,
    options: ResizeOptions | None = None,
) -> ImageFitResult:
    """
    Resize a single image to a target box and write it in its own format.

    Framework-agnostic, single-image operation. The output directory is
    created up front, so it may exist even when decoding later fails.

    Args:
        input_path: Path to a GIF, JPEG or PNG image (detected by signature)
        output_path: Path to the output image
        options: Resize options, defaults keep the source size

    Returns:
        ImageFitResult with status OK, or UNSUPPORTED_FORMAT when the source
        is not GIF/JPEG/PNG (nothing is written in that case)

    Raises:
        FileNotFoundError: If the input image does not exist
        CorruptImageError: If a supported image cannot be decoded
        OSError: If Pillow fails to write the output
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    options = options if options is not None else ResizeOptions()

    output_path.parent.mkdir(mode=0o777, parents=True, exist_ok=True)

    image_format = determine_image_format(input_path)
    if image_format is None:
        logger.warning(f"Unsupported image format, skipping: {input_path}")
        return ImageFitResult(status=ImageFitStatus.UNSUPPORTED_FORMAT)

    background = options.background_rgb
    source = _decode(input_path)

    # Orientation correction is limited to JPEG sources
    if image_format == ImageFormat.JPEG:
        source = apply_orientation(
            source,
            _read_jpeg_orientation(input_path),
            fill=(*background, 255),
        )

    target_size = resolve_target_size(source.size, options.width, options.height)
    canvas = Image.new("RGB", target_size, background)

    placement = compute_placement(source.size, target_size, options.fit)
    dest = placement.dest
    dest_size = (max(1, round_half_up(dest.width)), max(1, round_half_up(dest.height)))
    resampled = source.resize(
        dest_size,
        Image.Resampling.LANCZOS,
        box=placement.source.box,
    )
    canvas.paste(resampled, (int(dest.x), int(dest.y)), resampled)

    watermarked = False
    if options.watermark_file is not None:
        watermarked = add_watermark(canvas, options.watermark_file)

    canvas.save(output_path, format=image_format.pil_format)
    logger.debug(
        f"Wrote {output_path} ({image_format.pil_format} {target_size[0]}x{target_size[1]})"
    )

    return ImageFitResult(
        status=ImageFitStatus.OK,
        format=image_format,
        size=target_size,
        watermarked=watermarked,
    )


def resize(
    input_path: str | Path,
    output_path: str | Path,
    options: ResizeOptions | None = None,
    **option_keys: object,
) -> bool:
    """
    Boolean form of image_fit() taking either a ResizeOptions or option keys.

    ``resize(src, dst, width=200, bgColor="#000000")`` is equivalent to
    ``image_fit(input_path=src, output_path=dst, options=ResizeOptions(width=200, bg_color="#000000"))``.

    Returns:
        False only when the source format is not supported, True otherwise

    Raises:
        TypeError: If both options and option keys are given
        pydantic.ValidationError: If an option key is unknown or invalid
    """
    if options is not None and option_keys:
        raise TypeError("Pass either a ResizeOptions instance or option keys, not both")
    if options is None:
        options = ResizeOptions.model_validate(option_keys)

    result = image_fit(input_path=input_path, output_path=output_path, options=options)
    return result.ok
