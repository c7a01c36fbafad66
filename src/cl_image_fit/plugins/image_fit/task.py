"""Image fit task implementation."""

import logging
from pathlib import Path
from typing import Callable

from typing_extensions import override

from ...common.compute_module import ComputeModule
from .algo.image_fit import image_fit
from .errors import UnsupportedFormatError
from .schema import ImageFitOutput, ImageFitParams

logger = logging.getLogger(__name__)


class ImageFitTask(ComputeModule[ImageFitParams, ImageFitOutput]):
    """Compute module for fitting an image into a target box."""

    schema: type[ImageFitParams] = ImageFitParams

    @property
    @override
    def task_type(self) -> str:
        return "image_fit"

    @override
    async def run(
        self,
        params: ImageFitParams,
        progress_callback: Callable[[int], None] | None = None,
    ) -> ImageFitOutput:
        input_path = Path(params.input_path)
        if not input_path.exists():
            raise FileNotFoundError("Input file not found: " + str(input_path))

        result = image_fit(
            input_path=input_path,
            output_path=params.output_path,
            options=params.options,
        )
        if not result.ok or result.format is None or result.size is None:
            raise UnsupportedFormatError(
                f"Unsupported image format: {input_path}. Only GIF, JPEG and PNG are supported."
            )

        if params.options.watermark_file is not None and not result.watermarked:
            logger.warning(f"Watermark skipped for {params.output_path}")

        if progress_callback:
            progress_callback(100)

        width, height = result.size
        return ImageFitOutput(
            output_path=params.output_path,
            format=result.format,
            width=width,
            height=height,
            watermarked=result.watermarked,
        )
