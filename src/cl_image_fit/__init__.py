"""cl_image_fit - Aspect-preserving image fit/fill resizing with watermarks."""

from .common.compute_module import ComputeModule
from .common.schema_job import BaseJobParams, TaskOutput
from .common.schema_job_record import JobRecord, JobRecordUpdate, JobStatus
from .plugins.image_fit import (
    CorruptImageError,
    ImageFitError,
    ImageFitOutput,
    ImageFitParams,
    ImageFitTask,
    InvalidColorError,
    ResizeOptions,
    UnsupportedFormatError,
)
from .plugins.image_fit.algo.color import hex_to_rgb
from .plugins.image_fit.algo.image_fit import ImageFitResult, ImageFitStatus, image_fit, resize
from .plugins.image_fit.algo.watermark import add_watermark
from .utils.media_types import ImageFormat, determine_image_format

__version__ = "0.1.0"

__all__ = [
    "BaseJobParams",
    "TaskOutput",
    "ComputeModule",
    "JobRecord",
    "JobRecordUpdate",
    "JobStatus",
    "ImageFitTask",
    "ImageFitParams",
    "ImageFitOutput",
    "ResizeOptions",
    "ImageFitResult",
    "ImageFitStatus",
    "ImageFormat",
    "ImageFitError",
    "UnsupportedFormatError",
    "CorruptImageError",
    "InvalidColorError",
    "__version__",
    "add_watermark",
    "determine_image_format",
    "hex_to_rgb",
    "image_fit",
    "resize",
]
