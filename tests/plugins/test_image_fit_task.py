"""Tests for the image fit compute module."""

from pathlib import Path

import pytest
from PIL import Image

from cl_image_fit.common.schema_job_record import JobRecord, JobStatus
from cl_image_fit.plugins.image_fit.errors import UnsupportedFormatError
from cl_image_fit.plugins.image_fit.schema import ImageFitOutput, ImageFitParams, ResizeOptions
from cl_image_fit.plugins.image_fit.task import ImageFitTask
from cl_image_fit.utils.media_types import ImageFormat
from tests.conftest import ImageFactory


class MockProgressCallback:
    """Mock progress callback for testing."""

    def __init__(self) -> None:
        self.calls: list[int] = []

    def __call__(self, progress: int) -> None:
        self.calls.append(progress)


@pytest.fixture
def fit_task() -> ImageFitTask:
    return ImageFitTask()


@pytest.fixture
def mock_progress_callback() -> MockProgressCallback:
    return MockProgressCallback()


def test_task_type(fit_task: ImageFitTask):
    assert fit_task.task_type == "image_fit"
    assert fit_task.schema is ImageFitParams


# ============================================================================
# run()
# ============================================================================


@pytest.mark.asyncio
async def test_run_returns_output_metadata(
    fit_task: ImageFitTask,
    make_image: ImageFactory,
    temp_output_dir: Path,
    mock_progress_callback: MockProgressCallback,
):
    src = make_image("photo.jpg", size=(400, 300), format="JPEG")
    output_path = temp_output_dir / "thumb.jpg"
    params = ImageFitParams(
        input_path=str(src),
        output_path=str(output_path),
        options=ResizeOptions(width=100, height=100, fit=False),
    )

    output = await fit_task.run(params, mock_progress_callback)

    assert output == ImageFitOutput(
        output_path=str(output_path),
        format=ImageFormat.JPEG,
        width=100,
        height=100,
        watermarked=False,
    )
    assert mock_progress_callback.calls == [100]
    with Image.open(output_path) as out:
        assert out.size == (100, 100)


@pytest.mark.asyncio
async def test_run_reports_watermark(
    fit_task: ImageFitTask, make_image: ImageFactory, temp_output_dir: Path
):
    src = make_image("src.png", size=(300, 300))
    wm = make_image("wm.png", size=(30, 30), color=(0, 0, 0))
    params = ImageFitParams(
        input_path=str(src),
        output_path=str(temp_output_dir / "out.png"),
        options=ResizeOptions(watermark_file=wm),
    )

    output = await fit_task.run(params)

    assert output.watermarked is True


@pytest.mark.asyncio
async def test_run_missing_input(fit_task: ImageFitTask, tmp_path: Path):
    params = ImageFitParams(
        input_path=str(tmp_path / "missing.png"),
        output_path=str(tmp_path / "out.png"),
    )

    with pytest.raises(FileNotFoundError):
        _ = await fit_task.run(params)


@pytest.mark.asyncio
async def test_run_unsupported_format(fit_task: ImageFitTask, text_file: Path, tmp_path: Path):
    params = ImageFitParams(input_path=str(text_file), output_path=str(tmp_path / "out.png"))

    with pytest.raises(UnsupportedFormatError):
        _ = await fit_task.run(params)


# ============================================================================
# execute()
# ============================================================================


@pytest.mark.asyncio
async def test_execute_completed(
    fit_task: ImageFitTask, make_image: ImageFactory, temp_output_dir: Path
):
    src = make_image("src.gif", size=(64, 32), format="GIF")
    output_path = temp_output_dir / "out.gif"
    record = JobRecord(
        job_id="job-1",
        task_type="image_fit",
        params={
            "input_path": str(src),
            "output_path": str(output_path),
            "options": {"height": 16, "bgColor": "#000000"},
        },
    )

    update = await fit_task.execute(record)

    assert update.status == JobStatus.completed
    assert update.progress == 100
    assert update.error_message is None
    assert update.output == {
        "output_path": str(output_path),
        "format": "gif",
        "width": 32,
        "height": 16,
        "watermarked": False,
    }


@pytest.mark.asyncio
async def test_execute_invalid_params(fit_task: ImageFitTask, tmp_path: Path):
    record = JobRecord(
        job_id="job-2",
        task_type="image_fit",
        params={
            "input_path": str(tmp_path / "in.png"),
            "output_path": str(tmp_path / "out.png"),
            "options": {"bgColor": "white"},
        },
    )

    update = await fit_task.execute(record)

    assert update.status == JobStatus.error
    assert update.error_message is not None
    assert "#RRGGBB" in update.error_message


@pytest.mark.asyncio
async def test_execute_missing_file(fit_task: ImageFitTask, tmp_path: Path):
    record = JobRecord(
        job_id="job-3",
        task_type="image_fit",
        params={
            "input_path": str(tmp_path / "missing.png"),
            "output_path": str(tmp_path / "out.png"),
        },
    )

    update = await fit_task.execute(record)

    assert update.status == JobStatus.error
    assert update.error_message is not None
    assert "Input file not found" in update.error_message


@pytest.mark.asyncio
async def test_execute_unsupported_format(
    fit_task: ImageFitTask, text_file: Path, tmp_path: Path
):
    record = JobRecord(
        job_id="job-4",
        task_type="image_fit",
        params={"input_path": str(text_file), "output_path": str(tmp_path / "out.png")},
    )

    update = await fit_task.execute(record)

    assert update.status == JobStatus.error
    assert update.error_message is not None
    assert update.error_message.startswith("UnsupportedFormatError:")


def test_job_status_values():
    assert [status.value for status in JobStatus] == ["completed", "error"]
