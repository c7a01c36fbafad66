"""Test configuration and fixtures for cl_image_fit.

Images are synthesised with Pillow into tmp_path, no test media is checked in.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

ImageFactory = Callable[..., Path]


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Provide clean temporary directory for test outputs."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    return output_dir


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing a solid-colour image and returning its path.

    Args (of the returned callable):
        name: File name inside tmp_path
        size: (width, height)
        color: Fill colour, RGB or RGBA
        format: Pillow format name (PNG, JPEG, GIF)
        mode: Pillow mode, defaults to RGB
        orientation: Optional EXIF orientation tag to embed
    """

    def _make(
        name: str,
        size: tuple[int, int] = (200, 100),
        color: tuple[int, ...] = RED,
        format: str = "PNG",
        mode: str = "RGB",
        orientation: int | None = None,
    ) -> Path:
        path = tmp_path / name
        img = Image.new(mode, size, color)
        save_kwargs: dict[str, object] = {}
        if orientation is not None:
            exif = Image.Exif()
            exif[0x0112] = orientation
            save_kwargs["exif"] = exif
        if format == "JPEG":
            save_kwargs["quality"] = 95
        img.save(path, format=format, **save_kwargs)
        return path

    return _make


@pytest.fixture
def striped_image(tmp_path: Path) -> Path:
    """300x100 PNG in three vertical bands: green | red | blue."""
    path = tmp_path / "striped.png"
    img = Image.new("RGB", (300, 100), RED)
    img.paste(GREEN, (0, 0, 100, 100))
    img.paste(BLUE, (200, 0, 300, 100))
    img.save(path, format="PNG")
    return path


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    _ = path.write_text("this is not an image\n" * 10)
    return path


def assert_close(pixel: tuple[int, ...], expected: tuple[int, ...], tolerance: int = 8) -> None:
    """Compare the RGB part of a pixel with some slack for resampling."""
    for actual, wanted in zip(pixel[:3], expected[:3]):
        assert abs(actual - wanted) <= tolerance, f"{pixel} != {expected}"
