from PIL import Image

# Integer modes Pillow decodes 16-bit greyscale PNGs into
HIGH_BIT_DEPTH_MODES = ("I", "I;16", "I;16B", "I;16L")


def to_rgba(img: Image.Image) -> Image.Image:
    """Convert a decoded image to RGBA, scaling 16-bit greyscale down to 8 bits first."""
    if img.mode in HIGH_BIT_DEPTH_MODES:
        img = img.convert("I").point(lambda v: v / 256).convert("L")
    return img.convert("RGBA")
