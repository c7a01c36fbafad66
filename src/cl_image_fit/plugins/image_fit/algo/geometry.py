"""Target-size resolution and source/destination rectangle mapping.

Two placement modes are supported:

- fit (contain): the whole source is scaled into the canvas and centred,
  the remaining strip on one axis keeps the background colour.
- fill (cover): a centred window of the source with the canvas aspect ratio
  is scaled onto the whole canvas, the excess source is cropped.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def box(self) -> tuple[float, float, float, float]:
        """(left, upper, right, lower) as Pillow expects it."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class Placement:
    source: Rect
    dest: Rect


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; offsets here are never negative
    return int(math.floor(value + 0.5))


def resolve_target_size(
    source_size: tuple[int, int],
    width: int | None = None,
    height: int | None = None,
) -> tuple[int, int]:
    """
    Resolve the canvas size from the requested dimensions.

    Args:
        source_size: (width, height) of the oriented source image
        width: Requested width, derived from height and the source ratio if None
        height: Requested height, derived from width and the source ratio if None

    Returns:
        (width, height) in whole pixels, never smaller than 1x1
    """
    ow, oh = source_size

    if width is None and height is None:
        w, h = float(ow), float(oh)
    elif width is None:
        h = float(height)
        w = h * ow / oh
    elif height is None:
        w = float(width)
        h = w * oh / ow
    else:
        w, h = float(width), float(height)

    return max(1, round_half_up(w)), max(1, round_half_up(h))


def compute_placement(
    source_size: tuple[int, int],
    target_size: tuple[int, int],
    fit: bool = True,
) -> Placement:
    """
    Map a source image onto a canvas of ``target_size``.

    Args:
        source_size: (width, height) of the source image
        target_size: (width, height) of the canvas
        fit: Pad to keep the whole source in view if True, crop to fill otherwise

    Returns:
        Placement whose source rect lies inside the source image and whose
        dest rect lies inside the canvas
    """
    ow, oh = source_size
    w, h = target_size
    source_wider = (ow / oh) >= (w / h)

    if fit:
        source = Rect(0, 0, ow, oh)
        if source_wider:
            nw = float(w)
            nh = w * (oh / ow)
            dest = Rect(0, round_half_up(abs(h - nh) / 2), nw, nh)
        else:
            nh = float(h)
            nw = h * (ow / oh)
            dest = Rect(round_half_up(abs(w - nw) / 2), 0, nw, nh)
        return Placement(source=source, dest=dest)

    dest = Rect(0, 0, w, h)
    if source_wider:
        sh = float(oh)
        sw = oh * (w / h)
        source = Rect(round_half_up(abs(ow - sw) / 2), 0, sw, sh)
    else:
        sw = float(ow)
        sh = ow * (h / w)
        source = Rect(0, round_half_up(abs(oh - sh) / 2), sw, sh)
    return Placement(source=source, dest=dest)
