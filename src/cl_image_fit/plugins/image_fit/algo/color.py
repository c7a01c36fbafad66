import re

from ..errors import InvalidColorError

DEFAULT_BG_COLOR = "#ffffff"

_HEX_COLOR = re.compile(r"#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse ``#RRGGBB`` into an (r, g, b) triple.

    Raises:
        InvalidColorError: If the string is not exactly ``#`` followed by six hex digits
    """
    match = _HEX_COLOR.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidColorError(f"Expected a #RRGGBB colour, got {value!r}")
    r, g, b = (int(channel, 16) for channel in match.groups())
    return r, g, b
