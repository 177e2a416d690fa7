"""Color descriptor parsing."""

from functools import lru_cache

from PIL import ImageColor

from glyphpreview.config import TRANSPARENT
from glyphpreview.exceptions import ColorError

RGBA = tuple[float, float, float, float]


@lru_cache(maxsize=64)
def parse_color(value: str) -> RGBA:
    """Convert a CSS-style color descriptor to RGBA floats in [0, 1].

    Supports everything Pillow's ImageColor does (names, #rgb, #rrggbb,
    #rrggbbaa, rgb(), rgba(), hsl()) plus the keyword "transparent".

    Args:
        value: Color descriptor

    Returns:
        Tuple of (red, green, blue, alpha)

    Raises:
        ColorError: If the descriptor cannot be parsed
    """
    text = value.strip()
    if text.lower() == TRANSPARENT:
        return (0.0, 0.0, 0.0, 0.0)

    try:
        components = ImageColor.getrgb(text)
    except ValueError as e:
        raise ColorError(value, str(e)) from e

    if len(components) == 3:
        red, green, blue = components
        alpha = 255
    else:
        red, green, blue, alpha = components

    return (red / 255.0, green / 255.0, blue / 255.0, alpha / 255.0)
