"""Colour transforms. Each returns a new Color; inputs are never modified.

Strength arguments are blend factors in [0, 1]. Values outside that range
extrapolate and the result saturates at the channel limits.
"""

from rgba_kit.core.color import BLACK, WHITE, Color, clone
from rgba_kit.core.metrics import luma_yuv


def grayscale(color: Color) -> Color:
    gray = luma_yuv(color)
    return Color(gray, gray, gray, color.a)


def mix(into: Color, from_: Color, rstren: float = 0.5) -> Color:
    """Linear blend per channel (alpha included).

    rstren=0 gives `into`, rstren=1 gives `from_`.
    """
    lstren = 1 - rstren
    return Color(
        into.r * lstren + from_.r * rstren,
        into.g * lstren + from_.g * rstren,
        into.b * lstren + from_.b * rstren,
        into.a * lstren + from_.a * rstren,
    )


def whiten(color: Color, stren: float = 0.1) -> Color:
    return mix(color, WHITE, stren)


def blacken(color: Color, stren: float = 0.1) -> Color:
    return mix(color, BLACK, stren)


def fill(color: Color, background: Color = WHITE) -> Color:
    """Flatten a translucent colour onto a background.

    The colour's transparency becomes the blend strength towards
    `background`, approximating `color` composited over it. Opaque colours
    come back as a copy.
    """
    if color.is_opaque:
        return clone(color)

    stren = 1 - color.a / 255
    solid = Color(color.r, color.g, color.b, 255)
    return mix(solid, background, stren)


def opacity(color: Color, stren: float = 1) -> Color:
    """Copy of `color` with alpha set to stren * 255."""
    return Color(color.r, color.g, color.b, stren * 255)


def invert(color: Color) -> Color:
    return Color(255 - color.r, 255 - color.g, 255 - color.b, color.a)
