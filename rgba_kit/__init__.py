"""rgba-kit — RGBA colour values: parse, convert, mix and compare.

The public API is re-exported from rgba_kit.core.
"""

from rgba_kit.core.color import BLACK, TRANSPARENT, WHITE, Color, clone, eq, to_hex, to_string
from rgba_kit.core.errors import ColorFormatError, InvalidFormatError, UnsupportedFormatError
from rgba_kit.core.metrics import contrast, is_dark, is_light, luma, luma_yuv, wcag_level
from rgba_kit.core.parse import from_hex, from_rgb, from_string
from rgba_kit.core.transforms import blacken, fill, grayscale, invert, mix, opacity, whiten

__all__ = [
    'BLACK',
    'TRANSPARENT',
    'WHITE',
    'Color',
    'ColorFormatError',
    'InvalidFormatError',
    'UnsupportedFormatError',
    'blacken',
    'clone',
    'contrast',
    'eq',
    'fill',
    'from_hex',
    'from_rgb',
    'from_string',
    'grayscale',
    'invert',
    'is_dark',
    'is_light',
    'luma',
    'luma_yuv',
    'mix',
    'opacity',
    'to_hex',
    'to_string',
    'wcag_level',
    'whiten',
]
