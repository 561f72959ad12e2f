"""Luminance and contrast metrics. Alpha is ignored throughout."""

from rgba_kit.core.color import Color

# WCAG 2.x thresholds: (AA, AAA)
WCAG_NORMAL = (4.5, 7.0)
WCAG_LARGE = (3.0, 4.5)


def luma(color: Color) -> float:
    """Perceptual luminance with BT.709 weights, in [0, 255]."""
    return 0.2126 * color.r + 0.7152 * color.g + 0.0722 * color.b


def luma_yuv(color: Color) -> float:
    """Luminance with the BT.601 (Y'UV) weights, in [0, 255]."""
    return 0.299 * color.r + 0.587 * color.g + 0.114 * color.b


def is_dark(color: Color) -> bool:
    return luma_yuv(color) < 128


def is_light(color: Color) -> bool:
    return luma_yuv(color) >= 128


def contrast(a: Color, b: Color) -> float:
    """Contrast ratio between two colours, from 1 (same) to 21 (black/white)."""
    luma_a = luma(a) / 255
    luma_b = luma(b) / 255
    return (max(luma_a, luma_b) + 0.05) / (min(luma_a, luma_b) + 0.05)


def wcag_level(ratio: float, large_text: bool = False) -> str:
    """Classify a contrast ratio as 'AAA', 'AA' or 'fail'."""
    aa, aaa = WCAG_LARGE if large_text else WCAG_NORMAL
    if ratio >= aaa:
        return 'AAA'
    if ratio >= aa:
        return 'AA'
    return 'fail'
