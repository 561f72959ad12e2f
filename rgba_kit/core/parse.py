"""Regex-based parsers for colour strings.

Accepted forms:
  #rgb  #rgba  #rrggbb  #rrggbbaa    (hex digits, any case)
  rgb(r, g, b)  rgba(r, g, b, a)     (integer channels, alpha in [0, 1])

Named colours, hsl() and other CSS forms are not supported.
"""

import math
import re

from rgba_kit.core.color import Color
from rgba_kit.core.errors import InvalidFormatError, UnsupportedFormatError

_HEX_RE = re.compile(r'#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})', re.IGNORECASE)
_RGB_RE = re.compile(r'rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*(\d+(?:\.\d*)?|\.\d+))?\)', re.ASCII)


def from_string(text: str) -> Color:
    """Parse a hex or rgb()/rgba() colour string, dispatching on its prefix."""
    if text.startswith('#'):
        return from_hex(text)
    if text.startswith('rgb'):
        return from_rgb(text)
    raise UnsupportedFormatError('Unsupported color string', text)


def from_hex(text: str) -> Color:
    m = _HEX_RE.fullmatch(text)
    if not m:
        raise InvalidFormatError('Invalid hex color', text)

    digits = m.group(1)
    if len(digits) <= 4:
        # Short form: each digit is doubled, '#f0a' -> ff 00 aa
        pairs = [ch * 2 for ch in digits]
    else:
        pairs = [digits[i : i + 2] for i in range(0, len(digits), 2)]

    channels = [int(p, 16) for p in pairs]
    if len(channels) == 3:
        channels.append(255)
    return Color(*channels)


def from_rgb(text: str) -> Color:
    m = _RGB_RE.fullmatch(text)
    if not m:
        raise InvalidFormatError('Invalid rgba color', text)

    r, g, b = (_channel(m.group(i)) for i in (1, 2, 3))
    alpha = m.group(4)
    # Round half up so that an alpha of 0.5 maps to 128
    a = math.floor(min(float(alpha), 1.0) * 255 + 0.5) if alpha else 255
    return Color(r, g, b, a)


def _channel(digits: str) -> int:
    """Decimal channel text to int, saturating before int() sees a huge number."""
    significant = digits.lstrip('0')
    if len(significant) > 3:
        return 255
    return int(significant or '0')
