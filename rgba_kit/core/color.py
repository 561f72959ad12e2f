"""The Color value type: four saturating 8-bit channels (r, g, b, a).

Channels are clamped to [0, 255] and rounded to the nearest integer
(ties to even) when a Color is built, so arithmetic results can be passed
straight to the constructor. Alpha 0 is fully transparent, 255 fully opaque.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, fields


def clamp_channel(value: float) -> int:
    """Saturate a numeric value into a byte channel."""
    return round(min(255.0, max(0.0, float(value))))


@dataclass(frozen=True)
class Color:
    """An RGBA colour. Defaults to opaque white."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, clamp_channel(getattr(self, f.name)))

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.a))

    def __str__(self) -> str:
        return f'rgba({self.r},{self.g},{self.b},{self.a / 255:.2f})'

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def is_opaque(self) -> bool:
        return self.a == 255


WHITE = Color()
BLACK = Color(0, 0, 0)
TRANSPARENT = Color(0, 0, 0, 0)


def clone(color: Color) -> Color:
    """Return a new Color with the same channels."""
    return Color(color.r, color.g, color.b, color.a)


def to_string(color: Color) -> str:
    """Render as rgba(R,G,B,A) with alpha as a 2-decimal fraction."""
    return str(color)


def to_hex(color: Color) -> str:
    """Render as #rrggbb, or #rrggbbaa when the colour is not fully opaque."""
    text = f'#{color.r:02x}{color.g:02x}{color.b:02x}'
    if not color.is_opaque:
        text += f'{color.a:02x}'
    return text


def eq(a: Color, b: Color) -> bool:
    """True when all four channels match."""
    return a.r == b.r and a.g == b.g and a.b == b.b and a.a == b.a
