"""Render a colour swatch PNG.

The colour is composited over the background (RGBA_KIT_BACKGROUND or
white, overridable with --background) using fill, so the PNG shows how a
translucent colour actually looks on that background. The left half is
the flattened colour; a thin right-hand strip shows the background.

Example:
    rgba-kit swatch 'rgba(37, 99, 235, 0.4)' ./tmp/blue40.png
    rgba-kit swatch '#2563eb' ./tmp/blue.png --size 128
"""

import os

from PIL import Image, ImageDraw

from rgba_kit.core.parse import from_string
from rgba_kit.core.report import color_fields
from rgba_kit.core.transforms import fill
from rgba_kit.core.types import Command, Report, positive_int

command = Command(name='swatch', help='Write a PNG swatch of a colour composited over a background.')


def render_swatch(color, background, size: int = 64) -> Image.Image:
    flat = fill(color, background)
    image = Image.new('RGB', (size, size), flat.rgb)
    strip = max(1, size // 8)
    ImageDraw.Draw(image).rectangle((size - strip, 0, size - 1, size - 1), fill=background.rgb)
    return image


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('color', help='Colour to render')
    parser.add_argument('output', help='Output PNG path')
    parser.add_argument('--size', type=positive_int, default=64, help='Swatch edge length in pixels (default: 64)')
    parser.add_argument(
        '-b',
        '--background',
        default=None,
        help='Background colour (default: RGBA_KIT_BACKGROUND or white)',
    )


@command.run
def run(report: Report, args, settings) -> None:
    color = from_string(args.color)
    background = from_string(args.background) if args.background else settings.background
    image = render_swatch(color, background, args.size)

    out_dir = os.path.dirname(args.output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    image.save(args.output)

    report.add(args.color, {'file': args.output, 'size': args.size, **color_fields(fill(color, background))})
