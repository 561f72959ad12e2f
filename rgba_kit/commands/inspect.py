"""Parse colours and report channels, hex, luma and nearest named colour.

Accepts any colour string from_string understands: #rgb, #rgba, #rrggbb,
#rrggbbaa, rgb(r,g,b) and rgba(r,g,b,a). For each colour reports:

  rgba / hex / channels   normalised forms
  luma                    BT.709 luminance (0-255)
  luma_yuv                BT.601 luminance (0-255), used for dark/light
  tone                    'dark' if luma_yuv < 128, else 'light'
  nearest                 closest CSS basic colour within RGB distance 30

A colour string given more than once is reported once.

Example:
    rgba-kit inspect '#2563eb' 'rgba(10, 20, 30, 0.5)'
"""

from rgba_kit.core.metrics import is_dark, luma, luma_yuv
from rgba_kit.core.palette import nearest_name
from rgba_kit.core.parse import from_string
from rgba_kit.core.report import color_fields
from rgba_kit.core.types import Command, Report

command = Command(
    name='inspect',
    help='Parse colours. Show channels, hex, luma, dark/light and nearest name.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colors', nargs='+', metavar='COLOR', help='Colour string(s) to inspect')


@command.run
def run(report: Report, args, settings) -> None:
    # Repeated inputs are reported once
    for text in dict.fromkeys(args.colors):
        color = from_string(text)
        name, dist = nearest_name(color)
        report.add(
            text,
            {
                **color_fields(color),
                'luma': round(luma(color), 2),
                'luma_yuv': round(luma_yuv(color), 2),
                'tone': 'dark' if is_dark(color) else 'light',
                'nearest': name,
                'distance': dist,
            },
        )
