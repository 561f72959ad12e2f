"""Flatten a translucent colour onto an opaque background.

Transparency becomes the blend strength towards the background:
strength = 1 - alpha / 255. Opaque colours are returned unchanged.

Background defaults to RGBA_KIT_BACKGROUND, or white.

Example:
    rgba-kit fill 'rgba(0, 0, 0, 0.5)'
    rgba-kit fill '#2563eb80' --background '#0f172a'
"""

from rgba_kit.core.parse import from_string
from rgba_kit.core.report import color_fields
from rgba_kit.core.transforms import fill
from rgba_kit.core.types import Command, Report

command = Command(name='fill', help='Composite a translucent colour over a background (default white).')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('color', help='Colour to flatten')
    parser.add_argument(
        '-b',
        '--background',
        default=None,
        help='Background colour (default: RGBA_KIT_BACKGROUND or white)',
    )


@command.run
def run(report: Report, args, settings) -> None:
    background = from_string(args.background) if args.background else settings.background
    result = fill(from_string(args.color), background)
    report.add(args.color, {'background': str(background), **color_fields(result)})
