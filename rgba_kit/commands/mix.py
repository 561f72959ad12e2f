"""Blend two colours channel by channel, alpha included.

result = into * (1 - strength) + from * strength

Strength 0 returns INTO, 1 returns FROM, 0.5 (default) the midpoint.
Strengths outside [0, 1] extrapolate; channels saturate at 0 and 255.

Example:
    rgba-kit mix '#ff0000' '#0000ff'
    rgba-kit mix '#ff0000' '#0000ff' --strength 0.25
"""

from rgba_kit.core.parse import from_string
from rgba_kit.core.report import color_fields
from rgba_kit.core.transforms import mix
from rgba_kit.core.types import Command, Report

command = Command(name='mix', help='Linear blend of two colours (strength 0 = INTO, 1 = FROM).')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('into', help='Base colour')
    parser.add_argument('from_', metavar='from', help='Colour blended in')
    parser.add_argument('-s', '--strength', type=float, default=0.5, help='Blend strength (default: 0.5)')


@command.run
def run(report: Report, args, settings) -> None:
    result = mix(from_string(args.into), from_string(args.from_), args.strength)
    report.add(f'{args.into} + {args.from_}', {'strength': args.strength, **color_fields(result)})
