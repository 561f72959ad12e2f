"""Apply a single-colour transform.

Operations:
  grayscale   R=G=B=BT.601 luma, alpha kept
  invert      255 - channel for R, G, B, alpha kept
  whiten      mix towards white (strength default 0.1)
  blacken     mix towards black (strength default 0.1)
  opacity     set alpha to strength * 255 (strength default 1)

Example:
    rgba-kit transform invert '#2563eb'
    rgba-kit transform whiten '#2563eb' --strength 0.3
    rgba-kit transform opacity '#2563eb' -s 0.5
"""

from rgba_kit.core.parse import from_string
from rgba_kit.core.report import color_fields
from rgba_kit.core.transforms import blacken, grayscale, invert, opacity, whiten
from rgba_kit.core.types import Command, Report

command = Command(name='transform', help='grayscale / invert / whiten / blacken / opacity one colour.')

# op -> (function, default strength or None when the op takes no strength)
OPERATIONS = {
    'grayscale': (grayscale, None),
    'invert': (invert, None),
    'whiten': (whiten, 0.1),
    'blacken': (blacken, 0.1),
    'opacity': (opacity, 1.0),
}


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('op', choices=sorted(OPERATIONS), help='Transform to apply')
    parser.add_argument('color', help='Input colour')
    parser.add_argument('-s', '--strength', type=float, default=None, help='Strength for whiten/blacken/opacity')


@command.run
def run(report: Report, args, settings) -> None:
    fn, default = OPERATIONS[args.op]
    color = from_string(args.color)
    data: dict = {'op': args.op}
    if default is None:
        result = fn(color)
    else:
        strength = default if args.strength is None else args.strength
        result = fn(color, strength)
        data['strength'] = strength
    report.add(args.color, {**data, **color_fields(result)})
