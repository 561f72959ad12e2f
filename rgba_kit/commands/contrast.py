"""WCAG contrast ratio between a foreground and a background colour.

Ratio = (L1 + 0.05) / (L2 + 0.05) with L the BT.709 luma scaled to [0, 1]
and L1 the lighter of the two. Ranges from 1 (identical) to 21 (black on
white). Alpha is ignored; use `fill` first to flatten translucent colours.

Levels (normal text / large text):
  AA    4.5 / 3.0
  AAA   7.0 / 4.5

With --min-ratio (or RGBA_KIT_MIN_RATIO) the pair is recorded as pass or
fail and rgba-kit exits 1 on failure — usable as a CI gate.

Example:
    rgba-kit contrast '#334155' '#f8fafc'
    rgba-kit contrast '#777' '#fff' --min-ratio 4.5
"""

from rgba_kit.core.metrics import contrast, wcag_level
from rgba_kit.core.parse import from_string
from rgba_kit.core.types import Command, Report

command = Command(
    name='contrast',
    help='Contrast ratio (1-21) and WCAG level for a foreground/background pair.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('foreground', help='Foreground (text) colour')
    parser.add_argument('background', help='Background colour')
    parser.add_argument('--large-text', action='store_true', help='Use the large-text WCAG thresholds')
    parser.add_argument(
        '-m',
        '--min-ratio',
        type=float,
        default=None,
        metavar='N',
        help='Fail (exit 1) when the ratio is below N',
    )


@command.run
def run(report: Report, args, settings) -> None:
    fg = from_string(args.foreground)
    bg = from_string(args.background)
    ratio = contrast(fg, bg)
    subject = f'{args.foreground} on {args.background}'
    data = {
        'ratio': round(ratio, 2),
        'level': wcag_level(ratio, large_text=args.large_text),
    }

    threshold = args.min_ratio if args.min_ratio is not None else settings.min_ratio
    if threshold is not None:
        passed = ratio >= threshold
        data['min_ratio'] = threshold
        data['pass'] = passed
        if passed:
            report.record_pass(subject)
        else:
            report.record_fail(subject)

    report.add(subject, data)
