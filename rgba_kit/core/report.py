"""Report builder — text and JSON output for rgba-kit results."""

import json
from typing import Any

from rgba_kit.core.color import Color, to_hex
from rgba_kit.core.types import Report


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'yes' if value else 'no'
    if isinstance(value, float):
        return f'{value:.2f}'
    if isinstance(value, list):
        return ', '.join(_format_value(v) for v in value)
    if isinstance(value, dict):
        return ' '.join(f'{k}={_format_value(v)}' for k, v in value.items())
    if value is None:
        return '-'
    return str(value)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'rgba-kit {report.command}', '']

    for subject, data in report.subjects.items():
        lines.append(f'── {subject}')
        for key, value in data.items():
            if key == 'pass':
                lines.append(f'  {"✓ pass" if value else "✗ fail"}')
            else:
                lines.append(f'  {key}: {_format_value(value)}')
        lines.append('')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total}  FAIL {report.fail_count}/{total}')
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'results': [{'subject': subject, **data} for subject, data in report.subjects.items()],
    }
    total = report.pass_count + report.fail_count
    if total > 0:
        obj['summary'] = {'total': total, 'pass': report.pass_count, 'fail': report.fail_count}
    return json.dumps(obj, indent=2)


def color_fields(color: Color) -> dict[str, Any]:
    """The standard fields used to show a result colour."""
    return {'rgba': str(color), 'hex': to_hex(color), 'channels': list(color)}
