"""Report builder — text and JSON output for colour-by-value results."""

import datetime
import decimal
import json
import os
from typing import Any

from colour_by_value.core.palette import colour_name, hex_to_rgb, nearest_colour
from colour_by_value.core.types import Report


def _describe_colour(hex_val: str | None, hsl_css: str | None = None) -> str:
    if hex_val is None:
        return 'default'
    if hsl_css:
        return f'{hsl_css} {hex_val}'
    name = colour_name(hex_val)
    if name:
        return f'{hex_val} ({name})'
    near, _dist = nearest_colour(hex_to_rgb(hex_val))
    return f'{hex_val} (~{near})' if near else hex_val


def _emphasis_marks(data: dict[str, Any]) -> str:
    marks = [k for k in ('bold', 'italic', 'underline') if data.get(k)]
    return '  ' + ' '.join(marks) if marks else ''


def _json_default(obj: Any) -> Any:
    if isinstance(obj, (datetime.date, datetime.datetime, datetime.time)):
        return obj.isoformat()
    if isinstance(obj, decimal.Decimal):
        return str(obj)
    return repr(obj)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    total = len(report.cells)
    header = f'colour-by-value: {os.path.basename(report.workbook_path)}'
    if report.sheet:
        header += f' \u2014 {report.sheet}!{report.range_spec} ({total} cells)'
    lines.append(header)
    lines.append('')

    for address, entry in report.cells.items():
        lines.append(f'\u2500\u2500 {address} {entry.get("value")!r}')
        for mode_name, data in entry.get('modes', {}).items():
            if mode_name == 'condition':
                mark = '\u2713' if data.get('matched') else '\u2717'
                lines.append(f'  condition: {data.get("condition")} {data.get("target")!r} {mark}')
            elif 'background' in data:
                bg = _describe_colour(data['background'], data.get('background_hsl'))
                fg = _describe_colour(data.get('foreground'), data.get('foreground_hsl'))
                lines.append(f'  {mode_name}: bg {bg}  fg {fg}{_emphasis_marks(data)}')
            elif mode_name == 'census':
                lines.append(f'  census: palette index {data["index"]}')
            else:
                for k, v in data.items():
                    lines.append(f'  {mode_name}.{k}: {v}')
        if 'error' in entry:
            lines.append(f'  error: {entry["error"]}')
        lines.append('')

    census = report.summary.get('census')
    if census:
        lines.append(
            f'census: {census["reachable"]}/{census["palette_size"]} background colours used '
            f'across {census["samples"]} values  chi2={census["chi2"]}'
        )
    preview = report.summary.get('preview')
    if preview:
        lines.append(f'preview: {preview["file"]}')

    if total > 0:
        lines.append(
            f'STYLED {report.styled_count}/{total} cells  '
            f'SKIPPED {report.skipped_count}/{total} (empty)  '
            f'ERRORS {report.error_count}'
        )
    if report.output_path:
        lines.append(f'saved: {report.output_path}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'workbook': report.workbook_path,
        'sheet': report.sheet,
        'range': report.range_spec,
    }
    if report.output_path:
        obj['output'] = report.output_path

    obj['cells'] = []
    for address, entry in report.cells.items():
        cell_obj = {
            'address': address,
            'value': entry.get('value'),
            'modes': entry.get('modes', {}),
        }
        if 'error' in entry:
            cell_obj['error'] = entry['error']
        obj['cells'].append(cell_obj)

    if report.summary:
        obj['summary_by_mode'] = report.summary

    obj['summary'] = {
        'total': len(report.cells),
        'styled': report.styled_count,
        'skipped': report.skipped_count,
        'errors': report.error_count,
    }
    return json.dumps(obj, indent=2, default=_json_default)
