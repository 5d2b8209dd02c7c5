"""Apply one fixed style to the cells whose value matches a condition.

Requires --target. --when picks the comparison (default: equals):

  equals, notequals, contains, notcontains, startswith, endswith
      case-insensitive text comparisons
  greater, less, greaterequal, lessequal
      numeric comparisons on the leading number of the value
  number-equal, number-greater, number-less, number-greaterequal, number-lessequal
      numeric comparisons; an unknown number-* operator means greater
  date-equals, date-greater, date-less, date-greaterequal, date-lessequal
      calendar-date comparisons; --target is today, yesterday or YYYY-MM-DD

Matching cells get --bg (default #FEF08A) and --fg (default text colour).
Both accept #rgb, #rrggbb or a palette name such as red200. Cells that do
not match are left as they are.

Examples:
    colour-by-value condition ./out log.xlsx --when contains --target error --bg '#FECACA' --fg '#991B1B'
    colour-by-value condition ./out tasks.xlsx --range C:C --when date-less --target today --bg red200
"""

from colour_by_value.core.conditions import matches
from colour_by_value.core.palette import parse_hex
from colour_by_value.core.style import StyleBundle
from colour_by_value.core.types import Mode, Report

mode = Mode(
    name='condition',
    help='Apply a fixed --bg/--fg to cells matching --when/--target. Requires --target.',
    mutates=True,
)

DEFAULT_BACKGROUND = '#FEF08A'


def _fail_all(cells, report: Report, message: str) -> None:
    for cell in cells:
        report.set_value(cell.address, cell.read())
        report.record_error(cell.address, message)


@mode.run
def run(cells, report: Report, args) -> None:
    target = getattr(args, 'target', None)
    if target is None:
        _fail_all(cells, report, '--target value required')
        return

    bg = getattr(args, 'bg', None)
    fg = getattr(args, 'fg', None)
    try:
        style = StyleBundle(
            background=parse_hex(bg) if bg else DEFAULT_BACKGROUND,
            foreground=parse_hex(fg) if fg else None,
            mode=mode.name,
        )
    except ValueError as e:
        _fail_all(cells, report, str(e))
        return

    condition = getattr(args, 'when', None) or 'equals'
    for cell in cells:
        value = cell.read()
        report.set_value(cell.address, value)
        matched = matches(value, target, condition)
        data = {'condition': condition, 'target': target, 'matched': matched}
        if matched:
            cell.apply(style)
            data.update(style.as_dict())
            report.record_styled(cell.address)
        else:
            report.record_skipped(cell.address)
        report.add(cell.address, mode.name, data)
