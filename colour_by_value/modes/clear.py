"""Remove fill and font styling from every cell in the range.

Values are kept. Use it to reset a range before re-styling it with a
different mode.

Example:
    colour-by-value clear ./out people.xlsx --range A1:D50
"""

from colour_by_value.core.types import Mode, Report

mode = Mode(
    name='clear',
    help='Clear fill and font formatting from the range.',
    mutates=True,
)


@mode.run
def run(cells, report: Report, args) -> None:
    for cell in cells:
        report.set_value(cell.address, cell.read())
        cell.clear()
        report.add(cell.address, mode.name, {'cleared': True})
        report.record_styled(cell.address)
