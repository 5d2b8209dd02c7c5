"""Run every read-only mode over the range, combine into a single report.

Runs: census, preview.
Skips the modes that restyle the workbook (discrete, formatted, random,
condition, clear); run those explicitly.

Example:
    colour-by-value all ./out people.xlsx --range A1:C50
    colour-by-value all ./out people.xlsx --json
"""

from colour_by_value.core.types import Mode, Report

mode = Mode(
    name='all',
    help='Run every read-only mode (census, preview). Combine into a single report.',
)


@mode.run
def run(cells, report: Report, args) -> None:
    from colour_by_value.registry import all_modes

    for name, other in sorted(all_modes().items()):
        if name == mode.name or other.mutates:
            continue
        other.execute(cells, report, args)
