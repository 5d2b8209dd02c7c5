"""Palette colours plus value-derived bold / italic / underline.

Colours are chosen exactly as in `discrete`. Emphasis reads digest bytes
1, 2 and 3 against fixed cutoffs:

  bold       byte < 102   (~40% of values)
  italic     byte < 77    (~30%)
  underline  byte < 64    (25%)

Example:
    colour-by-value formatted ./out log.csv
"""

from colour_by_value.core.style import derive_formatted_style
from colour_by_value.core.types import Mode, Report
from colour_by_value.modes._styling import hasher_from, style_cells

mode = Mode(
    name='formatted',
    help='Palette colours plus probabilistic bold/italic/underline.',
    mutates=True,
)


@mode.run
def run(cells, report: Report, args) -> None:
    hasher = hasher_from(args)
    style_cells(cells, report, mode.name, lambda value: derive_formatted_style(value, hasher))
