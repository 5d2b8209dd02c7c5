"""Vivid high-contrast colours from a continuous HSL space.

A 32-bit rolling hash h of the value picks a saturated mid-lightness
background (hue h % 360) and a complementary text colour (hue + 180)
that is either very dark or very light. Use --bold to embolden every
non-empty cell.

The --hash option does not apply here; the rolling hash is fixed.

Example:
    colour-by-value random ./out tags.xlsx --range B:B --bold
"""

from colour_by_value.core.style import derive_random_style
from colour_by_value.core.types import Mode, Report
from colour_by_value.modes._styling import style_cells

mode = Mode(
    name='random',
    help='Complementary HSL background/text colours (high contrast). Optional --bold.',
    mutates=True,
)


@mode.run
def run(cells, report: Report, args) -> None:
    bold = bool(getattr(args, 'bold', False))
    style_cells(cells, report, mode.name, lambda value: derive_random_style(value, bold=bold))
