"""Colour each cell from a fixed 32-colour pastel palette keyed by its value.

The first digest byte (masked to 5 bits) picks the background. The text
colour comes from re-hashing the background hex string and masking to
4 bits into a 16-colour dark palette. No bold/italic/underline.

Empty cells get a plain white background and default text.

Example:
    colour-by-value discrete ./out people.xlsx --sheet Staff --range A2:A200
"""

from colour_by_value.core.style import derive_discrete_style
from colour_by_value.core.types import Mode, Report
from colour_by_value.modes._styling import hasher_from, style_cells

mode = Mode(
    name='discrete',
    help='Palette background + dark text colour derived from each value.',
    mutates=True,
)


@mode.run
def run(cells, report: Report, args) -> None:
    hasher = hasher_from(args)
    style_cells(cells, report, mode.name, lambda value: derive_discrete_style(value, hasher))
