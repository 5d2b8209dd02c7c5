"""Count how the values in a range spread over the background palette.

Maps every non-empty value to its background palette index (0-31) and
its text palette index (0-15), then reports with numpy:

  - how many of the 32 backgrounds are used at all
  - a chi-square statistic against a uniform spread
  - the most common background colours with percentages

Read-only: nothing in the workbook changes. A large sample of distinct
values should reach all 32 backgrounds.

Example:
    colour-by-value census ./out people.xlsx --range A:A --json
"""

import numpy as np

from colour_by_value.core.hashing import digest, is_empty
from colour_by_value.core.palette import (
    BACKGROUND_PALETTE,
    FOREGROUND_PALETTE,
    background_index,
    colour_name,
    foreground_index,
)
from colour_by_value.core.types import InvalidInputKind, Mode, Report
from colour_by_value.modes._styling import hasher_from

mode = Mode(
    name='census',
    help='Histogram of background palette indices across the range. Read-only.',
)

TOP_N = 10


def palette_histogram(indices: list[int], size: int) -> dict:
    """Reachability, uniformity and top entries for a list of palette indices."""
    counts = np.bincount(np.asarray(indices, dtype=int), minlength=size)
    total = int(counts.sum())
    if total == 0:
        return {'samples': 0, 'reachable': 0, 'chi2': 0.0, 'counts': counts.tolist()}
    expected = total / size
    chi2 = float(np.sum((counts - expected) ** 2 / expected))
    return {
        'samples': total,
        'reachable': int(np.count_nonzero(counts)),
        'chi2': round(chi2, 2),
        'counts': counts.tolist(),
    }


@mode.run
def run(cells, report: Report, args) -> None:
    hasher = hasher_from(args)
    bg_indices: list[int] = []
    fg_indices: list[int] = []

    for cell in cells:
        value = cell.read()
        report.set_value(cell.address, value)
        if is_empty(value):
            continue
        try:
            bg = background_index(digest(value, hasher))
        except InvalidInputKind as e:
            report.record_error(cell.address, str(e))
            continue
        fg = foreground_index(BACKGROUND_PALETTE[bg], hasher)
        bg_indices.append(bg)
        fg_indices.append(fg)
        report.add(cell.address, mode.name, {'index': bg, 'foreground_index': fg})

    background = palette_histogram(bg_indices, len(BACKGROUND_PALETTE))
    foreground = palette_histogram(fg_indices, len(FOREGROUND_PALETTE))

    order = np.argsort(-np.asarray(background['counts']), kind='stable')[:TOP_N]
    top = [
        {
            'index': int(i),
            'hex': BACKGROUND_PALETTE[i],
            'name': colour_name(BACKGROUND_PALETTE[i]),
            'pct': round(background['counts'][i] / background['samples'] * 100, 1),
        }
        for i in order
        if background['counts'][i] > 0
    ]

    report.add_summary(
        mode.name,
        {
            'samples': background['samples'],
            'palette_size': len(BACKGROUND_PALETTE),
            'reachable': background['reachable'],
            'chi2': background['chi2'],
            'top': top,
            'foreground_reachable': foreground['reachable'],
            'foreground_palette_size': len(FOREGROUND_PALETTE),
        },
    )
