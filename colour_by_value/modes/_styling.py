"""Shared loop for the modes that derive and apply a style per cell."""

from collections.abc import Callable
from typing import Any

from colour_by_value.core.hashing import HashStrategy, get_strategy
from colour_by_value.core.sheet import CellHandle
from colour_by_value.core.style import StyleBundle
from colour_by_value.core.types import InvalidInputKind, Report


def hasher_from(args: Any) -> HashStrategy:
    return get_strategy(getattr(args, 'hash', None))


def style_cells(
    cells: list[CellHandle],
    report: Report,
    mode_name: str,
    derive: Callable[[Any], StyleBundle],
) -> None:
    """Style each cell in turn; each cell's bundle is derived before it is applied.

    Values with no canonical form are reported as errors, not raised.
    """
    for cell in cells:
        value = cell.read()
        report.set_value(cell.address, value)
        try:
            style = derive(value)
        except InvalidInputKind as e:
            report.record_error(cell.address, str(e))
            continue
        cell.apply(style)
        report.add(cell.address, mode_name, style.as_dict())
        if style.is_unstyled:
            report.record_skipped(cell.address)
        else:
            report.record_styled(cell.address)
