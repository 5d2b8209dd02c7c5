"""Shared types for colour-by-value: Mode, Report, and the error hierarchy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from colour_by_value.core.sheet import CellHandle


class InvalidInputKind(TypeError):
    """A cell value has no canonical string form (list, dict, bytes, ...)."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f'Cannot derive a style from a {type(value).__name__} value')


class HostError(Exception):
    """Base class for spreadsheet host failures."""


class SheetNotFound(HostError):
    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        msg = f'Sheet "{name}" not found'
        if available:
            msg += f'. Available: {", ".join(available)}'
        super().__init__(msg)


class InvalidAddress(HostError):
    def __init__(self, address: str):
        self.address = address
        super().__init__(f'Invalid cell address or range: {address!r}')


class Mode:
    """A self-registering styling mode.

    Usage in a mode module:

        mode = Mode(name='discrete', help='Palette colours derived from each value')

        @mode.run
        def run(cells, report, args):
            ...
    """

    def __init__(self, name: str, help: str = '', mutates: bool = False):
        self.name = name
        self.help = help
        self.mutates = mutates  # writes styles, so the workbook must be saved
        self.doc = ''  # module docstring, filled in by the registry
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, cells: list[CellHandle], report: Report, args: Any) -> None:
        """Execute the mode's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Mode {self.name} has no run function')
        self._run_fn(cells, report, args)


@dataclass
class Report:
    """Accumulates per-cell results from modes for text/JSON output."""

    workbook_path: str = ''
    sheet: str = ''
    range_spec: str = ''
    cells: dict[str, dict[str, Any]] = field(default_factory=dict)
    summary: dict[str, dict[str, Any]] = field(default_factory=dict)
    styled_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    output_path: str | None = None

    def _entry(self, address: str) -> dict[str, Any]:
        if address not in self.cells:
            self.cells[address] = {'value': None, 'modes': {}}
        return self.cells[address]

    def add(self, address: str, mode_name: str, data: dict[str, Any]) -> None:
        """Add mode results for a cell."""
        self._entry(address)['modes'][mode_name] = data

    def set_value(self, address: str, value: Any) -> None:
        """Record the cell value the results were derived from."""
        self._entry(address)['value'] = value

    def add_summary(self, mode_name: str, data: dict[str, Any]) -> None:
        """Add range-wide results for a mode (census, preview)."""
        self.summary[mode_name] = data

    def record_styled(self, address: str) -> None:
        self.styled_count += 1

    def record_skipped(self, address: str) -> None:
        self.skipped_count += 1

    def record_error(self, address: str, message: str) -> None:
        entry = self._entry(address)
        if 'error' not in entry:
            self.error_count += 1
        entry['error'] = message
