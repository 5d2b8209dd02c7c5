"""Spreadsheet host backed by openpyxl.

The derivation engine never touches a spreadsheet. This module is the thin
host it is driven through:

    book = Workbook.load('people.xlsx')
    cell = book.get_cell('Sheet1', 'B2')
    cell.apply(derive_discrete_style(cell.read()))
    book.get_range('Sheet1', 'A1:C10').for_each_cell(fn)   # fn(value, address)
    book.save('out/people.styled.xlsx')

.csv files load into a fresh workbook with one sheet named after the file.
"""

from __future__ import annotations

import csv
import re
import zipfile
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import openpyxl
from openpyxl.styles import Font, PatternFill
from openpyxl.utils.cell import coordinate_from_string, range_boundaries
from openpyxl.utils.exceptions import CellCoordinatesException, InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from colour_by_value.core.style import StyleBundle
from colour_by_value.core.types import HostError, InvalidAddress, SheetNotFound

EXCEL_SUFFIXES = {'.xlsx', '.xlsm'}
CSV_SUFFIX = '.csv'

_INT_RE = re.compile(r'^[+-]?\d+$')


def _fill(style: StyleBundle) -> PatternFill:
    return PatternFill(fill_type='solid', fgColor=style.background_hex.lstrip('#'))


def _font(current: Font, style: StyleBundle) -> Font:
    fg = style.foreground_hex
    return Font(
        name=current.name,
        size=current.sz,
        color=fg.lstrip('#') if fg else None,
        bold=style.bold,
        italic=style.italic,
        underline='single' if style.underline else None,
    )


class CellHandle:
    """One addressable cell. Reads its value and applies a style bundle."""

    def __init__(self, cell: Any, sheet_name: str):
        self.cell = cell
        self.sheet_name = sheet_name

    @property
    def address(self) -> str:
        return self.cell.coordinate

    @property
    def row(self) -> int:
        return self.cell.row

    @property
    def column(self) -> int:
        return self.cell.column

    def read(self) -> Any:
        return self.cell.value

    def apply(self, style: StyleBundle) -> None:
        """Set fill and font together from one precomputed bundle."""
        fill = _fill(style)
        font = _font(self.cell.font, style)
        self.cell.fill = fill
        self.cell.font = font

    def write(self, value: Any, style: StyleBundle | None = None) -> None:
        """Write value (only if it changed) and optionally a style."""
        if self.cell.value != value:
            self.cell.value = value
        if style is not None:
            self.apply(style)

    def clear(self) -> None:
        self.cell.fill = PatternFill(fill_type=None)
        self.cell.font = Font(name=self.cell.font.name, size=self.cell.font.sz)

    def __repr__(self) -> str:
        return f'CellHandle({self.sheet_name}!{self.address})'


class CellRange:
    """A rectangular block of cells on one sheet."""

    def __init__(self, worksheet: Worksheet, bounds: tuple[int, int, int, int]):
        self.worksheet = worksheet
        self.min_col, self.min_row, self.max_col, self.max_row = bounds

    @property
    def spec(self) -> str:
        first = self.worksheet.cell(row=self.min_row, column=self.min_col).coordinate
        last = self.worksheet.cell(row=self.max_row, column=self.max_col).coordinate
        return first if first == last else f'{first}:{last}'

    def __iter__(self) -> Iterator[CellHandle]:
        for row in self.worksheet.iter_rows(
            min_row=self.min_row,
            max_row=self.max_row,
            min_col=self.min_col,
            max_col=self.max_col,
        ):
            for cell in row:
                yield CellHandle(cell, self.worksheet.title)

    def cells(self) -> list[CellHandle]:
        return list(self)

    def for_each_cell(self, fn: Callable[[Any, str], Any]) -> None:
        for handle in self:
            fn(handle.read(), handle.address)

    def clear_formatting(self) -> None:
        for handle in self:
            handle.clear()


def coerce_text(text: str) -> Any:
    """CSV text to the value a spreadsheet would store."""
    if text == '':
        return None
    if _INT_RE.match(text):
        return int(text)
    try:
        return float(text)
    except ValueError:
        return text


class Workbook:
    def __init__(self, book: openpyxl.Workbook, path: str | None = None):
        self.book = book
        self.path = path

    @classmethod
    def load(cls, path: str) -> Workbook:
        suffix = Path(path).suffix.lower()
        if suffix in EXCEL_SUFFIXES:
            try:
                book = openpyxl.load_workbook(path)
            except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
                raise HostError(f'Cannot read workbook {path}: {e}') from e
            return cls(book, path)
        if suffix == CSV_SUFFIX:
            return cls.from_csv(path)
        raise HostError(f'Unsupported workbook type: {path} (expected .xlsx, .xlsm or .csv)')

    @classmethod
    def from_csv(cls, path: str) -> Workbook:
        book = openpyxl.Workbook()
        ws = book.active
        ws.title = Path(path).stem[:31] or 'Sheet1'
        try:
            with open(path, encoding='utf-8', newline='') as f:
                for row in csv.reader(f):
                    ws.append([coerce_text(text) for text in row])
        except (UnicodeDecodeError, csv.Error, OSError) as e:
            raise HostError(f'Cannot read CSV {path}: {e}') from e
        return cls(book, path)

    def sheet_names(self) -> list[str]:
        return list(self.book.sheetnames)

    def sheet(self, name: str | None = None) -> Worksheet:
        """Worksheet by name. None selects the active sheet."""
        if name is None:
            return self.book.active
        if name not in self.book.sheetnames:
            raise SheetNotFound(name, self.sheet_names())
        return self.book[name]

    def get_cell(self, sheet_name: str | None, address: str) -> CellHandle:
        ws = self.sheet(sheet_name)
        try:
            column, row = coordinate_from_string(address.upper())
        except (CellCoordinatesException, ValueError) as e:
            raise InvalidAddress(address) from e
        return CellHandle(ws[f'{column}{row}'], ws.title)

    def get_range(self, sheet_name: str | None, range_spec: str | None = None) -> CellRange:
        """Cells in range_spec ('A1:C10', 'B2'); None or 'auto' = used range."""
        ws = self.sheet(sheet_name)
        if range_spec is None or range_spec.lower() == 'auto':
            return CellRange(ws, (ws.min_column, ws.min_row, ws.max_column, ws.max_row))
        try:
            min_col, min_row, max_col, max_row = range_boundaries(range_spec.upper())
        except (CellCoordinatesException, ValueError, TypeError) as e:
            raise InvalidAddress(range_spec) from e
        # Whole-column or whole-row specs: clip to the used range
        min_col = min_col or ws.min_column
        max_col = max_col or ws.max_column
        min_row = min_row or ws.min_row
        max_row = max_row or ws.max_row
        return CellRange(ws, (min_col, min_row, max_col, max_row))

    def save(self, path: str) -> str:
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            self.book.save(str(target))
        except OSError as e:
            raise HostError(f'Cannot save workbook {path}: {e}') from e
        return str(target)
