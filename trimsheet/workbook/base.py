"""
Workbook access contract.

The pipeline reads workbooks through a small protocol: sheet names,
row-major cell values and A1-style cell lookup. Decoding the file format
is left to the implementations.
"""

from typing import Any, Protocol, Sequence, runtime_checkable

from openpyxl.utils.cell import coordinate_to_tuple


# Required sheets, exact names
ULD_LOAD_INPUT = "ULD LOAD INPUT"
ULD_MASTER_TABLE = "ULD MASTER TABLE"
CARGO_HOLD_VISUAL_LAYOUT = "CARGO HOLD VISUAL LAYOUT"
ARM_MOMENT_COMPUTATION = "ARM & MOMENT COMPUTATION"
CG_BALANCE_DECISION_ENGINE = "CG & BALANCE DECISION ENGINE"

# Optional sheets
AIRCRAFT_MODELS = "AIRCRAFT MODELS"
TRIM_SHEET = "AIRCRAFT LOAD & TRIM SHEET"
AIRCRAFT_SELECTOR_CELL = "I3"

REQUIRED_SHEETS: tuple[str, ...] = (
    ULD_LOAD_INPUT,
    ULD_MASTER_TABLE,
    CARGO_HOLD_VISUAL_LAYOUT,
    ARM_MOMENT_COMPUTATION,
    CG_BALANCE_DECISION_ENGINE,
)

Row = tuple[Any, ...]


@runtime_checkable
class Workbook(Protocol):
    """Protocol for decoded workbooks."""

    @property
    def sheet_names(self) -> list[str]:
        """Names of all sheets, in workbook order."""
        ...

    def has_sheet(self, name: str) -> bool:
        """Check whether a sheet exists."""
        ...

    def rows(self, sheet: str) -> list[Row]:
        """All rows of a sheet, row 1 first, as raw cell values."""
        ...

    def cell(self, sheet: str, ref: str) -> Any:
        """Raw value of a cell by A1 reference, None when empty."""
        ...


class InMemoryWorkbook:
    """
    Workbook held as plain Python lists.

    Rows may be ragged; missing cells read as None.

    Usage:
        workbook = InMemoryWorkbook({"ULD LOAD INPUT": [["Position"], ["A1"]]})
        workbook.cell("ULD LOAD INPUT", "A2")  # "A1"
    """

    def __init__(self, sheets: dict[str, Sequence[Sequence[Any]]] | None = None):
        self._sheets: dict[str, list[Row]] = {}
        for name, rows in (sheets or {}).items():
            self.set_sheet(name, rows)

    @property
    def sheet_names(self) -> list[str]:
        return list(self._sheets)

    def has_sheet(self, name: str) -> bool:
        return name in self._sheets

    def rows(self, sheet: str) -> list[Row]:
        return list(self._sheets[sheet])

    def cell(self, sheet: str, ref: str) -> Any:
        row_idx, col_idx = coordinate_to_tuple(ref)
        rows = self._sheets[sheet]
        if row_idx > len(rows):
            return None
        row = rows[row_idx - 1]
        return row[col_idx - 1] if col_idx <= len(row) else None

    def set_sheet(self, name: str, rows: Sequence[Sequence[Any]]) -> None:
        """Replace a sheet's rows."""
        self._sheets[name] = [tuple(row) for row in rows]

    def set_cell(self, sheet: str, ref: str, value: Any) -> None:
        """Write a single cell, growing the sheet as needed."""
        row_idx, col_idx = coordinate_to_tuple(ref)
        rows = self._sheets.setdefault(sheet, [])
        while len(rows) < row_idx:
            rows.append(())
        row = list(rows[row_idx - 1])
        while len(row) < col_idx:
            row.append(None)
        row[col_idx - 1] = value
        rows[row_idx - 1] = tuple(row)

    def remove_sheet(self, name: str) -> None:
        self._sheets.pop(name, None)
