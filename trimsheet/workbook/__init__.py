"""
Workbook access for load-planning spreadsheets.

Provides the Workbook protocol consumed by the parsing pipeline plus
in-memory and openpyxl-backed implementations.
"""

from .base import (
    Workbook,
    InMemoryWorkbook,
    Row,
    REQUIRED_SHEETS,
    ULD_LOAD_INPUT,
    ULD_MASTER_TABLE,
    CARGO_HOLD_VISUAL_LAYOUT,
    ARM_MOMENT_COMPUTATION,
    CG_BALANCE_DECISION_ENGINE,
    AIRCRAFT_MODELS,
    TRIM_SHEET,
    AIRCRAFT_SELECTOR_CELL,
)
from .excel import ExcelWorkbook

__all__ = [
    "Workbook",
    "InMemoryWorkbook",
    "ExcelWorkbook",
    "Row",
    "REQUIRED_SHEETS",
    "ULD_LOAD_INPUT",
    "ULD_MASTER_TABLE",
    "CARGO_HOLD_VISUAL_LAYOUT",
    "ARM_MOMENT_COMPUTATION",
    "CG_BALANCE_DECISION_ENGINE",
    "AIRCRAFT_MODELS",
    "TRIM_SHEET",
    "AIRCRAFT_SELECTOR_CELL",
]
