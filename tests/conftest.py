"""Pytest fixtures for Load & Trim Sheet tests."""

import io
import zipfile

import pytest

from trimsheet.config import Settings
from trimsheet.data.synthetic import TrimSheetWorkbookGenerator
from trimsheet.workbook import (
    ARM_MOMENT_COMPUTATION,
    CARGO_HOLD_VISUAL_LAYOUT,
    CG_BALANCE_DECISION_ENGINE,
    TRIM_SHEET,
    ULD_LOAD_INPUT,
    ULD_MASTER_TABLE,
    InMemoryWorkbook,
)


def make_workbook(
    load_rows: list[list] | None = None,
    master_rows: list[list] | None = None,
    status_rows: list[list] | None = None,
    arm_rows: list[list] | None = None,
    cg_cells: dict[str, object] | None = None,
    aircraft: str | None = "A320",
) -> InMemoryWorkbook:
    """Build an in-memory workbook in the trim-sheet layout."""
    workbook = InMemoryWorkbook()
    workbook.set_sheet(
        ULD_LOAD_INPUT,
        [["Position", "ULD Type", "Weight (kg)", "Destination"]] + (load_rows or []),
    )
    workbook.set_sheet(
        ULD_MASTER_TABLE,
        [["ULD Type", "Max Weight (kg)", "Deck", "Compatible"]] + (master_rows or []),
    )
    workbook.set_sheet(
        CARGO_HOLD_VISUAL_LAYOUT,
        [
            ["CARGO HOLD VISUAL LAYOUT"],
            ["Legend"],
            ["Position", "ULD Type", "Actual", "Max", "Utilization", "Status"],
        ]
        + (status_rows or []),
    )
    workbook.set_sheet(
        ARM_MOMENT_COMPUTATION,
        [["Position", "ULD Type", "Arm (m)", "Weight (kg)", "Moment"]] + (arm_rows or []),
    )
    workbook.set_sheet(CG_BALANCE_DECISION_ENGINE, [["CG & BALANCE DECISION ENGINE"]])
    for ref, value in (cg_cells or {}).items():
        workbook.set_cell(CG_BALANCE_DECISION_ENGINE, ref, value)
    if aircraft is not None:
        workbook.set_sheet(TRIM_SHEET, [["AIRCRAFT LOAD & TRIM SHEET"]])
        workbook.set_cell(TRIM_SHEET, "I3", aircraft)
    return workbook


@pytest.fixture
def scenario_workbook() -> InMemoryWorkbook:
    """Three-row A320 workbook with one template slot and one overload."""
    return make_workbook(
        load_rows=[
            ["A1", "ULD-A", 1000, "JFK"],
            ["A2", "", "", ""],
            ["B1", "ULD-B", 500, "LAX"],
        ],
        master_rows=[
            ["ULD-A", 1200, "Main", "A320"],
            ["ULD-B", 600, "Lower", "A320"],
        ],
        status_rows=[
            ["A1", "ULD-A", 1000, 1200, 0.833, "SAFE"],
            ["B1", "ULD-B", 500, 600, 0.833, "OVERLOAD"],
        ],
        arm_rows=[
            ["A1", "ULD-A", 15.0, 1000, 15000],
            ["B1", "ULD-B", 18.0, 500, 9000],
            [],
            ["TOTAL", None, None, 1500, 24000],
        ],
        cg_cells={
            "B4": "A320",
            "B7": 14.0,
            "B8": 28.0,
            "B12": 1500,
            "B13": 24000,
            "B15": 16.0,
            "B19": "✓ WITHIN LIMITS",
            "B21": "✓ SAFE FOR FLIGHT",
        },
    )


@pytest.fixture
def settings() -> Settings:
    """Default settings."""
    return Settings()


def replace_zip_entry(data: bytes, name: str, content: bytes) -> bytes:
    """Rewrite one part of an .xlsx package, keeping the others."""
    source = zipfile.ZipFile(io.BytesIO(data))
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as target:
        for item in source.infolist():
            target.writestr(item, content if item.filename == name else source.read(item.filename))
    return buffer.getvalue()


@pytest.fixture
def generator() -> TrimSheetWorkbookGenerator:
    """Seeded workbook generator."""
    return TrimSheetWorkbookGenerator(seed=42)


@pytest.fixture
def broken_xml_workbook(generator) -> bytes:
    """Valid zip package whose workbook part is malformed XML."""
    data = TrimSheetWorkbookGenerator.to_bytes(generator.generate())
    return replace_zip_entry(data, "xl/workbook.xml", b"<workbook><<broken")
