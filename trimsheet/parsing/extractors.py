"""
Sheet extractors.

Each extractor reads one named sheet into typed records. Extractors are
stateless and independent; each raises SheetNotFoundError when its own
sheet is missing, even if the workbook was validated beforehand.

Malformed numeric cells never raise. They fall back to 0 or to the
aircraft configuration value documented per field.
"""

import logging

from trimsheet.domain import (
    AircraftConfiguration,
    ArmMomentTotals,
    CargoPosition,
    CGAnalysis,
    Deck,
    PositionStatus,
    PositionStatusLevel,
    SafetyVerdict,
    ULDSpec,
)
from trimsheet.errors import SheetNotFoundError
from trimsheet.workbook import (
    ARM_MOMENT_COMPUTATION,
    CARGO_HOLD_VISUAL_LAYOUT,
    CG_BALANCE_DECISION_ENGINE,
    ULD_LOAD_INPUT,
    ULD_MASTER_TABLE,
    Row,
    Workbook,
)

from .values import column, is_blank, to_float, to_text

logger = logging.getLogger(__name__)

# Rows before the data on the visual layout sheet (header + legend)
VISUAL_LAYOUT_HEADER_ROWS = 3

# Decision engine cells
CG_AIRCRAFT_TYPE_CELL = "B4"
CG_FORWARD_LIMIT_CELL = "B7"
CG_AFT_LIMIT_CELL = "B8"
CG_TOTAL_WEIGHT_CELL = "B12"
CG_TOTAL_MOMENT_CELL = "B13"
CG_COMPUTED_CELL = "B15"
CG_STATUS_CELL = "B19"
CG_OVERALL_STATUS_CELL = "B21"


def _sheet_rows(workbook: Workbook, sheet: str) -> list[Row]:
    if not workbook.has_sheet(sheet):
        raise SheetNotFoundError(sheet)
    return workbook.rows(sheet)


def extract_cargo_load_input(
    workbook: Workbook,
    max_rows: int | None = None,
) -> list[CargoPosition]:
    """
    Read loaded positions from the ULD LOAD INPUT sheet.

    Columns: position, ULD type, weight (kg), destination. Row 1 is the header.
    Rows with an empty position cell are skipped, as are template slots
    with a label but no ULD type, weight or destination.

    Args:
        workbook: Decoded workbook
        max_rows: Number of data rows to scan (None scans all)

    Returns:
        Positions in sheet row order
    """
    rows = _sheet_rows(workbook, ULD_LOAD_INPUT)[1:]
    if max_rows is not None:
        rows = rows[:max_rows]

    positions = []
    for row in rows:
        label = column(row, 0)
        if label is None or label == "":
            continue

        uld_type, weight, destination = column(row, 1), column(row, 2), column(row, 3)
        if is_blank(uld_type) and is_blank(weight) and is_blank(destination):
            continue

        positions.append(
            CargoPosition(
                position=to_text(label),
                uld_type=to_text(uld_type),
                weight=max(0.0, to_float(weight)),
                destination=to_text(destination),
            )
        )

    return positions


def extract_uld_master_table(workbook: Workbook) -> dict[str, ULDSpec]:
    """
    Read ULD type specifications from the ULD MASTER TABLE sheet.

    Columns: ULD type, max weight (kg), deck, compatibility note.
    """
    specs: dict[str, ULDSpec] = {}

    for row in _sheet_rows(workbook, ULD_MASTER_TABLE)[1:]:
        uld_type = to_text(column(row, 0))
        if not uld_type:
            continue

        deck_text = to_text(column(row, 2))
        deck = Deck.from_text(deck_text)
        if deck is None:
            logger.warning(f"ULD type {uld_type} has unrecognized deck {deck_text!r}")

        specs[uld_type] = ULDSpec(
            uld_type=uld_type,
            max_weight=to_float(column(row, 1)),
            deck=deck,
            compatibility=to_text(column(row, 3)),
        )

    return specs


def extract_cargo_visual_layout(workbook: Workbook) -> dict[str, PositionStatus]:
    """
    Read per-position load status from the CARGO HOLD VISUAL LAYOUT sheet.

    Data starts at row 4. Columns used: position (1), actual weight (3),
    max weight (4), status text (6).
    """
    statuses: dict[str, PositionStatus] = {}

    for row in _sheet_rows(workbook, CARGO_HOLD_VISUAL_LAYOUT)[VISUAL_LAYOUT_HEADER_ROWS:]:
        position = to_text(column(row, 0))
        if not position:
            continue

        actual_weight = to_float(column(row, 2))
        max_weight = to_float(column(row, 3))
        status_text = to_text(column(row, 5), default=PositionStatusLevel.UNKNOWN.value)

        statuses[position] = PositionStatus(
            position=position,
            status=PositionStatusLevel.from_text(status_text),
            status_text=status_text,
            actual_weight=actual_weight,
            max_weight=max_weight,
            utilization=actual_weight / max_weight if max_weight > 0 else 0.0,
        )

    return statuses


def extract_arm_moment(workbook: Workbook) -> ArmMomentTotals:
    """
    Read the totals row from the ARM & MOMENT COMPUTATION sheet.

    The totals row is appended after a variable number of position rows,
    so rows are scanned from the bottom for the last one whose total-weight
    column (4) holds a non-zero number. Its moment column (5) is read with
    it. Returns zero totals when no such row exists.
    """
    rows = _sheet_rows(workbook, ARM_MOMENT_COMPUTATION)

    for row in reversed(rows):
        total_weight = to_float(column(row, 3))
        if total_weight:
            return ArmMomentTotals(
                total_weight=total_weight,
                total_moment=to_float(column(row, 4)),
            )

    return ArmMomentTotals()


def extract_cg_balance(
    workbook: Workbook,
    aircraft: AircraftConfiguration,
) -> CGAnalysis:
    """
    Read the CG & BALANCE DECISION ENGINE results.

    Forward/aft limits fall back to the aircraft configuration when the
    cells do not parse; weight, moment and CG fall back to 0. The overall
    status text is normalized into a SafetyVerdict.

    Args:
        workbook: Decoded workbook
        aircraft: Resolved aircraft configuration

    Returns:
        CGAnalysis with sheet values taking precedence
    """
    sheet = CG_BALANCE_DECISION_ENGINE
    if not workbook.has_sheet(sheet):
        raise SheetNotFoundError(sheet)

    def read(ref: str):
        return workbook.cell(sheet, ref)

    overall_status = to_text(read(CG_OVERALL_STATUS_CELL), default="UNKNOWN")

    return CGAnalysis(
        aircraft_type=to_text(read(CG_AIRCRAFT_TYPE_CELL), default=aircraft.type_code),
        forward_limit=to_float(read(CG_FORWARD_LIMIT_CELL), default=aircraft.cg_forward),
        aft_limit=to_float(read(CG_AFT_LIMIT_CELL), default=aircraft.cg_aft),
        total_weight=to_float(read(CG_TOTAL_WEIGHT_CELL)),
        total_moment=to_float(read(CG_TOTAL_MOMENT_CELL)),
        computed_cg=to_float(read(CG_COMPUTED_CELL)),
        cg_status=to_text(read(CG_STATUS_CELL), default="UNKNOWN"),
        overall_status=overall_status,
        verdict=SafetyVerdict.from_text(overall_status),
    )
