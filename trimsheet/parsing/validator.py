"""
Workbook validation.

Checks that every required sheet is present before any extraction runs.
"""

import logging
from typing import Iterable, Sequence

from trimsheet.errors import MissingSheetsError
from trimsheet.workbook import REQUIRED_SHEETS, Workbook

logger = logging.getLogger(__name__)


def find_missing_sheets(
    sheet_names: Iterable[str],
    required: Sequence[str] = REQUIRED_SHEETS,
) -> list[str]:
    """
    Find required sheets absent from a workbook.

    Args:
        sheet_names: Sheet names present in the workbook
        required: Sheet names that must be present

    Returns:
        Missing names, in the order they are required
    """
    present = set(sheet_names)
    return [name for name in required if name not in present]


def validate_workbook(
    workbook: Workbook,
    required: Sequence[str] = REQUIRED_SHEETS,
) -> None:
    """
    Ensure a workbook exposes all required sheets.

    Raises:
        MissingSheetsError: Listing every missing sheet
    """
    missing = find_missing_sheets(workbook.sheet_names, required)
    if missing:
        logger.warning(f"Workbook rejected, missing sheets: {missing}")
        raise MissingSheetsError(missing)
