"""
Load plan service.

Entry point for turning an uploaded workbook into a LoadPlan and its
derived views. The service keeps no per-request state; every call is
independent.
"""

import logging
from pathlib import Path

from trimsheet.config import Settings, get_settings
from trimsheet.domain import LoadPlan, SummaryStats
from trimsheet.parsing import parse_load_plan, validate_workbook
from trimsheet.workbook import ExcelWorkbook, Workbook

from .layout import GridLayout, build_cargo_grid_layout, find_unexpected_positions
from .statistics import calculate_summary_stats, is_cleared_for_departure

logger = logging.getLogger(__name__)


class LoadPlanService:
    """
    Service for ingesting load-planning workbooks.

    Usage:
        service = LoadPlanService()
        plan = service.load_path("trim_sheet.xlsx")
        stats = service.summarize(plan)
        grid = service.grid(plan)
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def load(self, workbook: Workbook) -> LoadPlan:
        """
        Validate and parse a decoded workbook.

        Raises:
            MissingSheetsError: If required sheets are absent
            LoadPlanParseError: If extraction fails
        """
        validate_workbook(workbook)
        return parse_load_plan(workbook, settings=self.settings)

    def load_bytes(self, data: bytes) -> LoadPlan:
        """
        Decode and parse an .xlsx file held in memory.

        Raises:
            WorkbookDecodeError: If the bytes are not a workbook
        """
        logger.info(f"Processing uploaded workbook ({len(data)} bytes)")
        return self.load(ExcelWorkbook.from_bytes(data))

    def load_path(self, path: str | Path) -> LoadPlan:
        """Decode and parse an .xlsx file from disk."""
        logger.info(f"Processing workbook {path}")
        return self.load(ExcelWorkbook.from_path(path))

    def summarize(self, plan: LoadPlan) -> SummaryStats:
        """Aggregate statistics for a plan."""
        return calculate_summary_stats(plan)

    def grid(self, plan: LoadPlan) -> GridLayout:
        """Cargo grid rows for the plan's aircraft."""
        return build_cargo_grid_layout(plan.position_ids, plan.aircraft)

    def is_cleared(self, plan: LoadPlan) -> bool:
        """Departure clearance: safe CG verdict and no overloads."""
        return is_cleared_for_departure(plan, self.summarize(plan))

    def unexpected_positions(self, plan: LoadPlan) -> list[str]:
        """Positions not matching the aircraft's naming."""
        return find_unexpected_positions(plan)
