"""
Core services for the Load & Trim Sheet system.

Business logic layer containing:
- Statistics: deck weights, overloads and payload utilization
- Layout: aircraft-specific cargo grid
- Report: tabular cargo manifest
- Load plans: workbook ingestion facade
"""

from .statistics import calculate_summary_stats, cg_status_within_limits, is_cleared_for_departure
from .layout import (
    DECK_SEPARATOR,
    GridLayout,
    build_cargo_grid_layout,
    find_unexpected_positions,
)
from .report import build_manifest_frame, manifest_to_csv
from .load_plans import LoadPlanService

__all__ = [
    "calculate_summary_stats",
    "cg_status_within_limits",
    "is_cleared_for_departure",
    "DECK_SEPARATOR",
    "GridLayout",
    "build_cargo_grid_layout",
    "find_unexpected_positions",
    "build_manifest_frame",
    "manifest_to_csv",
    "LoadPlanService",
]
