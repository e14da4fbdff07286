"""
Workbook parsing pipeline.

Validator -> sheet extractors -> aircraft resolver -> assembler.
"""

from .validator import find_missing_sheets, validate_workbook
from .extractors import (
    extract_cargo_load_input,
    extract_uld_master_table,
    extract_cargo_visual_layout,
    extract_arm_moment,
    extract_cg_balance,
)
from .aircraft import read_aircraft_selector, resolve_aircraft_configuration
from .assembler import filter_active_positions, parse_load_plan

__all__ = [
    "find_missing_sheets",
    "validate_workbook",
    "extract_cargo_load_input",
    "extract_uld_master_table",
    "extract_cargo_visual_layout",
    "extract_arm_moment",
    "extract_cg_balance",
    "read_aircraft_selector",
    "resolve_aircraft_configuration",
    "filter_active_positions",
    "parse_load_plan",
]
