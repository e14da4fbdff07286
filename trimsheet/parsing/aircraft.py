"""
Aircraft configuration resolver.

Determines which aircraft the workbook describes and supplies the geometry
and weight constants used downstream. Resolution order:

1. A matching row in the AIRCRAFT MODELS sheet
2. The built-in profile for a supported type
3. Generic A320-shaped fallback constants

An unknown aircraft never fails the parse.
"""

import logging
from typing import Any

from trimsheet.domain import (
    AIRCRAFT_PROFILES,
    DEFAULT_AIRCRAFT_CODE,
    FALLBACK_PROFILE,
    AircraftConfiguration,
    AircraftProfile,
    AircraftType,
    ConfigurationSource,
)
from trimsheet.workbook import AIRCRAFT_MODELS, AIRCRAFT_SELECTOR_CELL, TRIM_SHEET, Workbook

from .values import column, to_float, to_text

logger = logging.getLogger(__name__)


def read_aircraft_selector(workbook: Workbook) -> str:
    """
    Read the selected aircraft code from the trim sheet.

    Returns:
        Upper-cased code, or A320 when the cell is blank or the sheet is absent
    """
    if not workbook.has_sheet(TRIM_SHEET):
        return DEFAULT_AIRCRAFT_CODE
    selected = to_text(workbook.cell(TRIM_SHEET, AIRCRAFT_SELECTOR_CELL))
    return selected.upper() or DEFAULT_AIRCRAFT_CODE


def _count(value: Any, default: int) -> int:
    number = to_float(value, default=-1.0)
    return int(number) if number >= 0 else default


def _measure(value: Any, default: float) -> float:
    number = to_float(value, default=-1.0)
    return number if number >= 0 else default


def _from_lookup_row(row: tuple, type_code: str, defaults: AircraftProfile) -> AircraftConfiguration:
    """Build a configuration from a lookup row, defaulting blank or bad cells per field."""
    return AircraftConfiguration(
        type_code=type_code,
        max_positions=_count(column(row, 1), defaults.max_positions),
        main_deck_positions=_count(column(row, 2), defaults.main_deck_positions),
        lower_deck_positions=_count(column(row, 3), defaults.lower_deck_positions),
        cg_forward=_measure(column(row, 4), defaults.cg_forward),
        cg_aft=_measure(column(row, 5), defaults.cg_aft),
        max_payload=_measure(column(row, 6), defaults.max_payload),
        source=ConfigurationSource.LOOKUP,
    )


def find_aircraft_model_row(workbook: Workbook, type_code: str) -> tuple | None:
    """Find the AIRCRAFT MODELS row for a type code, skipping the header."""
    if not workbook.has_sheet(AIRCRAFT_MODELS):
        return None
    for row in workbook.rows(AIRCRAFT_MODELS)[1:]:
        if to_text(column(row, 0)).upper() == type_code:
            return row
    return None


def resolve_aircraft_configuration(
    workbook: Workbook,
    selector: str | None = None,
) -> AircraftConfiguration:
    """
    Resolve the aircraft configuration for a workbook.

    Args:
        workbook: Decoded workbook
        selector: Aircraft code to resolve (default: read from the trim sheet)

    Returns:
        Immutable AircraftConfiguration
    """
    type_code = (selector or read_aircraft_selector(workbook)).strip().upper() or DEFAULT_AIRCRAFT_CODE
    aircraft_type = AircraftType.from_code(type_code)
    profile = AIRCRAFT_PROFILES.get(aircraft_type) if aircraft_type else None

    row = find_aircraft_model_row(workbook, type_code)
    if row is not None:
        logger.debug(f"Aircraft {type_code} resolved from {AIRCRAFT_MODELS}")
        return _from_lookup_row(row, type_code, profile or FALLBACK_PROFILE)

    if profile is not None:
        logger.debug(f"Aircraft {type_code} resolved from built-in profile")
        return AircraftConfiguration.from_profile(profile)

    logger.warning(f"Unknown aircraft {type_code!r}, using generic fallback constants")
    return AircraftConfiguration.from_profile(
        FALLBACK_PROFILE,
        type_code=type_code,
        source=ConfigurationSource.FALLBACK,
    )
