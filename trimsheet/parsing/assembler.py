"""
Load plan assembler.

Combines the extractor outputs and the resolved aircraft configuration
into one immutable LoadPlan.
"""

import logging
from datetime import datetime, timezone

from trimsheet.config import Settings, get_settings
from trimsheet.domain import AircraftConfiguration, CargoPosition, FlightInfo, LoadPlan
from trimsheet.errors import LoadPlanParseError
from trimsheet.workbook import Workbook

from .aircraft import resolve_aircraft_configuration
from .extractors import (
    extract_arm_moment,
    extract_cargo_load_input,
    extract_cargo_visual_layout,
    extract_cg_balance,
    extract_uld_master_table,
)

logger = logging.getLogger(__name__)


def filter_active_positions(positions: list[CargoPosition]) -> list[CargoPosition]:
    """Drop positions whose label is empty or whitespace, keeping order."""
    return [p for p in positions if p.position.strip()]


def build_flight_info(aircraft: AircraftConfiguration, settings: Settings) -> FlightInfo:
    """Header metadata; placeholders come from settings."""
    return FlightInfo(
        aircraft_type=aircraft.type_code,
        flight_number=settings.flight_number,
        route=settings.route,
        load_controller=settings.load_controller,
        status=settings.plan_status,
    )


def parse_load_plan(
    workbook: Workbook,
    settings: Settings | None = None,
    timestamp: datetime | None = None,
) -> LoadPlan:
    """
    Parse a validated workbook into a LoadPlan.

    The aircraft configuration is resolved first so that the CG extractor
    can fall back to its limits.

    Args:
        workbook: Decoded workbook
        settings: Runtime settings (default: process settings)
        timestamp: Creation time (default: now, UTC)

    Returns:
        Immutable LoadPlan

    Raises:
        LoadPlanParseError: Wrapping any extraction failure
    """
    settings = settings or get_settings()
    timestamp = timestamp or datetime.now(timezone.utc)

    try:
        aircraft = resolve_aircraft_configuration(workbook)
        cargo_positions = extract_cargo_load_input(workbook, max_rows=settings.max_cargo_rows)
        uld_specs = extract_uld_master_table(workbook)
        position_statuses = extract_cargo_visual_layout(workbook)
        arm_moment = extract_arm_moment(workbook)
        cg_analysis = extract_cg_balance(workbook, aircraft)

        plan = LoadPlan(
            flight_info=build_flight_info(aircraft, settings),
            aircraft=aircraft,
            cargo_positions=tuple(filter_active_positions(cargo_positions)),
            uld_specs=uld_specs,
            position_statuses=position_statuses,
            cg_analysis=cg_analysis,
            arm_moment=arm_moment,
            timestamp=timestamp,
        )
    except Exception as e:
        logger.error(f"Error parsing workbook: {e}")
        raise LoadPlanParseError(e) from e

    _log_plan_warnings(plan)
    logger.info(
        f"Assembled load plan for {aircraft.type_code}: "
        f"{len(plan.cargo_positions)} positions, verdict {cg_analysis.verdict.value}"
    )
    return plan


def _log_plan_warnings(plan: LoadPlan) -> None:
    """Report positions that do not fit the aircraft or reference unknown ULD types."""
    profile = plan.aircraft.profile
    for position in plan.cargo_positions:
        if profile is not None and not profile.accepts_position(position.position):
            logger.warning(
                f"Position {position.position} does not match {profile.aircraft_type.value} naming"
            )
        if position.uld_type and plan.spec_for(position) is None:
            logger.warning(f"Position {position.position} uses unknown ULD type {position.uld_type}")
