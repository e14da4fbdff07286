"""
Load plan domain models.

The LoadPlan is the single normalized aggregate produced from a workbook.
It is built once by the assembler and treated as a read-only snapshot.
"""

from datetime import datetime
from types import MappingProxyType
from typing import Annotated, Mapping, TypeVar

from pydantic import AfterValidator, BaseModel, Field, computed_field, field_serializer

from .aircraft import AircraftConfiguration
from .analysis import ArmMomentTotals, CGAnalysis
from .uld import CargoPosition, PositionStatus, ULDSpec

V = TypeVar("V")


def _read_only(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


# Mapping copied behind a read-only proxy
ReadOnlyMapping = Annotated[Mapping[str, V], AfterValidator(_read_only)]

FLIGHT_DATE_FORMAT = "%d %b %Y"
FLIGHT_TIME_FORMAT = "%H:%M"


class FlightInfo(BaseModel):
    """
    Display metadata printed on the trim sheet header.

    The flight date and time are rendered from the plan timestamp
    (LoadPlan.flight_date / LoadPlan.flight_time).
    """

    aircraft_type: str
    flight_number: str
    route: str
    load_controller: str
    status: str

    model_config = {"frozen": True}


class LoadPlan(BaseModel):
    """
    Normalized load plan for one workbook.

    Cargo positions keep sheet row order and contain only populated positions.
    Two plans parsed from the same workbook compare equal once their
    timestamps are aligned.
    """

    flight_info: FlightInfo
    aircraft: AircraftConfiguration
    cargo_positions: tuple[CargoPosition, ...] = ()
    uld_specs: ReadOnlyMapping[ULDSpec] = Field(default_factory=dict, validate_default=True)
    position_statuses: ReadOnlyMapping[PositionStatus] = Field(default_factory=dict, validate_default=True)
    cg_analysis: CGAnalysis
    arm_moment: ArmMomentTotals = Field(default_factory=ArmMomentTotals)
    timestamp: datetime

    model_config = {"frozen": True}

    @field_serializer("uld_specs", "position_statuses")
    def _serialize_mapping(self, value: Mapping) -> dict:
        return dict(value)

    @property
    def position_ids(self) -> list[str]:
        """Position labels in sheet order."""
        return [p.position for p in self.cargo_positions]

    @computed_field
    @property
    def flight_date(self) -> str:
        """Header date, e.g. 05 Mar 2024."""
        return self.timestamp.strftime(FLIGHT_DATE_FORMAT)

    @computed_field
    @property
    def flight_time(self) -> str:
        """Header time, HH:MM."""
        return self.timestamp.strftime(FLIGHT_TIME_FORMAT)

    @computed_field
    @property
    def total_cargo_weight(self) -> float:
        """Sum of all loaded position weights."""
        return sum(p.weight for p in self.cargo_positions)

    def spec_for(self, position: CargoPosition) -> ULDSpec | None:
        """Get the ULD spec for a position's ULD type, if known."""
        return self.uld_specs.get(position.uld_type)

    def status_for(self, position_id: str) -> PositionStatus | None:
        """Get the safety status for a position, if reported."""
        return self.position_statuses.get(position_id)


class SummaryStats(BaseModel):
    """Aggregate statistics derived from a LoadPlan on demand."""

    total_ulds: int = 0
    main_deck_weight: float = 0.0
    lower_deck_weight: float = 0.0
    overload_count: int = 0
    utilization_percent: float = 0.0
    uld_type_counts: dict[str, int] = Field(default_factory=dict)  # first-appearance order
    cg_within_limits: bool = False
    all_positions_loaded: bool = False

    model_config = {"frozen": True}

    @computed_field
    @property
    def deck_weight(self) -> float:
        """Weight assigned to a known deck."""
        return self.main_deck_weight + self.lower_deck_weight
