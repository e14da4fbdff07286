"""
Domain models for the Load & Trim Sheet system.

Core entities describing cargo positions, ULD types, aircraft configurations
and the balance results read from a load-planning workbook.
All models use Pydantic for validation and serialization.
"""

from .uld import CargoPosition, Deck, PositionStatus, PositionStatusLevel, ULDSpec
from .aircraft import (
    AircraftType,
    AircraftProfile,
    AircraftConfiguration,
    ConfigurationSource,
    AIRCRAFT_PROFILES,
    DEFAULT_AIRCRAFT_CODE,
    FALLBACK_PROFILE,
)
from .analysis import ArmMomentTotals, CGAnalysis, SafetyVerdict, SAFE_MARKERS
from .load_plan import FlightInfo, LoadPlan, SummaryStats

__all__ = [
    # ULD
    "CargoPosition",
    "Deck",
    "PositionStatus",
    "PositionStatusLevel",
    "ULDSpec",
    # Aircraft
    "AircraftType",
    "AircraftProfile",
    "AircraftConfiguration",
    "ConfigurationSource",
    "AIRCRAFT_PROFILES",
    "DEFAULT_AIRCRAFT_CODE",
    "FALLBACK_PROFILE",
    # Analysis
    "ArmMomentTotals",
    "CGAnalysis",
    "SafetyVerdict",
    "SAFE_MARKERS",
    # Load plan
    "FlightInfo",
    "LoadPlan",
    "SummaryStats",
]
