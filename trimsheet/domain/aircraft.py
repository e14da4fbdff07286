"""
Aircraft domain models.

Three aircraft types are supported, each with a different cargo-position
topology. Type-specific behavior lives on a single AircraftProfile resolved
once per workbook and carried by the AircraftConfiguration.
"""

import re
from enum import Enum

from pydantic import BaseModel, Field, computed_field


class AircraftType(str, Enum):
    """Supported aircraft types."""

    A320 = "A320"  # Narrow-body, 12 lower-deck positions A1..F2
    B737 = "B737"  # Narrow-body, 4 lower-deck positions FWD1..AFT2
    B777 = "B777"  # Wide-body, 6 main-deck + 6 lower-deck positions

    @classmethod
    def from_code(cls, code: str) -> "AircraftType | None":
        """Look up a type by code, ignoring case and surrounding whitespace."""
        normalized = code.strip().upper()
        for aircraft_type in cls:
            if aircraft_type.value == normalized:
                return aircraft_type
        return None


class ConfigurationSource(str, Enum):
    """Where a resolved aircraft configuration came from."""

    LOOKUP = "lookup"  # Row in the AIRCRAFT MODELS sheet
    BUILT_IN = "built_in"  # Built-in profile for a supported type
    FALLBACK = "fallback"  # Generic A320-shaped constants


class AircraftProfile(BaseModel):
    """
    Built-in capability profile for a supported aircraft type.

    Holds the default geometry/weight constants and the expected cargo
    position naming pattern.
    """

    aircraft_type: AircraftType
    name: str
    max_positions: int
    main_deck_positions: int
    lower_deck_positions: int
    cg_forward: float  # metres from reference datum
    cg_aft: float  # metres from reference datum
    max_payload: float  # kg
    position_pattern: str

    model_config = {"frozen": True}

    def accepts_position(self, label: str) -> bool:
        """Check whether a position label matches this aircraft's naming."""
        return re.fullmatch(self.position_pattern, label.strip()) is not None


AIRCRAFT_PROFILES: dict[AircraftType, AircraftProfile] = {
    AircraftType.A320: AircraftProfile(
        aircraft_type=AircraftType.A320,
        name="Airbus A320",
        max_positions=12,
        main_deck_positions=0,
        lower_deck_positions=12,
        cg_forward=14.0,
        cg_aft=28.0,
        max_payload=20000,
        position_pattern=r"[A-F][1-2]",
    ),
    AircraftType.B737: AircraftProfile(
        aircraft_type=AircraftType.B737,
        name="Boeing 737-800",
        max_positions=4,
        main_deck_positions=0,
        lower_deck_positions=4,
        cg_forward=15.5,
        cg_aft=24.5,
        max_payload=9000,
        position_pattern=r"(FWD|AFT)[1-2]",
    ),
    AircraftType.B777: AircraftProfile(
        aircraft_type=AircraftType.B777,
        name="Boeing 777-300ER",
        max_positions=12,
        main_deck_positions=6,
        lower_deck_positions=6,
        cg_forward=25.0,
        cg_aft=45.0,
        max_payload=50000,
        position_pattern=r"[ML][1-6]",
    ),
}

# Generic constants for selectors that match no supported type
FALLBACK_PROFILE = AIRCRAFT_PROFILES[AircraftType.A320]
DEFAULT_AIRCRAFT_CODE = AircraftType.A320.value


class AircraftConfiguration(BaseModel):
    """
    Resolved aircraft configuration for one workbook.

    The type code is kept exactly as selected, even when it names no
    supported aircraft.
    """

    type_code: str
    max_positions: int = Field(ge=0)
    main_deck_positions: int = Field(ge=0)
    lower_deck_positions: int = Field(ge=0)
    cg_forward: float
    cg_aft: float
    max_payload: float = Field(ge=0)
    source: ConfigurationSource = ConfigurationSource.BUILT_IN

    model_config = {"frozen": True}

    @computed_field
    @property
    def aircraft_type(self) -> AircraftType | None:
        """Supported aircraft type, or None for unknown codes."""
        return AircraftType.from_code(self.type_code)

    @property
    def profile(self) -> AircraftProfile | None:
        """Built-in profile for this type, if supported."""
        aircraft_type = self.aircraft_type
        return AIRCRAFT_PROFILES.get(aircraft_type) if aircraft_type else None

    @property
    def has_both_decks(self) -> bool:
        return self.main_deck_positions > 0 and self.lower_deck_positions > 0

    @classmethod
    def from_profile(
        cls,
        profile: AircraftProfile,
        type_code: str | None = None,
        source: ConfigurationSource = ConfigurationSource.BUILT_IN,
    ) -> "AircraftConfiguration":
        """Build a configuration from a profile's default constants."""
        return cls(
            type_code=type_code or profile.aircraft_type.value,
            max_positions=profile.max_positions,
            main_deck_positions=profile.main_deck_positions,
            lower_deck_positions=profile.lower_deck_positions,
            cg_forward=profile.cg_forward,
            cg_aft=profile.cg_aft,
            max_payload=profile.max_payload,
            source=source,
        )
