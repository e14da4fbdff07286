"""
ULD (Unit Load Device) domain models.

ULDs are standardized containers and pallets loaded into cargo positions.
Each loaded position is read from the load input sheet; static characteristics
per ULD type come from the master table, and per-position safety classification
comes from the visual layout sheet.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field, computed_field


class Deck(str, Enum):
    """Cargo-hold level a ULD type is assigned to."""

    MAIN = "Main"
    LOWER = "Lower"

    @classmethod
    def from_text(cls, text: str) -> "Deck | None":
        """
        Parse deck text from the master table.

        Blank text defaults to the main deck. Text naming neither deck
        returns None so the type counts towards no deck total.
        """
        cleaned = text.strip().lower()
        if not cleaned:
            return cls.MAIN
        for deck in cls:
            if deck.value.lower() == cleaned:
                return deck
        return None


class PositionStatusLevel(str, Enum):
    """Per-position load classification computed by the workbook."""

    SAFE = "SAFE"
    NEAR_LIMIT = "NEAR LIMIT"
    OVERLOAD = "OVERLOAD"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_text(cls, text: str) -> "PositionStatusLevel":
        """Exact, case-sensitive match of the stripped text; anything else is UNKNOWN."""
        stripped = text.strip()
        for level in cls:
            if level.value == stripped:
                return level
        return cls.UNKNOWN


class CargoPosition(BaseModel):
    """
    One populated cargo position from the load input sheet.

    Labels follow the aircraft's naming (A1, FWD1, M3, ...).
    """

    position: Annotated[str, Field(description="Position label (e.g., A1, FWD1, M3)")]
    uld_type: str = ""
    weight: float = Field(default=0.0, ge=0)  # kg
    destination: str = ""

    model_config = {"frozen": True}


class ULDSpec(BaseModel):
    """Static characteristics of a ULD type from the master table."""

    uld_type: str
    max_weight: float = 0.0  # kg
    deck: Deck | None = Deck.MAIN
    compatibility: str = ""

    model_config = {"frozen": True}


class PositionStatus(BaseModel):
    """
    Safety classification of a single position.

    Derived upstream by the workbook formulas and consumed read-only.
    """

    position: str
    status: PositionStatusLevel = PositionStatusLevel.UNKNOWN
    status_text: str = "UNKNOWN"
    actual_weight: float = 0.0
    max_weight: float = 0.0
    utilization: float = 0.0

    model_config = {"frozen": True}

    @computed_field
    @property
    def utilization_percent(self) -> float:
        """Utilization as a percentage of the position's max weight."""
        return self.utilization * 100

    @property
    def is_overloaded(self) -> bool:
        return self.status == PositionStatusLevel.OVERLOAD
