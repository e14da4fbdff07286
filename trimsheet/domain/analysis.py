"""
Balance analysis domain models.

Totals and the CG verdict are computed by the workbook's own formulas.
These models only carry the trusted results.
"""

from enum import Enum

from pydantic import BaseModel, computed_field


# Marker tokens the decision engine writes into a safe overall verdict
SAFE_MARKERS: tuple[str, ...] = ("✓ SAFE", "SAFE FOR FLIGHT")

UNKNOWN_TEXT = "UNKNOWN"


class SafetyVerdict(str, Enum):
    """
    Normalized overall safety verdict.

    Unrecognized verdict text is UNSAFE (fail-closed).
    """

    SAFE = "safe"
    UNSAFE = "unsafe"
    UNKNOWN = "unknown"

    @classmethod
    def from_text(cls, text: str) -> "SafetyVerdict":
        """
        Classify raw verdict text by case-sensitive marker containment.

        Blank text, or the literal UNKNOWN placeholder, is UNKNOWN.
        """
        stripped = text.strip()
        if not stripped or stripped == UNKNOWN_TEXT:
            return cls.UNKNOWN
        if any(marker in stripped for marker in SAFE_MARKERS):
            return cls.SAFE
        return cls.UNSAFE


class ArmMomentTotals(BaseModel):
    """Trailing totals row of the arm & moment sheet."""

    total_weight: float = 0.0  # kg
    total_moment: float = 0.0  # kg·m

    model_config = {"frozen": True}


class CGAnalysis(BaseModel):
    """Output of the CG & balance decision engine."""

    aircraft_type: str
    forward_limit: float  # metres
    aft_limit: float  # metres
    total_weight: float = 0.0
    total_moment: float = 0.0
    computed_cg: float = 0.0
    cg_status: str = UNKNOWN_TEXT
    overall_status: str = UNKNOWN_TEXT
    verdict: SafetyVerdict = SafetyVerdict.UNKNOWN

    model_config = {"frozen": True}

    @computed_field
    @property
    def is_safe(self) -> bool:
        """True only for a recognized safe verdict."""
        return self.verdict == SafetyVerdict.SAFE

    @computed_field
    @property
    def envelope_position(self) -> float | None:
        """
        CG location within the forward-aft envelope, in percent.

        0 is the forward limit and 100 the aft limit; values outside that
        range are out of the envelope. None when the limits do not form a
        positive range.
        """
        span = self.aft_limit - self.forward_limit
        if span <= 0:
            return None
        return (self.computed_cg - self.forward_limit) / span * 100
