"""
Load-planning workbook generator.

Generates realistic trim-sheet workbooks in the exact layout the parser
expects:
- Aircraft selection and model lookup table
- ULD load input and master table
- Per-position visual status
- Arm & moment rows with a trailing totals row
- CG & balance decision engine results

Values are written as plain numbers (no formulas) so they read back the
same with data_only=True.
"""

from io import BytesIO
from typing import Iterable

import numpy as np
from openpyxl import Workbook

from trimsheet.domain import AIRCRAFT_PROFILES, AircraftProfile, AircraftType
from trimsheet.workbook import (
    AIRCRAFT_MODELS,
    AIRCRAFT_SELECTOR_CELL,
    ARM_MOMENT_COMPUTATION,
    CARGO_HOLD_VISUAL_LAYOUT,
    CG_BALANCE_DECISION_ENGINE,
    TRIM_SHEET,
    ULD_LOAD_INPUT,
    ULD_MASTER_TABLE,
)

SAFE_VERDICT = "✓ SAFE FOR FLIGHT"
UNSAFE_VERDICT = "UNSAFE - REDISTRIBUTE"

# Utilization thresholds used by the workbook's status formulas
NEAR_LIMIT_RATIO = 0.9

DESTINATIONS = ["LAX", "JFK", "ORD", "SFO", "SEA", "MIA"]


def position_labels(aircraft_type: AircraftType) -> list[str]:
    """Position labels in load order for an aircraft type."""
    if aircraft_type == AircraftType.B737:
        return ["FWD1", "FWD2", "AFT1", "AFT2"]
    if aircraft_type == AircraftType.B777:
        return [f"M{i}" for i in range(1, 7)] + [f"L{i}" for i in range(1, 7)]
    return [f"{row}{col}" for row in "ABCDEF" for col in (1, 2)]


class TrimSheetWorkbookGenerator:
    """
    Generate synthetic load-planning workbooks.

    Usage:
        generator = TrimSheetWorkbookGenerator(seed=42)
        workbook = generator.generate(AircraftType.B777, overloaded=["M2"])
        data = TrimSheetWorkbookGenerator.to_bytes(workbook)
    """

    # ULD types: (max gross weight kg, deck, compatible aircraft)
    ULD_TYPES = {
        "AKE": (1588, "Lower", "A320, B737, B777"),
        "AKH": (1588, "Lower", "A320"),
        "PMC": (6804, "Main", "B777"),
        "PAG": (4626, "Main", "B777"),
    }

    def __init__(self, seed: int | None = None):
        """Initialize generator with optional random seed."""
        self.rng = np.random.default_rng(seed)

    def generate(
        self,
        aircraft_type: AircraftType = AircraftType.A320,
        overloaded: Iterable[str] = (),
        empty_slots: Iterable[str] = (),
        include_models_sheet: bool = True,
        omit_sheets: Iterable[str] = (),
    ) -> Workbook:
        """
        Generate a complete workbook for one aircraft.

        Args:
            aircraft_type: Aircraft to plan
            overloaded: Positions loaded above their ULD max weight
            empty_slots: Positions left as unpopulated template slots
            include_models_sheet: Whether to write the AIRCRAFT MODELS lookup
            omit_sheets: Sheets to remove (for invalid-workbook scenarios)

        Returns:
            openpyxl Workbook
        """
        profile = AIRCRAFT_PROFILES[aircraft_type]
        overloaded = set(overloaded)
        empty_slots = set(empty_slots)

        loads = []
        for label in position_labels(aircraft_type):
            if label in empty_slots:
                loads.append((label, None, None, None))
                continue
            uld_type = self._uld_type_for(profile, label)
            max_weight = self.ULD_TYPES[uld_type][0]
            if label in overloaded:
                weight = round(max_weight * self.rng.uniform(1.05, 1.2))
            else:
                weight = round(max_weight * self.rng.uniform(0.4, 0.85))
            destination = DESTINATIONS[int(self.rng.integers(len(DESTINATIONS)))]
            loads.append((label, uld_type, weight, destination))

        workbook = Workbook()
        workbook.remove(workbook.active)

        self._write_trim_sheet(workbook, profile)
        if include_models_sheet:
            self._write_aircraft_models(workbook)
        self._write_load_input(workbook, loads)
        self._write_master_table(workbook)
        self._write_visual_layout(workbook, loads)
        total_weight, total_moment = self._write_arm_moment(workbook, profile, loads)
        self._write_cg_balance(workbook, profile, total_weight, total_moment, bool(overloaded))

        for name in omit_sheets:
            if name in workbook.sheetnames:
                workbook.remove(workbook[name])

        return workbook

    @staticmethod
    def to_bytes(workbook: Workbook) -> bytes:
        """Serialize a workbook to .xlsx bytes."""
        buffer = BytesIO()
        workbook.save(buffer)
        return buffer.getvalue()

    def _uld_type_for(self, profile: AircraftProfile, label: str) -> str:
        if profile.aircraft_type == AircraftType.B777 and label.startswith("M"):
            return "PMC" if self.rng.random() < 0.6 else "PAG"
        if profile.aircraft_type == AircraftType.A320:
            return "AKE" if self.rng.random() < 0.7 else "AKH"
        return "AKE"

    def _write_trim_sheet(self, workbook: Workbook, profile: AircraftProfile) -> None:
        sheet = workbook.create_sheet(TRIM_SHEET)
        sheet["A1"] = "AIRCRAFT LOAD & TRIM SHEET"
        sheet["H3"] = "Aircraft"
        sheet[AIRCRAFT_SELECTOR_CELL] = profile.aircraft_type.value

    def _write_aircraft_models(self, workbook: Workbook) -> None:
        sheet = workbook.create_sheet(AIRCRAFT_MODELS)
        sheet.append(
            ["Aircraft", "Max Positions", "Main Deck", "Lower Deck", "CG Forward (m)", "CG Aft (m)", "Max Payload (kg)"]
        )
        for profile in AIRCRAFT_PROFILES.values():
            sheet.append(
                [
                    profile.aircraft_type.value,
                    profile.max_positions,
                    profile.main_deck_positions,
                    profile.lower_deck_positions,
                    profile.cg_forward,
                    profile.cg_aft,
                    profile.max_payload,
                ]
            )

    def _write_load_input(self, workbook: Workbook, loads: list[tuple]) -> None:
        sheet = workbook.create_sheet(ULD_LOAD_INPUT)
        sheet.append(["Position", "ULD Type", "Weight (kg)", "Destination"])
        for load in loads:
            sheet.append(list(load))

    def _write_master_table(self, workbook: Workbook) -> None:
        sheet = workbook.create_sheet(ULD_MASTER_TABLE)
        sheet.append(["ULD Type", "Max Weight (kg)", "Deck", "Compatible Aircraft"])
        for uld_type, (max_weight, deck, compatible) in self.ULD_TYPES.items():
            sheet.append([uld_type, max_weight, deck, compatible])

    def _write_visual_layout(self, workbook: Workbook, loads: list[tuple]) -> None:
        sheet = workbook.create_sheet(CARGO_HOLD_VISUAL_LAYOUT)
        sheet.append(["CARGO HOLD VISUAL LAYOUT"])
        sheet.append(["Legend: SAFE < 90% | NEAR LIMIT 90-100% | OVERLOAD > 100%"])
        sheet.append(["Position", "ULD Type", "Actual Weight (kg)", "Max Weight (kg)", "Utilization", "Status"])
        for label, uld_type, weight, _ in loads:
            if uld_type is None:
                continue
            max_weight = self.ULD_TYPES[uld_type][0]
            ratio = weight / max_weight
            if ratio > 1:
                status = "OVERLOAD"
            elif ratio >= NEAR_LIMIT_RATIO:
                status = "NEAR LIMIT"
            else:
                status = "SAFE"
            sheet.append([label, uld_type, weight, max_weight, round(ratio, 4), status])

    def _write_arm_moment(
        self,
        workbook: Workbook,
        profile: AircraftProfile,
        loads: list[tuple],
    ) -> tuple[float, float]:
        sheet = workbook.create_sheet(ARM_MOMENT_COMPUTATION)
        sheet.append(["Position", "ULD Type", "Arm (m)", "Weight (kg)", "Moment (kg·m)"])

        arms = np.linspace(profile.cg_forward, profile.cg_aft, num=len(loads))
        total_weight = 0.0
        total_moment = 0.0
        for (label, uld_type, weight, _), arm in zip(loads, arms):
            weight = weight or 0
            moment = weight * float(arm)
            total_weight += weight
            total_moment += moment
            sheet.append([label, uld_type, round(float(arm), 3), weight, round(moment, 1)])

        sheet.append([])
        sheet.append(["TOTAL", None, None, total_weight, round(total_moment, 1)])
        return total_weight, total_moment

    def _write_cg_balance(
        self,
        workbook: Workbook,
        profile: AircraftProfile,
        total_weight: float,
        total_moment: float,
        has_overload: bool,
    ) -> None:
        sheet = workbook.create_sheet(CG_BALANCE_DECISION_ENGINE)
        cg = total_moment / total_weight if total_weight else 0.0
        within_limits = profile.cg_forward <= cg <= profile.cg_aft

        sheet["A1"] = "CG & BALANCE DECISION ENGINE"
        sheet["A4"], sheet["B4"] = "Aircraft Type", profile.aircraft_type.value
        sheet["A7"], sheet["B7"] = "Forward CG Limit (m)", profile.cg_forward
        sheet["A8"], sheet["B8"] = "Aft CG Limit (m)", profile.cg_aft
        sheet["A12"], sheet["B12"] = "Total Weight (kg)", total_weight
        sheet["A13"], sheet["B13"] = "Total Moment (kg·m)", round(total_moment, 1)
        sheet["A15"], sheet["B15"] = "Computed CG (m)", round(cg, 3)
        sheet["A19"], sheet["B19"] = "CG Status", "✓ WITHIN LIMITS" if within_limits else "✗ OUT OF LIMITS"
        sheet["A21"], sheet["B21"] = (
            "Overall Status",
            SAFE_VERDICT if within_limits and not has_overload else UNSAFE_VERDICT,
        )
