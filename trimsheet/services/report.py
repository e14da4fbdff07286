"""
Cargo manifest report.

Flattens a LoadPlan into one row per loaded position, joining the ULD spec
and the position status, for tabular output (CLI, CSV download).
"""

import pandas as pd

from trimsheet.domain import LoadPlan

MANIFEST_COLUMNS = [
    "position",
    "uld_type",
    "destination",
    "weight_kg",
    "deck",
    "uld_max_weight_kg",
    "status",
    "utilization_pct",
]


def build_manifest_frame(plan: LoadPlan) -> pd.DataFrame:
    """
    Build the cargo manifest as a DataFrame.

    Unknown ULD types leave the deck and max-weight columns empty; positions
    without a reported status show UNKNOWN.
    """
    records = []
    for cargo in plan.cargo_positions:
        spec = plan.spec_for(cargo)
        status = plan.status_for(cargo.position)
        records.append(
            {
                "position": cargo.position,
                "uld_type": cargo.uld_type,
                "destination": cargo.destination,
                "weight_kg": cargo.weight,
                "deck": spec.deck.value if spec and spec.deck else None,
                "uld_max_weight_kg": spec.max_weight if spec else None,
                "status": status.status.value if status else "UNKNOWN",
                "utilization_pct": round(status.utilization_percent, 1) if status else None,
            }
        )

    return pd.DataFrame.from_records(records, columns=MANIFEST_COLUMNS)


def manifest_to_csv(plan: LoadPlan) -> str:
    """Render the manifest as CSV text."""
    return build_manifest_frame(plan).to_csv(index=False)
