"""
Aggregate statistics for a load plan.

Pure functions of a LoadPlan; cheap enough to recompute on every read.
"""

from trimsheet.domain import Deck, LoadPlan, PositionStatusLevel, SummaryStats

# Tokens the decision engine writes into an in-limits CG status
CG_OK_MARKERS: tuple[str, ...] = ("✓", "SAFE")


def cg_status_within_limits(cg_status: str) -> bool:
    """Check the CG status text for an in-limits marker (case-sensitive)."""
    return any(marker in cg_status for marker in CG_OK_MARKERS)


def calculate_summary_stats(plan: LoadPlan) -> SummaryStats:
    """
    Compute deck weights, overload count, payload utilization and the
    dashboard checks.

    Positions whose ULD type has no spec (or no recognized deck) count
    towards neither deck total. ULD type counts keep first-appearance
    order. All positions are loaded when the active position count equals
    the aircraft's max positions.
    """
    main_deck_weight = 0.0
    lower_deck_weight = 0.0
    overload_count = 0
    uld_type_counts: dict[str, int] = {}

    for cargo in plan.cargo_positions:
        spec = plan.spec_for(cargo)
        if spec is not None:
            if spec.deck == Deck.MAIN:
                main_deck_weight += cargo.weight
            elif spec.deck == Deck.LOWER:
                lower_deck_weight += cargo.weight

        status = plan.status_for(cargo.position)
        if status is not None and status.status == PositionStatusLevel.OVERLOAD:
            overload_count += 1

        uld_type_counts[cargo.uld_type] = uld_type_counts.get(cargo.uld_type, 0) + 1

    max_payload = plan.aircraft.max_payload
    utilization = (main_deck_weight + lower_deck_weight) / max_payload * 100 if max_payload > 0 else 0.0
    total_ulds = len(plan.cargo_positions)

    return SummaryStats(
        total_ulds=total_ulds,
        main_deck_weight=main_deck_weight,
        lower_deck_weight=lower_deck_weight,
        overload_count=overload_count,
        utilization_percent=utilization,
        uld_type_counts=uld_type_counts,
        cg_within_limits=cg_status_within_limits(plan.cg_analysis.cg_status),
        all_positions_loaded=total_ulds == plan.aircraft.max_positions,
    )


def is_cleared_for_departure(plan: LoadPlan, stats: SummaryStats | None = None) -> bool:
    """Aircraft is cleared only with a safe CG verdict and no overloaded position."""
    stats = stats or calculate_summary_stats(plan)
    return plan.cg_analysis.is_safe and stats.overload_count == 0
