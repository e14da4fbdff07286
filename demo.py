#!/usr/bin/env python3
"""
Load & Trim Sheet Demo.

Demonstrates the core pipeline:
1. Workbook ingestion (a real export, or a generated one)
2. Aircraft configuration
3. Cargo manifest and summary statistics
4. Cargo grid layout
5. Safety status
"""

import argparse
import logging
import sys

from trimsheet.config import configure_logging, get_settings
from trimsheet.data.synthetic import TrimSheetWorkbookGenerator
from trimsheet.domain import AircraftType
from trimsheet.errors import WorkbookError
from trimsheet.services import DECK_SEPARATOR, LoadPlanService, build_manifest_frame

logger = logging.getLogger("trimsheet.demo")


def print_section(title: str):
    """Print a section header."""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print a load & trim sheet from a workbook")
    parser.add_argument("workbook", nargs="?", help="Path to an .xlsx export (default: generate one)")
    parser.add_argument(
        "--aircraft",
        choices=[t.value for t in AircraftType],
        default=AircraftType.A320.value,
        help="Aircraft for the generated workbook",
    )
    parser.add_argument("--overload", action="append", default=[], help="Position to overload (generated workbook)")
    parser.add_argument("--seed", type=int, default=42)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings)
    service = LoadPlanService(settings)

    # 1. Ingestion
    print_section("1. Workbook Ingestion")
    try:
        if args.workbook:
            print(f"Reading {args.workbook}")
            plan = service.load_path(args.workbook)
        else:
            generator = TrimSheetWorkbookGenerator(seed=args.seed)
            workbook = generator.generate(AircraftType(args.aircraft), overloaded=args.overload)
            print(f"Generated {args.aircraft} workbook (seed {args.seed})")
            plan = service.load_bytes(TrimSheetWorkbookGenerator.to_bytes(workbook))
    except WorkbookError as e:
        logger.error(f"Workbook rejected: {e}")
        print(f"ERROR: {e}")
        return 1

    info = plan.flight_info
    print(f"Flight {info.flight_number}  {info.route}  {plan.flight_date} {plan.flight_time}")
    print(f"Controller: {info.load_controller}  Status: {info.status}")

    # 2. Aircraft
    print_section("2. Aircraft Configuration")
    aircraft = plan.aircraft
    print(f"Type: {aircraft.type_code} (source: {aircraft.source.value})")
    print(f"Positions: {aircraft.max_positions} ({aircraft.main_deck_positions} main, {aircraft.lower_deck_positions} lower)")
    print(f"CG limits: {aircraft.cg_forward:.2f} m - {aircraft.cg_aft:.2f} m")
    print(f"Max payload: {aircraft.max_payload:,.0f} kg")

    # 3. Manifest & summary
    print_section("3. Cargo Manifest")
    print(build_manifest_frame(plan).to_string(index=False))

    stats = service.summarize(plan)
    print()
    print(f"Total ULDs:   {stats.total_ulds}")
    print(f"Main deck:    {stats.main_deck_weight:,.0f} kg")
    print(f"Lower deck:   {stats.lower_deck_weight:,.0f} kg")
    print(f"Overloads:    {stats.overload_count}")
    print(f"Utilization:  {stats.utilization_percent:.1f}% of max payload")
    types = ", ".join(f"{t or '(blank)'} x{n}" for t, n in stats.uld_type_counts.items())
    print(f"ULD types:    {types or 'none'}")
    if stats.all_positions_loaded:
        print("ALL POSITIONS LOADED")
    else:
        print(f"{stats.total_ulds} OF {aircraft.max_positions} POSITIONS LOADED")

    # 4. Grid
    print_section("4. Cargo Hold Layout")
    print("  ▲ NOSE")
    for row in service.grid(plan):
        if row == DECK_SEPARATOR:
            print("  " + "-" * 20)
        else:
            print("  " + "  ".join(f"[{pid:^6}]" for pid in row))
    print("  ▼ TAIL")
    unexpected = service.unexpected_positions(plan)
    if unexpected:
        print(f"Positions not matching {aircraft.type_code} naming: {', '.join(unexpected)}")

    # 5. Safety
    print_section("5. Safety Status")
    cg = plan.cg_analysis
    print(f"Computed CG: {cg.computed_cg:.2f} m ({cg.cg_status})")
    print(f"CG within limits: {'yes' if stats.cg_within_limits else 'no'}")
    if cg.envelope_position is not None:
        print(f"Envelope position: {cg.envelope_position:.1f}% (forward 0% - aft 100%)")
    print(f"Verdict: {cg.overall_status}")
    if service.is_cleared(plan):
        print("Aircraft cleared for departure")
    else:
        print("Aircraft not cleared for departure - load adjustment required")

    print()
    print("=" * 60)
    print("  Demo Complete!")
    print("=" * 60)
    print()
    print("To run the API server:")
    print("  uvicorn trimsheet.api:app --reload")
    print()
    print("API Documentation at: http://localhost:8000/docs")
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
