"""
Cargo grid layout builder.

Maps the flat list of position labels onto rows of a presentation grid.
The grid shape depends on the aircraft type, so the presentation layer can
render any aircraft without branching on the type itself.
"""

from typing import Callable, Sequence

from trimsheet.domain import AircraftConfiguration, AircraftType, LoadPlan

DECK_SEPARATOR = "DECK_SEPARATOR"
ROW_WIDTH = 2

GridRow = list[str] | str
GridLayout = list[GridRow]


def chunk(position_ids: Sequence[str], size: int = ROW_WIDTH) -> list[list[str]]:
    """Split ids into consecutive rows of `size`."""
    return [list(position_ids[i : i + size]) for i in range(0, len(position_ids), size)]


def _b737_layout(position_ids: Sequence[str], aircraft: AircraftConfiguration) -> GridLayout:
    # Fixed 2x2: forward pair, aft pair
    return [list(position_ids[0:2]), list(position_ids[2:4])]


def _b777_layout(position_ids: Sequence[str], aircraft: AircraftConfiguration) -> GridLayout:
    main_count = aircraft.main_deck_positions
    lower_count = aircraft.lower_deck_positions

    # Main-deck rows are fixed slots; a partial load leaves short or empty rows
    layout: GridLayout = [
        list(position_ids[i : min(i + ROW_WIDTH, main_count)]) for i in range(0, main_count, ROW_WIDTH)
    ]
    if aircraft.has_both_decks:
        layout.append(DECK_SEPARATOR)
    layout.extend(chunk(position_ids[main_count : main_count + lower_count]))
    return layout


def _default_layout(position_ids: Sequence[str], aircraft: AircraftConfiguration) -> GridLayout:
    return list(chunk(position_ids))


LAYOUT_BUILDERS: dict[AircraftType, Callable[[Sequence[str], AircraftConfiguration], GridLayout]] = {
    AircraftType.B737: _b737_layout,
    AircraftType.B777: _b777_layout,
}


def build_cargo_grid_layout(
    position_ids: Sequence[str],
    aircraft: AircraftConfiguration,
) -> GridLayout:
    """
    Build grid rows for an aircraft.

    - B737: fixed 2x2 grid (ids past the fourth are not placed)
    - B777: ceil(main/2) main-deck rows (short or empty when partly
      loaded), a DECK_SEPARATOR marker when both decks are configured, then
      lower-deck rows until the ids run out (ids past main+lower are not placed)
    - A320 and unknown types: rows of two

    Args:
        position_ids: Position labels in load order
        aircraft: Resolved aircraft configuration

    Returns:
        Rows of position ids, with DECK_SEPARATOR marker entries
    """
    builder = LAYOUT_BUILDERS.get(aircraft.aircraft_type, _default_layout)
    return builder(position_ids, aircraft)


def find_unexpected_positions(plan: LoadPlan) -> list[str]:
    """
    List positions whose labels do not follow the aircraft's naming.

    Unknown aircraft types have no naming rule, so nothing is reported.
    """
    profile = plan.aircraft.profile
    if profile is None:
        return []
    return [pid for pid in plan.position_ids if not profile.accepts_position(pid)]
