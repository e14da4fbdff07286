"""
Aircraft profile API endpoints.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from trimsheet.domain import AIRCRAFT_PROFILES, AircraftProfile, AircraftType

router = APIRouter()


class AircraftProfileList(BaseModel):
    """List of supported aircraft."""

    aircraft: list[AircraftProfile]
    total: int


@router.get("/", response_model=AircraftProfileList)
async def list_aircraft():
    """
    List supported aircraft types with their built-in defaults.
    """
    profiles = list(AIRCRAFT_PROFILES.values())
    return AircraftProfileList(aircraft=profiles, total=len(profiles))


@router.get("/{type_code}", response_model=AircraftProfile)
async def get_aircraft(type_code: str):
    """
    Get the built-in profile for one aircraft type.
    """
    aircraft_type = AircraftType.from_code(type_code)

    if aircraft_type is None:
        raise HTTPException(
            status_code=404,
            detail=f"Aircraft {type_code.upper()} not supported",
        )

    return AIRCRAFT_PROFILES[aircraft_type]
