"""
Load plan API endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from trimsheet.api.dependencies import get_load_plan_service
from trimsheet.domain import LoadPlan, SummaryStats
from trimsheet.errors import WorkbookError
from trimsheet.services import LoadPlanService, manifest_to_csv

logger = logging.getLogger(__name__)

router = APIRouter()


class TrimSheetResponse(BaseModel):
    """Parsed load plan with its derived views."""

    load_plan: LoadPlan
    summary: SummaryStats
    grid: list[list[str] | str]
    cleared_for_departure: bool
    unexpected_positions: list[str]


async def _parse_upload(file: UploadFile, service: LoadPlanService) -> LoadPlan:
    """Read an uploaded workbook, mapping ingestion failures to HTTP errors."""
    if not (file.filename or "").lower().endswith(".xlsx"):
        raise HTTPException(status_code=400, detail="Please upload a valid .xlsx file")

    limit = service.settings.max_upload_bytes
    data = await file.read(limit + 1)
    if len(data) > limit:
        raise HTTPException(status_code=413, detail=f"Workbook exceeds the maximum upload size of {limit} bytes")

    # Decoding is blocking work; keep it off the event loop
    try:
        return await run_in_threadpool(service.load_bytes, data)
    except WorkbookError as e:
        logger.warning(f"Upload {file.filename} rejected: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/", response_model=TrimSheetResponse)
async def upload_load_plan(
    file: Annotated[UploadFile, File(description="Load-planning workbook (.xlsx)")],
    service: Annotated[LoadPlanService, Depends(get_load_plan_service)],
):
    """
    Parse a load-planning workbook.

    Returns the normalized load plan, summary statistics, cargo grid layout
    and the departure clearance flag.
    """
    plan = await _parse_upload(file, service)

    return TrimSheetResponse(
        load_plan=plan,
        summary=service.summarize(plan),
        grid=service.grid(plan),
        cleared_for_departure=service.is_cleared(plan),
        unexpected_positions=service.unexpected_positions(plan),
    )


@router.post("/manifest", response_class=PlainTextResponse)
async def upload_manifest(
    file: Annotated[UploadFile, File(description="Load-planning workbook (.xlsx)")],
    service: Annotated[LoadPlanService, Depends(get_load_plan_service)],
):
    """
    Parse a workbook and return its cargo manifest as CSV.
    """
    plan = await _parse_upload(file, service)
    return PlainTextResponse(manifest_to_csv(plan), media_type="text/csv")
