"""
Runtime settings.

Read from environment variables with defaults suitable for local use.
"""

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field

DEFAULT_MAX_UPLOAD_BYTES = 20 * 1024 * 1024


class Settings(BaseModel):
    """Application settings."""

    log_level: str = "INFO"

    # Trim sheet header placeholders (not derived from the workbook)
    flight_number: str = "CA-8042"
    route: str = "PVG → LAX"
    load_controller: str = "AI SYSTEM"
    plan_status: str = "AUTO-GENERATED"

    # Maximum load-input data rows scanned; None reads every row
    max_cargo_rows: int | None = Field(default=None, ge=1)

    # Largest accepted upload, in bytes
    max_upload_bytes: int = Field(default=DEFAULT_MAX_UPLOAD_BYTES, ge=1)

    model_config = {"frozen": True}


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings(
        log_level=os.getenv("TRIMSHEET_LOG_LEVEL", "INFO").upper(),
        flight_number=os.getenv("TRIMSHEET_FLIGHT_NUMBER", "CA-8042"),
        route=os.getenv("TRIMSHEET_ROUTE", "PVG → LAX"),
        load_controller=os.getenv("TRIMSHEET_LOAD_CONTROLLER", "AI SYSTEM"),
        plan_status=os.getenv("TRIMSHEET_PLAN_STATUS", "AUTO-GENERATED"),
        max_cargo_rows=_optional_int("TRIMSHEET_MAX_CARGO_ROWS"),
        max_upload_bytes=_optional_int("TRIMSHEET_MAX_UPLOAD_BYTES") or DEFAULT_MAX_UPLOAD_BYTES,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get process-wide settings (read once)."""
    return load_settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging at the configured level."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
