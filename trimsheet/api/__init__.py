"""
FastAPI application for the Load & Trim Sheet system.

Provides REST endpoints for:
- Workbook upload and load plan parsing
- Cargo manifest export
- Supported aircraft profiles
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
