"""API routers."""

from . import aircraft, load_plans

__all__ = ["aircraft", "load_plans"]
