"""
API dependencies.

Provides dependency injection for FastAPI routes.
"""

from trimsheet.config import Settings, get_settings
from trimsheet.services import LoadPlanService


class AppState:
    """Application state container (read-only after creation)."""

    _instance: "AppState | None" = None

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.load_plan_service = LoadPlanService(self.settings)

    @classmethod
    def get_instance(cls) -> "AppState":
        """Get or create singleton instance."""
        if cls._instance is None:
            cls._instance = AppState()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton (for testing)."""
        cls._instance = None


def get_load_plan_service() -> LoadPlanService:
    """Dependency for load plan service."""
    return AppState.get_instance().load_plan_service
