"""Core services exports."""

from src.catalog.core.services.database.db_session import DbSessionService

__all__ = ["DbSessionService"]
