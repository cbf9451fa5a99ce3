"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .services import get_account_service, get_script_service

__all__ = [
    "get_db_session",
    "get_account_service",
    "get_script_service",
]
