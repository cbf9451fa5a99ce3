"""Per-request service providers sharing the request's database session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from meditation_server.modules.accounts.service import AccountService
from meditation_server.modules.scripts.service import ScriptService

from .database import get_db_session


def get_account_service(db: AsyncSession = Depends(get_db_session)) -> AccountService:
    return AccountService.with_session(db)


def get_script_service(db: AsyncSession = Depends(get_db_session)) -> ScriptService:
    return ScriptService.with_session(db)


__all__ = ["get_account_service", "get_script_service"]
