"""SQLAlchemy-backed repository implementations."""

from .account_repository import SqlAccountRepository
from .script_repository import SqlScriptRepository
from .section_repository import SqlSectionRepository

__all__ = [
    "SqlAccountRepository",
    "SqlScriptRepository",
    "SqlSectionRepository",
]
