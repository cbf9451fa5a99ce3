"""Repository protocol for accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .models import Account


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence."""

    async def get_by_id(self, account_id: str) -> Account | None:
        ...

    async def get_by_username(self, username: str) -> Account | None:
        ...

    async def get_by_email(self, email: str) -> Account | None:
        ...

    async def create_account(
        self,
        *,
        username: str,
        password_hash: str,
        email: str | None,
        is_active: bool,
    ) -> Account:
        ...

    async def set_last_login(self, account_id: str, timestamp: datetime) -> None:
        ...
