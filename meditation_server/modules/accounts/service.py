"""Domain services for account management."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from meditation_server.core.crypto import hash_password, verify_password
from meditation_server.infrastructure.database.repositories.account_repository import SqlAccountRepository

from .exceptions import AccountAlreadyExistsError
from .models import Account, AccountCreateInput
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Encapsulates core account use cases."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AccountService":
        return cls(SqlAccountRepository(session))

    async def get_by_id(self, account_id: str) -> Account | None:
        return await self._repository.get_by_id(account_id)

    async def get_by_username(self, username: str) -> Account | None:
        return await self._repository.get_by_username(username)

    async def authenticate(self, username: str, password: str) -> Account | None:
        account = await self._repository.get_by_username(username)
        if account is None or not account.is_active:
            return None
        if not verify_password(password, account.password_hash):
            return None
        return account

    async def create_account(self, payload: AccountCreateInput) -> Account:
        existing = await self._repository.get_by_username(payload.username)
        if existing is not None:
            raise AccountAlreadyExistsError(f"Username already taken: {payload.username}")
        if payload.email and await self._repository.get_by_email(payload.email) is not None:
            raise AccountAlreadyExistsError(f"Email already registered: {payload.email}")

        account = await self._repository.create_account(
            username=payload.username,
            password_hash=hash_password(payload.password),
            email=payload.email,
            is_active=payload.is_active,
        )
        logger.info("Created account %s", account.id)
        return account

    async def set_last_login(self, account_id: str) -> None:
        await self._repository.set_last_login(account_id, datetime.now(timezone.utc))
