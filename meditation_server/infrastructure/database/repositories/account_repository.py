"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from meditation_server.db.models import Account as AccountModel
from meditation_server.modules.accounts.exceptions import AccountAlreadyExistsError
from meditation_server.modules.accounts.models import Account
from meditation_server.modules.accounts.repository import AccountRepository

from .base import AsyncRepository, ensure_utc


class SqlAccountRepository(AsyncRepository[AccountModel], AccountRepository):
    """Account repository backed by SQLAlchemy models."""

    async def get_by_id(self, account_id: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self.session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_username(self, username: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.username == username)
        result = await self.session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def get_by_email(self, email: str) -> Account | None:
        stmt = select(AccountModel).where(AccountModel.email == email)
        result = await self.session.execute(stmt)
        return self._to_domain(result.scalar_one_or_none())

    async def create_account(
        self,
        *,
        username: str,
        password_hash: str,
        email: str | None,
        is_active: bool,
    ) -> Account:
        model = AccountModel(
            username=username,
            password_hash=password_hash,
            email=email,
            is_active=is_active,
        )
        try:
            await self.add(model)
        except IntegrityError as exc:
            # a concurrent registration won the unique username or email
            raise AccountAlreadyExistsError(f"Account already exists: {username}") from exc
        return self._to_domain(model)

    async def set_last_login(self, account_id: str, timestamp: datetime) -> None:
        stmt = (
            update(AccountModel)
            .where(AccountModel.id == account_id)
            .values(last_login_at=timestamp)
        )
        await self.session.execute(stmt)

    @staticmethod
    def _to_domain(model: AccountModel | None) -> Account | None:
        if model is None:
            return None
        return Account(
            id=str(model.id),
            username=model.username,
            is_active=bool(model.is_active),
            password_hash=model.password_hash,
            email=model.email,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
            last_login_at=ensure_utc(model.last_login_at),
        )
