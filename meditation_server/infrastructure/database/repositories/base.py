"""Shared helpers for SQLAlchemy-backed repositories."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Generic, TypeVar

from sqlalchemy import literal_column
from sqlalchemy.ext.asyncio import AsyncSession

ModelT = TypeVar("ModelT")


def ensure_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps read back from stores that drop the zone."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class AsyncRepository(Generic[ModelT]):
    """Base repository exposing the SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    def insertion_order(self, model):
        """Secondary sort key that keeps rows with equal timestamps in insert order."""
        if self.session.get_bind().dialect.name == "sqlite":
            return literal_column(f"{model.__tablename__}.rowid").asc()
        return model.id.asc()

    async def add(self, instance: ModelT) -> ModelT:
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance
