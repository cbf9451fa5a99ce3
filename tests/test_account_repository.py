"""Tests for SqlAccountRepository uniqueness handling."""
from __future__ import annotations

import pytest

from meditation_server.infrastructure.database.repositories.account_repository import SqlAccountRepository
from meditation_server.modules.accounts import AccountAlreadyExistsError


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "second",
    [
        {"username": "calm_user", "email": None},
        {"username": "other_user", "email": "calm@example.com"},
    ],
)
async def test_unique_violation_becomes_already_exists(session, second):
    # Simulates two registrations that both passed the service's lookups
    repository = SqlAccountRepository(session)
    await repository.create_account(
        username="calm_user", password_hash="x", email="calm@example.com", is_active=True
    )

    with pytest.raises(AccountAlreadyExistsError):
        await repository.create_account(password_hash="y", is_active=True, **second)
