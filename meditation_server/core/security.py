"""JWT helpers and the authenticated-account dependency."""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from meditation_server.core.config import get_settings
from meditation_server.interfaces.http.deps.database import get_db_session
from meditation_server.modules.accounts.models import Account
from meditation_server.modules.accounts.service import AccountService
from meditation_server.schemas import TokenData

logger = logging.getLogger(__name__)

settings = get_settings()
security = HTTPBearer(auto_error=False)

_UNAUTHENTICATED_DETAIL = "You must be signed in to perform this action."


def _unauthenticated(detail: str = _UNAUTHENTICATED_DETAIL) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(account_id: str, username: str, expires_delta: Optional[timedelta] = None) -> str:
    expire_delta = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": account_id,
        "username": username,
        "exp": datetime.now(timezone.utc) + expire_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        logger.warning("Rejected access token: %s", exc)
        raise _unauthenticated("Could not validate credentials") from exc

    account_id = payload.get("sub")
    username = payload.get("username")
    if not all([account_id, username]):
        raise _unauthenticated("Could not validate credentials")
    return TokenData(account_id=account_id, username=username)


async def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db_session),
) -> Account:
    if credentials is None:
        raise _unauthenticated()
    token_data = decode_access_token(credentials.credentials)
    service = AccountService.with_session(db)
    account = await service.get_by_id(token_data.account_id)
    if account is None or not account.is_active:
        logger.warning("Token for missing or disabled account %s", token_data.account_id)
        raise _unauthenticated("Account does not exist or is disabled")
    return account
