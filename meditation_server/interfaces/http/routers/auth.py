"""Account registration and login endpoints."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from meditation_server.core.security import create_access_token, get_current_account
from meditation_server.interfaces.http.deps import get_account_service, get_db_session
from meditation_server.modules.accounts import (
    Account,
    AccountAlreadyExistsError,
    AccountCreateInput,
)
from meditation_server.modules.accounts.service import AccountService
from meditation_server.schemas import AccountCreate, AccountLoginResponse, AccountResponse, LoginRequest

router = APIRouter()


@router.post(
    "/register",
    response_model=AccountLoginResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register an account",
)
async def register(
    payload: AccountCreate,
    account_service: AccountService = Depends(get_account_service),
    db: AsyncSession = Depends(get_db_session),
) -> AccountLoginResponse:
    try:
        account = await account_service.create_account(
            AccountCreateInput(
                username=payload.username,
                password=payload.password,
                email=payload.email,
            )
        )
    except AccountAlreadyExistsError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username or email already registered") from exc
    await db.commit()

    return AccountLoginResponse(
        access_token=create_access_token(account.id, account.username),
        account_id=account.id,
        username=account.username,
    )


@router.post("/login", response_model=AccountLoginResponse, summary="Log in with username and password")
async def login(
    payload: LoginRequest,
    account_service: AccountService = Depends(get_account_service),
    db: AsyncSession = Depends(get_db_session),
) -> AccountLoginResponse:
    account = await account_service.authenticate(payload.username, payload.password)
    if not account:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    await account_service.set_last_login(account.id)
    await db.commit()

    return AccountLoginResponse(
        access_token=create_access_token(account.id, account.username),
        account_id=account.id,
        username=account.username,
    )


@router.get("/me", response_model=AccountResponse, summary="Current account")
async def me(account: Account = Depends(get_current_account)) -> AccountResponse:
    return AccountResponse.model_validate(account)
