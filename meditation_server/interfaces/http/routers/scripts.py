"""Owner-scoped endpoints for authoring meditation scripts."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from meditation_server.core.security import get_current_account
from meditation_server.interfaces.http.deps import get_db_session, get_script_service
from meditation_server.interfaces.http.errors import script_http_error
from meditation_server.modules.accounts import Account
from meditation_server.modules.scripts import ScriptCreateInput, ScriptError, ScriptUpdateInput
from meditation_server.modules.scripts.service import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, ScriptService
from meditation_server.schemas import (
    IdPayload,
    MeditationScriptCreate,
    MeditationScriptResponse,
    MeditationScriptUpdate,
    ScriptDetailPayload,
    ScriptListPayload,
    ScriptSectionResponse,
    SuccessResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=SuccessResponse[IdPayload],
    status_code=status.HTTP_201_CREATED,
    summary="Create a meditation script",
)
async def create_script(
    payload: MeditationScriptCreate,
    account: Account = Depends(get_current_account),
    service: ScriptService = Depends(get_script_service),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse[IdPayload]:
    try:
        script = await service.create_script(account.id, ScriptCreateInput(**payload.model_dump()))
    except ScriptError as exc:
        raise script_http_error(exc) from exc
    await db.commit()
    return SuccessResponse[IdPayload](data=IdPayload(id=script.id))


@router.patch(
    "/{script_id}",
    response_model=SuccessResponse[IdPayload],
    summary="Update selected fields of a meditation script",
)
async def update_script(
    payload: MeditationScriptUpdate,
    script_id: str = Path(..., description="Script id"),
    account: Account = Depends(get_current_account),
    service: ScriptService = Depends(get_script_service),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse[IdPayload]:
    changes = ScriptUpdateInput(**payload.model_dump(exclude_unset=True))
    try:
        script = await service.update_script(account.id, script_id, changes)
    except ScriptError as exc:
        raise script_http_error(exc) from exc
    await db.commit()
    return SuccessResponse[IdPayload](data=IdPayload(id=script.id))


@router.get(
    "",
    response_model=SuccessResponse[ScriptListPayload],
    summary="List the current account's meditation scripts",
)
async def list_scripts(
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    focus_area: Optional[str] = Query(None),
    is_favorite: Optional[bool] = Query(None),
    account: Account = Depends(get_current_account),
    service: ScriptService = Depends(get_script_service),
) -> SuccessResponse[ScriptListPayload]:
    try:
        result = await service.list_scripts(
            account.id,
            page=page,
            page_size=page_size,
            focus_area=focus_area,
            is_favorite=is_favorite,
        )
    except ScriptError as exc:
        raise script_http_error(exc) from exc
    return SuccessResponse[ScriptListPayload](
        data=ScriptListPayload(
            items=[MeditationScriptResponse.model_validate(item) for item in result.items],
            total=result.total,
        )
    )


@router.get(
    "/{script_id}",
    response_model=SuccessResponse[ScriptDetailPayload],
    summary="Get a meditation script with its ordered sections",
)
async def get_script(
    script_id: str = Path(..., description="Script id"),
    account: Account = Depends(get_current_account),
    service: ScriptService = Depends(get_script_service),
) -> SuccessResponse[ScriptDetailPayload]:
    try:
        result = await service.get_script_with_sections(account.id, script_id)
    except ScriptError as exc:
        raise script_http_error(exc) from exc
    return SuccessResponse[ScriptDetailPayload](
        data=ScriptDetailPayload(
            script=MeditationScriptResponse.model_validate(result.script),
            sections=[ScriptSectionResponse.model_validate(section) for section in result.sections],
        )
    )
