"""Endpoints for adding, editing and removing script sections."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from meditation_server.core.security import get_current_account
from meditation_server.interfaces.http.deps import get_db_session, get_script_service
from meditation_server.interfaces.http.errors import script_http_error
from meditation_server.modules.accounts import Account
from meditation_server.modules.scripts import UNSET, ScriptError, SectionUpsertInput
from meditation_server.modules.scripts.service import ScriptService
from meditation_server.schemas import IdPayload, ScriptSectionUpsert, SectionIdPayload, SuccessResponse

router = APIRouter()

_PARTIAL_SECTION_FIELDS = ("section_type", "title", "suggested_duration_minutes")


@router.post(
    "",
    response_model=SuccessResponse[SectionIdPayload],
    summary="Create a section, or update it when an id is given",
)
async def upsert_section(
    payload: ScriptSectionUpsert,
    account: Account = Depends(get_current_account),
    service: ScriptService = Depends(get_script_service),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse[SectionIdPayload]:
    optional = {
        name: getattr(payload, name) if name in payload.model_fields_set else UNSET
        for name in _PARTIAL_SECTION_FIELDS
    }
    try:
        section = await service.upsert_section(
            account.id,
            SectionUpsertInput(
                id=payload.id,
                script_id=payload.script_id,
                order_index=payload.order_index,
                body=payload.body,
                **optional,
            ),
        )
    except ScriptError as exc:
        raise script_http_error(exc) from exc
    await db.commit()
    return SuccessResponse[SectionIdPayload](data=SectionIdPayload(section_id=section.id))


@router.delete(
    "/{section_id}",
    response_model=SuccessResponse[IdPayload],
    summary="Delete a section",
)
async def delete_section(
    section_id: str = Path(..., description="Section id"),
    account: Account = Depends(get_current_account),
    service: ScriptService = Depends(get_script_service),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse[IdPayload]:
    try:
        deleted_id = await service.delete_section(account.id, section_id)
    except ScriptError as exc:
        raise script_http_error(exc) from exc
    await db.commit()
    return SuccessResponse[IdPayload](data=IdPayload(id=deleted_id))
