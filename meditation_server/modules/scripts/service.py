"""Application service for owner-scoped meditation script workflows.

Every operation takes the caller's account id first. Scripts are only ever
resolved through ``(id, owner_id)``, so a script that belongs to someone else
is reported exactly like one that does not exist. Sections carry no owner of
their own and are always checked through their parent script.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from meditation_server.db.models import generate_uuid
from meditation_server.infrastructure.database.repositories.script_repository import SqlScriptRepository
from meditation_server.infrastructure.database.repositories.section_repository import SqlSectionRepository

from .exceptions import (
    InvalidScriptInputError,
    ScriptNotFoundError,
    SectionForbiddenError,
    SectionNotFoundError,
    UnauthenticatedError,
)
from .models import (
    UNSET,
    MeditationScript,
    ScriptCreateInput,
    ScriptPage,
    ScriptSection,
    ScriptUpdateInput,
    ScriptWithSections,
    SectionUpsertInput,
)
from .repository import ScriptRepository, SectionRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

_NON_NULLABLE_SCRIPT_FIELDS = ("title", "is_favorite")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_positive(name: str, value: Optional[int]) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidScriptInputError(f"{name} must be a positive integer")


def _require_text(name: str, value: Optional[str]) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidScriptInputError(f"{name} is required")


@dataclass(slots=True)
class ScriptService:
    scripts: ScriptRepository
    sections: SectionRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "ScriptService":
        return cls(SqlScriptRepository(session), SqlSectionRepository(session))

    async def create_script(self, owner_id: Optional[str], payload: ScriptCreateInput) -> MeditationScript:
        owner_id = self._require_owner(owner_id)
        _require_text("title", payload.title)
        _require_positive("target_duration_minutes", payload.target_duration_minutes)

        now = _utcnow()
        script = await self.scripts.insert(
            MeditationScript(
                id=generate_uuid(),
                owner_id=owner_id,
                title=payload.title,
                description=payload.description,
                meditation_type=payload.meditation_type,
                focus_area=payload.focus_area,
                difficulty=payload.difficulty,
                language=payload.language,
                target_duration_minutes=payload.target_duration_minutes,
                full_script=payload.full_script,
                notes=payload.notes,
                is_favorite=bool(payload.is_favorite),
                created_at=now,
                updated_at=now,
            )
        )
        logger.info("Created meditation script %s", script.id)
        return script

    async def update_script(
        self,
        owner_id: Optional[str],
        script_id: str,
        payload: ScriptUpdateInput,
    ) -> MeditationScript:
        owner_id = self._require_owner(owner_id)
        values = payload.provided()
        if not values:
            raise InvalidScriptInputError("No fields to update")
        for name in _NON_NULLABLE_SCRIPT_FIELDS:
            if name in values and values[name] is None:
                raise InvalidScriptInputError(f"{name} cannot be cleared")
        if "title" in values:
            _require_text("title", values["title"])
        if "target_duration_minutes" in values:
            _require_positive("target_duration_minutes", values["target_duration_minutes"])

        current = await self._get_owned_script(script_id, owner_id)
        values["updated_at"] = max(_utcnow(), current.updated_at)

        updated = await self.scripts.update_fields(script_id, owner_id, values)
        if updated is None:
            raise ScriptNotFoundError("Meditation script not found")
        logger.info("Updated meditation script %s (%s)", script_id, ", ".join(sorted(values)))
        return updated

    async def list_scripts(
        self,
        owner_id: Optional[str],
        *,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
        focus_area: Optional[str] = None,
        is_favorite: Optional[bool] = None,
    ) -> ScriptPage:
        owner_id = self._require_owner(owner_id)
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise InvalidScriptInputError("page must be >= 1")
        if isinstance(page_size, bool) or not isinstance(page_size, int) or not 1 <= page_size <= MAX_PAGE_SIZE:
            raise InvalidScriptInputError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")

        scripts = await self.scripts.list_owned(
            owner_id,
            focus_area=focus_area or None,
            is_favorite=is_favorite,
        )
        start = (page - 1) * page_size
        return ScriptPage(items=list(scripts[start : start + page_size]), total=len(scripts))

    async def get_script_with_sections(self, owner_id: Optional[str], script_id: str) -> ScriptWithSections:
        owner_id = self._require_owner(owner_id)
        script = await self._get_owned_script(script_id, owner_id)
        sections = await self.sections.find_by_script(script.id)
        # sorted() is stable, equal order_index values keep their fetch order
        return ScriptWithSections(
            script=script,
            sections=sorted(sections, key=lambda section: section.order_index),
        )

    async def upsert_section(self, owner_id: Optional[str], payload: SectionUpsertInput) -> ScriptSection:
        owner_id = self._require_owner(owner_id)
        _require_text("body", payload.body)
        if payload.order_index is None:
            raise InvalidScriptInputError("order_index is required")
        _require_positive("order_index", payload.order_index)
        if payload.suggested_duration_minutes is not UNSET:
            _require_positive("suggested_duration_minutes", payload.suggested_duration_minutes)

        script = await self._get_owned_script(payload.script_id, owner_id)

        if payload.id:
            existing = await self.sections.find_by_id(payload.id)
            if existing is None:
                raise SectionNotFoundError("Section not found")
            if existing.script_id != script.id:
                raise SectionForbiddenError("Section does not belong to this script")

            values: dict[str, Any] = {
                "order_index": payload.order_index,
                "body": payload.body,
            }
            if payload.section_type is not UNSET:
                values["section_type"] = payload.section_type
            if payload.title is not UNSET:
                values["title"] = payload.title
            if payload.suggested_duration_minutes is not UNSET:
                values["suggested_duration_minutes"] = payload.suggested_duration_minutes

            section = await self.sections.update_existing(existing.id, values)
            if section is None:
                raise SectionNotFoundError("Section not found")
            logger.info("Updated section %s of script %s", section.id, script.id)
            return section

        section = await self.sections.upsert(
            ScriptSection(
                id=generate_uuid(),
                script_id=script.id,
                order_index=payload.order_index,
                section_type=_or_none(payload.section_type),
                title=_or_none(payload.title),
                body=payload.body,
                suggested_duration_minutes=_or_none(payload.suggested_duration_minutes),
                created_at=_utcnow(),
            )
        )
        logger.info("Created section %s for script %s", section.id, script.id)
        return section

    async def delete_section(self, owner_id: Optional[str], section_id: str) -> str:
        owner_id = self._require_owner(owner_id)
        section = await self.sections.find_by_id(section_id)
        if section is None:
            raise SectionNotFoundError("Section not found")

        await self._get_owned_script(section.script_id, owner_id)
        await self.sections.delete_by_id(section_id)
        logger.info("Deleted section %s from script %s", section_id, section.script_id)
        return section_id

    async def _get_owned_script(self, script_id: str, owner_id: str) -> MeditationScript:
        script = await self.scripts.find_owned(script_id, owner_id)
        if script is None:
            logger.debug("Script %s not visible to account %s", script_id, owner_id)
            raise ScriptNotFoundError("Meditation script not found")
        return script

    @staticmethod
    def _require_owner(owner_id: Optional[str]) -> str:
        if not owner_id:
            raise UnauthenticatedError("You must be signed in to perform this action")
        return owner_id


def _or_none(value: Any) -> Any:
    return None if value is UNSET else value
