"""SQLAlchemy implementation of the script section repository."""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import delete, select, update

from meditation_server.db.models import MeditationScriptSection as SectionModel
from meditation_server.modules.scripts.models import ScriptSection
from meditation_server.modules.scripts.repository import SectionRepository

from .base import AsyncRepository, ensure_utc


class SqlSectionRepository(AsyncRepository[SectionModel], SectionRepository):
    async def find_by_id(self, section_id: str) -> ScriptSection | None:
        stmt = select(SectionModel).where(SectionModel.id == section_id)
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    async def find_by_script(self, script_id: str) -> Sequence[ScriptSection]:
        stmt = (
            select(SectionModel)
            .where(SectionModel.script_id == script_id)
            .order_by(SectionModel.created_at.asc(), self.insertion_order(SectionModel))
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def upsert(self, section: ScriptSection) -> ScriptSection:
        model = await self.session.merge(
            SectionModel(
                id=section.id,
                script_id=section.script_id,
                order_index=section.order_index,
                section_type=section.section_type,
                title=section.title,
                body=section.body,
                suggested_duration_minutes=section.suggested_duration_minutes,
                created_at=section.created_at,
            )
        )
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    async def update_existing(self, section_id: str, values: dict[str, Any]) -> ScriptSection | None:
        if values:
            stmt = (
                update(SectionModel)
                .where(SectionModel.id == section_id)
                .values(**values)
                .execution_options(synchronize_session="fetch")
            )
            await self.session.execute(stmt)
        stmt = (
            select(SectionModel)
            .where(SectionModel.id == section_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    async def delete_by_id(self, section_id: str) -> None:
        stmt = (
            delete(SectionModel)
            .where(SectionModel.id == section_id)
            .execution_options(synchronize_session="fetch")
        )
        await self.session.execute(stmt)

    @staticmethod
    def _to_domain(model: SectionModel) -> ScriptSection:
        return ScriptSection(
            id=model.id,
            script_id=model.script_id,
            order_index=model.order_index,
            section_type=model.section_type,
            title=model.title,
            body=model.body,
            suggested_duration_minutes=model.suggested_duration_minutes,
            created_at=ensure_utc(model.created_at),
        )
