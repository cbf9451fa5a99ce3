"""SQLAlchemy implementation of the meditation script repository."""

from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import select, update

from meditation_server.db.models import MeditationScript as ScriptModel
from meditation_server.modules.scripts.models import MeditationScript
from meditation_server.modules.scripts.repository import ScriptRepository

from .base import AsyncRepository, ensure_utc


class SqlScriptRepository(AsyncRepository[ScriptModel], ScriptRepository):
    """Owner-scoped script persistence; id and owner always share one predicate."""

    async def insert(self, script: MeditationScript) -> MeditationScript:
        model = ScriptModel(
            id=script.id,
            owner_id=script.owner_id,
            title=script.title,
            description=script.description,
            meditation_type=script.meditation_type,
            focus_area=script.focus_area,
            difficulty=script.difficulty,
            language=script.language,
            target_duration_minutes=script.target_duration_minutes,
            full_script=script.full_script,
            notes=script.notes,
            is_favorite=script.is_favorite,
            created_at=script.created_at,
            updated_at=script.updated_at,
        )
        await self.add(model)
        return self._to_domain(model)

    async def update_fields(
        self,
        script_id: str,
        owner_id: str,
        values: dict[str, Any],
    ) -> MeditationScript | None:
        if not values:
            return await self.find_owned(script_id, owner_id)
        stmt = (
            update(ScriptModel)
            .where(ScriptModel.id == script_id, ScriptModel.owner_id == owner_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.find_owned(script_id, owner_id, refresh=True)

    async def find_owned(
        self,
        script_id: str,
        owner_id: str,
        *,
        refresh: bool = False,
    ) -> MeditationScript | None:
        stmt = select(ScriptModel).where(
            ScriptModel.id == script_id,
            ScriptModel.owner_id == owner_id,
        )
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    async def list_owned(
        self,
        owner_id: str,
        *,
        focus_area: str | None = None,
        is_favorite: bool | None = None,
    ) -> Sequence[MeditationScript]:
        stmt = select(ScriptModel).where(ScriptModel.owner_id == owner_id)
        if focus_area is not None:
            stmt = stmt.where(ScriptModel.focus_area == focus_area)
        if is_favorite is not None:
            stmt = stmt.where(ScriptModel.is_favorite == is_favorite)
        stmt = stmt.order_by(ScriptModel.created_at.asc(), self.insertion_order(ScriptModel))
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: ScriptModel) -> MeditationScript:
        return MeditationScript(
            id=model.id,
            owner_id=model.owner_id,
            title=model.title,
            description=model.description,
            meditation_type=model.meditation_type,
            focus_area=model.focus_area,
            difficulty=model.difficulty,
            language=model.language,
            target_duration_minutes=model.target_duration_minutes,
            full_script=model.full_script,
            notes=model.notes,
            is_favorite=bool(model.is_favorite),
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at),
        )
