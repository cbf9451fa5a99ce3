"""Repository protocols for script and section persistence."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from .models import MeditationScript, ScriptSection


class ScriptRepository(Protocol):
    """Script persistence; every read and write is scoped by owner."""

    async def insert(self, script: MeditationScript) -> MeditationScript:
        ...

    async def update_fields(
        self,
        script_id: str,
        owner_id: str,
        values: dict[str, Any],
    ) -> MeditationScript | None:
        ...

    async def find_owned(self, script_id: str, owner_id: str) -> MeditationScript | None:
        ...

    async def list_owned(
        self,
        owner_id: str,
        *,
        focus_area: str | None = None,
        is_favorite: bool | None = None,
    ) -> Sequence[MeditationScript]:
        ...


class SectionRepository(Protocol):
    """Section persistence. Ownership is resolved through the parent script by callers."""

    async def find_by_id(self, section_id: str) -> ScriptSection | None:
        ...

    async def find_by_script(self, script_id: str) -> Sequence[ScriptSection]:
        ...

    async def upsert(self, section: ScriptSection) -> ScriptSection:
        ...

    async def update_existing(self, section_id: str, values: dict[str, Any]) -> ScriptSection | None:
        ...

    async def delete_by_id(self, section_id: str) -> None:
        ...
