"""Domain models for meditation scripts and their sections."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Optional


@dataclass(slots=True)
class MeditationScript:
    id: str
    owner_id: str
    title: str
    description: Optional[str]
    meditation_type: Optional[str]
    focus_area: Optional[str]
    difficulty: Optional[str]
    language: Optional[str]
    target_duration_minutes: Optional[int]
    full_script: Optional[str]
    notes: Optional[str]
    is_favorite: bool
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True)
class ScriptSection:
    id: str
    script_id: str
    order_index: int
    section_type: Optional[str]
    title: Optional[str]
    body: str
    suggested_duration_minutes: Optional[int]
    created_at: datetime


@dataclass(slots=True)
class ScriptPage:
    items: list[MeditationScript]
    total: int


@dataclass(slots=True)
class ScriptWithSections:
    script: MeditationScript
    sections: list[ScriptSection] = field(default_factory=list)


@dataclass(slots=True)
class ScriptCreateInput:
    title: str
    description: Optional[str] = None
    meditation_type: Optional[str] = None
    focus_area: Optional[str] = None
    difficulty: Optional[str] = None
    language: Optional[str] = None
    target_duration_minutes: Optional[int] = None
    full_script: Optional[str] = None
    notes: Optional[str] = None
    is_favorite: bool = False


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class ScriptUpdateInput:
    title: Optional[str] | object = UNSET
    description: Optional[str] | object = UNSET
    meditation_type: Optional[str] | object = UNSET
    focus_area: Optional[str] | object = UNSET
    difficulty: Optional[str] | object = UNSET
    language: Optional[str] | object = UNSET
    target_duration_minutes: Optional[int] | object = UNSET
    full_script: Optional[str] | object = UNSET
    notes: Optional[str] | object = UNSET
    is_favorite: Optional[bool] | object = UNSET

    def provided(self) -> dict[str, Any]:
        """Return only the fields the caller explicitly supplied."""
        values: dict[str, Any] = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if value is not UNSET:
                values[item.name] = value
        return values


@dataclass(slots=True)
class SectionUpsertInput:
    script_id: str
    order_index: int
    body: str
    id: Optional[str] = None
    section_type: Optional[str] | object = UNSET
    title: Optional[str] | object = UNSET
    suggested_duration_minutes: Optional[int] | object = UNSET
