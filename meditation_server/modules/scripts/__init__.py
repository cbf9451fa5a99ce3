"""Meditation script domain: models and errors."""

from .exceptions import (
    InvalidScriptInputError,
    ScriptError,
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

__all__ = [
    "UNSET",
    "MeditationScript",
    "ScriptCreateInput",
    "ScriptPage",
    "ScriptSection",
    "ScriptUpdateInput",
    "ScriptWithSections",
    "SectionUpsertInput",
    "ScriptError",
    "UnauthenticatedError",
    "InvalidScriptInputError",
    "ScriptNotFoundError",
    "SectionNotFoundError",
    "SectionForbiddenError",
]
