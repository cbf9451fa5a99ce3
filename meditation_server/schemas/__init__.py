"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from meditation_server.core.crypto import MAX_PASSWORD_BYTES, password_fits

DataT = TypeVar("DataT")


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=72)


class AccountCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=72)
    email: Optional[str] = Field(default=None, max_length=100)

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        if not password_fits(value):
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class TokenData(BaseModel):
    account_id: str
    username: str


class AccountLoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    account_id: str
    username: str


class AccountResponse(BaseModel):
    id: str
    username: str
    email: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    last_login_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SuccessResponse(BaseModel, Generic[DataT]):
    """Envelope shared by every script endpoint."""

    success: bool = True
    data: DataT


class IdPayload(BaseModel):
    id: str


class SectionIdPayload(BaseModel):
    section_id: str


class MeditationScriptCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    meditation_type: Optional[str] = Field(default=None, max_length=100)
    focus_area: Optional[str] = Field(default=None, max_length=100)
    difficulty: Optional[str] = Field(default=None, max_length=50)
    language: Optional[str] = Field(default=None, max_length=35)
    target_duration_minutes: Optional[int] = Field(default=None, gt=0)
    full_script: Optional[str] = None
    notes: Optional[str] = None
    is_favorite: bool = False


class MeditationScriptUpdate(BaseModel):
    """Partial update; only keys present in the request body are written."""

    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    meditation_type: Optional[str] = Field(default=None, max_length=100)
    focus_area: Optional[str] = Field(default=None, max_length=100)
    difficulty: Optional[str] = Field(default=None, max_length=50)
    language: Optional[str] = Field(default=None, max_length=35)
    target_duration_minutes: Optional[int] = Field(default=None, gt=0)
    full_script: Optional[str] = None
    notes: Optional[str] = None
    is_favorite: Optional[bool] = None


class MeditationScriptResponse(BaseModel):
    id: str
    owner_id: str
    title: str
    description: Optional[str] = None
    meditation_type: Optional[str] = None
    focus_area: Optional[str] = None
    difficulty: Optional[str] = None
    language: Optional[str] = None
    target_duration_minutes: Optional[int] = None
    full_script: Optional[str] = None
    notes: Optional[str] = None
    is_favorite: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ScriptSectionUpsert(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: Optional[str] = None
    script_id: str
    order_index: int = Field(..., gt=0)
    section_type: Optional[str] = Field(default=None, max_length=100)
    title: Optional[str] = Field(default=None, max_length=255)
    body: str = Field(..., min_length=1)
    suggested_duration_minutes: Optional[int] = Field(default=None, gt=0)


class ScriptSectionResponse(BaseModel):
    id: str
    script_id: str
    order_index: int
    section_type: Optional[str] = None
    title: Optional[str] = None
    body: str
    suggested_duration_minutes: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ScriptListPayload(BaseModel):
    items: list[MeditationScriptResponse]
    total: int


class ScriptDetailPayload(BaseModel):
    script: MeditationScriptResponse
    sections: list[ScriptSectionResponse] = Field(default_factory=list)
