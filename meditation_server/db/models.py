"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from meditation_server.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Account(Base):
    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True)
    email = Column(String(100), unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    last_login_at = Column(DateTime(timezone=True))


class MeditationScript(Base):
    __tablename__ = "meditation_scripts"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    owner_id = Column(String(36), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    meditation_type = Column(String(100))  # mindfulness, body-scan, sleep
    focus_area = Column(String(100), index=True)  # stress, gratitude, sleep
    difficulty = Column(String(50))  # beginner, intermediate, advanced
    language = Column(String(35))
    target_duration_minutes = Column(Integer)
    full_script = Column(Text)
    notes = Column(Text)
    is_favorite = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class MeditationScriptSection(Base):
    __tablename__ = "meditation_script_sections"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    script_id = Column(String(36), ForeignKey("meditation_scripts.id"), nullable=False, index=True)
    order_index = Column(Integer, nullable=False)
    section_type = Column(String(100))  # intro, breathing, visualization, closing
    title = Column(String(255))
    body = Column(Text, nullable=False)
    suggested_duration_minutes = Column(Integer)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

