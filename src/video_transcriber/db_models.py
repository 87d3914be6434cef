from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel


class TranscriptionStatus(str, Enum):
    NONE = "NONE"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Video(SQLModel, table=True):
    __tablename__ = "videos"

    id: str = Field(primary_key=True, max_length=64)
    title: Optional[str] = Field(default=None, max_length=255)
    platform: Optional[str] = Field(default=None, max_length=64)
    file_key: str = Field(max_length=1024)
    duration: Optional[int] = None
    transcription: Optional[str] = Field(
        default=None, sa_column=Column(Text, nullable=True)
    )
    transcription_status: TranscriptionStatus = Field(default=TranscriptionStatus.NONE)
    created_at: datetime = Field(default_factory=_utcnow)
