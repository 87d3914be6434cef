"""Request and response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from video_transcriber.db_models import TranscriptionStatus


class TranscribeRequest(BaseModel):
    """Body of a transcribe request."""

    model_config = ConfigDict(populate_by_name=True)

    video_id: str | None = Field(default=None, alias="videoId")


class TranscribeResponse(BaseModel):
    """Transcription returned on success, fresh or cached."""

    success: bool = True
    transcription: str
    status: TranscriptionStatus
    duration: int | None = None
    cached: bool | None = None


class ErrorResponse(BaseModel):
    error: str


class VideoDetail(BaseModel):
    """Video record as shown to the UI, with a signed playback URL."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str | None = None
    platform: str | None = None
    file_key: str
    duration: int | None = None
    transcription: str | None = None
    transcription_status: TranscriptionStatus
    created_at: datetime
    download_url: str


class VideoDetailResponse(BaseModel):
    video: VideoDetail
