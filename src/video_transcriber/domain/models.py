"""Domain models for the video transcription service."""

from pydantic import BaseModel

from video_transcriber.db_models import TranscriptionStatus
from video_transcriber.exceptions import ErrorKind


class TranscriptionResult(BaseModel, frozen=True):
    """Text and optional duration returned by the speech-to-text service."""

    text: str
    duration_seconds: float | None = None


class TranscriptionJob(BaseModel):
    """
    State of a single pipeline run.

    Owned by one orchestrator call and never shared; the paths it records are
    released when that call returns.
    """

    source_url: str
    video_path: str | None = None
    audio_path: str | None = None
    result: TranscriptionResult | None = None

    def allocated_paths(self) -> list[str]:
        """Returns the temp paths obtained so far, in allocation order."""
        return [p for p in (self.video_path, self.audio_path) if p is not None]


class TranscribeOutcome(BaseModel, frozen=True):
    """Result of a transcribe request, tagged by ``error_kind`` on failure."""

    video_id: str | None = None
    error_kind: ErrorKind | None = None
    error: str | None = None
    transcription: str | None = None
    status: TranscriptionStatus | None = None
    duration: int | None = None
    cached: bool = False

    @property
    def succeeded(self) -> bool:
        return self.error_kind is None

    @classmethod
    def failure(
        cls, kind: ErrorKind, message: str, video_id: str | None = None
    ) -> "TranscribeOutcome":
        return cls(video_id=video_id, error_kind=kind, error=message)

    @classmethod
    def completed(
        cls,
        video_id: str,
        transcription: str,
        duration: int | None = None,
        cached: bool = False,
    ) -> "TranscribeOutcome":
        return cls(
            video_id=video_id,
            transcription=transcription,
            status=TranscriptionStatus.COMPLETED,
            duration=duration,
            cached=cached,
        )
