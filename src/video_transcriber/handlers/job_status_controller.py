"""Handler for transcribe requests and their status transitions."""

import asyncio
import math
from typing import Any

from video_transcriber.db_models import TranscriptionStatus, Video
from video_transcriber.domain.models import TranscribeOutcome
from video_transcriber.domain.orchestrator import TranscriptionOrchestrator
from video_transcriber.exceptions import (
    ErrorKind,
    PersistenceError,
    VideoNotFoundError,
    VideoTranscriberError,
)
from video_transcriber.infrastructure.interfaces import StorageClient
from video_transcriber.logging import setup_logging
from video_transcriber.repositories import VideoRepository

logger = setup_logging()

GENERIC_FAILURE_MESSAGE = "Transcription failed"


def round_duration(seconds: float) -> int:
    """Rounds a duration to whole seconds, halves rounding up."""
    return int(math.floor(seconds + 0.5))


class JobStatusController:
    """
    Drives a video through the transcription status lifecycle.

    ``COMPLETED`` videos are answered from the stored text. Any other status
    is marked ``PROCESSING`` and the pipeline runs; the record ends up
    ``COMPLETED`` with its text, or ``FAILED`` with its previous text left
    alone. The ``PROCESSING`` marker is not a lock: concurrent requests for
    the same video may both run the pipeline and the last write wins. A
    cancelled run marks the record ``FAILED`` before the cancellation
    propagates.

    ``orchestrator`` is None when no usable transcription provider is
    configured; such requests fail with a configuration error.
    """

    def __init__(
        self,
        repository: VideoRepository,
        orchestrator: TranscriptionOrchestrator | None,
        storage: StorageClient,
        credential_configured: bool,
    ):
        self._repository = repository
        self._orchestrator = orchestrator
        self._storage = storage
        self._credential_configured = credential_configured

    async def handle_transcribe_request(self, video_id: str | None) -> TranscribeOutcome:
        """
        Transcribes a video, or returns its cached transcription.

        Args:
            video_id: Id of the video record.

        Returns:
            TranscribeOutcome; on failure ``error_kind`` names the category.
        """
        if not video_id:
            return TranscribeOutcome.failure(
                ErrorKind.INVALID_REQUEST, "Video ID is required"
            )

        if not self._credential_configured or self._orchestrator is None:
            logger.error("Transcription service credential not configured")
            return TranscribeOutcome.failure(
                ErrorKind.CONFIGURATION,
                "Transcription service credential not configured",
                video_id,
            )

        try:
            return await self._transcribe(video_id)
        except VideoNotFoundError:
            logger.warning(
                "Video disappeared during transcription", extra={"video_id": video_id}
            )
            return TranscribeOutcome.failure(
                ErrorKind.NOT_FOUND, "Video not found", video_id
            )
        except PersistenceError:
            logger.exception("Record store failure", extra={"video_id": video_id})
            return TranscribeOutcome.failure(
                ErrorKind.PERSISTENCE, "Internal server error", video_id
            )

    async def _transcribe(self, video_id: str) -> TranscribeOutcome:
        video = await self._find(video_id)
        if video is None:
            logger.info("Video not found", extra={"video_id": video_id})
            return TranscribeOutcome.failure(
                ErrorKind.NOT_FOUND, "Video not found", video_id
            )

        if (
            video.transcription_status == TranscriptionStatus.COMPLETED
            and video.transcription is not None
        ):
            logger.info("Returning cached transcription", extra={"video_id": video_id})
            return TranscribeOutcome.completed(video_id, video.transcription, cached=True)

        await self._update(video_id, transcription_status=TranscriptionStatus.PROCESSING)

        try:
            result = await self._orchestrator.run(self._storage.object_url(video.file_key))
            duration = (
                round_duration(result.duration_seconds)
                if result.duration_seconds is not None
                else video.duration
            )
            updated = await self._update(
                video_id,
                transcription=result.text,
                transcription_status=TranscriptionStatus.COMPLETED,
                duration=duration,
            )
        except asyncio.CancelledError:
            logger.warning("Transcription cancelled", extra={"video_id": video_id})
            await self._mark_failed_on_cancel(video_id)
            raise
        except Exception as e:
            logger.exception("Transcription failed", extra={"video_id": video_id})
            await self._update(video_id, transcription_status=TranscriptionStatus.FAILED)
            kind = e.kind if isinstance(e, VideoTranscriberError) else ErrorKind.INTERNAL
            return TranscribeOutcome.failure(
                kind, str(e) or GENERIC_FAILURE_MESSAGE, video_id
            )

        logger.info(
            "Transcription completed",
            extra={"video_id": video_id, "duration": updated.duration},
        )
        return TranscribeOutcome.completed(
            video_id, updated.transcription, duration=updated.duration
        )

    async def _mark_failed_on_cancel(self, video_id: str) -> None:
        try:
            await asyncio.shield(
                self._update(video_id, transcription_status=TranscriptionStatus.FAILED)
            )
        except (PersistenceError, VideoNotFoundError):
            logger.exception(
                "Failed to mark cancelled transcription", extra={"video_id": video_id}
            )

    async def _find(self, video_id: str) -> Video | None:
        return await asyncio.to_thread(self._repository.find, video_id)

    async def _update(self, video_id: str, **fields: Any) -> Video:
        return await asyncio.to_thread(self._repository.update, video_id, **fields)
