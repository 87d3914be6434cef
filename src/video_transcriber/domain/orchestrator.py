"""Core business logic for the transcription pipeline."""

from video_transcriber.domain.models import TranscriptionJob, TranscriptionResult
from video_transcriber.domain.temp_files import TempFileStore
from video_transcriber.infrastructure.interfaces import (
    AudioExtractor,
    MediaFetcher,
    TranscriptionService,
)
from video_transcriber.logging import setup_logging

logger = setup_logging()


class TranscriptionOrchestrator:
    """Runs fetch, extract and transcribe for one video URL."""

    def __init__(
        self,
        fetcher: MediaFetcher,
        extractor: AudioExtractor,
        transcription_service: TranscriptionService,
        temp_files: TempFileStore,
    ):
        self._fetcher = fetcher
        self._extractor = extractor
        self._transcription_service = transcription_service
        self._temp_files = temp_files

    async def run(self, video_url: str) -> TranscriptionResult:
        """
        Transcribes the video at ``video_url``.

        Every temp file obtained along the way is released before this
        returns, whether the run succeeded or failed. Errors propagate
        unchanged; nothing is retried.

        Args:
            video_url: Directly fetchable URL of the video.

        Returns:
            TranscriptionResult with the full text and optional duration.

        Raises:
            FetchError: If the video download fails.
            ExtractionError: If audio extraction fails.
            TranscriptionError: If the speech-to-text call fails.
        """
        job = TranscriptionJob(source_url=video_url)
        logger.info("Transcription pipeline started", extra={"url": video_url})

        try:
            job.video_path = await self._fetcher.fetch(video_url)
            job.audio_path = await self._extractor.extract(job.video_path)
            job.result = await self._transcription_service.transcribe(job.audio_path)
        finally:
            paths = job.allocated_paths()
            if paths:
                self._temp_files.release(*paths)

        logger.info(
            "Transcription pipeline finished",
            extra={"url": video_url, "duration": job.result.duration_seconds},
        )
        return job.result
