"""AssemblyAI implementation of the TranscriptionService interface."""

import asyncio

import assemblyai as aai

from video_transcriber.domain.models import TranscriptionResult
from video_transcriber.exceptions import TranscriptionError
from video_transcriber.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription using AssemblyAI."""

    def __init__(self, transcriber: aai.Transcriber):
        self._transcriber = transcriber

    async def transcribe(self, audio_path: str) -> TranscriptionResult:
        """
        Transcribes the audio file using AssemblyAI.

        The SDK call blocks until the transcript is ready, so it runs in a
        worker thread.
        """
        try:
            transcript = await asyncio.to_thread(self._transcriber.transcribe, audio_path)

            if transcript.status == aai.TranscriptStatus.error:
                raise TranscriptionError(audio_path, Exception(transcript.error))

            if transcript.text is None:
                raise TranscriptionError(
                    audio_path, Exception("Transcription returned no text")
                )
        except TranscriptionError:
            logger.error("AssemblyAI transcription failed", extra={"audio_file": audio_path})
            raise
        except Exception as e:
            logger.exception("AssemblyAI transcription failed")
            raise TranscriptionError(audio_path, e) from e

        duration = transcript.audio_duration
        logger.info(
            "Audio transcription successful",
            extra={"audio_file": audio_path, "duration": duration},
        )
        return TranscriptionResult(
            text=transcript.text,
            duration_seconds=float(duration) if duration is not None else None,
        )
