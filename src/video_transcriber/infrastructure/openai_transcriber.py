"""OpenAI Whisper implementation of the TranscriptionService interface."""

import asyncio
import os
from pathlib import Path

from openai import AsyncOpenAI

from video_transcriber.domain.models import TranscriptionResult
from video_transcriber.exceptions import TranscriptionError
from video_transcriber.logging import setup_logging

from .interfaces import TranscriptionService

logger = setup_logging()

MEDIA_TYPES = {
    ".mp3": "audio/mpeg",
    ".mpga": "audio/mpeg",
    ".m4a": "audio/mp4",
    ".mp4": "audio/mp4",
    ".wav": "audio/wav",
    ".flac": "audio/flac",
    ".ogg": "audio/ogg",
    ".webm": "audio/webm",
}


def media_type_for(audio_path: str) -> str:
    """Returns the upload media type for an audio file, defaulting to MPEG."""
    extension = os.path.splitext(audio_path)[1].lower()
    return MEDIA_TYPES.get(extension, "audio/mpeg")


class OpenAITranscriber(TranscriptionService):
    """Handles audio transcription using the OpenAI audio API."""

    def __init__(self, client: AsyncOpenAI, model: str = "whisper-1"):
        self._client = client
        self._model = model

    async def transcribe(self, audio_path: str) -> TranscriptionResult:
        """
        Uploads the audio file and returns text plus duration.

        Requests ``verbose_json`` so the response carries the audio duration
        alongside the text.
        """
        try:
            audio_bytes = await asyncio.to_thread(Path(audio_path).read_bytes)
            transcription = await self._client.audio.transcriptions.create(
                file=(os.path.basename(audio_path), audio_bytes, media_type_for(audio_path)),
                model=self._model,
                response_format="verbose_json",
            )
        except Exception as e:
            logger.exception(
                "OpenAI transcription failed", extra={"audio_file": audio_path}
            )
            raise TranscriptionError(audio_path, e) from e

        text = getattr(transcription, "text", None)
        if text is None:
            logger.error("Transcription returned no text", extra={"audio_file": audio_path})
            raise TranscriptionError(
                audio_path, Exception("Transcription returned no text")
            )

        duration = getattr(transcription, "duration", None)
        logger.info(
            "Audio transcription successful",
            extra={"audio_file": audio_path, "duration": duration, "chars": len(text)},
        )
        return TranscriptionResult(
            text=text,
            duration_seconds=float(duration) if duration is not None else None,
        )
