"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod

from video_transcriber.domain.models import TranscriptionResult


class TranscriptionService(ABC):
    """Abstract base class for speech-to-text backends."""

    @abstractmethod
    async def transcribe(self, audio_path: str) -> TranscriptionResult:
        """
        Transcribes an audio file and returns its text and duration.

        Args:
            audio_path: Local path of the audio file.

        Returns:
            TranscriptionResult with the full text and, when the service
            reports it, the duration in seconds.

        Raises:
            TranscriptionError: If transcription fails.
        """
