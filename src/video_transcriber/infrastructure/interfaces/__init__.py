"""Infrastructure interface exports."""

from .audio_extractor import AudioExtractor
from .media_fetcher import MediaFetcher
from .storage import StorageClient
from .transcription_service import TranscriptionService

__all__ = ["AudioExtractor", "MediaFetcher", "StorageClient", "TranscriptionService"]
