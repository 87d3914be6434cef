"""Domain layer containing business logic and models."""

from .models import TranscribeOutcome, TranscriptionJob, TranscriptionResult
from .orchestrator import TranscriptionOrchestrator
from .temp_files import TempFileStore

__all__ = [
    "TempFileStore",
    "TranscribeOutcome",
    "TranscriptionJob",
    "TranscriptionOrchestrator",
    "TranscriptionResult",
]
