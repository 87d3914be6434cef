"""Error taxonomy for the video transcription service."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure category callers branch on instead of matching message text."""

    INVALID_REQUEST = "invalid_request"
    CONFIGURATION = "configuration"
    NOT_FOUND = "not_found"
    FETCH = "fetch"
    EXTRACTION = "extraction"
    TRANSCRIPTION = "transcription"
    PERSISTENCE = "persistence"
    INTERNAL = "internal"


class VideoTranscriberError(Exception):
    """Base class for every error raised by the transcription service."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class ConfigurationError(VideoTranscriberError):
    """Raised when a required setting, such as the service credential, is missing."""

    kind = ErrorKind.CONFIGURATION

    def __init__(self, setting: str):
        self.setting = setting
        super().__init__(f"{setting} not configured")


class VideoNotFoundError(VideoTranscriberError):
    """Raised when a requested video does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(f"Video {video_id} not found")


class FetchError(VideoTranscriberError):
    """Raised when the remote video cannot be downloaded."""

    kind = ErrorKind.FETCH

    def __init__(self, url: str, reason: str, cause: Exception | None = None):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to download: {reason}", cause)


class ExtractionError(VideoTranscriberError):
    """Raised when audio extraction from a video fails."""

    kind = ErrorKind.EXTRACTION

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        super().__init__("Failed to extract audio from video", cause)


class TranscriptionError(VideoTranscriberError):
    """Raised when the speech-to-text service fails."""

    kind = ErrorKind.TRANSCRIPTION

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        super().__init__("Failed to transcribe audio", cause)


class PersistenceError(VideoTranscriberError):
    """Raised when reading or writing a video record fails."""

    kind = ErrorKind.PERSISTENCE

    def __init__(self, video_id: str, cause: Exception | None = None):
        self.video_id = video_id
        super().__init__(f"Failed to persist video '{video_id}'", cause)


class StorageUrlError(VideoTranscriberError):
    """Raised when a signed download URL cannot be issued."""

    def __init__(self, file_key: str, cause: Exception | None = None):
        self.file_key = file_key
        super().__init__(f"Failed to sign download URL for '{file_key}'", cause)
