"""Abstract interface for audio extraction."""

from abc import ABC, abstractmethod


class AudioExtractor(ABC):
    """Abstract base class for turning a video file into speech-ready audio."""

    @abstractmethod
    async def extract(self, video_path: str) -> str:
        """
        Extracts a compressed mono audio track from a local video file.

        Args:
            video_path: Path of the source video.

        Returns:
            Local path of the produced audio file.

        Raises:
            ExtractionError: If the transcoder is missing or fails.

        Any file created for the output is removed before an error or
        cancellation leaves this method; the caller only releases paths it
        was given.
        """
