"""Abstract interface for retrieving remote media."""

from abc import ABC, abstractmethod


class MediaFetcher(ABC):
    """Abstract base class for downloading a video to local disk."""

    @abstractmethod
    async def fetch(self, url: str) -> str:
        """
        Downloads the resource at ``url`` into a new temp file.

        Args:
            url: Directly fetchable URL of the video.

        Returns:
            Local path of the downloaded file.

        Raises:
            FetchError: If the request fails or returns a non-success status.

        Any partially written file is removed before an error or
        cancellation leaves this method; the caller only releases paths it
        was given.
        """
