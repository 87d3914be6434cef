"""Abstract interface for object storage operations."""

from abc import ABC, abstractmethod


class StorageClient(ABC):
    """Abstract base class for object storage backends."""

    @abstractmethod
    def object_url(self, file_key: str) -> str:
        """
        Builds the internal URL the pipeline downloads an object from.

        Args:
            file_key: The object key in the configured bucket.
        """

    @abstractmethod
    def presigned_download_url(self, file_key: str) -> str:
        """
        Issues a time-limited signed GET URL for playback.

        Args:
            file_key: The object key in the configured bucket.

        Raises:
            StorageUrlError: If the URL cannot be signed.
        """
