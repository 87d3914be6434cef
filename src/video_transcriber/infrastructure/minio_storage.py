"""MinIO implementation of the StorageClient interface."""

from datetime import timedelta
from urllib.parse import quote

from minio import Minio

from video_transcriber.exceptions import StorageUrlError
from video_transcriber.logging import setup_logging

from .interfaces import StorageClient

logger = setup_logging()


class MinioStorageClient(StorageClient):
    """Builds object URLs for a single MinIO bucket."""

    def __init__(
        self,
        client: Minio,
        endpoint: str,
        bucket_name: str,
        expiry_seconds: int = 3600,
    ):
        self._client = client
        self._endpoint = endpoint.rstrip("/")
        self._bucket_name = bucket_name
        self._expiry = timedelta(seconds=expiry_seconds)

    def object_url(self, file_key: str) -> str:
        return f"{self._endpoint}/{self._bucket_name}/{quote(file_key, safe='/')}"

    def presigned_download_url(self, file_key: str) -> str:
        try:
            url = self._client.presigned_get_object(
                bucket_name=self._bucket_name,
                object_name=file_key,
                expires=self._expiry,
            )
        except Exception as e:
            logger.exception(
                "MinIO URL signing failed",
                extra={"bucket_name": self._bucket_name, "object_name": file_key},
            )
            raise StorageUrlError(file_key, e) from e

        logger.info(
            "Download URL signed",
            extra={"bucket_name": self._bucket_name, "object_name": file_key},
        )
        return url
