"""aiohttp implementation of the MediaFetcher interface."""

import os
from urllib.parse import urlparse

import aiohttp

from video_transcriber.domain.temp_files import TempFileStore
from video_transcriber.exceptions import FetchError
from video_transcriber.logging import setup_logging

from .interfaces import MediaFetcher

logger = setup_logging()

DEFAULT_VIDEO_EXTENSION = ".mp4"
CHUNK_SIZE = 1024 * 1024


class HttpMediaFetcher(MediaFetcher):
    """Downloads videos over plain HTTP into scratch files."""

    def __init__(self, temp_files: TempFileStore, timeout_seconds: float | None = None):
        self._temp_files = temp_files
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch(self, url: str) -> str:
        """
        Downloads the video at ``url`` with a single GET.

        The scratch file is only allocated once the server answered with a
        success status. A partially written file is removed before the error
        or cancellation propagates.
        """
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.get(url) as response:
                    if not 200 <= response.status < 300:
                        reason = response.reason or str(response.status)
                        logger.error(
                            "Video download rejected",
                            extra={"url": url, "status": response.status},
                        )
                        raise FetchError(url, reason)

                    video_path = self._temp_files.allocate_path(
                        "video", self._extension_for(url)
                    )
                    try:
                        await self._write_body(response, video_path)
                    except BaseException:
                        self._temp_files.release(video_path)
                        raise
        except FetchError:
            raise
        except Exception as e:
            logger.exception("Video download failed", extra={"url": url})
            raise FetchError(url, str(e) or type(e).__name__, e) from e

        logger.info(
            "Video downloaded",
            extra={"url": url, "path": video_path, "size": os.path.getsize(video_path)},
        )
        return video_path

    async def _write_body(self, response: aiohttp.ClientResponse, path: str) -> None:
        with open(path, "wb") as f:
            async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                f.write(chunk)

    def _extension_for(self, url: str) -> str:
        extension = os.path.splitext(urlparse(url).path)[1]
        return extension or DEFAULT_VIDEO_EXTENSION
