"""Scratch file management for the transcription pipeline."""

import os
import tempfile
import time
import uuid

from video_transcriber.logging import setup_logging

logger = setup_logging()


class TempFileStore:
    """Allocates unique scratch paths and removes them afterwards."""

    def __init__(self, directory: str | None = None):
        self._directory = directory or tempfile.gettempdir()

    @property
    def directory(self) -> str:
        return self._directory

    def allocate_path(self, kind: str, extension: str) -> str:
        """
        Returns a fresh path in the scratch directory.

        The file is not created. Names combine a nanosecond timestamp with a
        random suffix so concurrent requests never receive the same path.

        Args:
            kind: Short label used as the file name prefix (e.g. "video").
            extension: File extension, with or without the leading dot.
        """
        os.makedirs(self._directory, exist_ok=True)
        if extension and not extension.startswith("."):
            extension = f".{extension}"
        file_name = f"{kind}_{time.time_ns()}_{uuid.uuid4().hex[:8]}{extension}"
        return os.path.join(self._directory, file_name)

    def release(self, *paths: str) -> None:
        """Deletes each path if present. Failures are logged, never raised."""
        for path in paths:
            try:
                os.remove(path)
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning(
                    "Failed to remove temp file",
                    extra={"path": path, "error": str(e)},
                )
                continue
            logger.info("Temp file removed", extra={"path": path})
