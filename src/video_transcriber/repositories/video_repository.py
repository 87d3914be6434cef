"""Repository for video record access."""

from typing import Any

from sqlmodel import Session

from video_transcriber.db_models import Video
from video_transcriber.exceptions import PersistenceError, VideoNotFoundError
from video_transcriber.logging import setup_logging

logger = setup_logging()

UPDATABLE_FIELDS = frozenset({"transcription", "transcription_status", "duration"})


class VideoRepository:
    """
    Handles database operations for video records.

    Encapsulates SQL access and transaction management, keeping the handler
    layer free of database concerns.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def find(self, video_id: str) -> Video | None:
        """
        Retrieves a video by id.

        Returns:
            The detached Video record, or None if it does not exist.

        Raises:
            PersistenceError: If the query fails.
        """
        try:
            with self._session_factory() as db_session:
                video = db_session.get(Video, video_id)
                if video is not None:
                    db_session.expunge(video)
                return video
        except Exception as e:
            logger.exception("Failed to load video", extra={"video_id": video_id})
            raise PersistenceError(video_id, cause=e) from e

    def update(self, video_id: str, **fields: Any) -> Video:
        """
        Applies a field-level update to a video in a single transaction.

        Only the transcription fields may be changed.

        Raises:
            VideoNotFoundError: If the video does not exist.
            PersistenceError: If the write fails.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")

        try:
            with self._session_factory() as db_session:
                video = db_session.get(Video, video_id)
                if video is None:
                    raise VideoNotFoundError(video_id)

                for name, value in fields.items():
                    setattr(video, name, value)
                db_session.add(video)
                db_session.commit()
                db_session.refresh(video)
                db_session.expunge(video)
        except VideoNotFoundError:
            raise
        except Exception as e:
            logger.exception(
                "Failed to update video",
                extra={"video_id": video_id, "fields": sorted(fields)},
            )
            raise PersistenceError(video_id, cause=e) from e

        logger.info(
            "Video updated",
            extra={"video_id": video_id, "fields": sorted(fields)},
        )
        return video

    def add(self, video: Video) -> Video:
        """Inserts a new video record."""
        try:
            with self._session_factory() as db_session:
                db_session.add(video)
                db_session.commit()
                db_session.refresh(video)
                db_session.expunge(video)
                return video
        except Exception as e:
            logger.exception("Failed to insert video", extra={"video_id": video.id})
            raise PersistenceError(video.id, cause=e) from e
