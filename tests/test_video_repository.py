from contextlib import contextmanager

import pytest

from video_transcriber.db_models import TranscriptionStatus
from video_transcriber.exceptions import PersistenceError, VideoNotFoundError
from video_transcriber.repositories import VideoRepository


class TestVideoRepository:
    def test_find_returns_none_for_unknown_id(self, repository):
        assert repository.find("missing") is None

    def test_find_returns_detached_record(self, repository, seed_video):
        seed_video("v1", duration=30)

        video = repository.find("v1")

        assert video.file_key == "uploads/v1.mp4"
        assert video.transcription_status == TranscriptionStatus.NONE
        assert video.duration == 30

    def test_update_changes_only_given_fields(self, repository, seed_video):
        seed_video("v1", duration=30)

        updated = repository.update(
            "v1",
            transcription="text",
            transcription_status=TranscriptionStatus.COMPLETED,
        )

        assert updated.transcription == "text"
        assert updated.duration == 30
        stored = repository.find("v1")
        assert stored.transcription_status == TranscriptionStatus.COMPLETED
        assert stored.title == "Team sync"

    def test_update_rejects_other_fields(self, repository, seed_video):
        seed_video("v1")

        with pytest.raises(ValueError):
            repository.update("v1", file_key="elsewhere.mp4")

    def test_update_unknown_video_raises_not_found(self, repository):
        with pytest.raises(VideoNotFoundError):
            repository.update("missing", transcription_status=TranscriptionStatus.FAILED)

    def test_database_errors_become_persistence_errors(self):
        @contextmanager
        def broken_session():
            raise RuntimeError("connection refused")
            yield

        repository = VideoRepository(broken_session)

        with pytest.raises(PersistenceError) as exc_info:
            repository.find("v1")

        assert isinstance(exc_info.value.cause, RuntimeError)
        with pytest.raises(PersistenceError):
            repository.update("v1", transcription_status=TranscriptionStatus.FAILED)
