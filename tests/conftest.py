from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from fakes import FakeExtractor, FakeFetcher, FakeStorage, FakeTranscriptionService
from video_transcriber.db_models import TranscriptionStatus, Video
from video_transcriber.domain.orchestrator import TranscriptionOrchestrator
from video_transcriber.domain.temp_files import TempFileStore
from video_transcriber.handlers import JobStatusController
from video_transcriber.repositories import VideoRepository
from video_transcriber.routes import transcribe_router, videos_router


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine):
    @contextmanager
    def session_factory():
        with Session(engine) as session:
            yield session

    return VideoRepository(session_factory)


@pytest.fixture
def seed_video(repository):
    """Inserts a video record and returns it."""

    def _seed(
        video_id: str = "v1",
        status: TranscriptionStatus = TranscriptionStatus.NONE,
        transcription: str | None = None,
        duration: int | None = None,
    ) -> Video:
        return repository.add(
            Video(
                id=video_id,
                title="Team sync",
                platform="upload",
                file_key=f"uploads/{video_id}.mp4",
                transcription=transcription,
                transcription_status=status,
                duration=duration,
            )
        )

    return _seed


@pytest.fixture
def temp_files(tmp_path):
    """Scratch store in an isolated directory, wrapped to record calls."""
    return MagicMock(wraps=TempFileStore(str(tmp_path / "scratch")))


@pytest.fixture
def scratch_dir(tmp_path):
    return tmp_path / "scratch"


@pytest.fixture
def fetcher(temp_files):
    return FakeFetcher(temp_files)


@pytest.fixture
def extractor(temp_files):
    return FakeExtractor(temp_files)


@pytest.fixture
def transcription_service():
    return FakeTranscriptionService()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def orchestrator(fetcher, extractor, transcription_service, temp_files):
    return TranscriptionOrchestrator(fetcher, extractor, transcription_service, temp_files)


@pytest.fixture
def controller(repository, orchestrator, storage):
    return JobStatusController(
        repository=repository,
        orchestrator=orchestrator,
        storage=storage,
        credential_configured=True,
    )


@pytest.fixture
def app():
    app = FastAPI()
    app.include_router(transcribe_router)
    app.include_router(videos_router)
    return app
