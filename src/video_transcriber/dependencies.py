"""Dependency injection configuration for the video-transcriber service."""

from contextlib import contextmanager
from functools import lru_cache

import assemblyai as aai
from minio import Minio
from openai import AsyncOpenAI
from sqlmodel import Session, SQLModel, create_engine

from video_transcriber.config import AppConfig, load_config
from video_transcriber.domain.orchestrator import TranscriptionOrchestrator
from video_transcriber.domain.temp_files import TempFileStore
from video_transcriber.exceptions import ConfigurationError
from video_transcriber.handlers import JobStatusController
from video_transcriber.infrastructure import (
    AssemblyAITranscriber,
    FFmpegAudioExtractor,
    HttpMediaFetcher,
    MinioStorageClient,
    OpenAITranscriber,
)
from video_transcriber.infrastructure.interfaces import (
    StorageClient,
    TranscriptionService,
)
from video_transcriber.logging import setup_logging
from video_transcriber.repositories import VideoRepository

logger = setup_logging()


@lru_cache
def get_config() -> AppConfig:
    """Returns the configuration loaded from the environment."""
    return load_config()


@lru_cache
def get_engine():
    """Returns the database engine for the record store."""
    return create_engine(get_config().database.url)


def init_db() -> None:
    """Creates missing tables in the record store."""
    SQLModel.metadata.create_all(get_engine())
    logger.info("Database initialized")


@contextmanager
def _session_factory():
    """Creates a database session context manager."""
    with Session(get_engine()) as session:
        yield session


@lru_cache
def get_repository() -> VideoRepository:
    """Returns the video repository."""
    return VideoRepository(_session_factory)


@lru_cache
def get_storage() -> StorageClient:
    """Returns the configured storage client."""
    storage = get_config().storage
    minio_client = Minio(
        endpoint=storage.minio_endpoint,
        access_key=storage.minio_user,
        secret_key=storage.minio_password,
        secure=storage.minio_secure,
        region=storage.minio_region,
    )
    return MinioStorageClient(
        minio_client,
        endpoint=storage.endpoint,
        bucket_name=storage.bucket,
        expiry_seconds=storage.presigned_url_expiry_seconds,
    )


@lru_cache
def get_temp_files() -> TempFileStore:
    """Returns the scratch file store shared by the pipeline stages."""
    return TempFileStore(get_config().pipeline.scratch_dir)


def build_transcription_service(config: AppConfig) -> TranscriptionService:
    """
    Builds the speech-to-text client for the configured provider.

    Raises:
        ConfigurationError: If the provider is unknown.
    """
    transcription = config.transcription
    if transcription.provider == "openai":
        client = AsyncOpenAI(
            api_key=transcription.api_key,
            timeout=transcription.timeout_seconds,
            max_retries=0,
        )
        return OpenAITranscriber(client, model=transcription.model)

    if transcription.provider == "assemblyai":
        aai.settings.api_key = transcription.api_key
        if transcription.timeout_seconds is not None:
            aai.settings.http_timeout = transcription.timeout_seconds
        return AssemblyAITranscriber(aai.Transcriber())

    raise ConfigurationError(f"Transcription provider '{transcription.provider}'")


@lru_cache
def get_transcription_service() -> TranscriptionService:
    """Returns the configured transcription service."""
    return build_transcription_service(get_config())


@lru_cache
def get_orchestrator() -> TranscriptionOrchestrator:
    """Returns the transcription pipeline."""
    config = get_config()
    temp_files = get_temp_files()
    return TranscriptionOrchestrator(
        fetcher=HttpMediaFetcher(
            temp_files, timeout_seconds=config.pipeline.fetch_timeout_seconds
        ),
        extractor=FFmpegAudioExtractor.from_config(temp_files, config.pipeline),
        transcription_service=get_transcription_service(),
        temp_files=temp_files,
    )


def get_controller() -> JobStatusController:
    """
    Returns the transcribe request controller.

    Without a supported provider and credential no pipeline is built; the
    controller then answers every request with a configuration error.
    """
    configured = get_config().transcription.is_configured
    return JobStatusController(
        repository=get_repository(),
        orchestrator=get_orchestrator() if configured else None,
        storage=get_storage(),
        credential_configured=configured,
    )
