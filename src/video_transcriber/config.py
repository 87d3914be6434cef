"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field

SUPPORTED_PROVIDERS = ("openai", "assemblyai")


def _optional_float(name: str) -> float | None:
    """Reads a float setting; unset or empty means no bound."""
    value = os.getenv(name, "")
    return float(value) if value else None


class TranscriptionServiceConfig(BaseModel, frozen=True):
    """Speech-to-text service configuration."""

    provider: str = "openai"
    api_key: str = ""
    model: str = "whisper-1"
    timeout_seconds: float | None = None

    @computed_field
    @property
    def is_configured(self) -> bool:
        """True for a supported provider with its credential present."""
        return self.provider in SUPPORTED_PROVIDERS and bool(self.api_key)


class StorageConfig(BaseModel, frozen=True):
    """
    Object storage configuration.

    ``endpoint`` and ``bucket`` build the internal URL the pipeline downloads
    from. The MinIO settings are only used to sign playback URLs.
    """

    endpoint: str = "http://minio:9002"
    bucket: str = "videos"
    minio_endpoint: str = "minio:9000"
    minio_user: str = ""
    minio_password: str = ""
    minio_region: str = "us-east-1"
    minio_secure: bool = False
    presigned_url_expiry_seconds: int = 3600


class DatabaseConfig(BaseModel, frozen=True):
    """Immutable database connection configuration."""

    host: str
    port: str
    user: str
    password: str
    database: str
    url_override: str | None = None

    @computed_field
    @property
    def url(self) -> str:
        """Returns the full connection URL."""
        if self.url_override:
            return self.url_override
        return (
            f"postgresql+psycopg://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class PipelineConfig(BaseModel, frozen=True):
    """Settings for the fetch, extract and transcribe stages."""

    scratch_dir: str | None = None
    ffmpeg_binary: str = "ffmpeg"
    fetch_timeout_seconds: float | None = None
    extraction_timeout_seconds: float | None = None
    audio_sample_rate: int = 16000
    audio_channels: int = 1
    audio_bitrate: str = "32k"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    transcription: TranscriptionServiceConfig
    storage: StorageConfig
    database: DatabaseConfig
    pipeline: PipelineConfig


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    provider = os.getenv("TRANSCRIPTION_PROVIDER", "openai").lower()
    api_key_variable = (
        "ASSEMBLYAI_API_KEY" if provider == "assemblyai" else "OPENAI_API_KEY"
    )

    return AppConfig(
        transcription=TranscriptionServiceConfig(
            provider=provider,
            api_key=os.getenv(api_key_variable, ""),
            model=os.getenv("TRANSCRIPTION_MODEL", "whisper-1"),
            timeout_seconds=_optional_float("TRANSCRIPTION_TIMEOUT_SECONDS"),
        ),
        storage=StorageConfig(
            endpoint=os.getenv("S3_ENDPOINT", "http://minio:9002"),
            bucket=os.getenv("S3_BUCKET", "videos"),
            minio_endpoint=os.getenv("MINIO_ENDPOINT", "minio:9000"),
            minio_user=os.getenv("MINIO_USER", ""),
            minio_password=os.getenv("MINIO_PASSWORD", ""),
            minio_region=os.getenv("MINIO_REGION", "us-east-1"),
            minio_secure=os.getenv("MINIO_SECURE", "false").lower() == "true",
            presigned_url_expiry_seconds=int(
                os.getenv("PRESIGNED_URL_EXPIRY_SECONDS", "3600")
            ),
        ),
        database=DatabaseConfig(
            host=os.getenv("POSTGRES_HOST", "postgres"),
            port=os.getenv("POSTGRES_PORT", "5432"),
            user=os.getenv("POSTGRES_USER", ""),
            password=os.getenv("POSTGRES_PASSWORD", ""),
            database=os.getenv("POSTGRES_DB", "video_transcriber"),
            url_override=os.getenv("DATABASE_URL") or None,
        ),
        pipeline=PipelineConfig(
            scratch_dir=os.getenv("TRANSCRIBER_SCRATCH_DIR") or None,
            ffmpeg_binary=os.getenv("FFMPEG_BINARY", "ffmpeg"),
            fetch_timeout_seconds=_optional_float("FETCH_TIMEOUT_SECONDS"),
            extraction_timeout_seconds=_optional_float("EXTRACTION_TIMEOUT_SECONDS"),
        ),
    )
