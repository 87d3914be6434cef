"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .ffmpeg_extractor import FFmpegAudioExtractor
from .http_fetcher import HttpMediaFetcher
from .minio_storage import MinioStorageClient
from .openai_transcriber import OpenAITranscriber

__all__ = [
    "AssemblyAITranscriber",
    "FFmpegAudioExtractor",
    "HttpMediaFetcher",
    "MinioStorageClient",
    "OpenAITranscriber",
]
