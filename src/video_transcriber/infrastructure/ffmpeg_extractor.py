"""FFmpeg implementation of the AudioExtractor interface."""

import asyncio
from contextlib import suppress

from video_transcriber.config import PipelineConfig
from video_transcriber.domain.temp_files import TempFileStore
from video_transcriber.exceptions import ExtractionError
from video_transcriber.logging import setup_logging

from .interfaces import AudioExtractor

logger = setup_logging()

AUDIO_EXTENSION = ".mp3"


class FFmpegAudioExtractor(AudioExtractor):
    """
    Extracts speech-optimized audio by running ffmpeg.

    Output is mono, resampled to 16 kHz and encoded at a low bitrate, which is
    what speech-to-text services expect and keeps the upload small.
    """

    def __init__(
        self,
        temp_files: TempFileStore,
        ffmpeg_binary: str = "ffmpeg",
        sample_rate: int = 16000,
        channels: int = 1,
        bitrate: str = "32k",
        timeout_seconds: float | None = None,
    ):
        self._temp_files = temp_files
        self._ffmpeg_binary = ffmpeg_binary
        self._sample_rate = sample_rate
        self._channels = channels
        self._bitrate = bitrate
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_config(
        cls, temp_files: TempFileStore, config: PipelineConfig
    ) -> "FFmpegAudioExtractor":
        return cls(
            temp_files,
            ffmpeg_binary=config.ffmpeg_binary,
            sample_rate=config.audio_sample_rate,
            channels=config.audio_channels,
            bitrate=config.audio_bitrate,
            timeout_seconds=config.extraction_timeout_seconds,
        )

    def build_command(self, video_path: str, audio_path: str) -> list[str]:
        return [
            self._ffmpeg_binary,
            "-i", video_path,
            "-vn",
            "-ac", str(self._channels),
            "-ar", str(self._sample_rate),
            "-b:a", self._bitrate,
            "-y",
            audio_path,
        ]

    async def extract(self, video_path: str) -> str:
        audio_path = self._temp_files.allocate_path("audio", AUDIO_EXTENSION)
        try:
            await self._run(self.build_command(video_path, audio_path))
        except asyncio.CancelledError:
            logger.warning("Audio extraction cancelled", extra={"file_name": video_path})
            self._temp_files.release(audio_path)
            raise
        except Exception as e:
            logger.exception("Audio extraction failed", extra={"file_name": video_path})
            self._temp_files.release(audio_path)
            raise ExtractionError(video_path, e) from e

        logger.info(
            "Audio extracted successfully",
            extra={"video_file": video_path, "audio_file": audio_path},
        )
        return audio_path

    async def _run(self, command: list[str]) -> None:
        process = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        try:
            _, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self._timeout_seconds
            )
        except (asyncio.TimeoutError, asyncio.CancelledError):
            # ffmpeg may exit on its own before the kill lands
            with suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise

        if process.returncode != 0:
            logger.debug(
                "ffmpeg stderr",
                extra={"stderr": stderr.decode(errors="ignore")[-2000:]},
            )
            raise RuntimeError(f"ffmpeg exited with status {process.returncode}")
