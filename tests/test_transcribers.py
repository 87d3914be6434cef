"""
Unit tests for the speech-to-text clients.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import assemblyai as aai
import pytest

from video_transcriber.domain.models import TranscriptionResult
from video_transcriber.exceptions import ErrorKind, TranscriptionError
from video_transcriber.infrastructure.assemblyai_transcriber import AssemblyAITranscriber
from video_transcriber.infrastructure.openai_transcriber import (
    OpenAITranscriber,
    media_type_for,
)


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "audio_1.mp3"
    path.write_bytes(b"ID3-fake-audio")
    return str(path)


class TestOpenAITranscriber:
    """OpenAI audio transcription client"""

    @pytest.fixture
    def mock_client(self):
        client = MagicMock()
        client.audio.transcriptions.create = AsyncMock(
            return_value=SimpleNamespace(text="hello world", duration=12.4)
        )
        return client

    @pytest.mark.asyncio
    async def test_uploads_audio_and_returns_text_with_duration(
        self, mock_client, audio_file
    ):
        transcriber = OpenAITranscriber(mock_client)

        result = await transcriber.transcribe(audio_file)

        assert result == TranscriptionResult(text="hello world", duration_seconds=12.4)
        kwargs = mock_client.audio.transcriptions.create.call_args.kwargs
        assert kwargs["file"] == ("audio_1.mp3", b"ID3-fake-audio", "audio/mpeg")
        assert kwargs["model"] == "whisper-1"
        assert kwargs["response_format"] == "verbose_json"

    @pytest.mark.asyncio
    async def test_missing_duration_is_none(self, mock_client, audio_file):
        mock_client.audio.transcriptions.create.return_value = SimpleNamespace(text="hi")

        result = await OpenAITranscriber(mock_client).transcribe(audio_file)

        assert result.duration_seconds is None

    @pytest.mark.asyncio
    async def test_service_failure_raises_transcription_error(
        self, mock_client, audio_file
    ):
        mock_client.audio.transcriptions.create.side_effect = RuntimeError("503")

        with pytest.raises(TranscriptionError) as exc_info:
            await OpenAITranscriber(mock_client).transcribe(audio_file)

        assert exc_info.value.kind == ErrorKind.TRANSCRIPTION
        assert str(exc_info.value) == "Failed to transcribe audio"

    @pytest.mark.asyncio
    async def test_unreadable_file_raises_transcription_error(self, mock_client, tmp_path):
        with pytest.raises(TranscriptionError):
            await OpenAITranscriber(mock_client).transcribe(str(tmp_path / "gone.mp3"))

        mock_client.audio.transcriptions.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_response_without_text_raises(self, mock_client, audio_file):
        mock_client.audio.transcriptions.create.return_value = SimpleNamespace(text=None)

        with pytest.raises(TranscriptionError):
            await OpenAITranscriber(mock_client).transcribe(audio_file)

    @pytest.mark.parametrize(
        "path, media_type",
        [
            ("a.mp3", "audio/mpeg"),
            ("a.WAV", "audio/wav"),
            ("a.m4a", "audio/mp4"),
            ("a.unknown", "audio/mpeg"),
        ],
    )
    def test_media_type_for(self, path, media_type):
        assert media_type_for(path) == media_type


class TestAssemblyAITranscriber:
    """AssemblyAI transcription client"""

    @pytest.mark.asyncio
    async def test_returns_text_and_audio_duration(self, audio_file):
        transcriber = MagicMock()
        transcriber.transcribe.return_value = MagicMock(
            status=aai.TranscriptStatus.completed, text="hello", audio_duration=7
        )

        result = await AssemblyAITranscriber(transcriber).transcribe(audio_file)

        assert result == TranscriptionResult(text="hello", duration_seconds=7.0)
        transcriber.transcribe.assert_called_once_with(audio_file)

    @pytest.mark.asyncio
    async def test_error_status_raises(self, audio_file):
        transcriber = MagicMock()
        transcriber.transcribe.return_value = MagicMock(
            status=aai.TranscriptStatus.error, error="bad audio"
        )

        with pytest.raises(TranscriptionError) as exc_info:
            await AssemblyAITranscriber(transcriber).transcribe(audio_file)

        assert str(exc_info.value.cause) == "bad audio"

    @pytest.mark.asyncio
    async def test_sdk_exception_is_wrapped(self, audio_file):
        transcriber = MagicMock()
        transcriber.transcribe.side_effect = ConnectionError("offline")

        with pytest.raises(TranscriptionError) as exc_info:
            await AssemblyAITranscriber(transcriber).transcribe(audio_file)

        assert isinstance(exc_info.value.cause, ConnectionError)
