"""Tests for the host-facing command surface."""

from unittest.mock import MagicMock

import numpy as np
import pytest
import requests

from localscribe.commands import CommandError, TranscriptionCommands
from localscribe.core.asr import ModelStatus, ModelTier

from conftest import MODEL_BYTES, StubBackend, make_wav


@pytest.fixture
def session():
    response = MagicMock()
    response.content = MODEL_BYTES
    session = MagicMock(spec=requests.Session)
    session.get.return_value = response
    return session


@pytest.fixture
def commands(models_dir, session):
    return TranscriptionCommands(
        models_dir=models_dir, backend=StubBackend(), session=session
    )


class TestModelCommands:
    def test_status_without_model(self, commands):
        status = commands.get_model_status()
        assert isinstance(status, ModelStatus)
        assert status.is_downloaded is False

    def test_download_messages(self, commands, session):
        assert commands.download_model("tiny") == "Model tiny downloaded successfully"
        assert commands.download_model("tiny") == "Model tiny already downloaded"
        session.get.assert_called_once()

    def test_download_invalid_tier_flattened(self, commands):
        with pytest.raises(CommandError) as exc_info:
            commands.download_model("medium")

        assert str(exc_info.value) == "Invalid model type 'medium'. Must be 'tiny' or 'base'"
        assert type(exc_info.value) is CommandError

    def test_download_network_failure_flattened(self, commands, session):
        session.get.side_effect = requests.ConnectionError("offline")

        with pytest.raises(CommandError, match="Failed to download model: offline"):
            commands.download_model("base")

    def test_delete_messages(self, commands):
        commands.download_model("base")

        assert commands.delete_model("base") == "Model base deleted successfully"
        assert commands.delete_model("base") == "Model base not found"

    def test_delete_invalid_tier(self, commands):
        with pytest.raises(CommandError, match="Must be 'tiny' or 'base'"):
            commands.delete_model("xl")

    def test_check_model_availability(self, commands):
        assert commands.check_model_availability() is False
        commands.download_model(ModelTier.COMPACT)
        assert commands.check_model_availability() is True

    def test_check_model_availability_swallows_directory_errors(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        commands = TranscriptionCommands(models_dir=blocker / "models")

        assert commands.check_model_availability() is False

    def test_get_model_info(self, commands):
        info = commands.get_model_info("tiny")
        assert info.size_label == "~75 MB"
        assert info.speed == "32x faster than large"

    def test_get_model_info_invalid(self, commands):
        with pytest.raises(CommandError):
            commands.get_model_info("giant")


class TestTranscribeCommand:
    def test_transcribe(self, commands):
        commands.download_model("base")

        result = commands.transcribe(make_wav(np.zeros(1600, dtype=np.int16)))

        assert result.success is True
        assert result.text == "hello world today"

    def test_transcribe_without_model(self, commands):
        with pytest.raises(CommandError) as exc_info:
            commands.transcribe(make_wav(np.zeros(1600, dtype=np.int16)))

        assert "No Whisper model downloaded" in str(exc_info.value)

    def test_transcribe_bad_audio(self, commands):
        commands.download_model("tiny")

        with pytest.raises(CommandError, match="Failed to read WAV data"):
            commands.transcribe(b"\x00\x01\x02")

    def test_transcribe_cut_riff_header(self, commands):
        commands.download_model("tiny")

        with pytest.raises(CommandError, match="Failed to read WAV data"):
            commands.transcribe(b"RIFF\x00\x00")

    def test_result_serializes(self, commands):
        commands.download_model("tiny")

        result = commands.transcribe(make_wav(np.zeros(1600, dtype=np.int16)))

        assert result.model_dump() == {"text": "hello world today", "success": True}
