"""
Command surface presented to the host application.

Each command returns its result or raises CommandError carrying a plain
descriptive message; internal error kinds do not cross this boundary.
"""

from pathlib import Path
from typing import Optional, Union

import requests

from .core.asr import (
    EngineState,
    ModelDownloader,
    ModelInfo,
    ModelManager,
    ModelStatus,
    ModelTier,
    RecognitionBackend,
    TranscriptionEngine,
    TranscriptionResult,
    get_model_info,
)
from .core.errors import LocalScribeError
from .utils.logger import get_logger

logger = get_logger(__name__)


class CommandError(Exception):
    pass


class TranscriptionCommands:
    def __init__(
        self,
        models_dir: Optional[Path] = None,
        backend: Optional[RecognitionBackend] = None,
        session: Optional[requests.Session] = None,
    ):
        self.state = EngineState()
        self.manager = ModelManager(self.state, models_dir)
        self.downloader = ModelDownloader(self.manager, session=session)
        self.engine = TranscriptionEngine(self.manager, backend=backend)

    def get_model_status(self) -> ModelStatus:
        try:
            return self.manager.get_status()
        except LocalScribeError as e:
            logger.error(f"Failed to get model status: {e}")
            raise CommandError(str(e)) from e

    def download_model(self, model_type: Union[ModelTier, str]) -> str:
        try:
            tier = ModelTier.parse(model_type)
            fetched = self.downloader.download(tier)
        except LocalScribeError as e:
            logger.error(f"Failed to download model: {e}")
            raise CommandError(str(e)) from e

        if fetched:
            return f"Model {tier.value} downloaded successfully"
        return f"Model {tier.value} already downloaded"

    def delete_model(self, model_type: Union[ModelTier, str]) -> str:
        try:
            tier = ModelTier.parse(model_type)
            removed = self.downloader.delete(tier)
        except LocalScribeError as e:
            logger.error(f"Failed to delete model: {e}")
            raise CommandError(str(e)) from e

        if removed:
            return f"Model {tier.value} deleted successfully"
        return f"Model {tier.value} not found"

    def transcribe(self, audio_data: bytes) -> TranscriptionResult:
        try:
            return self.engine.transcribe(audio_data)
        except LocalScribeError as e:
            logger.error(f"Failed to transcribe audio: {e}")
            raise CommandError(str(e)) from e

    def check_model_availability(self) -> bool:
        try:
            return self.get_model_status().is_downloaded
        except CommandError:
            return False

    def get_model_info(self, model_type: Union[ModelTier, str]) -> ModelInfo:
        try:
            return get_model_info(model_type)
        except LocalScribeError as e:
            raise CommandError(str(e)) from e
