from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, List, Protocol

import numpy as np

from ...config import RECOGNITION_THREADS
from ...utils.logger import get_logger
from ..errors import ModelLoadError, TranscriptionError

logger = get_logger(__name__)

# whisper.cpp files start with the uint32 0x67676d6c stored little-endian.
GGML_MAGIC = b"lmgg"


class SamplingStrategy(Enum):
    GREEDY = 0
    BEAM_SEARCH = 1


@dataclass(frozen=True)
class RecognitionConfig:
    language: str = "en"
    translate: bool = False
    suppress_diagnostics: bool = True
    strategy: SamplingStrategy = SamplingStrategy.GREEDY
    best_of: int = 1
    n_threads: int = RECOGNITION_THREADS

    def to_params(self) -> dict:
        verbose = not self.suppress_diagnostics
        return {
            "language": self.language,
            "translate": self.translate,
            "n_threads": self.n_threads,
            "greedy": {"best_of": self.best_of},
            "print_progress": verbose,
            "print_realtime": verbose,
            "print_timestamps": verbose,
            "print_special": verbose,
        }


DEFAULT_RECOGNITION_CONFIG = RecognitionConfig()


class RecognitionBackend(Protocol):
    def load(self, model_path: Path, config: RecognitionConfig) -> Any:
        """Build a recognition context from a model file."""

    def recognize(
        self, context: Any, samples: np.ndarray, config: RecognitionConfig
    ) -> List[str]:
        """Run recognition and return segment texts in time order."""


class WhisperCppBackend:
    """Runs whisper.cpp through the pywhispercpp bindings."""

    def load(self, model_path: Path, config: RecognitionConfig) -> Any:
        try:
            with open(model_path, "rb") as f:
                magic = f.read(len(GGML_MAGIC))
        except OSError as e:
            raise ModelLoadError(f"Failed to load Whisper model: {e}") from e

        if magic != GGML_MAGIC:
            raise ModelLoadError(
                f"Failed to load Whisper model: {model_path} is not a ggml model file"
            )

        from pywhispercpp.model import Model

        logger.info(f"Loading Whisper model from {model_path}")

        # None sends whisper.cpp's own log output to devnull.
        redirect = None if config.suppress_diagnostics else False
        try:
            return Model(
                str(model_path),
                params_sampling_strategy=config.strategy.value,
                redirect_whispercpp_logs_to=redirect,
                **config.to_params(),
            )
        except Exception as e:
            raise ModelLoadError(f"Failed to load Whisper model: {e}") from e

    def recognize(
        self, context: Any, samples: np.ndarray, config: RecognitionConfig
    ) -> List[str]:
        try:
            segments = context.transcribe(samples, **config.to_params())
        except Exception as e:
            raise TranscriptionError(f"Failed to run transcription: {e}") from e

        return [segment.text for segment in segments]
