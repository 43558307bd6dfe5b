from .backends import (
    DEFAULT_RECOGNITION_CONFIG,
    RecognitionBackend,
    RecognitionConfig,
    SamplingStrategy,
    WhisperCppBackend,
)
from .catalog import MODEL_CATALOG, ModelInfo, ModelTier, get_model_info
from .model_downloader import ModelDownloader
from .model_manager import ModelManager, ModelStatus
from .state import EngineState, LoadState
from .transcriber import TranscriptionEngine, TranscriptionResult

__all__ = [
    "DEFAULT_RECOGNITION_CONFIG",
    "RecognitionBackend",
    "RecognitionConfig",
    "SamplingStrategy",
    "WhisperCppBackend",
    "MODEL_CATALOG",
    "ModelInfo",
    "ModelTier",
    "get_model_info",
    "ModelDownloader",
    "ModelManager",
    "ModelStatus",
    "EngineState",
    "LoadState",
    "TranscriptionEngine",
    "TranscriptionResult",
]
