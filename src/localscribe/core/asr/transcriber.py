"""
Transcription engine over a lazily loaded whisper.cpp context.

The engine keeps at most one recognition context in the shared EngineState.
The context is loaded on the first transcription, reused by every later
call, and only released when a model is deleted. Loading, decoding and
recognition all run while holding the state lock, so transcriptions are
serialized process-wide.
"""

import time
from pathlib import Path
from typing import Any, List, Optional

from pydantic import BaseModel

from ...config import WHISPER_SAMPLE_RATE
from ...utils.logger import get_logger
from ..audio.decoder import decode_wav
from ..errors import FormatError, NoModelError
from .backends import (
    DEFAULT_RECOGNITION_CONFIG,
    RecognitionBackend,
    RecognitionConfig,
    WhisperCppBackend,
)
from .model_manager import ModelManager
from .state import LoadState

NO_MODEL_MESSAGE = "No Whisper model downloaded. Please download a model first."


class TranscriptionResult(BaseModel):
    text: str
    success: bool = True


def join_segments(segments: List[str]) -> str:
    return " ".join(segments).strip()


class TranscriptionEngine:
    """
    Transcribes WAV clips with a cached recognition context.

    Example:
        state = EngineState()
        engine = TranscriptionEngine(ModelManager(state))
        result = engine.transcribe(wav_bytes)
    """

    def __init__(
        self,
        manager: ModelManager,
        backend: Optional[RecognitionBackend] = None,
        config: RecognitionConfig = DEFAULT_RECOGNITION_CONFIG,
    ):
        """
        Initialize the transcription engine.

        Args:
            manager: Model manager sharing the engine's EngineState
            backend: Recognition backend (defaults to whisper.cpp)
            config: Fixed recognition configuration used for every call
        """
        self._manager = manager
        self._state = manager.state
        self._backend = backend or WhisperCppBackend()
        self.config = config
        self.logger = get_logger(__name__)

    @property
    def state(self) -> LoadState:
        return self._state.load_state

    @property
    def is_loaded(self) -> bool:
        return self.state == LoadState.LOADED

    def _ensure_context(self) -> Any:
        # Caller holds self._state.lock.
        if self._state.context is not None:
            return self._state.context

        model_path: Optional[Path] = self._state.active_path
        if model_path is None:
            raise NoModelError(NO_MODEL_MESSAGE)

        self.logger.info("Loading Whisper context for first use")
        start_time = time.time()
        context = self._backend.load(model_path, self.config)
        self._state.context = context
        self.logger.info(
            f"Whisper context loaded from {model_path} "
            f"in {time.time() - start_time:.2f}s"
        )
        return context

    def transcribe(self, audio_data: bytes) -> TranscriptionResult:
        """
        Transcribe a WAV clip to text.

        Args:
            audio_data: WAV-encoded bytes (16 kHz, 16-bit PCM or 32-bit float)

        Returns:
            TranscriptionResult with the joined segment text.

        Raises:
            NoModelError: If no model is downloaded.
            ModelLoadError: If the backend rejects the model file.
            FormatError: If the audio cannot be decoded or is not 16 kHz.
            TranscriptionError: If recognition itself fails.
        """
        self.logger.info(f"Transcribing audio, size: {len(audio_data)} bytes")

        status = self._manager.get_status()
        if not status.is_downloaded:
            raise NoModelError(NO_MODEL_MESSAGE)

        with self._state.lock:
            context = self._ensure_context()

            audio = decode_wav(audio_data)
            self.logger.info(
                f"Audio specs: {audio.sample_rate} Hz, {audio.channel_count} channels, "
                f"{audio.frame_count} samples"
            )
            if audio.sample_rate != WHISPER_SAMPLE_RATE:
                raise FormatError(
                    f"Unsupported sample rate {audio.sample_rate} Hz, "
                    f"expected {WHISPER_SAMPLE_RATE} Hz"
                )

            start_time = time.time()
            segments = self._backend.recognize(context, audio.samples, self.config)
            processing_time = time.time() - start_time

        self.logger.info(f"Transcription complete, {len(segments)} segments")
        if processing_time > 0:
            self.logger.debug(
                f"Transcription finished: audio_len={audio.duration_seconds:.2f}s, "
                f"time={processing_time:.2f}s, "
                f"speed={audio.duration_seconds / processing_time:.2f}x"
            )

        return TranscriptionResult(text=join_segments(segments), success=True)
