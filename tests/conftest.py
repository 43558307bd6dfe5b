"""
Shared fixtures.

Logs go to a throwaway directory and Qt runs offscreen so the suite works
on headless machines.
"""
import io
import os
import tempfile
import time

os.environ.setdefault("LOCALSCRIBE_LOG_DIR", tempfile.mkdtemp(prefix="localscribe-logs-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest
import scipy.io.wavfile as wav

from localscribe.core.asr import EngineState, ModelManager, ModelTier, MODEL_CATALOG

MODEL_BYTES = b"lmgg" + b"\x00" * 60


class StubBackend:
    """Recognition backend double that records calls."""

    def __init__(self, segments=None, load_delay=0.0, load_error=None, on_recognize=None):
        self.segments = segments if segments is not None else ["hello", "world", "today"]
        self.load_delay = load_delay
        self.load_error = load_error
        self.on_recognize = on_recognize
        self.load_calls = []
        self.recognize_calls = []

    def load(self, model_path, config):
        self.load_calls.append(model_path)
        if self.load_delay:
            time.sleep(self.load_delay)
        if self.load_error is not None:
            raise self.load_error
        return {"model_path": model_path}

    def recognize(self, context, samples, config):
        self.recognize_calls.append((context, samples, config))
        if self.on_recognize is not None:
            self.on_recognize()
        return list(self.segments)


def make_wav(samples, sample_rate=16000):
    buffer = io.BytesIO()
    wav.write(buffer, sample_rate, np.asarray(samples))
    return buffer.getvalue()


@pytest.fixture
def models_dir(tmp_path):
    return tmp_path / "models"


@pytest.fixture
def engine_state():
    return EngineState()


@pytest.fixture
def manager(engine_state, models_dir):
    return ModelManager(engine_state, models_dir)


@pytest.fixture
def install_model(models_dir):
    def _install(tier: ModelTier, content: bytes = MODEL_BYTES):
        models_dir.mkdir(parents=True, exist_ok=True)
        path = models_dir / MODEL_CATALOG[tier].filename
        path.write_bytes(content)
        return path

    return _install


@pytest.fixture
def speech_wav():
    return make_wav(np.zeros(16000, dtype=np.int16))
