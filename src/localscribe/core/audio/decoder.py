"""
WAV decoding for the recognition backend.

Parses a WAV byte stream and normalizes it into mono float32 samples.
"""

import io
import struct
import warnings
from dataclasses import dataclass

import numpy as np
import scipy.io.wavfile as wav

from ...utils.logger import get_logger
from ..errors import FormatError

logger = get_logger(__name__)

INT16_SCALE = 32768.0


@dataclass
class AudioBuffer:
    sample_rate: int
    channel_count: int
    samples: np.ndarray

    @property
    def frame_count(self) -> int:
        return len(self.samples)

    @property
    def duration_seconds(self) -> float:
        if self.sample_rate <= 0:
            return 0.0
        return self.frame_count / self.sample_rate


def _to_float32(data: np.ndarray) -> np.ndarray:
    if data.dtype == np.float32:
        return data
    if data.dtype == np.int16:
        return data.astype(np.float32) / INT16_SCALE
    raise FormatError(
        f"Unsupported WAV sample format: {data.dtype} "
        "(expected 16-bit PCM or 32-bit float)"
    )


def _downmix(samples: np.ndarray) -> np.ndarray:
    if samples.ndim == 1:
        return samples
    if samples.shape[1] == 1:
        return samples[:, 0]
    # Stereo and wider layouts are averaged per frame.
    return samples.mean(axis=1, dtype=np.float32)


def decode_wav(data: bytes) -> AudioBuffer:
    """
    Decode a WAV byte stream into a mono float32 buffer.

    Args:
        data: Complete WAV file contents

    Returns:
        AudioBuffer with the source sample rate and channel count and
        mono samples in [-1.0, 1.0).

    Raises:
        FormatError: If the header cannot be parsed or the sample encoding
            is neither 16-bit PCM nor 32-bit float.
    """
    try:
        with warnings.catch_warnings():
            # Unknown chunks (LIST, fact, ...) are skipped by the reader.
            warnings.simplefilter("ignore", wav.WavFileWarning)
            sample_rate, raw = wav.read(io.BytesIO(data))
    except (ValueError, EOFError, struct.error) as e:
        raise FormatError(f"Failed to read WAV data: {e}") from e

    channel_count = 1 if raw.ndim == 1 else raw.shape[1]
    samples = _downmix(_to_float32(raw))

    logger.debug(
        f"Decoded WAV: {sample_rate} Hz, {channel_count} channels, "
        f"{len(samples)} samples"
    )

    return AudioBuffer(
        sample_rate=int(sample_rate),
        channel_count=channel_count,
        samples=np.ascontiguousarray(samples, dtype=np.float32),
    )
