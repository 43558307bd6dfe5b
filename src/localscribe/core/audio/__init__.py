from .decoder import AudioBuffer, decode_wav

__all__ = [
    "AudioBuffer",
    "decode_wav",
]
