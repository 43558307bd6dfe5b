"""
Internal error hierarchy.

Every failure raised inside the package is a LocalScribeError tagged with an
ErrorKind, so callers and tests can match on the kind. The command surface
is the only place that flattens these into plain messages.
"""

from enum import Enum, auto


class ErrorKind(Enum):
    INVALID_ARGUMENT = auto()
    DIRECTORY = auto()
    NETWORK = auto()
    IO = auto()
    FORMAT = auto()
    MODEL_LOAD = auto()
    NO_MODEL = auto()
    TRANSCRIPTION = auto()


class LocalScribeError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(LocalScribeError):
    """Unsupported model tier."""

    kind = ErrorKind.INVALID_ARGUMENT


class DirectoryError(LocalScribeError):
    """The models directory is unavailable."""

    kind = ErrorKind.DIRECTORY


class NetworkError(LocalScribeError):
    """Transport failure or non-success HTTP status while downloading."""

    kind = ErrorKind.NETWORK


class FileIOError(LocalScribeError):
    """A model file could not be written, read or removed."""

    kind = ErrorKind.IO


class FormatError(LocalScribeError):
    """The audio payload is not a usable WAV stream."""

    kind = ErrorKind.FORMAT


class ModelLoadError(LocalScribeError):
    """The recognition backend rejected the model file."""

    kind = ErrorKind.MODEL_LOAD


class NoModelError(LocalScribeError):
    """Transcription was requested while no model is downloaded."""

    kind = ErrorKind.NO_MODEL


class TranscriptionError(LocalScribeError):
    """The recognition backend failed while decoding audio."""

    kind = ErrorKind.TRANSCRIPTION
