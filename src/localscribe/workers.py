"""
Background threads for running commands from a Qt host.

Each worker runs one command off the UI thread and reports through
signals, so several commands can be in flight at once.
"""

from PySide6.QtCore import QThread, Signal

from .commands import CommandError, TranscriptionCommands
from .utils.logger import get_logger

logger = get_logger(__name__)


class ModelDownloadThread(QThread):
    """
    Download a model tier in the background.

    Signals:
        finished: Emitted with the confirmation message
        error: Emitted with the error message
    """

    finished = Signal(str)
    error = Signal(str)

    def __init__(self, commands: TranscriptionCommands, model_type: str, parent=None):
        super().__init__(parent)
        self._commands = commands
        self._model_type = model_type

    def run(self):
        logger.info(f"Background download started: {self._model_type}")
        try:
            message = self._commands.download_model(self._model_type)
        except CommandError as e:
            self.error.emit(str(e))
            return
        except Exception as e:
            logger.exception(f"Background download error: {e}")
            self.error.emit(str(e))
            return
        self.finished.emit(message)


class ModelDeleteThread(QThread):
    """
    Delete a model tier in the background.

    Signals:
        finished: Emitted with the confirmation message
        error: Emitted with the error message
    """

    finished = Signal(str)
    error = Signal(str)

    def __init__(self, commands: TranscriptionCommands, model_type: str, parent=None):
        super().__init__(parent)
        self._commands = commands
        self._model_type = model_type

    def run(self):
        try:
            message = self._commands.delete_model(self._model_type)
        except CommandError as e:
            self.error.emit(str(e))
            return
        except Exception as e:
            logger.exception(f"Background delete error: {e}")
            self.error.emit(str(e))
            return
        self.finished.emit(message)


class TranscriptionWorkerThread(QThread):
    """
    Transcribe a WAV clip in the background.

    Signals:
        finished: Emitted with the TranscriptionResult
        error: Emitted with the error message
    """

    finished = Signal(object)
    error = Signal(str)

    def __init__(self, commands: TranscriptionCommands, audio_data: bytes, parent=None):
        super().__init__(parent)
        self._commands = commands
        self._audio_data = audio_data

    def run(self):
        import time

        start_time = time.time()
        try:
            result = self._commands.transcribe(self._audio_data)
        except CommandError as e:
            self.error.emit(str(e))
            return
        except Exception as e:
            logger.exception(f"Background transcription error: {e}")
            self.error.emit(str(e))
            return

        duration = time.time() - start_time
        logger.info(
            f"Transcription completed in {duration:.2f}s: "
            f"'{result.text[:50]}{'...' if len(result.text) > 50 else ''}'"
        )
        self.finished.emit(result)
