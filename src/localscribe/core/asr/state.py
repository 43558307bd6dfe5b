"""
Shared engine cache.

One EngineState instance is shared by the model manager, the downloader and
the transcription engine. Its lock covers the loaded context and the active
model path as a unit.
"""

import threading
from enum import Enum, auto
from pathlib import Path
from typing import Any, Optional

from ...utils.logger import get_logger

logger = get_logger(__name__)


class LoadState(Enum):
    UNLOADED = auto()
    LOADED = auto()


class EngineState:
    def __init__(self):
        self.lock = threading.Lock()
        # Both fields are only touched while holding self.lock.
        self.context: Optional[Any] = None
        self.active_path: Optional[Path] = None

    @property
    def load_state(self) -> LoadState:
        with self.lock:
            return LoadState.LOADED if self.context is not None else LoadState.UNLOADED

    def record_active_path(self, path: Path) -> None:
        with self.lock:
            if self.active_path == path:
                return
            if self.context is not None:
                # The cached context belongs to the previous file.
                logger.info(
                    f"Active model changed to {path}, dropping cached context"
                )
                self.context = None
            self.active_path = path

    def reset(self) -> None:
        with self.lock:
            if self.context is not None:
                logger.info("Releasing cached recognition context")
            self.context = None
            self.active_path = None
