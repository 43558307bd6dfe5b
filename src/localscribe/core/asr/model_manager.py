"""
Model storage and status.

Model files live as fixed-name blobs in an application-private "models"
directory; a file's presence is the only record of a download.
"""

import os
from pathlib import Path
from typing import Optional, Union

from platformdirs import user_data_path
from pydantic import BaseModel, ConfigDict, Field

from ...config import APP_NAME
from ...utils.logger import get_logger
from ..errors import DirectoryError
from .catalog import MODEL_CATALOG, TIER_PRIORITY, ModelTier
from .state import EngineState

logger = get_logger(__name__)

BYTES_PER_MB = 1024.0 * 1024.0


def get_default_models_dir() -> Path:
    return user_data_path(APP_NAME, appauthor=False) / "models"


class ModelStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    active_tier: Optional[ModelTier] = Field(default=None, alias="modelType")
    is_downloaded: bool = Field(default=False, alias="isDownloaded")
    model_path: Optional[str] = Field(default=None, alias="modelPath")
    size_mb: Optional[float] = Field(default=None, alias="modelSizeMb")

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ModelManager:
    def __init__(self, state: EngineState, models_dir: Optional[Path] = None):
        self.state = state
        self._models_dir = Path(models_dir) if models_dir else get_default_models_dir()

    def models_dir(self) -> Path:
        try:
            self._models_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryError(f"Failed to create models directory: {e}") from e
        return self._models_dir

    def resolve_path(self, tier: Union[ModelTier, str]) -> Path:
        info = MODEL_CATALOG[ModelTier.parse(tier)]
        return self.models_dir() / info.filename

    def is_downloaded(self, tier: Union[ModelTier, str]) -> bool:
        return self.resolve_path(tier).exists()

    def _size_mb(self, tier: ModelTier, path: Path) -> float:
        try:
            return os.path.getsize(path) / BYTES_PER_MB
        except OSError as e:
            logger.warning(f"Could not read size of {path}, using estimate: {e}")
            return MODEL_CATALOG[tier].nominal_size_mb

    def get_status(self) -> ModelStatus:
        """
        Compute the current model status from the filesystem.

        The Standard tier wins when both files exist. When a model is found
        its path is recorded as the engine's active path.
        """
        for tier in TIER_PRIORITY:
            path = self.resolve_path(tier)
            if not path.exists():
                continue

            # A cached context from a different file is dropped here, so a
            # newly downloaded Standard model replaces a loaded Compact one.
            self.state.record_active_path(path)
            return ModelStatus(
                active_tier=tier,
                is_downloaded=True,
                model_path=str(path),
                size_mb=self._size_mb(tier, path),
            )

        return ModelStatus()
