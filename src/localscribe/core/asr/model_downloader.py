from typing import Optional, Union

import requests

from ...config import DOWNLOAD_TIMEOUT_SECONDS
from ...utils.logger import get_logger
from ..errors import FileIOError, NetworkError
from .catalog import ModelTier, get_model_info
from .model_manager import ModelManager


class ModelDownloader:
    def __init__(
        self,
        manager: ModelManager,
        session: Optional[requests.Session] = None,
        timeout: float = DOWNLOAD_TIMEOUT_SECONDS,
    ):
        self._manager = manager
        self._session = session or requests.Session()
        self._timeout = timeout
        self._logger = get_logger(__name__)

    def download(self, tier: Union[ModelTier, str]) -> bool:
        """
        Fetch a model file unless it is already present.

        Returns:
            True if the model was fetched, False if it was already downloaded.
        """
        model_info = get_model_info(tier)
        model_path = self._manager.resolve_path(model_info.tier)

        if model_path.exists():
            self._logger.info(f"Model {model_info.model_name} already downloaded")
            return False

        url = model_info.url
        self._logger.info(f"Downloading {model_info.model_name} model from {url}")

        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
            content = response.content
        except requests.HTTPError as e:
            self._logger.error(f"Download failed: {e}")
            raise NetworkError(
                f"Failed to download model: HTTP {e.response.status_code}"
            ) from e
        except requests.RequestException as e:
            self._logger.error(f"Download failed: {e}")
            raise NetworkError(f"Failed to download model: {e}") from e

        # A failed write can leave a truncated file; it only surfaces on load.
        try:
            model_path.write_bytes(content)
        except OSError as e:
            self._logger.error(f"Failed to write {model_path}: {e}")
            raise FileIOError(f"Failed to write model file: {e}") from e

        self._logger.info(
            f"Model {model_info.model_name} downloaded successfully to {model_path}"
        )
        return True

    def delete(self, tier: Union[ModelTier, str]) -> bool:
        """
        Delete a model file, releasing the cached recognition context first.

        Returns:
            True if a file was removed, False if it was already absent.
        """
        model_info = get_model_info(tier)
        model_path = self._manager.resolve_path(model_info.tier)

        # Waits for any in-flight transcription to finish.
        self._manager.state.reset()

        if not model_path.exists():
            self._logger.info(f"Model {model_info.model_name} not found")
            return False

        try:
            model_path.unlink()
        except OSError as e:
            self._logger.error(f"Failed to delete {model_path}: {e}")
            raise FileIOError(f"Failed to delete model: {e}") from e

        self._logger.info(f"Model {model_info.model_name} deleted successfully")
        return True
