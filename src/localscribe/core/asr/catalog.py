from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Union

from ..errors import InvalidArgumentError

HUGGINGFACE_BASE = "https://huggingface.co/ggerganov/whisper.cpp/resolve/main"


class ModelTier(str, Enum):
    COMPACT = "tiny"
    STANDARD = "base"

    @classmethod
    def parse(cls, value: Union["ModelTier", str]) -> "ModelTier":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid model type '{value}'. Must be 'tiny' or 'base'"
            ) from None


@dataclass(frozen=True)
class ModelInfo:
    tier: ModelTier
    model_name: str
    nominal_size_mb: float
    size_label: str
    speed: str
    accuracy: str

    @property
    def filename(self) -> str:
        return f"ggml-{self.model_name}.bin"

    @property
    def url(self) -> str:
        return f"{HUGGINGFACE_BASE}/{self.filename}"


MODEL_CATALOG: Dict[ModelTier, ModelInfo] = {
    ModelTier.COMPACT: ModelInfo(
        tier=ModelTier.COMPACT,
        model_name="tiny.en",
        nominal_size_mb=75.0,
        size_label="~75 MB",
        speed="32x faster than large",
        accuracy="Good for clear audio",
    ),
    ModelTier.STANDARD: ModelInfo(
        tier=ModelTier.STANDARD,
        model_name="base.en",
        nominal_size_mb=142.0,
        size_label="~142 MB",
        speed="16x faster than large",
        accuracy="Better accuracy",
    ),
}

# Probe order for status and lazy loading; the first present file wins.
TIER_PRIORITY: List[ModelTier] = [ModelTier.STANDARD, ModelTier.COMPACT]


def get_model_info(tier: Union[ModelTier, str]) -> ModelInfo:
    return MODEL_CATALOG[ModelTier.parse(tier)]
