from .config import AutopilotConfig
from .constants import (
    ANGLE_GAIN,
    ANGLE_TOLERANCE,
    CONTROL_INTERVAL,
    FAR_DAMPENING,
    NEAR_DAMPENING,
    NEAR_FIELD_THRESHOLD,
    RATE_POLL_INTERVAL,
)
from .control import ControlLoopConfig, TranslationConfig
from .display import DisplayLayout
from .rates import RateDecomposerConfig
from .vehicle import VehicleConfig

__all__ = [
    "AutopilotConfig",
    "ControlLoopConfig",
    "DisplayLayout",
    "RateDecomposerConfig",
    "TranslationConfig",
    "VehicleConfig",
    "ANGLE_GAIN",
    "ANGLE_TOLERANCE",
    "CONTROL_INTERVAL",
    "FAR_DAMPENING",
    "NEAR_DAMPENING",
    "NEAR_FIELD_THRESHOLD",
    "RATE_POLL_INTERVAL",
]
