from pydantic import BaseModel, Field

from ..common import Axis
from .constants import (
    ANGLE_GAIN,
    ANGLE_TOLERANCE,
    CONTROL_INTERVAL,
    FAR_DAMPENING,
    NEAR_DAMPENING,
    NEAR_FIELD_THRESHOLD,
)


class TranslationConfig(BaseModel):
    """
    Translation phase tuning.

    The primary approach axis is damped harder once the vehicle is inside the
    near field so the final approach is slow; every other axis always uses the
    far-field constant.
    """

    primary_axis: Axis = Field(
        default=Axis.X, description="Approach axis with near-field dampening"
    )
    near_field_threshold: float = Field(
        default=NEAR_FIELD_THRESHOLD,
        gt=0,
        description="Primary-axis distance below which near dampening applies",
    )
    near_dampening: float = Field(
        default=NEAR_DAMPENING, gt=0, description="Near-field dampening in seconds"
    )
    far_dampening: float = Field(
        default=FAR_DAMPENING, gt=0, description="Far-field dampening in seconds"
    )

    def dampening(self, axis: Axis, displacement: float) -> float:
        """Return the dampening constant for ``axis`` at ``displacement``."""
        if axis == self.primary_axis and abs(displacement) < self.near_field_threshold:
            return self.near_dampening
        return self.far_dampening


class ControlLoopConfig(BaseModel):
    """Control loop cadence, attitude gain and the translation gate."""

    interval: float = Field(
        default=CONTROL_INTERVAL, gt=0, description="Control tick in seconds"
    )
    angle_gain: float = Field(
        default=ANGLE_GAIN,
        gt=0,
        description="Proportional gain K: attitude rate goal is -error/K",
    )
    angle_tolerance: float = Field(
        default=ANGLE_TOLERANCE,
        gt=0,
        description="Angular error (deg) below which translation is enabled",
    )
    translation: TranslationConfig = Field(default_factory=TranslationConfig)
