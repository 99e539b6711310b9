from pydantic import BaseModel, Field

from .constants import RATE_POLL_INTERVAL


class RateDecomposerConfig(BaseModel):
    """Polling cadence for the finite-difference axis rate estimate."""

    interval: float = Field(
        default=RATE_POLL_INTERVAL,
        gt=0,
        description="Displacement poll interval in seconds",
    )
