"""Shared fixtures for visualization tests."""

import matplotlib
import pytest

matplotlib.use("Agg")  # Use non-interactive backend for testing

from autopilot.common import LoopPhase
from autopilot.session import SessionTelemetry, TickRecord


@pytest.fixture
def session_telemetry():
    """Create a short recorded session that latches halfway through."""
    telemetry = SessionTelemetry()
    for i, (roll, x) in enumerate([(1.0, None), (0.5, None), (0.1, 20.0), (0.0, 18.0)]):
        translating = x is not None
        telemetry.append(
            TickRecord(
                time=0.02 * (i + 1),
                phase=(
                    LoopPhase.ATTITUDE_AND_TRANSLATION
                    if translating
                    else LoopPhase.ATTITUDE_ONLY
                ),
                angles_ready=translating,
                angle_error={"roll": roll, "pitch": 0.0, "yaw": 0.0},
                angle_rate={"roll": -0.1, "pitch": 0.0, "yaw": 0.0},
                axis_displacement={"x": x, "y": 0.0, "z": 0.0} if translating else {},
                axis_rate={"x": -0.1, "y": 0.0, "z": 0.0} if translating else {},
                commands={"roll": -1},
            )
        )
    return telemetry
