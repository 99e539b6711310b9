"""Timeline plot of a recorded autopilot session."""

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ..common import Angle, Axis, LoopPhase
from ..session.records import SessionTelemetry


def _as_array(values: list[float | None]) -> np.ndarray:
    return np.array([np.nan if v is None else v for v in values], dtype=float)


def plot_session_telemetry(
    telemetry: SessionTelemetry,
    figsize: tuple[float, float] = (10, 8),
    tolerance: float | None = None,
) -> tuple[Figure, list[Axes]]:
    """Plot a session timeline.

    Creates a 4-panel figure showing:
    - Angular error per angle (with the tolerance band if given)
    - Displacement per axis
    - Estimated rate per axis
    - Control loop phase

    Axis panels are blank (NaN) until translation control is enabled.

    Args:
        telemetry: Recorded session telemetry.
        figsize: Tuple of (width, height) for the figure size. Default: (10, 8)
        tolerance: Optional angular tolerance in degrees to shade.

    Returns:
        tuple: (fig, axes) - The matplotlib figure and list of axes objects.

    Example:
        >>> pilot = Autopilot.simulated(config)
        >>> pilot.start()
        >>> pilot.run(120.0)
        >>> fig, axes = plot_session_telemetry(pilot.records)
        >>> plt.show()
    """
    if len(telemetry) == 0:
        raise ValueError("Session has no recorded ticks. Run the autopilot first.")

    time = np.array(telemetry.extract_field("time"), dtype=float)
    fig, axes = plt.subplots(4, 1, figsize=figsize, sharex=True)

    ax = axes[0]
    for angle in Angle:
        values = _as_array(telemetry.series("angle_error", angle.value))
        ax.plot(time, values, label=angle.value)
    if tolerance is not None:
        ax.axhspan(-tolerance, tolerance, color="green", alpha=0.15)
    ax.set_ylabel("Error (deg)")
    ax.legend(loc="upper right")

    ax = axes[1]
    for axis in Axis:
        values = _as_array(telemetry.series("axis_displacement", axis.value))
        ax.plot(time, values, label=axis.value)
    ax.set_ylabel("Range (m)")
    ax.legend(loc="upper right")

    ax = axes[2]
    for axis in Axis:
        values = _as_array(telemetry.series("axis_rate", axis.value))
        ax.plot(time, values, label=axis.value)
    ax.set_ylabel("Rate (m/s)")
    ax.legend(loc="upper right")

    ax = axes[3]
    phase = [int(p) for p in telemetry.extract_field("phase")]
    ax.step(time, phase, where="post", color="black")
    ax.set_yticks([p.value for p in LoopPhase])
    ax.set_yticklabels([p.name.replace("_", " ").title() for p in LoopPhase])
    ax.set_xlabel("Time (s)")

    fig.tight_layout()
    return fig, list(axes)
