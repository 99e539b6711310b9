"""Fly a simulated approach and plot the session timeline.

Run with: python3 examples/docking_demo.py [config.yaml]
"""
import logging
import sys

import matplotlib.pyplot as plt

from autopilot.config import AutopilotConfig
from autopilot.session import Autopilot
from autopilot.visualization import plot_session_telemetry


def run_demo(config_path=None, duration=300.0):
    if config_path:
        cfg = AutopilotConfig.from_yaml_file(config_path)
    else:
        cfg = AutopilotConfig(name="Docking demo")
        # start off-axis and well outside the near field
        cfg.vehicle.angle_error = (4.0, -2.5, 1.0)
        cfg.vehicle.displacement = (30.0, 2.0, -1.5)

    pilot = Autopilot.simulated(cfg)
    pilot.start()
    pilot.run(duration)
    pilot.stop()

    pilot.log.print_log()
    vehicle = pilot.telemetry
    print(f"Final displacement: {[round(float(d), 2) for d in vehicle.displacement]}")
    print(f"Commands issued: {vehicle.total_commands}")

    fig, _ = plot_session_telemetry(
        pilot.records, tolerance=cfg.control.angle_tolerance
    )
    fig.suptitle(cfg.name)
    plt.show()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_demo(sys.argv[1] if len(sys.argv) > 1 else None)
