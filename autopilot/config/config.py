import json
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from .control import ControlLoopConfig
from .display import DisplayLayout
from .rates import RateDecomposerConfig
from .vehicle import VehicleConfig

_YAML_HEADER = """\
# ISS Autopilot Configuration File
#
# Units Legend:
#   intervals, step_size, dampening, angle_gain: seconds
#   angle_error, angle_tolerance: degrees
#   angle_rate, angular_step: degrees/second
#   displacement, near_field_threshold: meters
#   velocity, linear_step: meters/second
#
"""


class AutopilotConfig(BaseModel):
    """
    Configuration for one autopilot session.

    Groups the rate decomposer cadence, control loop tuning, the simulated
    vehicle used for offline runs and the text display layout.
    """

    name: str = "Default Autopilot"
    rates: RateDecomposerConfig = Field(default_factory=RateDecomposerConfig)
    control: ControlLoopConfig = Field(default_factory=ControlLoopConfig)
    vehicle: VehicleConfig = Field(default_factory=VehicleConfig)
    display: DisplayLayout = Field(default_factory=DisplayLayout)

    @classmethod
    def from_json_file(cls, filepath: str | Path) -> "AutopilotConfig":
        """Load configuration from a JSON file."""
        with open(filepath) as f:
            data = json.load(f)
        return cls.model_validate(data)

    def to_json_file(self, filepath: str | Path) -> None:
        """Save configuration to a JSON file."""
        Path(filepath).write_text(self.model_dump_json(indent=4))

    @classmethod
    def from_yaml_file(cls, filepath: str | Path) -> "AutopilotConfig":
        """Load configuration from a YAML file."""
        with open(filepath) as f:
            data = yaml.safe_load(f) or {}
        return cls.model_validate(data)

    def to_yaml_file(self, filepath: str | Path) -> None:
        """Save configuration to a YAML file with a units header."""
        body = yaml.safe_dump(
            self.model_dump(mode="json"), sort_keys=False, default_flow_style=None
        )
        Path(filepath).write_text(_YAML_HEADER + body)
