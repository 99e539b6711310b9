from pydantic import BaseModel, Field

Triple = tuple[float, float, float]


class VehicleConfig(BaseModel):
    """
    Simulated rendezvous vehicle parameters.

    Angles are ordered (roll, pitch, yaw) and axes (x, y, z). Every actuator
    command changes the commanded rate by a fixed step, as the simulator's
    thruster buttons do.
    """

    angle_error: Triple = (0.0, 0.0, 0.0)  # deg
    angle_rate: Triple = (0.0, 0.0, 0.0)  # deg/s
    displacement: Triple = (0.0, 0.0, 0.0)  # m
    velocity: Triple = (0.0, 0.0, 0.0)  # m/s
    angular_step: float = Field(default=0.1, gt=0, description="deg/s per nudge")
    linear_step: float = Field(default=0.06, gt=0, description="m/s per nudge")
    step_size: float = Field(default=0.01, gt=0, description="Physics step in s")
    # Display resolution applied to readings; 0 disables rounding
    quantization: float = Field(default=0.0, ge=0)
