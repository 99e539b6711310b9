# Reference tunings from the ISS docking simulator autopilot.
RATE_POLL_INTERVAL = 0.1  # s
CONTROL_INTERVAL = 0.02  # s
ANGLE_GAIN = 10.0  # s - time constant of the exponential error decay
ANGLE_TOLERANCE = 0.2  # deg
NEAR_FIELD_THRESHOLD = 5.0  # m
NEAR_DAMPENING = 500.0  # s
FAR_DAMPENING = 200.0  # s
