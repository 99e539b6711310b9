from __future__ import annotations

import math
import re
from typing import Any

_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?\d+(?:\.\d+)?)")


class TelemetryReadError(ValueError):
    """A telemetry value could not be read as a finite number.

    This is a broken collaborator contract, not a recoverable condition: the
    control loop must not act on stale or missing data.
    """


def to_reading(val: Any, source: str = "telemetry") -> float:
    """Coerce a telemetry value to a finite float or raise TelemetryReadError."""
    if isinstance(val, bool) or val is None:
        raise TelemetryReadError(f"{source}: expected numeric value, got {val!r}")
    try:
        value = float(val)
    except (TypeError, ValueError):
        raise TelemetryReadError(
            f"{source}: expected numeric value, got {val!r}"
        ) from None
    if not math.isfinite(value):
        raise TelemetryReadError(f"{source}: non-finite value {val!r}")
    return value


def parse_reading(text: str, source: str = "display") -> float:
    """Extract the signed decimal prefix of a display string.

    Display elements render values followed by units (``"-12.3 m"``,
    ``"0.20 °/s"``); only the leading number is meaningful.
    """
    if not isinstance(text, str):
        raise TelemetryReadError(f"{source}: expected text, got {text!r}")
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        raise TelemetryReadError(f"{source}: no numeric prefix in {text!r}")
    return float(match.group(1))
