"""Adapters between the autopilot and a text display with push buttons.

The display is reached only through two callables: one returning the text of
an element by key, one pressing a control by key. How elements are found
(a browser page, a test double) is up to the embedding application.
"""

from collections.abc import Callable

from ..common import Angle, Axis, Direction, parse_reading
from ..config import DisplayLayout


class DisplayTelemetry:
    """TelemetrySource that parses the numeric prefix of display text."""

    def __init__(
        self, read_text: Callable[[str], str], layout: DisplayLayout | None = None
    ) -> None:
        self.read_text = read_text
        self.layout = layout or DisplayLayout()

    def _read(self, key: str) -> float:
        return parse_reading(self.read_text(key), source=key)

    def angle_error(self, angle: Angle) -> float:
        return self._read(self.layout.angle_error_key.format(angle=angle.value))

    def angle_rate(self, angle: Angle) -> float:
        return self._read(self.layout.angle_rate_key.format(angle=angle.value))

    def axis_displacement(self, axis: Axis) -> float:
        return self._read(self.layout.axis_displacement_key.format(axis=axis.value))

    def combined_angular_rate(self) -> float:
        return self._read(self.layout.combined_angular_rate_key)

    def combined_speed_magnitude(self) -> float:
        return self._read(self.layout.combined_speed_key)


class ButtonActuator:
    """Actuator that presses the button bound to a target and direction."""

    def __init__(
        self, press: Callable[[str], None], layout: DisplayLayout | None = None
    ) -> None:
        self.press = press
        self.layout = layout or DisplayLayout()

    def button_for(self, target: Axis | Angle, direction: Direction) -> str:
        """Key of the control that nudges ``target`` in ``direction``."""
        if isinstance(target, Angle):
            label = self.layout.angle_labels[target.value][direction.value]
            return self.layout.angle_button_key.format(angle=target.value, label=label)
        label = self.layout.axis_labels[target.value][direction.value]
        return self.layout.translate_button_key.format(axis=target.value, label=label)

    def command(self, target: Axis | Angle, direction: Direction) -> None:
        self.press(self.button_for(target, direction))
