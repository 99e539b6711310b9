from pydantic import BaseModel


class DisplayLayout(BaseModel):
    """
    Element keys of a text telemetry display and its control buttons.

    Templates are formatted with ``angle``/``axis`` set to the identifier value
    and ``label`` set to the button label. The defaults follow the element
    naming of the ISS docking simulator page.
    """

    angle_error_key: str = "#{angle}>div.error"
    angle_rate_key: str = "#{angle}>div.rate"
    axis_displacement_key: str = "#{axis}-range>div.distance"
    combined_angular_rate_key: str = "#rate>div.rate"
    combined_speed_key: str = "#range>div.rate"
    angle_button_key: str = "#{angle}-{label}-button"
    translate_button_key: str = "#translate-{label}-button"
    # (decrease, increase) labels per identifier
    angle_labels: dict[str, tuple[str, str]] = {
        "roll": ("left", "right"),
        "pitch": ("down", "up"),
        "yaw": ("left", "right"),
    }
    axis_labels: dict[str, tuple[str, str]] = {
        "x": ("backward", "forward"),
        "y": ("left", "right"),
        "z": ("down", "up"),
    }
