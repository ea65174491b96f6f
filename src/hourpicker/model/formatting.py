"""Text rendering of decimal hours for the title view."""
from __future__ import annotations

from hourpicker.config import DisplayMode, HOUR_SUFFIX, MINUTE_SUFFIX
from hourpicker.model.time_converter import Sign, hours_to_components


def format_decimal(decimal_hours: float) -> str:
    return f"{decimal_hours:.2f}{HOUR_SUFFIX}"


def component_segments(decimal_hours: float) -> list[str]:
    """
    Text segments for the component display, e.g. ["-", "2h", "30m"].

    The "-" glyph is only present for negative values.
    """
    components = hours_to_components(decimal_hours)
    segments: list[str] = []
    if components.sign is Sign.MINUS:
        segments.append("-")
    segments.append(f"{components.hour}{HOUR_SUFFIX}")
    segments.append(f"{components.minute}{MINUTE_SUFFIX}")
    return segments


def format_hours(decimal_hours: float, mode: DisplayMode) -> str:
    """Render decimal hours according to the display mode."""
    if mode is DisplayMode.DECIMAL:
        return format_decimal(decimal_hours)
    return " ".join(component_segments(decimal_hours))
