"""
HourPicker
==========
A Qt (PySide6) picker for positive and negative hours, bound to a single
decimal hours value (e.g. 8.25 == 8h 15m).
"""
from hourpicker.app.state import HoursBinding
from hourpicker.app.ui.hour_picker import HourPicker
from hourpicker.config import DisplayMode, PickerConfig
from hourpicker.controller.sync import SelectorState, SyncState, ValueSyncController
from hourpicker.model.time_converter import (
    Sign, TimeComponents, components_to_hours, hours_to_components,
    hours_to_hour_magnitude, hours_to_minute_magnitude
)

__all__ = [
    "HoursBinding",
    "HourPicker",
    "DisplayMode",
    "PickerConfig",
    "SelectorState",
    "SyncState",
    "ValueSyncController",
    "Sign",
    "TimeComponents",
    "components_to_hours",
    "hours_to_components",
    "hours_to_hour_magnitude",
    "hours_to_minute_magnitude",
]
