"""
Configuration & Constants
=========================
This module serves as the central registry for picker defaults and the
configuration object the widget is built from.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (23 hours, 60 minutes, "+"/"-")
   scattered throughout the code.
2. Persistence: Hosts can keep the picker setup in QSettings and restore it
   with `load_picker_config`.

Exports:
    DisplayMode: Decimal ("2.50h") or component ("2h 30m") rendering.
    PickerConfig: Validated construction parameters of the HourPicker.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# Global Constants
ORG_ID = "hourpicker"
APP_ID = "hourpicker-demo"
VISIBLE_APP_NAME = "HourPicker"

DEFAULT_MAX_HOURS: int = 23
MINUTES_PER_HOUR: int = 60
MINUTE_STEP: int = 1

SIGN_VALUES: tuple[str, str] = ("+", "-")
HOUR_SUFFIX = "h"
MINUTE_SUFFIX = "m"

SETTINGS_GROUP = "hourpicker"


class DisplayMode(Enum):
    """How the current value is rendered in the title view."""
    DECIMAL = "decimal"
    COMPONENTS = "components"

    @classmethod
    def parse(cls, name: str) -> DisplayMode:
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown display mode '{name}'. Expected one of: {[m.value for m in cls]}"
            ) from None


@dataclass
class PickerConfig:
    """Construction parameters of an HourPicker."""
    display_mode: DisplayMode
    max_hours: int = DEFAULT_MAX_HOURS
    sign_picker_visible: bool = True
    title_view_visible: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.display_mode, str):
            self.display_mode = DisplayMode.parse(self.display_mode)
        if self.max_hours < 0:
            raise ValueError(f"max_hours must be >= 0, got {self.max_hours}")

    @property
    def is_decimal_time_format_used(self) -> bool:
        return self.display_mode is DisplayMode.DECIMAL


def load_picker_config(settings: QSettings, group: str = SETTINGS_GROUP) -> PickerConfig:
    """
    Read a PickerConfig from QSettings, falling back to defaults for missing keys.

    Args:
        settings: The settings store (e.g. `QSettings()`).
        group: Settings group the keys live in.

    Returns:
        The validated configuration.
    """
    settings.beginGroup(group)
    try:
        config = PickerConfig(
            display_mode=DisplayMode.parse(
                settings.value("display_mode", DisplayMode.COMPONENTS.value, type=str)
            ),
            max_hours=settings.value("max_hours", DEFAULT_MAX_HOURS, type=int),
            sign_picker_visible=settings.value("sign_picker_visible", True, type=bool),
            title_view_visible=settings.value("title_view_visible", True, type=bool),
        )
    finally:
        settings.endGroup()
    logger.debug(f"Loaded picker config from group '{group}': {config}")
    return config


def save_picker_config(settings: QSettings, config: PickerConfig, group: str = SETTINGS_GROUP) -> None:
    settings.beginGroup(group)
    try:
        settings.setValue("display_mode", config.display_mode.value)
        settings.setValue("max_hours", config.max_hours)
        settings.setValue("sign_picker_visible", config.sign_picker_visible)
        settings.setValue("title_view_visible", config.title_view_visible)
    finally:
        settings.endGroup()
