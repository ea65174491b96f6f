from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from hourpicker.model.time_converter import is_valid_hours

logger = logging.getLogger(__name__)


class HoursBinding(QObject):
    """
    Host-owned decimal hours value with change notification.

    The host keeps this object and reads/writes the value; the picker
    observes `value_changed` and writes back on user edits.
    """
    value_changed = Signal(float)

    def __init__(self, value: float = 0.0, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._check_finite(value)
        self._value = float(value)

    def value(self) -> float:
        return self._value

    def set_value(self, value: float) -> None:
        self._check_finite(value)
        value = float(value)
        if value == self._value:
            return
        self._value = value
        logger.debug(f"Bound hours set to {value}")
        self.value_changed.emit(value)

    @staticmethod
    def _check_finite(value: float) -> None:
        if not is_valid_hours(value):
            raise ValueError(f"Hours value must be finite, got {value!r}")
