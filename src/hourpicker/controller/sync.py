"""
Value Synchronization Controller
================================
Keeps the host-owned decimal hours value and the three selector indices
(sign, hour, minute) in step, without either side seeing its own echo.

Why is this file needed?
------------------------
Both sides notify on change. Pushing new indices into the selector makes the
selector report an index change, and writing a new value to the binding makes
the binding report a value change. Without a guard, every edit would bounce
back and forth.

The `_is_external_change` flag is a re-entrancy guard for the single GUI
thread, not a mutex. All transitions run synchronously inside the signal
handler that triggered them.

Classes:
    SyncState: QUIESCENT or PROPAGATING_EXTERNAL.
    SelectorState: The three selector indices.
    ValueSyncController: The state machine.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import logging
from typing import Sequence, Union

from PySide6.QtCore import QObject, Signal, Slot

from hourpicker.app.state import HoursBinding
from hourpicker.config import DEFAULT_MAX_HOURS, MINUTES_PER_HOUR
from hourpicker.model.time_converter import (
    Sign, components_to_hours, hours_to_components, is_valid_hours
)

logger = logging.getLogger(__name__)


class SyncState(IntEnum):
    QUIESCENT = 0
    PROPAGATING_EXTERNAL = 1


@dataclass(frozen=True)
class SelectorState:
    """Indices currently shown by the selector columns."""
    sign_index: int = Sign.PLUS
    hour_index: int = 0
    minute_index: int = 0

    @property
    def sign(self) -> Sign:
        return Sign(self.sign_index)

    def as_tuple(self) -> tuple[int, int, int]:
        return self.sign_index, self.hour_index, self.minute_index


IndicesLike = Union[SelectorState, Sequence[int]]


class ValueSyncController(QObject):
    """Two-way binding between one HoursBinding and one SelectorState."""
    indices_changed = Signal(object)  # SelectorState, push into the selector
    value_committed = Signal(float)  # user edit written to the binding
    state_changed = Signal(int)  # SyncState

    def __init__(
        self,
        binding: HoursBinding,
        max_hour: int = DEFAULT_MAX_HOURS,
        parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        if max_hour < 0:
            raise ValueError(f"max_hour must be >= 0, got {max_hour}")
        self._binding = binding
        self._max_hour = max_hour

        self._is_external_change = False
        self._value = self._sanitize(binding.value())
        self._selector = self._selector_from_hours(self._value)

        self._binding.value_changed.connect(self.on_external_change)

    # ---- accessors ----

    @property
    def max_hour(self) -> int:
        return self._max_hour

    def value(self) -> float:
        """Internal copy of the decimal hours."""
        return self._value

    def selector_state(self) -> SelectorState:
        return self._selector

    def state(self) -> SyncState:
        return SyncState.PROPAGATING_EXTERNAL if self._is_external_change else SyncState.QUIESCENT

    def is_propagating(self) -> bool:
        return self._is_external_change

    # ---- transitions ----

    @Slot(float)
    def on_external_change(self, value: float) -> None:
        """Host changed the bound value: rebuild the selector indices."""
        if self._is_external_change:
            logger.debug(f"Ignoring re-entrant external change to {value}")
            return

        value = self._sanitize(value)
        self._set_propagating(True)
        try:
            if self._value == value:
                # Echo of our own write from on_selector_changed
                return
            selector = self._selector_from_hours(value)
            self._value = value
            self._selector = selector
            logger.debug(f"External change to {value} -> {self._selector}")
            self.indices_changed.emit(self._selector)
        finally:
            self._set_propagating(False)

    @Slot(object)
    def on_selector_changed(self, indices: IndicesLike) -> None:
        """User moved one of the selector columns: write the new value to the host."""
        if self._is_external_change:
            # Side effect of pushing indices during an external change
            return

        raw = self._raw_indices(indices)
        self._selector = self._clamp(raw)
        candidate = components_to_hours(
            self._selector.hour_index,
            self._selector.minute_index,
            self._selector.sign,
        )
        logger.debug(f"Selector change {self._selector} -> {candidate}")
        self._value = candidate
        self._binding.set_value(candidate)
        if self._selector.as_tuple() != raw:
            self._push_selector()
        self.value_committed.emit(candidate)

    # ---- helpers ----

    def _set_propagating(self, flag: bool) -> None:
        if flag != self._is_external_change:
            self._is_external_change = flag
            self.state_changed.emit(int(self.state()))

    def _selector_from_hours(self, value: float) -> SelectorState:
        components = hours_to_components(value, max_hour=self._max_hour)
        return SelectorState(
            sign_index=int(components.sign),
            hour_index=components.hour,
            minute_index=components.minute,
        )

    def _push_selector(self) -> None:
        """Show the clamped indices in the selector; its echo is ignored."""
        self._set_propagating(True)
        try:
            self.indices_changed.emit(self._selector)
        finally:
            self._set_propagating(False)

    @staticmethod
    def _raw_indices(indices: IndicesLike) -> tuple[int, ...]:
        if isinstance(indices, SelectorState):
            return indices.as_tuple()
        raw = tuple(int(i) for i in indices)
        if len(raw) != 3:
            raise ValueError(f"Expected 3 selector indices (sign, hour, minute), got {len(raw)}")
        return raw

    def _clamp(self, raw: tuple[int, ...]) -> SelectorState:
        limits = (int(Sign.MINUS), self._max_hour, MINUTES_PER_HOUR - 1)
        clamped = tuple(min(max(i, 0), hi) for i, hi in zip(raw, limits))
        if clamped != raw:
            logger.warning(f"Selector indices {raw} out of range, clamped to {clamped}")
        return SelectorState(*clamped)

    @staticmethod
    def _sanitize(value: float) -> float:
        if not is_valid_hours(value):
            logger.warning(f"Non-finite hours value {value!r} replaced by 0.0")
            return 0.0
        return float(value)
