"""
Hour Picker Widget
==================
An expandable picker for positive and negative hours.

The widget shows a title row with the current value and, below it, three
selector columns (sign, hour, minute). The value itself is owned by the host
through an `HoursBinding`:

    binding = HoursBinding(2.5)
    picker = HourPicker(binding, title="Overtime", caption="Balance of this month",
                        max_hours=30, display_mode=DisplayMode.COMPONENTS)
    binding.value_changed.connect(lambda v: print(f"New value: {v}"))
"""
from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QWidget, QVBoxLayout

from hourpicker.app.state import HoursBinding
from hourpicker.app.ui.multi_picker import MultiPicker, PickerColumn
from hourpicker.app.ui.title_view import TitleViewButton
from hourpicker.config import (
    DEFAULT_MAX_HOURS, DisplayMode, HOUR_SUFFIX, MINUTE_STEP, MINUTE_SUFFIX, MINUTES_PER_HOUR,
    PickerConfig, SIGN_VALUES
)
from hourpicker.controller.sync import SelectorState, ValueSyncController

logger = logging.getLogger(__name__)


class HourPicker(QWidget):
    """Hour picker bound to a host-owned decimal hours value."""

    def __init__(
        self,
        binding: HoursBinding,
        *,
        display_mode: DisplayMode,
        title: str = "",
        caption: str = "",
        max_hours: int = DEFAULT_MAX_HOURS,
        sign_picker_visible: bool = True,
        title_view_visible: bool = True,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._binding = binding
        self._sign_picker_visible = sign_picker_visible
        self._title_view_visible = title_view_visible
        self._is_expanded = False

        self.sign_values: list[str] = list(SIGN_VALUES)
        self.hour_values: list[int] = list(range(0, max_hours + 1))
        self.minute_values: list[int] = list(range(0, MINUTES_PER_HOUR, MINUTE_STEP))

        self._controller = ValueSyncController(binding, max_hour=max_hours, parent=self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.title_view = TitleViewButton(title, caption, self._controller.value(), display_mode, self)
        self.title_view.clicked.connect(self.toggle_expanded)
        self.title_view.setVisible(title_view_visible)
        layout.addWidget(self.title_view)

        self.multi_picker = MultiPicker(self._build_columns(), self)
        self.multi_picker.set_selection(self._picker_indices(self._controller.selector_state()))
        layout.addWidget(self.multi_picker)

        # wiring
        self.multi_picker.selection_changed.connect(self._on_picker_changed)
        self._controller.indices_changed.connect(self._on_indices_changed)
        self._controller.value_committed.connect(self._refresh_title)

        self._update_picker_visibility()

    @classmethod
    def from_config(
        cls,
        binding: HoursBinding,
        config: PickerConfig,
        title: str = "",
        caption: str = "",
        parent: QWidget | None = None
    ) -> HourPicker:
        return cls(
            binding,
            display_mode=config.display_mode,
            title=title,
            caption=caption,
            max_hours=config.max_hours,
            sign_picker_visible=config.sign_picker_visible,
            title_view_visible=config.title_view_visible,
            parent=parent,
        )

    # ---- public API ----

    def controller(self) -> ValueSyncController:
        return self._controller

    def value(self) -> float:
        return self._controller.value()

    def is_sign_picker_visible(self) -> bool:
        return self._sign_picker_visible

    def display_mode(self) -> DisplayMode:
        return self.title_view.display_mode()

    def set_display_mode(self, mode: DisplayMode) -> None:
        self.title_view.set_display_mode(mode)

    def is_expanded(self) -> bool:
        """Whether the selector columns are shown."""
        return self._is_expanded or not self._title_view_visible

    @Slot()
    def toggle_expanded(self) -> None:
        self._is_expanded = not self._is_expanded
        logger.debug(f"Picker expanded: {self._is_expanded}")
        self._update_picker_visibility()

    # ---- internals ----

    def _build_columns(self) -> list[PickerColumn]:
        columns = [
            PickerColumn(self.hour_values, HOUR_SUFFIX),
            PickerColumn(self.minute_values, MINUTE_SUFFIX),
        ]
        if self._sign_picker_visible:
            columns.insert(0, PickerColumn(self.sign_values))
        return columns

    def _picker_indices(self, state: SelectorState) -> tuple[int, ...]:
        if self._sign_picker_visible:
            return state.as_tuple()
        return state.hour_index, state.minute_index

    def _selector_state(self, indices: Sequence[int]) -> SelectorState:
        if self._sign_picker_visible:
            return SelectorState(*indices)
        # Without a sign column the sign is kept from the current value
        sign_index = self._controller.selector_state().sign_index
        return SelectorState(sign_index, *indices)

    def _update_picker_visibility(self) -> None:
        self.multi_picker.setVisible(self.is_expanded())

    @Slot(object)
    def _on_picker_changed(self, indices: Sequence[int]) -> None:
        self._controller.on_selector_changed(self._selector_state(indices))

    @Slot(object)
    def _on_indices_changed(self, state: SelectorState) -> None:
        self.multi_picker.set_selection(self._picker_indices(state))
        self._refresh_title()

    @Slot()
    def _refresh_title(self) -> None:
        self.title_view.set_hours(self._controller.value())
