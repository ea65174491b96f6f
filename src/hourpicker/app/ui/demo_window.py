"""
Demo window showing the hour picker in its typical configurations.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QCheckBox, QPushButton, QLabel, QFrame
)

from hourpicker.app.state import HoursBinding
from hourpicker.app.ui.hour_picker import HourPicker
from hourpicker.config import DisplayMode, PickerConfig, VISIBLE_APP_NAME

logger = logging.getLogger(__name__)

# Values the "change externally" button flips between
EXTERNAL_VALUE_A = 2.3
EXTERNAL_VALUE_B = -15.8


class DemoWindow(QWidget):
    """
    Interactive example on top, the three preview configurations below.

    `config` only applies to the interactive picker.
    """
    def __init__(self, config: PickerConfig | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        config = config or PickerConfig(display_mode=DisplayMode.COMPONENTS, max_hours=30)
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(460, 520)

        layout = QVBoxLayout(self)

        # --- Interactive example ---
        grp = QGroupBox(self.tr("Example"), self)
        form = QVBoxLayout(grp)

        self.binding = HoursBinding(EXTERNAL_VALUE_A, self)

        self.chk_decimal = QCheckBox(self.tr("Decimal Time"), grp)
        self.chk_decimal.setChecked(config.is_decimal_time_format_used)
        self.chk_decimal.toggled.connect(self.on_decimal_toggled)
        form.addWidget(self.chk_decimal)

        self.btn_external = QPushButton(self.tr("Change hours externally"), grp)
        self.btn_external.clicked.connect(self.on_change_externally)
        form.addWidget(self.btn_external)

        self.picker = HourPicker.from_config(
            self.binding,
            config,
            title=self.tr("Title"),
            caption=self.tr("Caption text here"),
            parent=grp,
        )
        form.addWidget(self.picker)

        self.lbl_value = QLabel(grp)
        form.addWidget(self.lbl_value)
        self.binding.value_changed.connect(self._update_value_label)
        self._update_value_label(self.binding.value())

        layout.addWidget(grp)

        # --- Static configurations ---
        grp_static = QGroupBox(self.tr("Configurations"), self)
        static = QVBoxLayout(grp_static)
        self.static_bindings = [HoursBinding(25.4, self), HoursBinding(-25.4, self), HoursBinding(25.4, self)]
        configs = [
            dict(sign_picker_visible=True, display_mode=DisplayMode.COMPONENTS),
            dict(sign_picker_visible=True, display_mode=DisplayMode.DECIMAL),
            dict(sign_picker_visible=False, display_mode=DisplayMode.COMPONENTS),
        ]
        for i, (binding, kwargs) in enumerate(zip(self.static_bindings, configs)):
            if i:
                line = QFrame(grp_static)
                line.setFrameShape(QFrame.Shape.HLine)
                static.addWidget(line)
            static.addWidget(HourPicker(
                binding, title=self.tr("Title"), caption=self.tr("Caption text"),
                max_hours=30, parent=grp_static, **kwargs
            ))
        layout.addWidget(grp_static)
        layout.addStretch()

    @Slot(bool)
    def on_decimal_toggled(self, checked: bool) -> None:
        self.picker.set_display_mode(DisplayMode.DECIMAL if checked else DisplayMode.COMPONENTS)

    @Slot()
    def on_change_externally(self) -> None:
        new_value = EXTERNAL_VALUE_B if self.binding.value() == EXTERNAL_VALUE_A else EXTERNAL_VALUE_A
        logger.info(f"Changing hours externally to {new_value}")
        self.binding.set_value(new_value)

    @Slot(float)
    def _update_value_label(self, value: float) -> None:
        self.lbl_value.setText(self.tr("Value: {0}").format(value))
