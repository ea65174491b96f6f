from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import QWidget, QHBoxLayout, QComboBox, QSizePolicy


@dataclass(frozen=True)
class PickerColumn:
    """One column of the picker: the selectable values and a label suffix."""
    values: Sequence[object]
    suffix: str = ""

    def labels(self) -> list[str]:
        return [f"{v}{self.suffix}" for v in self.values]


class MultiPicker(QWidget):
    """
    Generic selector with N parallel columns of labelled values.

    Emits `selection_changed` with the tuple of all column indices whenever any
    column changes, whether by the user or via `set_selection`.
    """
    selection_changed = Signal(object)

    def __init__(self, columns: Sequence[PickerColumn], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        if not columns:
            raise ValueError("MultiPicker needs at least one column")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self._combos: list[QComboBox] = []
        for column in columns:
            combo = QComboBox(self)
            combo.addItems(column.labels())
            combo.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
            combo.currentIndexChanged.connect(self._relay_changed)
            layout.addWidget(combo)
            self._combos.append(combo)

    def column_count(self) -> int:
        return len(self._combos)

    def combo(self, column: int) -> QComboBox:
        return self._combos[column]

    def selection(self) -> tuple[int, ...]:
        return tuple(c.currentIndex() for c in self._combos)

    def set_selection(self, indices: Sequence[int]) -> None:
        if len(indices) != len(self._combos):
            raise ValueError(
                f"Expected {len(self._combos)} indices, got {len(indices)}"
            )
        for combo, index in zip(self._combos, indices):
            combo.setCurrentIndex(index)

    @Slot(int)
    def _relay_changed(self, _index: int) -> None:
        self.selection_changed.emit(self.selection())
