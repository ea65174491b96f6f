from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSizePolicy

from hourpicker.config import DisplayMode
from hourpicker.model.formatting import component_segments, format_decimal


class TitleTextView(QWidget):
    """A title with a smaller caption text below."""
    def __init__(self, title: str, caption: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.title_label = QLabel(title, self)
        self.caption_label = QLabel(caption, self)
        self.caption_label.setStyleSheet("color: gray; font-size: 11px;")
        self.caption_label.setVisible(bool(caption))

        layout.addWidget(self.title_label)
        layout.addWidget(self.caption_label)


class TitleViewButton(QWidget):
    """
    Clickable header row of the hour picker.

    Left: title and caption. Right: the current value, either as "2.50h" or as
    separate "-", "2h", "30m" segments.
    """
    clicked = Signal()

    def __init__(
        self,
        title: str,
        caption: str,
        decimal_hours: float,
        display_mode: DisplayMode,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self._decimal_hours = decimal_hours
        self._display_mode = display_mode
        self._pressed = False

        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        self.text_view = TitleTextView(title, caption, self)
        row.addWidget(self.text_view)
        row.addStretch(1)

        # sign, hour, minute segments; only the first one is used in decimal mode
        self._value_labels: list[QLabel] = []
        for _ in range(3):
            lbl = QLabel(self)
            lbl.setStyleSheet("color: palette(highlight);")
            row.addWidget(lbl)
            self._value_labels.append(lbl)

        self._refresh()

    def set_hours(self, decimal_hours: float) -> None:
        self._decimal_hours = decimal_hours
        self._refresh()

    def set_display_mode(self, mode: DisplayMode) -> None:
        self._display_mode = mode
        self._refresh()

    def display_mode(self) -> DisplayMode:
        return self._display_mode

    def value_text(self) -> str:
        """The value as currently shown, segments joined by spaces."""
        return " ".join(lbl.text() for lbl in self._value_labels if lbl.isVisibleTo(self))

    def _segments(self) -> list[str]:
        if self._display_mode is DisplayMode.DECIMAL:
            return [format_decimal(self._decimal_hours)]
        return component_segments(self._decimal_hours)

    def _refresh(self) -> None:
        segments = self._segments()
        for i, lbl in enumerate(self._value_labels):
            if i < len(segments):
                lbl.setText(segments[i])
                lbl.setVisible(True)
            else:
                lbl.clear()
                lbl.setVisible(False)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._pressed = True
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if self._pressed and event.button() == Qt.LeftButton and self.rect().contains(event.pos()):
            self.clicked.emit()
        self._pressed = False
        super().mouseReleaseEvent(event)
