# widgets.py
from __future__ import annotations

from PySide6.QtCore import Qt, QRectF, QEasingCurve, QSize, QVariantAnimation, Signal
from PySide6.QtGui import QPainter, QColor, QPen
from PySide6.QtWidgets import QAbstractButton, QHBoxLayout, QLabel, QSlider, QWidget


class ToggleSwitch(QAbstractButton):
    """
    Checkable pill with a sliding knob. The track takes `on_color` when checked,
    so a muted stream reads red and a locked one amber.
    """

    KNOB_PAD = 3.0

    def __init__(self, on_color: str = "#7fd6a6", off_color: str = "#3a3a42", parent=None) -> None:
        super().__init__(parent)
        self.setCheckable(True)
        self.setCursor(Qt.PointingHandCursor)
        self.setFixedSize(self.sizeHint())

        self._track = {True: QColor(on_color), False: QColor(off_color)}
        self._pos = 0.0  # knob position, 0 = off side, 1 = on side

        self._slide = QVariantAnimation(self)
        self._slide.setDuration(140)
        self._slide.setEasingCurve(QEasingCurve.InOutCubic)
        self._slide.valueChanged.connect(self._move_knob)

        self.toggled.connect(self._start_slide)

    def sizeHint(self) -> QSize:
        return QSize(46, 24)

    def set_checked_silently(self, checked: bool) -> None:
        self._slide.stop()
        self.blockSignals(True)
        self.setChecked(checked)
        self.blockSignals(False)
        self._move_knob(1.0 if checked else 0.0)

    def _start_slide(self, checked: bool) -> None:
        self._slide.stop()
        self._slide.setStartValue(self._pos)
        self._slide.setEndValue(1.0 if checked else 0.0)
        self._slide.start()

    def _move_knob(self, pos) -> None:
        self._pos = float(pos)
        self.update()

    def _knob_rect(self, track: QRectF) -> QRectF:
        d = track.height() - 2 * self.KNOB_PAD
        travel = track.width() - 2 * self.KNOB_PAD - d
        return QRectF(track.left() + self.KNOB_PAD + self._pos * travel, track.top() + self.KNOB_PAD, d, d)

    def paintEvent(self, _event) -> None:
        track = QRectF(self.rect()).adjusted(0.5, 0.5, -0.5, -0.5)
        color = self._track[self.isChecked()]
        if not self.isEnabled():
            color = color.darker(160)

        p = QPainter(self)
        p.setRenderHint(QPainter.Antialiasing, True)
        p.setPen(QPen(QColor("#2a2a30"), 1.0))
        p.setBrush(color)
        p.drawRoundedRect(track, track.height() / 2.0, track.height() / 2.0)

        p.setPen(Qt.NoPen)
        p.setBrush(QColor("#f2f2f2"))
        p.drawEllipse(self._knob_rect(track))
        p.end()


class VolumeSlider(QWidget):
    """Horizontal 0..max slider with a trailing percent label. Emits on release, not on every tick."""

    committed = Signal(int)

    def __init__(self, maximum: int = 200, parent=None) -> None:
        super().__init__(parent)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(0, maximum)
        self.slider.setPageStep(5)
        self.slider.setTracking(False)

        self.label = QLabel("0%")
        self.label.setObjectName("Percent")
        self.label.setFixedWidth(48)
        self.label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)

        lay = QHBoxLayout()
        lay.setContentsMargins(0, 0, 0, 0)
        lay.setSpacing(8)
        lay.addWidget(self.slider, 1)
        lay.addWidget(self.label, 0)
        self.setLayout(lay)

        self.slider.sliderMoved.connect(self._show)
        self.slider.valueChanged.connect(self._on_value)

    def _show(self, v: int) -> None:
        self.label.setText(f"{v}%")

    def _on_value(self, v: int) -> None:
        self._show(v)
        self.committed.emit(v)

    def value(self) -> int:
        return self.slider.value()

    def set_value_silently(self, v: int) -> None:
        # volumes above the slider range still display their real percent
        self.slider.blockSignals(True)
        self.slider.setValue(min(v, self.slider.maximum()))
        self.slider.blockSignals(False)
        self._show(v)


class StatusPill(QLabel):
    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setAlignment(Qt.AlignCenter)
        self.setFixedWidth(80)
        self.set_state("live")

    def set_state(self, state: str) -> None:
        if state == "live":
            text, bg, bd, fg = "Live", "#233a2c", "#2f6b45", "#cfeedd"
        elif state == "stale":
            text, bg, bd, fg = "Gone", "#3a3424", "#7a6231", "#f3e6c8"
        elif state == "error":
            text, bg, bd, fg = "Error", "#3a2424", "#7a3131", "#f3c8c8"
        else:
            text, bg, bd, fg = state.title(), "#2a2a30", "#3a3a42", "#d6d6d6"

        self.setText(text)
        self.setStyleSheet(
            f"""
            QLabel {{
                background: {bg};
                border: 1px solid {bd};
                border-radius: 10px;
                padding: 4px 8px;
                color: {fg};
                font-weight: 600;
            }}
            """
        )
