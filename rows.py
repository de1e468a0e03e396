# rows.py
from __future__ import annotations

import logging
from typing import Optional, Tuple

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from backend import Sources
from errors import CollaboratorError
from models import TrackedSource
from widgets import StatusPill, ToggleSwitch, VolumeSlider

log = logging.getLogger(__name__)


class SourceRow(QWidget):
    lock_changed = Signal(str, bool)

    def __init__(self, sources: Sources, source: TrackedSource, max_volume: int = 200) -> None:
        super().__init__()
        self.setObjectName("RowCard")

        self.sources = sources
        self.source = source
        self._error: Optional[str] = None

        self.title = QLabel("")
        self.title.setObjectName("RowTitle")
        self.title.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)

        self.status = StatusPill()

        self.volume = VolumeSlider(max_volume)
        self.mute = ToggleSwitch(on_color="#e58b8b")
        self.mute.setToolTip("Mute")
        self.lock = ToggleSwitch(on_color="#d6b86a")
        self.lock.setToolTip("Keep this source listed while its stream is gone")

        top = QHBoxLayout()
        top.setSpacing(10)
        top.addWidget(self.title, 1)
        top.addWidget(self.status, 0, Qt.AlignVCenter)

        ctl = QHBoxLayout()
        ctl.setSpacing(10)
        ctl.addWidget(QLabel("Volume"))
        ctl.addWidget(self.volume, 1)
        ctl.addWidget(QLabel("Mute"))
        ctl.addWidget(self.mute, 0, Qt.AlignVCenter)
        ctl.addWidget(QLabel("Lock"))
        ctl.addWidget(self.lock, 0, Qt.AlignVCenter)

        col = QVBoxLayout()
        col.setContentsMargins(10, 8, 10, 8)
        col.setSpacing(6)
        col.addLayout(top)
        col.addLayout(ctl)
        self.setLayout(col)

        self.volume.committed.connect(self._on_volume)
        self.mute.toggled.connect(self._on_mute)
        self.lock.toggled.connect(self._on_lock)
        self.sync_from_source()

    def bind(self, source: TrackedSource) -> None:
        self.source = source
        self._error = None
        self.sync_from_source()

    def sync_from_source(self) -> None:
        s = self.source
        self.title.setText(f"{s.name or '(unnamed)'} (id: {s.id})")
        self.volume.set_value_silently(s.volume)
        self.mute.set_checked_silently(s.mute)
        self.lock.set_checked_silently(s.locked)

        live = not s.is_stale
        self.volume.setEnabled(live)
        self.mute.setEnabled(live)
        self._sync_status()

    def _sync_status(self) -> None:
        if self._error is not None:
            self.status.set_state("error")
            self.status.setToolTip(self._error)
        elif self.source.is_stale:
            self.status.set_state("stale")
            self.status.setToolTip("No stream with this name right now.")
        else:
            self.status.set_state("live")
            self.status.setToolTip("")

    def _push(self, before: Tuple[int, bool], what: str) -> None:
        try:
            self.sources.flush_if_changed(self.source, before)
            self._error = None
        except CollaboratorError as e:
            log.warning("error (when changing %s.%s): %s", self.source.id, what, e)
            self._error = str(e)
        self._sync_status()

    def _on_volume(self, v: int) -> None:
        before = self.source.state()
        self.source.volume = v
        self._push(before, "volume")

    def _on_mute(self, checked: bool) -> None:
        before = self.source.state()
        self.source.mute = checked
        self._push(before, "mute")

    def _on_lock(self, checked: bool) -> None:
        self.source.locked = checked
        self.lock_changed.emit(self.source.name, checked)
