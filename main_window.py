# main_window.py
from __future__ import annotations

import logging
import sys
from typing import Dict, List

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from backend import Sources
from errors import CollaboratorError, ParseError
from rows import SourceRow
from store_config import ConfigStore
from theme import apply_dark_theme

log = logging.getLogger(__name__)

APP_NAME = "PACTL Mixer"


class MixerWindow(QMainWindow):
    def __init__(self, sources: Sources, store: ConfigStore) -> None:
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.resize(420, 320)

        self.sources = sources
        self.store = store
        self._max_volume = store.max_volume()
        self._rows: Dict[str, SourceRow] = {}

        self._build_ui()
        self._wire_timers()
        self._rebuild_rows()

    def _build_ui(self) -> None:
        root = QWidget()
        outer = QVBoxLayout()
        outer.setContentsMargins(12, 12, 12, 12)
        outer.setSpacing(10)
        root.setLayout(outer)
        self.setCentralWidget(root)

        title = QLabel("Mixer")
        title.setObjectName("Title")
        outer.addWidget(title)

        container = QWidget()
        self._list_layout = QVBoxLayout()
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        self._list_layout.setSpacing(8)
        self._list_layout.addStretch(1)
        container.setLayout(self._list_layout)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        scroll.setWidget(container)
        outer.addWidget(scroll, 1)

        self.empty_label = QLabel("No application streams.")
        self.empty_label.setObjectName("Muted")
        self.empty_label.setAlignment(Qt.AlignCenter)
        self._list_layout.insertWidget(0, self.empty_label)

        outer.addLayout(self._build_footer())

    def _build_footer(self) -> QHBoxLayout:
        footer = QHBoxLayout()
        footer.setSpacing(10)

        self.auto_refresh = QCheckBox("Auto refresh")
        self.auto_refresh.setChecked(self.store.auto_refresh())

        update_btn = QPushButton("Update")
        update_btn.setObjectName("Primary")
        update_btn.clicked.connect(self.refresh_everything)

        exit_btn = QPushButton("Exit")
        exit_btn.clicked.connect(self.close)

        footer.addWidget(self.auto_refresh)
        footer.addStretch(1)
        footer.addWidget(update_btn)
        footer.addWidget(exit_btn)
        return footer

    def _wire_timers(self) -> None:
        self.timer = QTimer(self)
        self.timer.setInterval(self.store.refresh_interval_ms())
        self.timer.timeout.connect(self._auto_refresh_tick)
        self.timer.start()

    def _refresh(self) -> None:
        self.sources.refresh()
        self.sources.apply_locks(self.store.locked_names())
        self._rebuild_rows()

    def _auto_refresh_tick(self) -> None:
        if not self.auto_refresh.isChecked():
            return
        # a slider being dragged would be reset underneath the user
        if any(r.volume.slider.isSliderDown() for r in self._rows.values()):
            return
        try:
            self._refresh()
        except (CollaboratorError, ParseError) as e:
            log.warning("auto refresh failed: %s", e)

    def refresh_everything(self) -> None:
        try:
            self._refresh()
        except (CollaboratorError, ParseError) as e:
            QMessageBox.critical(self, "pactl error", str(e))

    def _rebuild_rows(self) -> None:
        seen: List[str] = []
        for i, s in enumerate(self.sources):
            seen.append(s.name)
            row = self._rows.get(s.name)
            if row is None:
                row = SourceRow(self.sources, s, self._max_volume)
                row.lock_changed.connect(self.store.set_locked)
                self._rows[s.name] = row
            else:
                row.bind(s)
                self._list_layout.removeWidget(row)
            # keep widget order equal to registry order, after the empty label
            self._list_layout.insertWidget(i + 1, row)

        for name in [n for n in self._rows if n not in seen]:
            row = self._rows.pop(name)
            row.setParent(None)
            row.deleteLater()

        self.empty_label.setVisible(not self._rows)


def run_app(sources: Sources, store: ConfigStore) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    apply_dark_theme(app)

    w = MixerWindow(sources, store)
    w.show()
    return app.exec()
