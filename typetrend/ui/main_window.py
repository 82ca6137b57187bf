from __future__ import annotations

import html
import logging
import time
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from typetrend import config
from typetrend.core.aggregate import WindowAverage
from typetrend.core.comparator import char_states
from typetrend.core.errors import StorageError
from typetrend.core.metrics import display_wpm, format_elapsed
from typetrend.core.sampler import SamplerHandle
from typetrend.core.session import TypingSession
from typetrend.ui.colors import TypingColors, state_style
from typetrend.ui.sound import SoundMode, tone_for

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


class MainWindow(QMainWindow):
    """Practice screen: target text, input line, live stats and history averages.

    Only reads from the :class:`TypingSession`; every change is pushed back
    through ``update_input``/``tick``/``finish``/``reset``.
    """

    def __init__(self, session: TypingSession, startup_warning: Optional[str] = None) -> None:
        super().__init__()
        self._session = session
        self._sample_timer: Optional[QTimer] = None
        self._sampling_handle: Optional[SamplerHandle] = None
        self._stat_labels: dict[str, QLabel] = {}
        self._aggregate_labels: dict[str, QLabel] = {}

        self.setWindowTitle(config.APP_NAME)
        self._build_ui()
        self._session.set_keystroke_hook(self.play_keystroke_feedback)
        self._refresh()

        self._idle_timer = QTimer(self)
        self._idle_timer.timeout.connect(self._refresh)
        self._idle_timer.start(config.AGGREGATE_REFRESH_MS)
        if startup_warning:
            self._warn(startup_warning)

    def _build_ui(self) -> None:
        root = QWidget()
        root.setStyleSheet(f"background: {TypingColors.BG};")
        layout = QHBoxLayout(root)

        practice = QFrame()
        practice.setStyleSheet(f"background: {TypingColors.PANEL_BG}; border-radius: 6px;")
        practice_layout = QVBoxLayout(practice)

        self.target_label = QLabel()
        self.target_label.setWordWrap(True)
        self.target_label.setTextFormat(Qt.RichText)
        self.target_label.setMinimumHeight(100)
        self.target_label.setStyleSheet(f"background: {TypingColors.CARD_BG}; padding: 8px; font-size: 16px;")
        practice_layout.addWidget(self.target_label)

        self.input_box = QLineEdit()
        self.input_box.textEdited.connect(self._on_text_edited)
        self.input_box.returnPressed.connect(self._finish_session)
        practice_layout.addWidget(self.input_box)

        stats = QGridLayout()
        for column, (key, title) in enumerate(
            (("wpm", "WPM"), ("accuracy", "Accuracy"), ("cpm", "CPM"), ("time", "Time"))
        ):
            header = QLabel(title)
            header.setAlignment(Qt.AlignCenter)
            header.setStyleSheet(f"color: {TypingColors.TEXT_MUTED}; font-weight: 600;")
            value = QLabel()
            value.setAlignment(Qt.AlignCenter)
            value.setStyleSheet(f"color: {TypingColors.TEXT_PRIMARY}; font-size: 18px;")
            stats.addWidget(header, 0, column)
            stats.addWidget(value, 1, column)
            self._stat_labels[key] = value
        practice_layout.addLayout(stats)

        self.samples_label = QLabel()
        self.samples_label.setStyleSheet(f"color: {TypingColors.TEXT_MUTED};")
        practice_layout.addWidget(self.samples_label)

        controls = QHBoxLayout()
        reset_button = QPushButton("Reset")
        reset_button.setStyleSheet(f"background: {TypingColors.PRIMARY}; color: white; padding: 4px 12px;")
        reset_button.clicked.connect(self._reset_session)
        controls.addWidget(reset_button)
        controls.addWidget(QLabel("Sound:"))
        self.sound_combo = QComboBox()
        for mode in SoundMode:
            self.sound_combo.addItem(mode.label, mode)
        controls.addWidget(self.sound_combo)
        controls.addStretch(1)
        practice_layout.addLayout(controls)

        layout.addWidget(practice, 2)

        aggregates = QFrame()
        aggregates.setStyleSheet(f"background: {TypingColors.PANEL_BG}; border-radius: 6px;")
        aggregates_layout = QVBoxLayout(aggregates)
        heading = QLabel("Aggregates")
        heading.setStyleSheet("font-size: 18px; font-weight: 700;")
        aggregates_layout.addWidget(heading)
        for key, title in (("hourly", "Hourly"), ("daily", "Daily"), ("overall", "Overall")):
            label = QLabel()
            label.setTextFormat(Qt.RichText)
            aggregates_layout.addWidget(QLabel(f"<b>{title}</b>"))
            aggregates_layout.addWidget(label)
            self._aggregate_labels[key] = label
        aggregates_layout.addStretch(1)
        layout.addWidget(aggregates, 1)

        self.setCentralWidget(root)
        self.input_box.setFocus()

    def play_keystroke_feedback(self, char: str) -> None:
        """Keystroke hook handed to the session."""
        tone = tone_for(char, self.sound_combo.currentData())
        if tone is None:
            return
        logger.debug("Keystroke tone %d Hz for %r", tone.frequency, char)
        QApplication.beep()

    def _on_text_edited(self, text: str) -> None:
        try:
            self._session.update_input(text, now_ms())
        except StorageError as e:
            self._warn(f"Session result may be lost: {e}")
        if self._session.input != text:
            # the session finished and started over
            self.input_box.setText(self._session.input)
        self._sync_sampling()
        self._refresh()

    def _finish_session(self) -> None:
        try:
            self._session.finish(now_ms())
        except StorageError as e:
            self._warn(f"Session result may be lost: {e}")
        self.input_box.clear()
        self._sync_sampling()
        self._refresh()

    def _reset_session(self) -> None:
        try:
            self._session.close(now_ms())
        except StorageError as e:
            self._warn(f"Session result may be lost: {e}")
        self.input_box.clear()
        self._sync_sampling()
        self._refresh()
        self.input_box.setFocus()

    def _sync_sampling(self) -> None:
        """Run one QTimer per sampling handle; drop it when the handle changes."""
        handle = self._session.handle
        if handle is self._sampling_handle:
            return
        if self._sample_timer is not None:
            self._sample_timer.stop()
            self._sample_timer.deleteLater()
            self._sample_timer = None
        self._sampling_handle = handle
        if handle is None:
            return
        timer = QTimer(self)
        timer.timeout.connect(lambda h=handle: self._on_tick(h))
        timer.start(config.SAMPLE_INTERVAL_MS)
        self._sample_timer = timer

    def _on_tick(self, handle: SamplerHandle) -> None:
        if self._session.tick(now_ms(), handle) is not None:
            self._refresh()

    def _refresh(self) -> None:
        session = self._session
        spans = []
        for char, state in zip(session.target, char_states(session.input, session.target)):
            spans.append(f'<span style="{state_style(state)}">{html.escape(char)}</span>')
        self.target_label.setText("".join(spans))

        metrics = session.live_metrics()
        self._stat_labels["wpm"].setText(f"{display_wpm(metrics.adjusted_wpm):.1f}")
        self._stat_labels["accuracy"].setText(f"{metrics.accuracy_percent:.1f}%")
        self._stat_labels["cpm"].setText(f"{metrics.cpm:.1f}")
        self._stat_labels["time"].setText(format_elapsed(session.timer.elapsed_seconds))

        samples = session.samples
        if samples:
            self.samples_label.setText(f"{len(samples)} samples, last {samples[-1].wpm:.1f} WPM")
        else:
            self.samples_label.setText("No samples yet")

        aggregates = session.aggregates(now_ms())
        self._set_window(self._aggregate_labels["hourly"], aggregates.hourly)
        self._set_window(self._aggregate_labels["daily"], aggregates.daily)
        self._set_window(self._aggregate_labels["overall"], aggregates.overall)

    def _set_window(self, label: QLabel, window: WindowAverage) -> None:
        label.setText(f"Avg WPM: {window.avg_wpm:.1f}<br>Avg Acc%: {window.avg_accuracy:.1f}")

    def _warn(self, message: str) -> None:
        logger.warning(message)
        self.statusBar().setStyleSheet(f"color: {TypingColors.WARNING};")
        self.statusBar().showMessage(message, 10000)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop the timers before the window goes away."""
        self._idle_timer.stop()
        if self._sample_timer is not None:
            self._sample_timer.stop()
        super().closeEvent(event)
