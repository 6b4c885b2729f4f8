"""
Main window: countdown pill, monitoring controls, settings and an activity log.
A tray icon carries the options menu so the app stays reachable when hidden.
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QCheckBox,
    QComboBox,
    QDoubleSpinBox,
    QInputDialog,
    QMenu,
    QMessageBox,
    QStyle,
    QSystemTrayIcon,
)

from packages.shared.config import AppConfig, IDLE_TIME_PRESETS, apply_config_update
from packages.shared.store import ConfigStore
from packages.core.alerts.messages import build_alert_payload, idle_time_changed_payload
from packages.core.monitor.idle_monitor import IdleMonitor
from packages.core.monitor.qt_scheduler import QtScheduler
from packages.core.monitor.types import StatusDisplay

from .activity_filter import ActivityEventFilter
from .components import Card, DangerButton, PrimaryButton, SecondaryButton, StatusPill
from .host_alerts import build_alert_backends
from .theme import Theme

log = logging.getLogger(__name__)

SOUND_TYPE_LABELS = [
    ("beep", "Simple Beep"),
    ("alarm", "Alarm Bell"),
    ("notification", "Notification"),
]
CUSTOM_IDLE_LABEL = "Custom..."


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Get Back To Work")
        self.resize(900, 680)
        self.setMinimumSize(720, 560)

        self.theme = Theme("dark")

        self.store = ConfigStore()
        self.cfg: AppConfig = self.store.load()

        self._build_tray()
        self.notifier, self.sound = build_alert_backends(self.tray)

        self.monitor = IdleMonitor(
            config=self.cfg.to_monitor_config(),
            scheduler=QtScheduler(self),
            notifier=self.notifier,
            sound=self.sound,
        )
        self.monitor.on_event(self._on_monitor_event)
        self.monitor.on_display(self._on_display)
        self._alarm_box: Optional[QMessageBox] = None

        self._build_ui()
        self.setStyleSheet(self.theme.get_stylesheet())
        self._load_to_ui()

        self._activity_filter = ActivityEventFilter(self.monitor, self)
        QApplication.instance().installEventFilter(self._activity_filter)

        self.monitor.start()

    # UI construction

    def _build_tray(self) -> None:
        self.tray = QSystemTrayIcon(self)
        self.tray.setIcon(QApplication.style().standardIcon(QStyle.SP_MessageBoxWarning))
        self.tray.setToolTip("Get Back To Work (click for options)")

        menu = QMenu(self)
        actions = [
            ("Show Window", self._show_window),
            ("Start Monitoring", self._start_monitoring),
            ("Stop Monitoring", self._stop_monitoring),
            ("Reset Timer", self._reset_timer),
            ("Change Idle Time", self._change_idle_time),
            ("Sound Settings", self._show_sound_settings),
            ("Dismiss Alarm", self._dismiss_alarm),
        ]
        for label, slot in actions:
            action = QAction(label, menu)
            action.triggered.connect(slot)
            menu.addAction(action)
        menu.addSeparator()
        quit_action = QAction("Quit", menu)
        quit_action.triggered.connect(QApplication.instance().quit)
        menu.addAction(quit_action)

        self.tray.setContextMenu(menu)
        self.tray.activated.connect(self._on_tray_activated)
        if QSystemTrayIcon.isSystemTrayAvailable():
            self.tray.show()

    def _build_ui(self) -> None:
        root = QWidget()
        self.setCentralWidget(root)
        main_layout = QVBoxLayout(root)
        main_layout.setContentsMargins(24, 24, 24, 24)
        main_layout.setSpacing(20)

        title = QLabel("Get Back To Work")
        title.setObjectName("TitleLabel")
        main_layout.addWidget(title)
        subtitle = QLabel("An alarm sounds when you have been idle for too long.")
        subtitle.setObjectName("SubtitleLabel")
        main_layout.addWidget(subtitle)

        self.status_pill = StatusPill("Paused")
        main_layout.addWidget(self.status_pill)

        controls = QHBoxLayout()
        controls.setSpacing(12)
        self.btn_start = PrimaryButton("Start Monitoring")
        self.btn_start.clicked.connect(self._start_monitoring)
        controls.addWidget(self.btn_start)
        self.btn_stop = SecondaryButton("Stop")
        self.btn_stop.clicked.connect(self._stop_monitoring)
        controls.addWidget(self.btn_stop)
        self.btn_reset = SecondaryButton("Reset Timer")
        self.btn_reset.clicked.connect(self._reset_timer)
        controls.addWidget(self.btn_reset)
        controls.addStretch()
        self.btn_dismiss = DangerButton("Dismiss")
        self.btn_dismiss.setEnabled(False)
        self.btn_dismiss.clicked.connect(self._dismiss_alarm)
        controls.addWidget(self.btn_dismiss)
        main_layout.addLayout(controls)

        bottom = QHBoxLayout()
        bottom.setSpacing(20)
        bottom.addWidget(self._build_settings_card(), 1)
        bottom.addWidget(self._build_activity_card(), 1)
        main_layout.addLayout(bottom, 1)

    def _build_settings_card(self) -> Card:
        card = Card()
        layout = card.layout

        label = QLabel("Settings")
        label.setObjectName("SectionLabel")
        layout.addWidget(label)

        idle_row = QHBoxLayout()
        idle_label = QLabel("Idle time (minutes):")
        idle_label.setObjectName("BodyLabel")
        idle_row.addWidget(idle_label)
        self.combo_idle_preset = QComboBox()
        for minutes in IDLE_TIME_PRESETS:
            self.combo_idle_preset.addItem(f"{minutes} minute{'s' if minutes != 1 else ''}", float(minutes))
        self.combo_idle_preset.addItem(CUSTOM_IDLE_LABEL, None)
        self.combo_idle_preset.activated.connect(self._on_idle_preset)
        idle_row.addWidget(self.combo_idle_preset)
        self.spin_idle_minutes = QDoubleSpinBox()
        self.spin_idle_minutes.setRange(0.1, 24 * 60)
        self.spin_idle_minutes.setDecimals(1)
        idle_row.addWidget(self.spin_idle_minutes)
        idle_row.addStretch()
        layout.addLayout(idle_row)

        check_row = QHBoxLayout()
        check_label = QLabel("Check interval (seconds):")
        check_label.setObjectName("BodyLabel")
        check_row.addWidget(check_label)
        self.spin_check_interval = QDoubleSpinBox()
        self.spin_check_interval.setRange(0.1, 60)
        self.spin_check_interval.setDecimals(1)
        check_row.addWidget(self.spin_check_interval)
        check_row.addStretch()
        layout.addLayout(check_row)

        self.sound_section = QLabel("Sound")
        self.sound_section.setObjectName("SectionLabel")
        layout.addWidget(self.sound_section)

        self.chk_sound = QCheckBox("Enable sound alerts")
        layout.addWidget(self.chk_sound)

        sound_row = QHBoxLayout()
        self.combo_sound_type = QComboBox()
        for value, text in SOUND_TYPE_LABELS:
            self.combo_sound_type.addItem(text, value)
        sound_row.addWidget(self.combo_sound_type)
        repeat_label = QLabel("repeat every (s):")
        repeat_label.setObjectName("BodyLabel")
        sound_row.addWidget(repeat_label)
        self.spin_sound_repeat = QDoubleSpinBox()
        self.spin_sound_repeat.setRange(1, 300)
        self.spin_sound_repeat.setDecimals(0)
        sound_row.addWidget(self.spin_sound_repeat)
        self.btn_test_sound = SecondaryButton("Play Test Sound")
        self.btn_test_sound.clicked.connect(self._test_sound)
        sound_row.addWidget(self.btn_test_sound)
        sound_row.addStretch()
        layout.addLayout(sound_row)

        self.btn_save = PrimaryButton("Save Settings")
        self.btn_save.clicked.connect(self._save_config)
        layout.addWidget(self.btn_save)
        layout.addStretch()
        return card

    def _build_activity_card(self) -> Card:
        card = Card()
        layout = card.layout

        label = QLabel("Activity")
        label.setObjectName("SectionLabel")
        layout.addWidget(label)

        self.events = QListWidget()
        layout.addWidget(self.events, 1)

        hint = QLabel("Tip: any key press or click in this window counts as activity.")
        hint.setObjectName("HintLabel")
        layout.addWidget(hint)
        return card

    def _load_to_ui(self) -> None:
        cfg = self.cfg
        self.spin_idle_minutes.setValue(cfg.idle_time_in_minutes)
        preset = self.combo_idle_preset.findData(cfg.idle_time_in_minutes)
        self.combo_idle_preset.setCurrentIndex(preset if preset >= 0 else self.combo_idle_preset.count() - 1)
        self.spin_check_interval.setValue(cfg.check_interval_in_seconds)
        self.chk_sound.setChecked(cfg.sound_enabled)
        self.combo_sound_type.setCurrentIndex(max(0, self.combo_sound_type.findData(cfg.sound_type)))
        self.spin_sound_repeat.setValue(cfg.sound_repeat_seconds)

    # Monitor callbacks (run on the Qt thread via QtScheduler)

    def _on_display(self, status: StatusDisplay) -> None:
        self.status_pill.show_status(status, self.monitor.is_monitoring())
        self.tray.setToolTip(f"Get Back To Work: {status.text}")

    def _on_monitor_event(self, evt: dict) -> None:
        t = evt.get("type")
        reason = evt.get("reason") or ""
        at = evt.get("at", "")
        self._append_event(f"{at} {t}" + (f" ({reason})" if reason else ""))

        if t == "ALARM_STARTED":
            self.btn_dismiss.setEnabled(True)
            self._show_alarm_box()
        elif t == "ALARM_CLEARED":
            self.btn_dismiss.setEnabled(False)
            self._close_alarm_box()
        elif t in ("MONITORING_STARTED", "MONITORING_STOPPED"):
            monitoring = t == "MONITORING_STARTED"
            self.btn_start.setEnabled(not monitoring)
            self.btn_stop.setEnabled(monitoring)

    def _append_event(self, line: str) -> None:
        self.events.insertItem(0, QListWidgetItem(line))

    # Alarm dialog

    def _show_alarm_box(self) -> None:
        if self._alarm_box is not None:
            return
        payload = build_alert_payload("IDLE_ALARM")
        box = QMessageBox(QMessageBox.Warning, payload["title"], payload["body"], QMessageBox.NoButton, self)
        dismiss = box.addButton("Dismiss", QMessageBox.AcceptRole)
        dismiss.clicked.connect(self._dismiss_alarm)
        box.setModal(False)
        box.show()
        self._alarm_box = box

    def _close_alarm_box(self) -> None:
        if self._alarm_box is None:
            return
        box, self._alarm_box = self._alarm_box, None
        box.close()
        box.deleteLater()

    # Commands

    def _start_monitoring(self) -> None:
        self.monitor.start()
        self._toast("MONITORING_STARTED")

    def _stop_monitoring(self) -> None:
        self.monitor.stop()
        self._toast("MONITORING_STOPPED")

    def _reset_timer(self) -> None:
        self.monitor.reset_timer()
        self._toast("TIMER_RESET")

    def _dismiss_alarm(self) -> None:
        self.monitor.acknowledge_alarm()

    def _test_sound(self) -> None:
        self.sound.play(self.combo_sound_type.currentData())

    def _show_sound_settings(self) -> None:
        self.showNormal()
        self.raise_()
        self.activateWindow()
        self.chk_sound.setFocus()

    def _on_idle_preset(self, index: int) -> None:
        minutes = self.combo_idle_preset.itemData(index)
        if minutes is None:
            self.spin_idle_minutes.setFocus()
            return
        self.spin_idle_minutes.setValue(minutes)

    def _change_idle_time(self) -> None:
        labels = [self.combo_idle_preset.itemText(i) for i in range(self.combo_idle_preset.count())]
        choice, ok = QInputDialog.getItem(
            self,
            "Change Idle Time",
            f"Current idle time: {self.cfg.idle_time_in_minutes:g} minutes",
            labels,
            0,
            False,
        )
        if not ok:
            return
        minutes = self.combo_idle_preset.itemData(labels.index(choice))
        if minutes is None:
            minutes, ok = QInputDialog.getDouble(
                self, "Change Idle Time", "Enter idle time in minutes", self.cfg.idle_time_in_minutes, 0.1, 24 * 60, 1
            )
            if not ok:
                return
        if self._apply_changes(idle_time_in_minutes=minutes):
            payload = idle_time_changed_payload(self.cfg.idle_time_in_minutes)
            self.notifier.notify(payload["title"], payload["body"])
            self._load_to_ui()

    def _save_config(self) -> None:
        self._apply_changes(
            idle_time_in_minutes=self.spin_idle_minutes.value(),
            check_interval_in_seconds=self.spin_check_interval.value(),
            sound_enabled=self.chk_sound.isChecked(),
            sound_type=self.combo_sound_type.currentData(),
            sound_repeat_seconds=self.spin_sound_repeat.value(),
        )

    def _apply_changes(self, **changes) -> bool:
        updated = apply_config_update(self.cfg, **changes)
        if updated is self.cfg:
            self._append_event("Config rejected, previous values kept.")
            self._load_to_ui()
            return False

        self.cfg = updated
        self.store.save(self.cfg)
        self.monitor.update_config(self.cfg.to_monitor_config())
        self._append_event("Config saved.")
        return True

    def _toast(self, kind: str) -> None:
        payload = build_alert_payload(kind)
        self.notifier.notify(payload["title"], payload["body"])

    def _on_tray_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self.tray.contextMenu().popup(self.tray.geometry().center())

    def _show_window(self) -> None:
        self.showNormal()
        self.raise_()
        self.activateWindow()
