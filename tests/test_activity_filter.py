"""Desktop host tests on the offscreen Qt platform."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication, QWidget

from conftest import ManualScheduler, RecordingNotifier, RecordingSound, monitor_config

from packages.core.monitor.idle_monitor import IdleMonitor
from apps.desktop.ui.activity_filter import ActivityEventFilter


@pytest.fixture(scope="session")
def qapp():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def alarmed(qapp):
    scheduler = ManualScheduler()
    monitor = IdleMonitor(
        config=monitor_config(),
        scheduler=scheduler,
        notifier=RecordingNotifier(),
        sound=RecordingSound(),
        clock=scheduler.clock,
    )
    activity_filter = ActivityEventFilter(monitor)
    qapp.installEventFilter(activity_filter)
    widget = QWidget()
    widget.show()

    monitor.start()
    scheduler.advance(61_000)
    assert monitor.is_alarm_active()

    yield scheduler, monitor, widget

    qapp.removeEventFilter(activity_filter)
    widget.close()


def wait_until(predicate, timeout_ms: int = 3000) -> bool:
    waited = 0
    while not predicate() and waited < timeout_ms:
        QTest.qWait(20)
        waited += 20
    return predicate()


def test_key_press_acknowledges_alarm(alarmed):
    scheduler, monitor, widget = alarmed

    QTest.keyClick(widget, Qt.Key_A)

    assert monitor.is_alarm_active() is False
    assert monitor.elapsed_ms() == 0


def test_mouse_press_acknowledges_alarm(alarmed):
    scheduler, monitor, widget = alarmed

    QTest.mouseClick(widget, Qt.LeftButton)

    assert monitor.is_alarm_active() is False


def test_input_while_stopped_is_ignored(alarmed):
    scheduler, monitor, widget = alarmed
    monitor.stop()
    before = monitor.get_state().last_activity_ms
    scheduler.advance(5_000)

    QTest.keyClick(widget, Qt.Key_A)

    assert monitor.is_alarm_active() is True
    assert monitor.get_state().last_activity_ms == before


def test_alarm_box_does_not_dismiss_itself(qapp, tmp_path, monkeypatch):
    monkeypatch.delenv("GET_BACK_TO_WORK_HOME", raising=False)
    monkeypatch.setenv("APPDATA", str(tmp_path))
    from apps.desktop.ui.window import MainWindow

    win = MainWindow()
    win.show()
    try:
        win.monitor.update_config(
            {**win.cfg.to_monitor_config(), "idle_threshold_ms": 300, "check_interval_ms": 50}
        )
        win.monitor.reset_timer()

        assert wait_until(win.monitor.is_alarm_active)
        assert win._alarm_box is not None
        QTest.qWait(1000)

        log_lines = [win.events.item(i).text() for i in range(win.events.count())]
        assert win.monitor.is_alarm_active() is True
        assert not any("ALARM_CLEARED" in line for line in log_lines)
    finally:
        win.monitor.acknowledge_alarm()
        win.monitor.stop()
        qapp.removeEventFilter(win._activity_filter)
        win.close()
