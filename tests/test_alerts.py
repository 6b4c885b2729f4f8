from packages.core.alerts.messages import build_alert_payload, idle_time_changed_payload
from packages.core.alerts.notifier import TOAST_SECONDS, ToastNotifierWin10
from packages.core.alerts.sound import TONE_PATTERNS, WinBeepSound, pattern_for


def test_tone_patterns_are_ordered():
    for tones in TONE_PATTERNS.values():
        offsets = [t.offset_ms for t in tones]
        assert offsets == sorted(offsets)
        assert offsets[0] == 0


def test_unknown_sound_type_falls_back_to_beep():
    assert pattern_for("kazoo") == TONE_PATTERNS["beep"]


def test_win_beep_plays_pattern_frequencies():
    beeps = []
    player = WinBeepSound(beep=lambda freq, dur: beeps.append((freq, dur)), threaded=False)

    player.play("notification")

    assert beeps == [(1200, 150), (1600, 150)]


def test_win_beep_failure_is_logged_not_raised(caplog):
    def broken(freq, dur):
        raise RuntimeError("no speaker")

    WinBeepSound(beep=broken, threaded=False).play("beep")

    assert "Failed to play sound" in caplog.text


def test_alert_payloads():
    assert build_alert_payload("WELCOME_BACK") == {
        "title": "Get Back To Work",
        "body": "Welcome back to work!",
    }
    assert idle_time_changed_payload(2.5)["body"] == "Idle time set to 2.5 minutes"


class FakeToaster:
    def __init__(self, active=False):
        self.active = active
        self.shown = []

    def notification_active(self):
        return self.active

    def show_toast(self, title, body, duration, threaded):
        self.shown.append((title, body, duration))


def test_toast_is_shown_when_none_visible():
    toaster = FakeToaster()

    ToastNotifierWin10(toaster).notify("Get Back To Work", "Get back to work!")

    assert toaster.shown == [("Get Back To Work", "Get back to work!", TOAST_SECONDS)]


def test_repeat_alert_is_dropped_while_toast_visible():
    toaster = FakeToaster(active=True)

    ToastNotifierWin10(toaster).notify("Get Back To Work", "Get back to work!")

    assert toaster.shown == []
