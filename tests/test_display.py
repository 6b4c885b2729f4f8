from packages.core.monitor.display import format_remaining, render_status

BASE_MS = 1_700_000_000_000


def render(elapsed_ms, threshold_ms=300_000, now_ms=BASE_MS, monitoring=True, alarm_active=False):
    return render_status(
        now_ms,
        monitoring=monitoring,
        alarm_active=alarm_active,
        elapsed_ms=elapsed_ms,
        threshold_ms=threshold_ms,
    )


class TestPausedAndAlarm:
    def test_paused_when_not_monitoring(self):
        status = render(0, monitoring=False, alarm_active=True)
        assert status.text.endswith("Paused")
        assert status.severity == "normal"

    def test_alarm_blinks_on_half_second_boundary(self):
        first = render(0, alarm_active=True, now_ms=BASE_MS + 499)
        second = render(0, alarm_active=True, now_ms=BASE_MS + 500)
        assert first.text.endswith("IDLE!")
        assert second.text.endswith("GET BACK TO WORK!")
        assert first.severity == second.severity == "error"

    def test_blink_depends_only_on_clock(self):
        a = render(10, alarm_active=True, now_ms=BASE_MS + 1_250)
        b = render(99_999, alarm_active=True, now_ms=BASE_MS + 7_250)
        assert a == b


class TestCountdown:
    def test_fresh_countdown(self):
        status = render(1_000)
        assert status.text == "✔ 4m 59.0s"
        assert status.severity == "normal"

    def test_progress_tiers(self):
        assert render(30_000, threshold_ms=100_000).icon == "⌚"   # 70% left
        assert render(60_000, threshold_ms=100_000).icon == "⚠"   # 40% left
        assert render(80_000, threshold_ms=100_000).icon == "✖"   # 20% left

    def test_severity_escalates_near_the_end(self):
        assert render(300_000 - 61_000).severity == "normal"
        assert render(300_000 - 45_000).severity == "warning"
        assert render(300_000 - 30_000).severity == "warning"
        assert render(300_000 - 10_500).severity == "error"

    def test_tenths_are_shown(self):
        assert render(300_000 - 10_550).text.endswith("0m 10.5s")

    def test_active_when_countdown_not_started(self):
        assert render(0).text.endswith("Active")

    def test_active_when_idle_check_lags_behind(self):
        status = render(400_000)
        assert status.text.endswith("Active")
        assert status.severity == "normal"

    def test_non_positive_threshold_is_safe(self):
        assert render(5_000, threshold_ms=0).text.endswith("Active")


def test_format_remaining():
    assert format_remaining(0) == "0m 0.0s"
    assert format_remaining(125_950) == "2m 5.9s"
