from packages.core.monitor.activity import ActivityTracker
from packages.core.monitor.idle_evaluator import evaluate_idle


def test_triggers_at_threshold():
    decision = evaluate_idle(60_000, 0, 60_000, monitoring=True, alarm_active=False)
    assert decision.trigger_alarm is True
    assert decision.remaining_ms == 0


def test_pending_before_threshold():
    decision = evaluate_idle(59_999, 0, 60_000, monitoring=True, alarm_active=False)
    assert decision.phase == "IDLE_PENDING"
    assert decision.trigger_alarm is False
    assert decision.remaining_ms == 1


def test_no_retrigger_while_alarm_active():
    decision = evaluate_idle(600_000, 0, 60_000, monitoring=True, alarm_active=True)
    assert decision.phase == "ALARM"
    assert decision.trigger_alarm is False


def test_paused_never_triggers():
    decision = evaluate_idle(600_000, 0, 60_000, monitoring=False, alarm_active=False)
    assert decision.phase == "PAUSED"
    assert decision.trigger_alarm is False


def test_tracker_keeps_most_recent_timestamp():
    now = [1_000]
    tracker = ActivityTracker(lambda: now[0])

    for t in (1_500, 1_500, 9_000, 12_345):
        now[0] = t
        tracker.record()

    assert tracker.last_activity_ms == 12_345
    assert tracker.elapsed_ms(13_000) == 655
