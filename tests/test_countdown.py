# tests/test_countdown.py
# Aritmética de la cuenta regresiva y comportamiento al llegar al objetivo.

from datetime import datetime, timedelta

from invitation.countdown import Countdown, compute_breakdown
from invitation.schemas import CountdownBreakdown

TARGET = datetime(2026, 4, 3, 14, 0, 0)


def test_two_days_before():
    b = compute_breakdown(TARGET, datetime(2026, 4, 1, 14, 0, 0))
    assert b == CountdownBreakdown(days=2, hours=0, minutes=0, seconds=0)


def test_mixed_units():
    now = TARGET - timedelta(days=3, hours=5, minutes=7, seconds=9, milliseconds=400)
    b = compute_breakdown(TARGET, now)
    assert (b.days, b.hours, b.minutes, b.seconds) == (3, 5, 7, 9)


def test_sub_second_remaining_floors_to_zero():
    b = compute_breakdown(TARGET, TARGET - timedelta(milliseconds=500))
    assert b.is_zero


def test_at_target_is_zero():
    assert compute_breakdown(TARGET, TARGET).is_zero


def test_after_target_is_never_negative():
    b = compute_breakdown(TARGET, TARGET + timedelta(days=10, hours=3))
    assert b == CountdownBreakdown()
    assert min(b.days, b.hours, b.minutes, b.seconds) == 0


def test_countdown_ticks_then_freezes_at_zero():
    countdown = Countdown(TARGET)
    assert countdown.tick(TARGET - timedelta(seconds=2)).seconds == 2
    assert not countdown.finished

    assert countdown.tick(TARGET).is_zero
    assert countdown.finished

    # Una vez terminado no se recalcula.
    assert countdown.tick(TARGET - timedelta(days=1)).is_zero


def test_countdown_already_past_starts_finished():
    countdown = Countdown(TARGET)
    assert countdown.tick(TARGET + timedelta(hours=1)).is_zero
    assert countdown.finished
