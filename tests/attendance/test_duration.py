from src.attendease.attendease.attendance.duration import calculate_total_hours
from src.attendease.attendease.core.constants import INVALID_TIMES


def test_full_day():
    assert calculate_total_hours("09:00:00", "17:30:00", "2026-02-02") == "8h 30m"


def test_leftover_seconds_are_dropped():
    assert calculate_total_hours("09:00:30", "09:59:59", "2026-02-02") == "0h 59m"


def test_checkout_before_checkin_is_invalid():
    assert calculate_total_hours("17:00:00", "09:00:00", "2026-02-02") == INVALID_TIMES


def test_equal_times_are_invalid():
    assert calculate_total_hours("09:00:00", "09:00:00", "2026-02-02") == INVALID_TIMES


def test_unparsable_time_is_invalid():
    assert calculate_total_hours("nine", "17:00:00", "2026-02-02") == INVALID_TIMES
    assert calculate_total_hours("09:00:00", "25:00:00", "2026-02-02") == INVALID_TIMES


def test_missing_input_gives_no_duration():
    assert calculate_total_hours("09:00:00", None, "2026-02-02") is None
    assert calculate_total_hours(None, "17:00:00", "2026-02-02") is None
