from datetime import datetime, time

from src.attendance_payroll.attendance_payroll.attendance.gate import is_upcoming_day


def test_today_before_cutoff_is_upcoming():
    assert is_upcoming_day("2025-03-10", "2025-03", now=datetime(2025, 3, 10, 8, 54)) is True


def test_today_at_cutoff_is_closed():
    assert is_upcoming_day("2025-03-10", "2025-03", now=datetime(2025, 3, 10, 8, 55)) is False


def test_later_and_earlier_days_of_current_month():
    now = datetime(2025, 3, 10, 12, 0)
    assert is_upcoming_day("2025-03-11", "2025-03", now=now) is True
    assert is_upcoming_day("2025-03-09", "2025-03", now=now) is False


def test_future_and_past_months():
    now = datetime(2025, 3, 10, 12, 0)
    assert is_upcoming_day("2025-04-01", "2025-04", now=now) is True
    assert is_upcoming_day("2025-02-28", "2025-02", now=now) is False
    assert is_upcoming_day("2024-12-31", "2024-12", now=now) is False


def test_custom_cutoff():
    now = datetime(2025, 3, 10, 9, 30)
    assert is_upcoming_day("2025-03-10", "2025-03", now=now, cutoff=time(10, 0)) is True
