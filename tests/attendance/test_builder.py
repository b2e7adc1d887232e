from src.attendance_payroll.attendance_payroll.attendance.builder import borrow_night_checkout, build_day
from src.attendance_payroll.attendance_payroll.core.enums import AttendanceStatus
from tests.fakes import DAY_SHIFT, NIGHT_SHIFT, entry


def test_missing_record_is_absent_on_working_day():
    day = build_day(None, work_date="2025-03-10", shift=DAY_SHIFT, shift_code="D1")
    assert day.status == AttendanceStatus.ABSENT
    assert day.punch_count == 0


def test_missing_record_is_holiday_on_weekend_off():
    day = build_day(None, work_date="2025-03-09", shift=DAY_SHIFT, weekend_off=True)
    assert day.status == AttendanceStatus.HOLIDAY


def test_record_without_status_and_punches_is_present():
    e = entry("100", "2025-03-10", "09:25", "18:00")
    day = build_day(e, work_date="2025-03-10", shift=DAY_SHIFT, shift_code="D1")
    assert day.status == AttendanceStatus.PRESENT
    assert day.late is True
    assert day.late_minutes == 10


def test_stored_status_is_normalized():
    e = entry("100", "2025-03-10", status="upl")
    day = build_day(e, work_date="2025-03-10", shift=DAY_SHIFT)
    assert day.status == AttendanceStatus.UNPAID_LEAVE


def test_holiday_with_punches_is_never_late():
    e = entry("100", "2025-03-10", "11:00", "12:00", status="Holiday")
    day = build_day(e, work_date="2025-03-10", shift=DAY_SHIFT)
    assert day.late is False
    assert day.early_leave is False


def test_partial_punch_is_early_leave_like():
    e = entry("100", "2025-03-10", None, "18:00", excused=True)
    day = build_day(e, work_date="2025-03-10", shift=DAY_SHIFT)
    assert day.is_partial_punch
    assert day.early_leave is True


def test_same_time_punches_keep_both_and_no_violation():
    e = entry("100", "2025-03-10", "13:00", "13:00")
    day = build_day(e, work_date="2025-03-10", shift=DAY_SHIFT)
    assert day.has_both_punches
    assert day.late is False
    assert day.early_leave is False


def test_night_checkout_borrowed_from_next_morning():
    today = entry("200", "2025-03-10", "21:05")
    tomorrow = entry("200", "2025-03-11", None, "06:05")
    day = build_day(today, work_date="2025-03-10", shift=NIGHT_SHIFT, shift_code="S2", next_entry=tomorrow)
    assert day.check_out == tomorrow.check_out
    assert day.has_both_punches
    assert day.late is False
    assert day.early_leave is False


def test_no_borrow_for_day_shift_or_evening_checkout():
    today = entry("200", "2025-03-10", "21:05")
    evening = entry("200", "2025-03-11", "20:55", "23:00")
    assert borrow_night_checkout(today, evening, NIGHT_SHIFT) is None
    morning = entry("200", "2025-03-11", None, "06:00")
    assert borrow_night_checkout(today, morning, DAY_SHIFT) is None


def test_future_day_is_blank():
    day = build_day(entry("100", "2025-03-20", "09:00", "18:00"), work_date="2025-03-20", shift=DAY_SHIFT, is_future=True)
    assert day.is_future is True
    assert day.status is None
    assert day.check_in is None
