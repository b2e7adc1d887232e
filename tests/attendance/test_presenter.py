from datetime import datetime

from src.attendance_payroll.attendance_payroll.attendance.model import AttendanceDay
from src.attendance_payroll.attendance_payroll.attendance.presenter import day_to_dict
from src.attendance_payroll.attendance_payroll.core.enums import AttendanceStatus


def test_day_json_shape():
    day = AttendanceDay(
        date="2025-03-10",
        status=AttendanceStatus.PRESENT,
        check_in=datetime(2025, 3, 10, 9, 25),
        check_out=datetime(2025, 3, 10, 18, 0),
        late=True,
        late_minutes=10,
        excused=True,
        shift="D1",
    )
    d = day_to_dict(day)
    assert d["status"] == "Present"
    assert d["statusShortCode"] == "P"
    assert d["checkIn"] == "2025-03-10T09:25:00"
    assert d["lateExcused"] is True
    assert d["earlyExcused"] is False
    assert d["excused"] is True
    assert d["category"] == "ON_TIME"
    assert d["cssClass"] == "bg-success"
    assert d["isFuture"] is False


def test_future_day_json():
    d = day_to_dict(AttendanceDay(date="2025-03-20", status=None, shift="D1", is_future=True))
    assert d["isFuture"] is True
    assert d["status"] == ""
    assert d["checkIn"] is None


def test_future_and_past_days_share_one_shape():
    future = day_to_dict(AttendanceDay(date="2025-03-20", status=None, is_future=True))
    past = day_to_dict(AttendanceDay(date="2025-03-05", status=AttendanceStatus.ABSENT))
    assert future.keys() == past.keys()
    assert future["lateMinutes"] == 0
    assert future["isLeave"] is False
