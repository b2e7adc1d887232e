from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Normalized attendance status stored per employee per day."""

    PRESENT = "Present"
    HOLIDAY = "Holiday"
    ABSENT = "Absent"
    SICK_LEAVE = "Sick Leave"
    PAID_LEAVE = "Paid Leave"
    UNPAID_LEAVE = "Un Paid Leave"
    LEAVE_WITHOUT_INFORM = "Leave Without Inform"
    WORK_FROM_HOME = "Work From Home"
    HALF_DAY = "Half Day"
    NEW_INDUCTION = "New Induction"


class DayCategory(str, Enum):
    """Semantic category of one attendance day."""

    ON_TIME = "ON_TIME"
    LATE_ONLY = "LATE_ONLY"
    EARLY_ONLY = "EARLY_ONLY"
    LATE_AND_EARLY = "LATE_AND_EARLY"
    EXCUSED_VIOLATION = "EXCUSED_VIOLATION"
    HOLIDAY = "HOLIDAY"
    ABSENT = "ABSENT"
    LEAVE = "LEAVE"
    WORK_FROM_HOME = "WORK_FROM_HOME"
    PARTIAL_PUNCH = "PARTIAL_PUNCH"
    LEAVE_WITHOUT_INFORM = "LEAVE_WITHOUT_INFORM"
    UNCLASSIFIED = "UNCLASSIFIED"


class Tone(str, Enum):
    """Display severity of a classified day."""

    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    DARK = "dark"
    NEUTRAL = "neutral"


class SaturdayPolicy(str, Enum):
    """Department-level Saturday rule."""

    ALL_OFF = "all_off"
    ALTERNATE = "alternate"


class SaturdayGroup(str, Enum):
    """A works 1st & 3rd Saturdays; B works 2nd & 4th."""

    A = "A"
    B = "B"
