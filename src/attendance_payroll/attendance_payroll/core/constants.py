"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_GRACE_MINUTES = 15
DEFAULT_TIMEZONE_OFFSET = "+05:00"

# Attendance day is not closed before this local time.
DAY_CUTOFF = time(8, 55)

LEAVES_PER_QUARTER = 6

# Night shifts: punches before these hours belong to the shift that started the previous day.
NIGHT_CHECKIN_ROLLOVER_HOUR = 6
NIGHT_CHECKOUT_ROLLOVER_HOUR = 8

SUSPICIOUS_DEDUCTION_DAYS = 20
