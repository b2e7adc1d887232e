import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_payroll_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

TIMEZONE_OFFSET = "+05:00"
DAY_CUTOFF = "08:55"

DEFAULT_GRACE_MINUTES = 15
LEAVES_PER_QUARTER = 6

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
