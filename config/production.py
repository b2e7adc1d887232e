import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_payroll"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

TIMEZONE_OFFSET = os.getenv("TIMEZONE_OFFSET", "+05:00")
DAY_CUTOFF = os.getenv("DAY_CUTOFF", "08:55")

DEFAULT_GRACE_MINUTES = int(os.getenv("DEFAULT_GRACE_MINUTES", "15"))
LEAVES_PER_QUARTER = int(os.getenv("LEAVES_PER_QUARTER", "6"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
