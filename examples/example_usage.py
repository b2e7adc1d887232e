"""Example: build one employee's monthly sheet through the service layer (no Flask).

Controllers are thin; the classification and deduction rules live in services.
"""

import importlib
import sys

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_payroll.attendance_payroll.container import build_container
from src.attendance_payroll.attendance_payroll.core.logging import configure_logging, get_logger

logger = get_logger("example")


def main(emp_code: str, month: str) -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging("INFO")
    container = build_container(db_config=settings.DB_CONFIG)

    report = container.monthly_attendance_service.build_month(month, now=container.clock(), emp_code=emp_code)
    for record in report.employees:
        t = record.totals
        logger.info(
            "%s %s: late=%d early=%d deduct_days=%.3f net=%.2f",
            record.emp_code,
            record.name,
            t.late_count,
            t.early_count,
            t.salary_deduct_days,
            t.net_salary,
        )


if __name__ == "__main__":
    main(sys.argv[1], sys.argv[2])
