"""Calendar quarters for the paid-leave quota.

Q1 Jan-Mar, Q2 Apr-Jun, Q3 Jul-Sep, Q4 Oct-Dec. Unused leave carries from Q1
into Q2 and from Q3 into Q4 only; nothing carries into the next year.
"""

from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import days_in_month, parse_iso_date

QUARTERS = (1, 2, 3, 4)

_RANGE_LABELS = {
    1: "Jan–Mar",
    2: "Apr–Jun",
    3: "Jul–Sep",
    4: "Oct–Dec",
}

_CARRY_SOURCE = {2: 1, 4: 3}


def quarter_of(date_str: str) -> tuple[int, int]:
    """(year, quarter) of a YYYY-MM-DD date."""
    d = parse_iso_date(date_str)
    return d.year, (d.month - 1) // 3 + 1


def quarter_range(year: int, quarter: int) -> tuple[str, str]:
    start_month = (quarter - 1) * 3 + 1
    end_month = start_month + 2
    return (
        f"{year:04d}-{start_month:02d}-01",
        f"{year:04d}-{end_month:02d}-{days_in_month(year, end_month):02d}",
    )


def quarter_label(year: int, quarter: int) -> str:
    return f"Q{quarter} ({_RANGE_LABELS.get(quarter, f'Q{quarter}')}) {year}"


def carry_source(quarter: int) -> Optional[int]:
    return _CARRY_SOURCE.get(quarter)
