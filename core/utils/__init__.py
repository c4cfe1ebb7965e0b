"""
유틸리티 패키지

ID 생성, 달력 날짜 처리, 타임존 처리 등 공통 유틸리티
"""

from core.utils.dates import (
    month_key,
    month_label,
    parse_calendar_date,
    shift_month,
    weekday_label,
)
from core.utils.timezone import (
    WIB,
    to_wib,
    now_utc,
    now_wib,
    today_wib,
)

__all__ = [
    "WIB",
    "to_wib",
    "now_utc",
    "now_wib",
    "today_wib",
    "parse_calendar_date",
    "shift_month",
    "month_key",
    "month_label",
    "weekday_label",
]
