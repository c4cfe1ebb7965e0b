"""
타임존 유틸리티

내부 저장: UTC | 업무 기준일: WIB (Asia/Jakarta, UTC+7)
장부의 날짜는 타임존 없는 달력 날짜이므로 "오늘"만 WIB 기준으로 계산한다.
"""

from datetime import date, datetime, timedelta, timezone

# WIB 타임존 (UTC+7)
WIB_OFFSET_HOURS = 7
WIB = timezone(timedelta(hours=WIB_OFFSET_HOURS))


def to_wib(dt: datetime) -> datetime:
    """UTC datetime을 WIB로 변환

    Args:
        dt: datetime 객체 (UTC 권장, naive면 UTC로 간주)

    Returns:
        WIB 타임존의 datetime

    Example:
        >>> utc_dt = datetime(2026, 2, 20, 18, 0, 0, tzinfo=timezone.utc)
        >>> to_wib(utc_dt).day
        21  # 다음날 01:00
    """
    if dt.tzinfo is None:
        # naive datetime은 UTC로 간주
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(WIB)


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)"""
    return datetime.now(timezone.utc)


def now_wib() -> datetime:
    """현재 WIB 시간 반환"""
    return datetime.now(WIB)


def today_wib() -> date:
    """WIB 기준 오늘 날짜

    보고서 기준일(as_of)과 폼 기본 날짜에 사용.
    UTC 날짜를 쓰면 자정~07시 사이 하루 밀림.
    """
    return now_wib().date()
