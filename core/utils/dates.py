"""
달력 날짜 유틸리티

장부 날짜는 (년, 월, 일) 정수만 가진 naive date로 다룬다.
입력 경계에서 한 번만 파싱하고, 이후 타임존을 거치는 변환은 하지 않는다.
"""

from datetime import date, datetime

# 인도네시아어 월/요일 약어 (보고서 라벨용)
MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "Mei", "Jun",
    "Jul", "Agu", "Sep", "Okt", "Nov", "Des",
)
WEEKDAY_LABELS: tuple[str, ...] = ("Sen", "Sel", "Rab", "Kam", "Jum", "Sab", "Min")


def parse_calendar_date(value: date | datetime | str) -> date:
    """입력값을 naive 달력 날짜로 변환

    Args:
        value: date, datetime 또는 ISO 문자열 ("2026-02-21", "2026-02-21T08:00:00")

    Returns:
        date 객체

    Raises:
        ValueError: 파싱할 수 없는 값

    Note:
        datetime은 시간 정보를 버리고 적힌 날짜 그대로 사용한다.
        (타임존 변환 시 하루 밀리는 문제 방지)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"날짜 형식이 올바르지 않습니다: {value!r}")

    text = value.strip()
    try:
        # 앞 10자리 (YYYY-MM-DD)만 사용
        return date.fromisoformat(text[:10])
    except ValueError as e:
        raise ValueError(f"날짜 형식이 올바르지 않습니다: {value!r}") from e


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """(년, 월)을 delta개월 이동

    Example:
        >>> shift_month(2026, 1, -1)
        (2025, 12)
    """
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_key(value: date) -> tuple[int, int]:
    """버킷 키 (년, 월)"""
    return value.year, value.month


def month_label(year: int, month: int) -> str:
    """월 라벨 ("Agu 2026")"""
    return f"{MONTH_LABELS[month - 1]} {year}"


def weekday_label(value: date) -> str:
    """요일 라벨 ("Sen" ~ "Min")"""
    return WEEKDAY_LABELS[value.weekday()]
