"""
ID 생성 유틸리티

분개 ID / 분개 항목 ID 생성 및 파싱 기능 제공
규칙: JV-{seq:06d}, L-{seq:06d}-{leg}
"""

import itertools
import secrets
import string

# 분개 ID 접두사
JOURNAL_PREFIX: str = "JV"
# 분개 항목 ID 접두사
ENTRY_PREFIX: str = "L"


class JournalIdGenerator:
    """세션 내 고유 분개 ID 생성기

    카운터 기반이라 한 세션 안에서는 충돌하지 않는다.

    사용 예시:
    ```python
    ids = JournalIdGenerator()
    ids.next_journal_id()  # 'JV-000001'
    ```
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_journal_id(self) -> str:
        """다음 분개 ID 반환"""
        return make_journal_id(next(self._counter))


def make_journal_id(seq: int) -> str:
    """순번으로 분개 ID 생성

    Example:
        >>> make_journal_id(12)
        'JV-000012'
    """
    if seq < 0:
        raise ValueError("seq는 음수일 수 없습니다")
    return f"{JOURNAL_PREFIX}-{seq:06d}"


def make_entry_id(journal_id: str, leg: int) -> str:
    """분개 ID와 다리 번호로 분개 항목 ID 생성

    Example:
        >>> make_entry_id("JV-000012", 1)
        'L-000012-1'
    """
    ref = parse_journal_ref(journal_id) or journal_id
    return f"{ENTRY_PREFIX}-{ref}-{leg}"


def parse_journal_ref(journal_id: str) -> str | None:
    """분개 ID에서 참조 번호 추출 (보고서 Ref 컬럼용)

    Example:
        >>> parse_journal_ref("JV-000012")
        '000012'
        >>> parse_journal_ref("other-12345")
        None
    """
    if not journal_id:
        return None

    prefix = f"{JOURNAL_PREFIX}-"

    if journal_id.startswith(prefix):
        ref = journal_id[len(prefix):]
        return ref if ref else None

    return None


def parse_journal_seq(journal_id: str) -> int | None:
    """분개 ID의 순번 (JV-{seq} 형식이 아니면 None)

    Example:
        >>> parse_journal_seq("JV-000012")
        12
        >>> parse_journal_seq("IMPORT-7")
        None
    """
    ref = parse_journal_ref(journal_id)
    if ref is None or not (ref.isascii() and ref.isdigit()):
        return None
    return int(ref)


def make_record_id(prefix: str, length: int = 6) -> str:
    """운영 레코드 ID 생성 (TRP-XXXXXX, VEH-XXXXXX 등)"""
    alphabet = string.ascii_uppercase + string.digits
    suffix = "".join(secrets.choice(alphabet) for _ in range(length))
    return f"{prefix}-{suffix}"
