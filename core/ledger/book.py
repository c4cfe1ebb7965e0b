"""
장부 (Ledger)

세션이 소유하는 분개 항목의 추가 전용 컬렉션.
분개 단위로만 추가되며 삭제/수정 경로는 없다.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from decimal import Decimal

from core.ledger.entry import LedgerEntry
from core.ledger.errors import DuplicateJournalError, UnbalancedJournalError

logger = logging.getLogger(__name__)


def is_balanced(legs: Sequence[LedgerEntry]) -> bool:
    """차변 합계 == 대변 합계 (다리 2개 이상)"""
    if len(legs) < 2:
        return False
    total_debit = sum((leg.debit for leg in legs), Decimal("0"))
    total_credit = sum((leg.credit for leg in legs), Decimal("0"))
    return total_debit == total_credit


class Ledger:
    """추가 전용 장부

    version은 분개가 추가될 때마다 1씩 증가.
    보고서 캐시는 (id(ledger), version)을 키로 사용한다.

    사용 예시:
    ```python
    ledger = Ledger()
    poster = JournalPoster(ledger)
    poster.post(FlowDirection.IN, "2026-02-01", "Modal awal", 1000, "CASH")

    len(ledger)      # 2
    ledger.version   # 1
    ```
    """

    def __init__(self, entries: Sequence[LedgerEntry] = ()):
        self._entries: list[LedgerEntry] = []
        self._journal_ids: set[str] = set()
        self._version = 0

        # 초기 항목도 분개 단위 검증을 거친다
        groups: dict[str, list[LedgerEntry]] = {}
        for entry in entries:
            groups.setdefault(entry.journal_id, []).append(entry)
        for legs in groups.values():
            self.append_journal(legs)

    @property
    def version(self) -> int:
        """변경 카운터"""
        return self._version

    @property
    def entries(self) -> tuple[LedgerEntry, ...]:
        """현재 항목 스냅샷 (추가 순서)"""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[LedgerEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def journal_count(self) -> int:
        """분개 수"""
        return len(self._journal_ids)

    @property
    def journal_ids(self) -> frozenset[str]:
        """장부에 있는 분개 ID 집합"""
        return frozenset(self._journal_ids)

    def has_journal(self, journal_id: str) -> bool:
        """분개 존재 여부"""
        return journal_id in self._journal_ids

    def journal(self, journal_id: str) -> list[LedgerEntry]:
        """분개 ID의 모든 다리 (추가 순서)"""
        return [e for e in self._entries if e.journal_id == journal_id]

    def append_journal(self, legs: Sequence[LedgerEntry]) -> None:
        """분개 추가

        Args:
            legs: 같은 journal_id를 가진 균형 잡힌 다리들

        Raises:
            UnbalancedJournalError: 균형이 맞지 않거나 journal_id가 섞인 경우
            DuplicateJournalError: 이미 있는 journal_id
        """
        journal_ids = {leg.journal_id for leg in legs}
        if len(journal_ids) != 1:
            raise UnbalancedJournalError(f"한 분개에 여러 journal_id: {sorted(journal_ids)}")

        journal_id = journal_ids.pop()
        if journal_id in self._journal_ids:
            raise DuplicateJournalError(f"이미 존재하는 분개: {journal_id}")

        if not is_balanced(legs):
            raise UnbalancedJournalError(f"Unbalanced journal: {journal_id}")

        self._entries.extend(legs)
        self._journal_ids.add(journal_id)
        self._version += 1

        logger.debug(f"분개 추가: {journal_id} (legs={len(legs)}, version={self._version})")
