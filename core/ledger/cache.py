"""
보고서 캐시

장부 버전을 키로 하는 메모이제이션.
분개가 추가되면 버전이 바뀌므로 오래된 보고서를 반환하지 않는다.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable, Hashable, Sequence
from typing import Any, TypeVar

from core.constants import Defaults
from core.ledger.book import Ledger
from core.ledger.entry import LedgerEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReportCache:
    """장부 스냅샷별 보고서 캐시 (LRU)

    키: (보고서 이름, 추가 인자, id(ledger), ledger.version)

    현재 스냅샷의 결과만 보관한다. 다른 스냅샷으로 재계산이 일어나면
    이전 스냅샷의 결과는 모두 버리고, 같은 스냅샷 안에서는
    max_entries개를 넘으면 가장 오래 쓰지 않은 결과부터 버린다.

    사용 예시:
    ```python
    cache = ReportCache()
    sheet = cache.get("balance_sheet", ledger, aggregate)
    buckets = cache.get("profit_loss", ledger, lambda e: rollup(e, as_of), as_of)
    ```
    """

    def __init__(self, max_entries: int = Defaults.REPORT_CACHE_SIZE):
        if max_entries < 1:
            raise ValueError(f"max_entries는 1 이상이어야 합니다: {max_entries}")
        self.max_entries = max_entries
        self._items: OrderedDict[tuple[Any, ...], tuple[Ledger, Any]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._items)

    def get(
        self,
        name: str,
        ledger: Ledger,
        builder: Callable[[Sequence[LedgerEntry]], T],
        *params: Hashable,
    ) -> T:
        """캐시된 보고서 반환 (없거나 버전이 바뀌었으면 재계산)"""
        ledger_key = (id(ledger), ledger.version)
        key = (name, params, ledger_key)

        if key in self._items:
            self.hits += 1
            self._items.move_to_end(key)
            return self._items[key][1]

        self.misses += 1

        stale = [k for k in self._items if k[2] != ledger_key]
        for k in stale:
            del self._items[k]

        result = builder(ledger.entries)
        # ledger 참조를 함께 보관해 id 재사용으로 인한 오염 방지
        self._items[key] = (ledger, result)
        while len(self._items) > self.max_entries:
            self._items.popitem(last=False)

        logger.debug(f"보고서 재계산: {name} {params} version={ledger.version}")
        return result

    def clear(self) -> None:
        """전체 캐시 비우기"""
        self._items.clear()
