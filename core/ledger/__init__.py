"""
복식부기 (Double-Entry Bookkeeping) 엔진

분개 전기기(JournalPoster)가 유일한 쓰기 경로이고,
나머지 보고서는 장부 항목 목록의 순수 함수.

사용 예시:
```python
from core.ledger import Ledger, JournalPoster, aggregate, build_statement, rollup

ledger = Ledger()
poster = JournalPoster(ledger)

# 출자금 입금
poster.post(FlowDirection.IN, "2026-02-01", "Setoran modal", 50_000_000, "CASH")

# 연료비 지출 (상대 계정: BEBAN BBM)
poster.post(FlowDirection.OUT, "2026-02-03", "Solar unit B 9123", 1_250_000, "BBM")

# 계좌 명세 (최신순, 누적 잔액)
rows = build_statement(ledger.entries)

# 재무상태표
sheet = aggregate(ledger.entries)
assert sheet.is_balanced

# 최근 12개월 손익
buckets = rollup(ledger.entries, as_of=date(2026, 2, 28))
```
"""

from core.ledger.balance_sheet import (
    AccountBalance,
    BalanceSheet,
    TrialBalanceRow,
    aggregate,
    trial_balance,
)
from core.ledger.book import Ledger, is_balanced
from core.ledger.cache import ReportCache
from core.ledger.entry import LedgerEntry
from core.ledger.errors import (
    CategoryMappingError,
    DuplicateJournalError,
    JournalAlreadyReversedError,
    JournalNotFoundError,
    LedgerError,
    LedgerValidationError,
    UnbalancedJournalError,
)
from core.ledger.journal import group_journals, journal_totals, unbalanced_journals
from core.ledger.poster import JournalPoster
from core.ledger.profit_loss import (
    MonthlyProfitLoss,
    ProfitLossSummary,
    rollup,
    summarize_rollup,
)
from core.ledger.statement import (
    StatementRow,
    StatementSummary,
    build_statement,
    summarize_statement,
)
from core.ledger.types import (
    CATEGORY_ACCOUNTS,
    AccountType,
    CategoryAccount,
    FinancialCategory,
    JournalSide,
    categories_for_flow,
    default_category_for_flow,
)

__all__ = [
    # 핵심 클래스
    "Ledger",
    "LedgerEntry",
    "JournalPoster",
    "ReportCache",
    # 보고서
    "build_statement",
    "summarize_statement",
    "group_journals",
    "journal_totals",
    "unbalanced_journals",
    "aggregate",
    "trial_balance",
    "rollup",
    "summarize_rollup",
    "is_balanced",
    # 결과 타입
    "StatementRow",
    "StatementSummary",
    "AccountBalance",
    "BalanceSheet",
    "TrialBalanceRow",
    "MonthlyProfitLoss",
    "ProfitLossSummary",
    # Enum
    "AccountType",
    "FinancialCategory",
    "JournalSide",
    # 상수/매핑
    "CATEGORY_ACCOUNTS",
    "CategoryAccount",
    "categories_for_flow",
    "default_category_for_flow",
    # 예외
    "LedgerError",
    "LedgerValidationError",
    "UnbalancedJournalError",
    "JournalNotFoundError",
    "JournalAlreadyReversedError",
    "CategoryMappingError",
    "DuplicateJournalError",
]
