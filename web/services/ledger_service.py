"""
Ledger 서비스

분개 전기/역분개 및 장부 보고서 조회.
보고서는 ReportCache를 거쳐 장부 버전이 같으면 재계산하지 않는다.
"""

import logging
from datetime import date
from typing import Any

from core.constants import LedgerAccounts
from core.ledger import (
    CATEGORY_ACCOUNTS,
    LedgerEntry,
    aggregate,
    build_statement,
    categories_for_flow,
    group_journals,
    rollup,
    summarize_rollup,
    summarize_statement,
    trial_balance,
)
from core.ledger.balance_sheet import AccountBalance
from core.session import AppSession
from core.types import FlowDirection

logger = logging.getLogger(__name__)


def entry_to_dict(entry: LedgerEntry) -> dict[str, Any]:
    """LedgerEntryResponse 형태로 변환"""
    return entry.to_dict()


def journal_to_dict(legs: list[LedgerEntry]) -> dict[str, Any]:
    """분개(다리 목록)를 JournalResponse 형태로 변환"""
    first = legs[0]
    return {
        "journal_id": first.journal_id,
        "date": first.date.isoformat(),
        "description": first.description,
        "total_debit": str(sum(leg.debit for leg in legs)),
        "total_credit": str(sum(leg.credit for leg in legs)),
        "legs": [entry_to_dict(leg) for leg in legs],
    }


def _balance_to_dict(item: AccountBalance) -> dict[str, Any]:
    return {
        "account_id": item.account_id,
        "account_type": item.account_type.value,
        "balance": str(item.balance),
    }


class LedgerService:
    """Ledger 서비스

    Args:
        session: 애플리케이션 세션 (장부, 전기기, 캐시 보유)
    """

    def __init__(self, session: AppSession):
        self.session = session

    # =========================================================================
    # 쓰기
    # =========================================================================

    def post_entry(
        self,
        flow: FlowDirection | str,
        entry_date: str,
        description: str,
        amount: str,
        category: str,
        account_id: str | None = None,
        account_type: str | None = None,
    ) -> dict[str, Any]:
        """분개 전기

        Raises:
            LedgerValidationError: 입력 검증 실패
        """
        legs = self.session.poster.post(
            flow=flow,
            entry_date=entry_date,
            description=description,
            amount=amount,
            category=category,
            target_account_id=account_id,
            account_type=account_type,
        )
        return journal_to_dict(list(legs))

    def reverse(
        self,
        journal_id: str,
        entry_date: str | None = None,
        description: str | None = None,
    ) -> dict[str, Any]:
        """역분개 전기

        Raises:
            JournalNotFoundError: 분개 없음
            JournalAlreadyReversedError: 이미 역분개됨
        """
        legs = self.session.poster.reverse(journal_id, entry_date=entry_date, description=description)
        return journal_to_dict(legs)

    # =========================================================================
    # 보고서
    # =========================================================================

    def get_statement(self, account_id: str = LedgerAccounts.CASH_AND_BANK) -> dict[str, Any]:
        """계정 거래 내역 (최신순)"""
        account = account_id.strip().upper()
        rows = self.session.reports.get(
            "statement",
            self.session.ledger,
            lambda entries: build_statement(entries, account),
            account,
        )
        summary = summarize_statement(rows)

        return {
            "account_id": account,
            "rows": [
                {"entry": entry_to_dict(row.entry), "running_balance": str(row.running_balance)}
                for row in rows
            ],
            "opening_balance": str(summary.opening_balance),
            "total_debit": str(summary.total_debit),
            "total_credit": str(summary.total_credit),
            "ending_balance": str(summary.ending_balance),
        }

    def get_journals(self, limit: int | None = None) -> list[dict[str, Any]]:
        """일반 분개장 (최신 분개 먼저)"""
        groups = self.session.reports.get("journals", self.session.ledger, group_journals)
        if limit is not None:
            groups = groups[:limit]
        return [journal_to_dict(legs) for legs in groups]

    def get_balance_sheet(self) -> dict[str, Any]:
        """재무상태표"""
        sheet = self.session.reports.get("balance_sheet", self.session.ledger, aggregate)
        if not sheet.is_balanced:
            # 정상 경로로는 발생하지 않음 (Poster가 항상 균형 분개 생성)
            logger.error(
                f"재무상태표 불균형: assets={sheet.total_assets} "
                f"liabilities+equity={sheet.total_liabilities_and_equity}"
            )

        return {
            "assets": [_balance_to_dict(a) for a in sheet.assets],
            "liabilities": [_balance_to_dict(a) for a in sheet.liabilities],
            "equity": [_balance_to_dict(a) for a in sheet.equity],
            "total_assets": str(sheet.total_assets),
            "total_liabilities": str(sheet.total_liabilities),
            "total_equity": str(sheet.total_equity),
            "total_liabilities_and_equity": str(sheet.total_liabilities_and_equity),
            "total_revenue": str(sheet.total_revenue),
            "total_expense": str(sheet.total_expense),
            "profit_loss": str(sheet.profit_loss),
            "is_balanced": sheet.is_balanced,
        }

    def get_trial_balance(self) -> list[dict[str, Any]]:
        """시산표"""
        rows = self.session.reports.get("trial_balance", self.session.ledger, trial_balance)
        return [
            {
                "account_id": row.account_id,
                "account_type": row.account_type.value,
                "total_debit": str(row.total_debit),
                "total_credit": str(row.total_credit),
                "balance": str(row.balance),
            }
            for row in rows
        ]

    def get_profit_loss(self, as_of: date, months: int = 12) -> dict[str, Any]:
        """최근 N개월 손익계산서"""
        buckets = self.session.reports.get(
            "profit_loss",
            self.session.ledger,
            lambda entries: rollup(entries, as_of, months),
            as_of,
            months,
        )
        summary = summarize_rollup(buckets)

        return {
            "period_label": summary.period_label,
            "months": [
                {
                    "label": b.label,
                    "year": b.year,
                    "month": b.month,
                    "revenue": str(b.revenue),
                    "expense": str(b.expense),
                    "profit": str(b.profit),
                }
                for b in buckets
            ],
            "total_revenue": str(summary.total_revenue),
            "total_expense": str(summary.total_expense),
            "total_profit": str(summary.total_profit),
        }

    @staticmethod
    def get_categories(flow: FlowDirection | None = None) -> list[dict[str, Any]]:
        """카테고리 선택지 (flow 지정 시 해당 방향만)"""
        if flow is None:
            categories = list(CATEGORY_ACCOUNTS)
        else:
            categories = categories_for_flow(flow)

        return [
            {
                "category": category.value,
                "label": CATEGORY_ACCOUNTS[category].label,
                "default_account": CATEGORY_ACCOUNTS[category].default_account,
                "account_type": CATEGORY_ACCOUNTS[category].account_type.value,
            }
            for category in categories
        ]
