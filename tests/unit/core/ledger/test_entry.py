"""LedgerEntry / Ledger 테스트"""

from datetime import date
from decimal import Decimal

import pytest

from core.ledger.book import Ledger, is_balanced
from core.ledger.entry import LedgerEntry
from core.ledger.errors import DuplicateJournalError, UnbalancedJournalError
from core.ledger.types import AccountType, FinancialCategory, JournalSide


def make_leg(
    journal_id: str = "JV-000001",
    leg: int = 1,
    debit: str = "0",
    credit: str = "0",
    account_id: str = "KAS & BANK",
    account_type: AccountType = AccountType.ASSET,
    category: FinancialCategory = FinancialCategory.CASH,
) -> LedgerEntry:
    return LedgerEntry(
        entry_id=f"L-{journal_id}-{leg}",
        date=date(2026, 2, 1),
        description="TEST",
        debit=Decimal(debit),
        credit=Decimal(credit),
        account_id=account_id,
        account_type=account_type,
        category=category,
        journal_id=journal_id,
    )


class TestLedgerEntry:
    """LedgerEntry 테스트"""

    def test_debit_leg(self) -> None:
        """차변 다리"""
        leg = make_leg(debit="1000")

        assert leg.side == JournalSide.DEBIT
        assert leg.amount == Decimal("1000")
        assert leg.net == Decimal("1000")

    def test_credit_leg(self) -> None:
        """대변 다리"""
        leg = make_leg(credit="250")

        assert leg.side == JournalSide.CREDIT
        assert leg.net == Decimal("-250")

    def test_negative_amount_rejected(self) -> None:
        """음수 금액 거부"""
        with pytest.raises(ValueError, match="음수"):
            make_leg(debit="-1")

    def test_both_sides_rejected(self) -> None:
        """차변/대변 동시 기입 거부"""
        with pytest.raises(ValueError):
            make_leg(debit="10", credit="10")

    def test_zero_leg_rejected(self) -> None:
        """0원 다리 거부"""
        with pytest.raises(ValueError):
            make_leg()

    def test_frozen(self) -> None:
        """불변성 확인"""
        leg = make_leg(debit="1")
        with pytest.raises(AttributeError):
            leg.debit = Decimal("2")  # type: ignore

    def test_to_dict(self) -> None:
        """직렬화 (금액 문자열, ISO 날짜, Enum 값)"""
        data = make_leg(debit="1000.50").to_dict()

        assert data["debit"] == "1000.50"
        assert data["credit"] == "0"
        assert data["date"] == "2026-02-01"
        assert data["account_type"] == "ASET"
        assert data["category"] == "CASH"
        assert data["reversal_of"] is None


class TestLedger:
    """Ledger 테스트"""

    def test_empty(self) -> None:
        """빈 장부"""
        ledger = Ledger()

        assert len(ledger) == 0
        assert ledger.version == 0
        assert ledger.entries == ()

    def test_append_balanced_journal(self) -> None:
        """균형 분개 추가 → 버전 증가"""
        ledger = Ledger()
        legs = [
            make_leg(leg=1, debit="500"),
            make_leg(leg=2, credit="500", account_id="MODAL DISETOR", account_type=AccountType.EQUITY),
        ]

        ledger.append_journal(legs)

        assert len(ledger) == 2
        assert ledger.version == 1
        assert ledger.has_journal("JV-000001")
        assert ledger.journal("JV-000001") == legs

    def test_unbalanced_journal_rejected(self) -> None:
        """불균형 분개 거부, 장부 변경 없음"""
        ledger = Ledger()
        legs = [make_leg(leg=1, debit="500"), make_leg(leg=2, credit="400")]

        with pytest.raises(UnbalancedJournalError):
            ledger.append_journal(legs)

        assert len(ledger) == 0
        assert ledger.version == 0

    def test_single_leg_rejected(self) -> None:
        """다리 1개 분개 거부"""
        with pytest.raises(UnbalancedJournalError):
            Ledger().append_journal([make_leg(debit="1")])

    def test_mixed_journal_ids_rejected(self) -> None:
        """서로 다른 journal_id 혼합 거부"""
        legs = [make_leg("JV-000001", debit="5"), make_leg("JV-000002", credit="5")]

        with pytest.raises(UnbalancedJournalError):
            Ledger().append_journal(legs)

    def test_duplicate_journal_rejected(self) -> None:
        """같은 분개 재추가 거부"""
        ledger = Ledger()
        legs = [make_leg(leg=1, debit="5"), make_leg(leg=2, credit="5")]
        ledger.append_journal(legs)

        with pytest.raises(DuplicateJournalError):
            ledger.append_journal(legs)

    def test_initial_entries_validated(self) -> None:
        """초기 항목도 분개 단위 검증"""
        legs = [
            make_leg("JV-000001", 1, debit="5"),
            make_leg("JV-000001", 2, credit="5"),
            make_leg("JV-000002", 1, debit="7"),
            make_leg("JV-000002", 2, credit="7"),
        ]

        ledger = Ledger(legs)

        assert len(ledger) == 4
        assert ledger.version == 2

    def test_entries_snapshot_is_immutable(self) -> None:
        """entries는 튜플 스냅샷"""
        ledger = Ledger([make_leg(leg=1, debit="5"), make_leg(leg=2, credit="5")])
        snapshot = ledger.entries

        ledger.append_journal([make_leg("JV-000002", 1, debit="1"), make_leg("JV-000002", 2, credit="1")])

        assert len(snapshot) == 2
        assert len(ledger.entries) == 4


class TestIsBalanced:
    """is_balanced 테스트"""

    def test_balanced(self) -> None:
        assert is_balanced([make_leg(debit="3"), make_leg(leg=2, credit="3")]) is True

    def test_unbalanced(self) -> None:
        assert is_balanced([make_leg(debit="3"), make_leg(leg=2, credit="2")]) is False

    def test_empty(self) -> None:
        assert is_balanced([]) is False
