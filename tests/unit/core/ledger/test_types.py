"""Ledger 타입 및 카테고리 매핑 테스트"""

from decimal import Decimal

import pytest

from core.ledger.errors import CategoryMappingError
from core.ledger.types import (
    CATEGORY_ACCOUNTS,
    AccountType,
    CategoryAccount,
    FinancialCategory,
    categories_for_flow,
    default_category_for_flow,
    get_category_account,
    natural_balance,
    validate_category_accounts,
)
from core.types import FlowDirection


class TestAccountType:
    """AccountType 테스트"""

    def test_values(self) -> None:
        """표시 명칭"""
        assert AccountType.ASSET.value == "ASET"
        assert AccountType.LIABILITY.value == "KEWAJIBAN"
        assert AccountType.EQUITY.value == "EKUITAS"
        assert AccountType.REVENUE.value == "PENDAPATAN"
        assert AccountType.EXPENSE.value == "BEBAN"

    def test_debit_normal(self) -> None:
        """자산/비용만 차변 증가 계정"""
        debit_normal = {t for t in AccountType if t.is_debit_normal}
        assert debit_normal == {AccountType.ASSET, AccountType.EXPENSE}

    def test_str_serialization(self) -> None:
        """str 상속"""
        assert AccountType("ASET") == "ASET"


class TestCategoryAccounts:
    """카테고리 → 계정 매핑 테스트"""

    def test_every_category_mapped(self) -> None:
        """16개 카테고리 모두 매핑"""
        assert len(FinancialCategory) == 16
        assert set(CATEGORY_ACCOUNTS) == set(FinancialCategory)

    @pytest.mark.parametrize(
        "category,account,account_type",
        [
            (FinancialCategory.INVOICE, "PIUTANG USAHA", AccountType.REVENUE),
            (FinancialCategory.BBM, "BEBAN BBM", AccountType.EXPENSE),
            (FinancialCategory.CASH, "MODAL DISETOR", AccountType.EQUITY),
            (FinancialCategory.PAJAK, "HUTANG PAJAK", AccountType.LIABILITY),
            (FinancialCategory.BANK, "HUTANG BANK", AccountType.LIABILITY),
            (FinancialCategory.BIAYA_LAIN, "BEBAN LAIN-LAIN", AccountType.EXPENSE),
        ],
    )
    def test_default_accounts(
        self,
        category: FinancialCategory,
        account: str,
        account_type: AccountType,
    ) -> None:
        """대표 카테고리 기본 계정"""
        row = get_category_account(category)
        assert row.default_account == account
        assert row.account_type == account_type

    def test_validate_passes_for_builtin_table(self) -> None:
        """기본 테이블은 검증 통과"""
        validate_category_accounts()

    def test_validate_missing_category(self) -> None:
        """누락된 카테고리 → CategoryMappingError"""
        table = dict(CATEGORY_ACCOUNTS)
        del table[FinancialCategory.ATK]

        with pytest.raises(CategoryMappingError, match="ATK"):
            validate_category_accounts(table)

    def test_validate_blank_account(self) -> None:
        """기본 계정이 빈 문자열 → CategoryMappingError"""
        table = dict(CATEGORY_ACCOUNTS)
        table[FinancialCategory.GAJI] = CategoryAccount("Gaji", "  ", AccountType.EXPENSE)

        with pytest.raises(CategoryMappingError, match="GAJI"):
            validate_category_accounts(table)

    def test_validate_cash_account_as_default(self) -> None:
        """현금 계정을 기본 계정으로 쓰면 CategoryMappingError"""
        table = dict(CATEGORY_ACCOUNTS)
        table[FinancialCategory.BBM] = CategoryAccount("Solar", "kas & bank", AccountType.EXPENSE)

        with pytest.raises(CategoryMappingError, match="BBM"):
            validate_category_accounts(table)


class TestFlowCategories:
    """흐름 방향별 카테고리 테스트"""

    def test_in_categories(self) -> None:
        """IN: 수익/자본 카테고리 (테이블 순서)"""
        assert categories_for_flow(FlowDirection.IN) == [
            FinancialCategory.INVOICE,
            FinancialCategory.CASH,
            FinancialCategory.REVENUE,
        ]

    def test_out_categories_exclude_revenue(self) -> None:
        """OUT: 비용/부채 카테고리만"""
        categories = categories_for_flow(FlowDirection.OUT)

        assert FinancialCategory.INVOICE not in categories
        assert FinancialCategory.CASH not in categories
        assert FinancialCategory.PAJAK in categories
        assert categories[0] == FinancialCategory.BBM

    def test_default_category(self) -> None:
        """흐름 전환 시 첫 호환 카테고리"""
        assert default_category_for_flow(FlowDirection.IN) == FinancialCategory.INVOICE
        assert default_category_for_flow(FlowDirection.OUT) == FinancialCategory.BBM


class TestNaturalBalance:
    """부호 규칙 테스트"""

    def test_debit_normal_accounts(self) -> None:
        """자산/비용: 차변 - 대변"""
        assert natural_balance(AccountType.ASSET, Decimal("100"), Decimal("30")) == Decimal("70")
        assert natural_balance(AccountType.EXPENSE, Decimal("0"), Decimal("30")) == Decimal("-30")

    def test_credit_normal_accounts(self) -> None:
        """부채/자본/수익: 대변 - 차변"""
        for account_type in (AccountType.LIABILITY, AccountType.EQUITY, AccountType.REVENUE):
            assert natural_balance(account_type, Decimal("30"), Decimal("100")) == Decimal("70")
