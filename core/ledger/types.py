"""
복식부기 타입 정의

AccountType, FinancialCategory 등 Ledger 시스템에서 사용하는 Enum과
카테고리 → 기본 계정 매핑 테이블 정의
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from core.constants import LedgerAccounts
from core.ledger.errors import CategoryMappingError
from core.types import FlowDirection


class AccountType(str, Enum):
    """계정 유형

    복식부기의 5대 계정 유형.
    값은 보고서에 표시되는 인도네시아어 명칭.
    """

    ASSET = "ASET"  # 자산 (현금, 채권)
    LIABILITY = "KEWAJIBAN"  # 부채 (세금, 차입금)
    EQUITY = "EKUITAS"  # 자본 (출자금)
    REVENUE = "PENDAPATAN"  # 수익 (운송 매출)
    EXPENSE = "BEBAN"  # 비용 (연료, 정비, 급여)

    @property
    def is_debit_normal(self) -> bool:
        """차변이 증가 방향인 계정 (자산, 비용)"""
        return self in (AccountType.ASSET, AccountType.EXPENSE)


class JournalSide(str, Enum):
    """분개 방향 (차변/대변)"""

    DEBIT = "DEBIT"  # 차변 (자산 증가, 비용 증가)
    CREDIT = "CREDIT"  # 대변 (자산 감소, 수익 증가)


class FinancialCategory(str, Enum):
    """업무 카테고리 (닫힌 목록)

    상대 계정 기본값 결정과 대시보드 분류에 사용.
    """

    MAINTENANCE = "MAINTENANCE"
    GAJI = "GAJI"  # 급여
    BBM = "BBM"  # 연료
    INVOICE = "INVOICE"  # 운송 청구
    REVENUE = "REVENUE"  # 기타 수익
    CASH = "CASH"  # 출자금 / 현금 다리
    BANK = "BANK"  # 은행 차입
    PAJAK = "PAJAK"  # 세금
    ASURANSI = "ASURANSI"  # 보험
    SEWA_KANTOR = "SEWA_KANTOR"  # 사무실 임대
    LISTRIK_AIR = "LISTRIK_AIR"  # 공과금
    ATK = "ATK"  # 사무용품
    PERIZINAN = "PERIZINAN"  # 인허가
    BUNGA_BANK = "BUNGA_BANK"  # 은행 이자
    PENYUSUTAN = "PENYUSUTAN"  # 감가상각
    BIAYA_LAIN = "BIAYA_LAIN"  # 기타 비용


@dataclass(frozen=True)
class CategoryAccount:
    """카테고리별 기본 상대 계정"""

    label: str
    default_account: str
    account_type: AccountType


# 카테고리 → (라벨, 기본 계정, 계정 유형)
# 순서는 입력 폼의 카테고리 표시 순서
CATEGORY_ACCOUNTS: dict[FinancialCategory, CategoryAccount] = {
    FinancialCategory.INVOICE: CategoryAccount(
        "Penagihan Client (Revenue)", "PIUTANG USAHA", AccountType.REVENUE
    ),
    FinancialCategory.BBM: CategoryAccount(
        "Bahan Bakar (BBM)", "BEBAN BBM", AccountType.EXPENSE
    ),
    FinancialCategory.MAINTENANCE: CategoryAccount(
        "Perbaikan & Suku Cadang", "BEBAN PEMELIHARAAN", AccountType.EXPENSE
    ),
    FinancialCategory.GAJI: CategoryAccount(
        "Gaji, Upah & Komisi", "BEBAN GAJI", AccountType.EXPENSE
    ),
    FinancialCategory.PERIZINAN: CategoryAccount(
        "Pajak STNK / KIR / Izin", "BEBAN PERIZINAN", AccountType.EXPENSE
    ),
    FinancialCategory.ASURANSI: CategoryAccount(
        "Asuransi Armada", "BEBAN ASURANSI", AccountType.EXPENSE
    ),
    FinancialCategory.CASH: CategoryAccount(
        "Setoran Modal Pemilik", "MODAL DISETOR", AccountType.EQUITY
    ),
    FinancialCategory.REVENUE: CategoryAccount(
        "Pendapatan Lain-lain", "PENDAPATAN LAIN", AccountType.REVENUE
    ),
    FinancialCategory.ATK: CategoryAccount(
        "Alat Tulis & Kantor", "BEBAN ATK", AccountType.EXPENSE
    ),
    FinancialCategory.LISTRIK_AIR: CategoryAccount(
        "Utilitas (Listrik/Air)", "BEBAN UTILITAS", AccountType.EXPENSE
    ),
    FinancialCategory.SEWA_KANTOR: CategoryAccount(
        "Sewa Kantor/Mess", "BEBAN SEWA", AccountType.EXPENSE
    ),
    FinancialCategory.PAJAK: CategoryAccount(
        "PPh / PPN Perusahaan", "HUTANG PAJAK", AccountType.LIABILITY
    ),
    FinancialCategory.BIAYA_LAIN: CategoryAccount(
        "Biaya Operasional Lainnya", "BEBAN LAIN-LAIN", AccountType.EXPENSE
    ),
    FinancialCategory.BANK: CategoryAccount(
        "Pinjaman Bank", "HUTANG BANK", AccountType.LIABILITY
    ),
    FinancialCategory.BUNGA_BANK: CategoryAccount(
        "Bunga & Administrasi Bank", "BEBAN BUNGA BANK", AccountType.EXPENSE
    ),
    FinancialCategory.PENYUSUTAN: CategoryAccount(
        "Penyusutan Armada", "BEBAN PENYUSUTAN", AccountType.EXPENSE
    ),
}

# 입금/출금별로 폼에 제안할 상대 계정 유형
FLOW_ACCOUNT_TYPES: dict[FlowDirection, tuple[AccountType, ...]] = {
    FlowDirection.IN: (AccountType.REVENUE, AccountType.EQUITY),
    FlowDirection.OUT: (AccountType.EXPENSE, AccountType.LIABILITY),
}


def validate_category_accounts(
    table: dict[FinancialCategory, CategoryAccount] | None = None,
) -> None:
    """매핑 테이블 완전성 검증

    모든 카테고리가 정확히 하나의 매핑을 가져야 함.

    Raises:
        CategoryMappingError: 누락, 빈 기본 계정, 현금 계정을 기본 계정으로 쓰는 경우
    """
    if table is None:
        table = CATEGORY_ACCOUNTS

    missing = [c.value for c in FinancialCategory if c not in table]
    if missing:
        raise CategoryMappingError(f"카테고리 매핑 누락: {missing}")

    blank = [c.value for c, row in table.items() if not row.default_account.strip()]
    if blank:
        raise CategoryMappingError(f"기본 계정이 비어 있는 카테고리: {blank}")

    reserved = [
        c.value for c, row in table.items()
        if row.default_account.strip().upper() == LedgerAccounts.CASH_AND_BANK
    ]
    if reserved:
        raise CategoryMappingError(f"현금 계정을 기본 계정으로 쓰는 카테고리: {reserved}")


def get_category_account(category: FinancialCategory) -> CategoryAccount:
    """카테고리의 기본 계정 조회"""
    return CATEGORY_ACCOUNTS[category]


def categories_for_flow(flow: FlowDirection) -> list[FinancialCategory]:
    """흐름 방향에 맞는 카테고리 목록 (테이블 순서)"""
    allowed = FLOW_ACCOUNT_TYPES[flow]
    return [c for c, row in CATEGORY_ACCOUNTS.items() if row.account_type in allowed]


def default_category_for_flow(flow: FlowDirection) -> FinancialCategory:
    """흐름 방향 전환 시 기본 선택 카테고리"""
    candidates = categories_for_flow(flow)
    return candidates[0] if candidates else FinancialCategory.BIAYA_LAIN


def natural_balance(account_type: AccountType, debit: Decimal, credit: Decimal) -> Decimal:
    """계정 유형별 부호 규칙을 적용한 잔액

    자산/비용: 차변 - 대변
    부채/자본/수익: 대변 - 차변
    """
    if account_type.is_debit_normal:
        return debit - credit
    return credit - debit


# 시작 시 매핑 테이블 검증
validate_category_accounts()
