"""
Ledger 예외 정의
"""


class LedgerError(Exception):
    """Ledger 예외 기본 클래스"""

    pass


class LedgerValidationError(LedgerError, ValueError):
    """입력 검증 실패 (금액 0 이하, 알 수 없는 카테고리 등)

    아무 항목도 추가되지 않는다. 호출자는 사용자에게 재입력을 요청.
    """

    pass


class UnbalancedJournalError(LedgerError):
    """차변 합계 ≠ 대변 합계인 분개"""

    pass


class JournalNotFoundError(LedgerError, KeyError):
    """존재하지 않는 분개 ID"""

    def __str__(self) -> str:
        # KeyError는 메시지를 repr로 감싸므로 원문 그대로 반환
        return str(self.args[0]) if self.args else ""


class JournalAlreadyReversedError(LedgerError):
    """이미 역분개된 분개를 다시 역분개"""

    pass


class CategoryMappingError(LedgerError):
    """카테고리 → 계정 매핑 테이블 누락/중복"""

    pass


class DuplicateJournalError(LedgerError):
    """이미 장부에 있는 분개 ID로 추가"""

    pass
