"""
운영 레코드 예외 정의 (차량, 운행, 직원, 예산)

Ledger 예외는 core.ledger.errors 참고.
"""


class RecordValidationError(ValueError):
    """레코드 입력 검증 실패"""

    pass


class RecordNotFoundError(LookupError):
    """존재하지 않는 레코드 ID"""

    pass


class AccessDeniedError(PermissionError):
    """역할 권한 부족 또는 금지된 작업"""

    pass
