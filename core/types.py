"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class UserRole(str, Enum):
    """사용자 역할"""

    DEVELOPER = "DEVELOPER"
    OWNER = "PEMILIK"
    ADMIN = "ADMIN"
    OPERATOR = "OPERATOR"


class FlowDirection(str, Enum):
    """자금 흐름 방향 (입금 / 출금)"""

    IN = "IN"  # 수령
    OUT = "OUT"  # 지출


class VehicleType(str, Enum):
    """차량 유형"""

    FLATBED = "FLATBED"
    CONTAINER = "CONTAINER"
    WINGBOX = "WINGBOX"


class VehicleStatus(str, Enum):
    """차량 상태"""

    ACTIVE = "AKTIF"
    REPAIR = "PERBAIKAN"
    STANDBY = "STANDBY"


class ProjectStatus(str, Enum):
    """프로젝트 예산 상태"""

    PLANNING = "PLANNING"
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"


class AuditStatus(str, Enum):
    """감사 결과 상태"""

    SAFE = "AMAN"
    WARNING = "PERINGATAN"
    CRITICAL = "KRITIS"


class NavTab(str, Enum):
    """대시보드 탭"""

    DASHBOARD = "dasbor"
    OPERATIONS = "operasional"
    FINANCE = "keuangan"
    HR = "sdm"
    SETTINGS = "pengaturan"
