"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
금액/수량은 문자열로 받아 Decimal로 변환 (float 오차 방지)
"""

from datetime import datetime

from pydantic import BaseModel, Field

from core.types import FlowDirection, ProjectStatus, UserRole, VehicleStatus, VehicleType


class JournalPostRequest(BaseModel):
    """분개 입력 요청

    "entry jurnal" 폼과 영수증 스캔 자동 입력이 같은 형태를 사용.
    """

    flow: FlowDirection = Field(..., description="IN (수령) / OUT (지출)")
    date: str = Field(..., description="거래일 (YYYY-MM-DD)")
    description: str = Field(..., description="적요")
    amount: str = Field(..., description="금액 (양수)")
    category: str = Field(..., description="카테고리 (BBM, INVOICE 등)")
    account_id: str | None = Field(default=None, description="상대 계정 (없으면 카테고리 기본 계정)")
    account_type: str | None = Field(default=None, description="상대 계정 유형 (없으면 카테고리 기본 유형)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "flow": "OUT",
                    "date": "2026-02-03",
                    "description": "Solar unit B 9123",
                    "amount": "1250000",
                    "category": "BBM",
                },
                {
                    "flow": "IN",
                    "date": "2026-02-01",
                    "description": "Setoran modal",
                    "amount": "50000000",
                    "category": "CASH",
                },
            ]
        }
    }


class JournalReverseRequest(BaseModel):
    """역분개 요청"""

    date: str | None = Field(default=None, description="역분개 일자 (없으면 원 분개 일자)")
    description: str | None = Field(default=None, description="사유")


class ReceiptScanRequest(BaseModel):
    """영수증 스캔 요청"""

    image_b64: str = Field(..., min_length=1, description="base64 인코딩된 JPEG")


class VehicleCreateRequest(BaseModel):
    """차량 등록 요청"""

    plate_number: str = Field(..., description="번호판")
    model: str = Field(..., description="모델 / 브랜드")
    vehicle_type: VehicleType = Field(default=VehicleType.CONTAINER)
    status: VehicleStatus = Field(default=VehicleStatus.ACTIVE)
    gps_id: str | None = Field(default=None)


class TripStartRequest(BaseModel):
    """운행 시작 요청 (운전자는 현재 사용자)"""

    vehicle_id: str
    route: str
    tonnage: str = Field(default="0", description="적재량 (톤)")
    km_start: str = Field(default="0", description="출발 주행거리")
    cargo_type: str | None = None
    hauling_location: str | None = None


class TripCloseRequest(BaseModel):
    """운행 종료 요청"""

    km_end: str = Field(..., description="도착 주행거리")


class FuelLogRequest(BaseModel):
    """주유 기록 요청"""

    trip_id: str
    liters: str
    cost: str
    date: str | None = Field(default=None, description="주유일 (없으면 오늘)")
    receipt_url: str | None = None


class UserCreateRequest(BaseModel):
    """직원 추가 요청"""

    name: str
    email: str
    role: UserRole = Field(default=UserRole.OPERATOR)


class CheckInRequest(BaseModel):
    """출근 요청

    lat/lng가 있으면 GPS 출근, check_in만 있으면 수동 출근.
    """

    check_in: datetime | None = Field(default=None, description="출근 시각 (없으면 현재)")
    lat: float | None = Field(default=None, ge=-90, le=90)
    lng: float | None = Field(default=None, ge=-180, le=180)


class CompanyUpdateRequest(BaseModel):
    """회사 정보 변경 요청 (지정한 필드만 변경)"""

    name: str | None = None
    address: str | None = None
    registration_id: str | None = None
    logo: str | None = Field(default=None, description="data URL")


class RoleSwitchRequest(BaseModel):
    """역할 시뮬레이션 전환 요청"""

    role: UserRole


class ProjectCreateRequest(BaseModel):
    """프로젝트 예산 등록 요청"""

    name: str
    cap: str
    target_revenue: str
    realized_cost: str = "0"
    realized_revenue: str = "0"
    start_date: str | None = None
    status: ProjectStatus = Field(default=ProjectStatus.PLANNING)
