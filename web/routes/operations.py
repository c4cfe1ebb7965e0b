"""
Operations 라우트

차량(Armada), 운행 기록(Ritase / Manifest), 주유 기록, 연비
"""

from fastapi import APIRouter, Depends, HTTPException, Path

from adapters.interfaces import IAuditClient
from core.errors import RecordNotFoundError, RecordValidationError
from core.session import AppSession
from core.utils.timezone import today_wib
from web.dependencies import get_audit_client, get_session, require_manager
from web.models.requests import FuelLogRequest, TripCloseRequest, TripStartRequest, VehicleCreateRequest
from web.models.responses import (
    FuelEfficiencyResponse,
    FuelLogResponse,
    ManifestAnalysisResponse,
    TripResponse,
    VehicleResponse,
)
from web.services.audit_service import AuditService
from web.services.operations_service import (
    OperationsService,
    fuel_to_dict,
    trip_to_dict,
    vehicle_to_dict,
)

router = APIRouter(prefix="/api/operations", tags=["Operations"])


# =========================================================================
# 차량
# =========================================================================


@router.get("/vehicles", response_model=list[VehicleResponse])
async def get_vehicles(session: AppSession = Depends(get_session)) -> list[VehicleResponse]:
    """차량 목록"""
    return [VehicleResponse(**vehicle_to_dict(v)) for v in session.fleet.vehicles]


@router.post("/vehicles", response_model=VehicleResponse, status_code=201)
async def create_vehicle(
    request: VehicleCreateRequest,
    session: AppSession = Depends(require_manager),
) -> VehicleResponse:
    """차량 등록 (관리자 전용)"""
    try:
        vehicle = session.fleet.add_vehicle(
            plate_number=request.plate_number,
            model=request.model,
            vehicle_type=request.vehicle_type,
            status=request.status,
            gps_id=request.gps_id,
        )
    except RecordValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return VehicleResponse(**vehicle_to_dict(vehicle))


@router.delete("/vehicles/{vehicle_id}")
async def delete_vehicle(
    vehicle_id: str = Path(..., description="차량 ID"),
    session: AppSession = Depends(require_manager),
) -> dict[str, str]:
    """차량 삭제 (관리자 전용)"""
    try:
        session.fleet.remove_vehicle(vehicle_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": f"Vehicle deleted: {vehicle_id}"}


# =========================================================================
# 운행
# =========================================================================


@router.get("/trips", response_model=list[TripResponse])
async def get_trips(session: AppSession = Depends(get_session)) -> list[TripResponse]:
    """운행 목록 (최신순)"""
    return [TripResponse(**trip_to_dict(t)) for t in session.fleet.trips]


@router.post("/trips", response_model=TripResponse, status_code=201)
async def start_trip(
    request: TripStartRequest,
    session: AppSession = Depends(get_session),
) -> TripResponse:
    """운행 시작 (운전자 = 현재 사용자)"""
    service = OperationsService(session)
    try:
        trip = service.start_trip(
            vehicle_id=request.vehicle_id,
            route=request.route,
            tonnage=request.tonnage,
            km_start=request.km_start,
            cargo_type=request.cargo_type,
            hauling_location=request.hauling_location,
        )
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RecordValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return TripResponse(**trip)


@router.post("/trips/{trip_id}/close", response_model=TripResponse)
async def close_trip(
    request: TripCloseRequest,
    trip_id: str = Path(..., description="운행 ID"),
    session: AppSession = Depends(get_session),
) -> TripResponse:
    """운행 종료"""
    service = OperationsService(session)
    try:
        trip = service.close_trip(trip_id, request.km_end)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RecordValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return TripResponse(**trip)


@router.get("/trips/{trip_id}/efficiency", response_model=FuelEfficiencyResponse)
async def get_efficiency(
    trip_id: str = Path(..., description="운행 ID"),
    session: AppSession = Depends(get_session),
) -> FuelEfficiencyResponse:
    """운행 연비 (L/100km)"""
    try:
        efficiency = OperationsService(session).get_efficiency(trip_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return FuelEfficiencyResponse(**efficiency)


@router.post("/trips/{trip_id}/analysis", response_model=ManifestAnalysisResponse)
async def analyze_manifest(
    trip_id: str = Path(..., description="운행 ID"),
    session: AppSession = Depends(get_session),
    client: IAuditClient | None = Depends(get_audit_client),
) -> ManifestAnalysisResponse:
    """Manifest AI 분석 (실패 시 대체 문구)"""
    service = OperationsService(session)
    try:
        trip = session.fleet.get_trip(trip_id)
        efficiency = service.get_efficiency(trip_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    analysis = await AuditService(client).analyze_manifest(trip, session.fleet.fuel_logs_for(trip_id))
    return ManifestAnalysisResponse(
        trip_id=trip_id,
        efficiency=FuelEfficiencyResponse(**efficiency),
        analysis=analysis,
    )


# =========================================================================
# 주유
# =========================================================================


@router.get("/fuel", response_model=list[FuelLogResponse])
async def get_fuel_logs(session: AppSession = Depends(get_session)) -> list[FuelLogResponse]:
    """주유 기록 (최신순)"""
    return [FuelLogResponse(**fuel_to_dict(f)) for f in session.fleet.fuel_logs]


@router.post("/fuel", response_model=FuelLogResponse, status_code=201)
async def create_fuel_log(
    request: FuelLogRequest,
    session: AppSession = Depends(get_session),
) -> FuelLogResponse:
    """주유 기록 추가"""
    service = OperationsService(session)
    try:
        log = service.log_fuel(
            trip_id=request.trip_id,
            liters=request.liters,
            cost=request.cost,
            fuel_date=request.date,
            today=today_wib(),
            receipt_url=request.receipt_url,
        )
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except RecordValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return FuelLogResponse(**log)
