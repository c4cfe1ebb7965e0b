"""
차량 및 운행 기록 저장소 (In-memory)

차량 등록/삭제, 운행 시작/종료, 주유 기록.
운행/주유 목록은 최신순으로 반환.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal

from core.errors import RecordNotFoundError, RecordValidationError
from core.fleet.models import ZERO, FuelLog, TripLog, Vehicle
from core.types import VehicleStatus, VehicleType
from core.utils.idempotency import make_record_id
from core.utils.timezone import now_utc

logger = logging.getLogger(__name__)


class FleetRegistry:
    """차량 운영 레코드 저장소

    사용 예시:
        registry = FleetRegistry()
        vehicle = registry.add_vehicle("B 1234 XYZ", "HINO 500")
        trip = registry.start_trip(vehicle.vehicle_id, "admin-01", "JAKARTA - SURABAYA", Decimal("20"), Decimal("1000"))
        registry.close_trip(trip.trip_id, Decimal("1800"))
    """

    def __init__(self) -> None:
        self._vehicles: list[Vehicle] = []
        self._trips: list[TripLog] = []
        self._fuel_logs: list[FuelLog] = []

    # =========================================================================
    # 차량
    # =========================================================================

    @property
    def vehicles(self) -> list[Vehicle]:
        """등록 순서대로 차량 목록"""
        return list(self._vehicles)

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        for vehicle in self._vehicles:
            if vehicle.vehicle_id == vehicle_id:
                return vehicle
        raise RecordNotFoundError(f"차량을 찾을 수 없습니다: {vehicle_id}")

    def add_vehicle(
        self,
        plate_number: str,
        model: str,
        vehicle_type: VehicleType | str = VehicleType.CONTAINER,
        status: VehicleStatus | str = VehicleStatus.ACTIVE,
        gps_id: str | None = None,
    ) -> Vehicle:
        """차량 등록

        Raises:
            RecordValidationError: 번호판/모델 누락 또는 잘못된 유형/상태
        """
        plate = plate_number.strip().upper()
        model_name = model.strip().upper()
        if not plate or not model_name:
            raise RecordValidationError("번호판과 모델은 필수입니다")

        try:
            vehicle_type = VehicleType(vehicle_type)
            status = VehicleStatus(status)
        except ValueError as e:
            raise RecordValidationError(str(e)) from e

        vehicle = Vehicle(
            vehicle_id=make_record_id("VEH"),
            plate_number=plate,
            model=model_name,
            vehicle_type=vehicle_type,
            status=status,
            gps_id=(gps_id or "").strip() or None,
        )
        self._vehicles.append(vehicle)
        logger.info(f"차량 등록: {vehicle.vehicle_id} {vehicle.plate_number}")
        return vehicle

    def remove_vehicle(self, vehicle_id: str) -> Vehicle:
        vehicle = self.get_vehicle(vehicle_id)
        self._vehicles.remove(vehicle)
        logger.info(f"차량 삭제: {vehicle_id}")
        return vehicle

    # =========================================================================
    # 운행
    # =========================================================================

    @property
    def trips(self) -> list[TripLog]:
        """최신순 운행 목록"""
        return list(reversed(self._trips))

    def get_trip(self, trip_id: str) -> TripLog:
        for trip in self._trips:
            if trip.trip_id == trip_id:
                return trip
        raise RecordNotFoundError(f"운행 기록을 찾을 수 없습니다: {trip_id}")

    def start_trip(
        self,
        vehicle_id: str,
        driver_id: str,
        route: str,
        tonnage: Decimal,
        km_start: Decimal,
        cargo_type: str | None = None,
        hauling_location: str | None = None,
        start_time: datetime | None = None,
    ) -> TripLog:
        """운행 시작 (Manifest 발행)

        Args:
            driver_id: 현재 사용자 ID
            start_time: 시작 시각 (None이면 현재 UTC)

        Raises:
            RecordNotFoundError: 등록되지 않은 차량
            RecordValidationError: 음수 톤수/주행거리 또는 빈 경로
        """
        self.get_vehicle(vehicle_id)

        if tonnage < ZERO or km_start < ZERO:
            raise RecordValidationError("톤수와 주행거리는 0 이상이어야 합니다")
        route_name = route.strip().upper()
        if not route_name:
            raise RecordValidationError("경로는 필수입니다")

        trip = TripLog(
            trip_id=make_record_id("TRP"),
            vehicle_id=vehicle_id,
            driver_id=driver_id,
            route=route_name,
            tonnage=tonnage,
            start_time=start_time or now_utc(),
            km_start=km_start,
            cargo_type=(cargo_type or "").strip().upper() or None,
            hauling_location=(hauling_location or "").strip().upper() or None,
        )
        self._trips.append(trip)
        logger.info(f"운행 시작: {trip.trip_id} vehicle={vehicle_id} route={route_name}")
        return trip

    def close_trip(
        self,
        trip_id: str,
        km_end: Decimal,
        end_time: datetime | None = None,
    ) -> TripLog:
        """운행 종료

        Raises:
            RecordNotFoundError: 존재하지 않는 운행
            RecordValidationError: 이미 종료되었거나 km_end < km_start
        """
        trip = self.get_trip(trip_id)
        if trip.is_finished:
            raise RecordValidationError(f"이미 종료된 운행입니다: {trip_id}")
        if km_end < trip.km_start:
            raise RecordValidationError(
                f"종료 주행거리({km_end})가 시작 주행거리({trip.km_start})보다 작습니다"
            )

        trip.km_end = km_end
        trip.end_time = end_time or now_utc()
        logger.info(f"운행 종료: {trip_id} distance={trip.distance}km")
        return trip

    # =========================================================================
    # 주유
    # =========================================================================

    @property
    def fuel_logs(self) -> list[FuelLog]:
        """최신순 주유 기록"""
        return list(reversed(self._fuel_logs))

    def fuel_logs_for(self, trip_id: str) -> list[FuelLog]:
        return [log for log in self._fuel_logs if log.trip_id == trip_id]

    def log_fuel(
        self,
        trip_id: str,
        liters: Decimal,
        cost: Decimal,
        fuel_date: date,
        receipt_url: str | None = None,
    ) -> FuelLog:
        """주유 기록 추가

        Raises:
            RecordNotFoundError: 존재하지 않는 운행
            RecordValidationError: liters <= 0 또는 cost < 0
        """
        self.get_trip(trip_id)
        if liters <= ZERO:
            raise RecordValidationError("주유량은 0보다 커야 합니다")
        if cost < ZERO:
            raise RecordValidationError("주유 비용은 음수일 수 없습니다")

        fuel_log = FuelLog(
            fuel_id=make_record_id("FUEL"),
            trip_id=trip_id,
            liters=liters,
            cost=cost,
            date=fuel_date,
            receipt_url=receipt_url,
        )
        self._fuel_logs.append(fuel_log)
        logger.info(f"주유 기록: {fuel_log.fuel_id} trip={trip_id} {liters}L")
        return fuel_log
