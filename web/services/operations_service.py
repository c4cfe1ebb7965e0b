"""
Operations 서비스

차량/운행/주유/직원/출근 레코드 처리 및 직렬화
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from core.errors import RecordValidationError
from core.fleet import FuelLog, TripLog, Vehicle, fuel_efficiency
from core.hr import AttendanceRecord, User
from core.session import AppSession
from core.utils.dates import parse_calendar_date

logger = logging.getLogger(__name__)


def to_decimal(value: str, field_name: str) -> Decimal:
    """요청 문자열을 Decimal로 변환

    Raises:
        RecordValidationError: 숫자가 아닌 값
    """
    try:
        result = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as e:
        raise RecordValidationError(f"{field_name} 형식이 올바르지 않습니다: {value!r}") from e
    if not result.is_finite():
        raise RecordValidationError(f"{field_name} 형식이 올바르지 않습니다: {value!r}")
    return result


def vehicle_to_dict(vehicle: Vehicle) -> dict[str, Any]:
    return {
        "vehicle_id": vehicle.vehicle_id,
        "plate_number": vehicle.plate_number,
        "model": vehicle.model,
        "vehicle_type": vehicle.vehicle_type.value,
        "status": vehicle.status.value,
        "gps_id": vehicle.gps_id,
    }


def trip_to_dict(trip: TripLog) -> dict[str, Any]:
    return {
        "trip_id": trip.trip_id,
        "vehicle_id": trip.vehicle_id,
        "driver_id": trip.driver_id,
        "route": trip.route,
        "tonnage": str(trip.tonnage),
        "start_time": trip.start_time,
        "end_time": trip.end_time,
        "km_start": str(trip.km_start),
        "km_end": str(trip.km_end) if trip.km_end is not None else None,
        "distance": str(trip.distance),
        "cargo_type": trip.cargo_type,
        "hauling_location": trip.hauling_location,
    }


def fuel_to_dict(log: FuelLog) -> dict[str, Any]:
    return {
        "fuel_id": log.fuel_id,
        "trip_id": log.trip_id,
        "liters": str(log.liters),
        "cost": str(log.cost),
        "date": log.date.isoformat(),
        "receipt_url": log.receipt_url,
    }


def user_to_dict(user: User) -> dict[str, Any]:
    return {
        "user_id": user.user_id,
        "name": user.name,
        "role": user.role.value,
        "email": user.email,
    }


def attendance_to_dict(record: AttendanceRecord) -> dict[str, Any]:
    return {
        "record_id": record.record_id,
        "user_id": record.user_id,
        "check_in": record.check_in,
        "lat": record.lat,
        "lng": record.lng,
        "is_manual": record.is_manual,
    }


class OperationsService:
    """Operations 서비스

    Args:
        session: 애플리케이션 세션
    """

    def __init__(self, session: AppSession):
        self.session = session

    def start_trip(
        self,
        vehicle_id: str,
        route: str,
        tonnage: str,
        km_start: str,
        cargo_type: str | None = None,
        hauling_location: str | None = None,
    ) -> dict[str, Any]:
        """운행 시작 (운전자 = 현재 사용자)"""
        trip = self.session.fleet.start_trip(
            vehicle_id=vehicle_id,
            driver_id=self.session.current_user.user_id,
            route=route,
            tonnage=to_decimal(tonnage, "tonnage"),
            km_start=to_decimal(km_start, "km_start"),
            cargo_type=cargo_type,
            hauling_location=hauling_location,
        )
        return trip_to_dict(trip)

    def close_trip(self, trip_id: str, km_end: str) -> dict[str, Any]:
        trip = self.session.fleet.close_trip(trip_id, to_decimal(km_end, "km_end"))
        return trip_to_dict(trip)

    def log_fuel(
        self,
        trip_id: str,
        liters: str,
        cost: str,
        fuel_date: str | None,
        today: date,
        receipt_url: str | None = None,
    ) -> dict[str, Any]:
        """주유 기록 (날짜 없으면 오늘)"""
        if fuel_date is None:
            day = today
        else:
            try:
                day = parse_calendar_date(fuel_date)
            except ValueError as e:
                raise RecordValidationError(str(e)) from e

        log = self.session.fleet.log_fuel(
            trip_id=trip_id,
            liters=to_decimal(liters, "liters"),
            cost=to_decimal(cost, "cost"),
            fuel_date=day,
            receipt_url=receipt_url,
        )
        return fuel_to_dict(log)

    def get_efficiency(self, trip_id: str) -> dict[str, Any]:
        """운행 연비"""
        trip = self.session.fleet.get_trip(trip_id)
        efficiency = fuel_efficiency(trip, self.session.fleet.fuel_logs_for(trip_id))
        return {
            "trip_id": efficiency.trip_id,
            "liters": str(efficiency.liters),
            "distance": str(efficiency.distance),
            "l_per_100km": str(efficiency.l_per_100km) if efficiency.l_per_100km is not None else None,
            "is_excessive": efficiency.is_excessive,
        }
