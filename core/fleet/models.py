"""
차량 운영 데이터 구조

차량(Armada), 운행 기록(Ritase/Manifest), 주유 기록
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from core.types import VehicleStatus, VehicleType

ZERO = Decimal("0")


@dataclass
class Vehicle:
    """차량"""

    vehicle_id: str
    plate_number: str
    model: str
    vehicle_type: VehicleType = VehicleType.CONTAINER
    status: VehicleStatus = VehicleStatus.ACTIVE
    gps_id: str | None = None


@dataclass
class TripLog:
    """운행 기록 (Manifest)

    end_time/km_end가 비어 있으면 운행 중.
    """

    trip_id: str
    vehicle_id: str
    driver_id: str
    route: str
    tonnage: Decimal
    start_time: datetime
    km_start: Decimal
    end_time: datetime | None = None
    km_end: Decimal | None = None
    cargo_type: str | None = None
    hauling_location: str | None = None

    @property
    def is_finished(self) -> bool:
        """운행 종료 여부"""
        return self.end_time is not None

    @property
    def distance(self) -> Decimal:
        """주행 거리 (km)

        종료 주행거리가 없으면 0.
        """
        if self.km_end is None:
            return ZERO
        return max(self.km_end - self.km_start, ZERO)


@dataclass(frozen=True)
class FuelLog:
    """주유 기록"""

    fuel_id: str
    trip_id: str
    liters: Decimal
    cost: Decimal
    date: date
    receipt_url: str | None = None
