"""
연비 분석

운행별 연료 사용량과 L/100km 계산
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from core.constants import Thresholds
from core.fleet.models import ZERO, FuelLog, TripLog


@dataclass(frozen=True)
class FuelEfficiency:
    """운행 연비

    l_per_100km: 주행 거리가 0이면 None (해당 없음)
    """

    trip_id: str
    liters: Decimal
    distance: Decimal
    l_per_100km: Decimal | None

    @property
    def is_excessive(self) -> bool:
        """중장비 기준(40 L/100km) 초과 소비 여부"""
        if self.l_per_100km is None:
            return False
        return self.l_per_100km > Thresholds.FUEL_EXCESSIVE_L_PER_100KM


def fuel_efficiency(trip: TripLog, fuel_logs: Iterable[FuelLog]) -> FuelEfficiency:
    """운행 연비 계산

    Args:
        trip: 운행 기록
        fuel_logs: 주유 기록 (다른 운행 기록이 섞여 있어도 됨)

    Returns:
        FuelEfficiency (거리 0이면 l_per_100km=None)
    """
    liters = sum((log.liters for log in fuel_logs if log.trip_id == trip.trip_id), ZERO)
    distance = trip.distance

    if distance > ZERO:
        l_per_100km = (liters / distance * 100).quantize(Decimal("0.01"))
    else:
        l_per_100km = None

    return FuelEfficiency(
        trip_id=trip.trip_id,
        liters=liters,
        distance=distance,
        l_per_100km=l_per_100km,
    )
