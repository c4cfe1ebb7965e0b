"""
Fleet 모듈

차량, 운행 기록(Manifest), 주유 기록 및 연비 분석
"""

from core.fleet.efficiency import FuelEfficiency, fuel_efficiency
from core.fleet.models import FuelLog, TripLog, Vehicle
from core.fleet.registry import FleetRegistry

__all__ = [
    "FleetRegistry",
    "FuelEfficiency",
    "FuelLog",
    "TripLog",
    "Vehicle",
    "fuel_efficiency",
]
