"""FleetRegistry / 연비 테스트"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from core.errors import RecordNotFoundError, RecordValidationError
from core.fleet import FleetRegistry, FuelLog, TripLog, fuel_efficiency
from core.types import VehicleStatus, VehicleType


@pytest.fixture
def registry() -> FleetRegistry:
    return FleetRegistry()


@pytest.fixture
def trip(registry: FleetRegistry) -> TripLog:
    vehicle = registry.add_vehicle("b 9123 xyz", "hino 500")
    return registry.start_trip(
        vehicle.vehicle_id, "admin-01", "jakarta - surabaya", Decimal("20"), Decimal("1000")
    )


class TestVehicles:
    """차량 등록/삭제 테스트"""

    def test_add_vehicle_normalizes(self, registry: FleetRegistry) -> None:
        """번호판/모델 대문자, 기본 유형/상태"""
        vehicle = registry.add_vehicle(" b 9123 xyz ", "hino 500", gps_id="  ")

        assert vehicle.vehicle_id.startswith("VEH-")
        assert vehicle.plate_number == "B 9123 XYZ"
        assert vehicle.model == "HINO 500"
        assert vehicle.vehicle_type == VehicleType.CONTAINER
        assert vehicle.status == VehicleStatus.ACTIVE
        assert vehicle.gps_id is None
        assert registry.vehicles == [vehicle]

    def test_add_vehicle_with_string_enums(self, registry: FleetRegistry) -> None:
        vehicle = registry.add_vehicle("B 1", "FUSO", "WINGBOX", "PERBAIKAN", "GPS-77")

        assert vehicle.vehicle_type == VehicleType.WINGBOX
        assert vehicle.status == VehicleStatus.REPAIR
        assert vehicle.gps_id == "GPS-77"

    @pytest.mark.parametrize(("plate", "model"), [("", "HINO"), ("B 1", "  ")])
    def test_missing_fields_rejected(self, registry: FleetRegistry, plate: str, model: str) -> None:
        with pytest.raises(RecordValidationError):
            registry.add_vehicle(plate, model)

    def test_unknown_type_rejected(self, registry: FleetRegistry) -> None:
        with pytest.raises(RecordValidationError):
            registry.add_vehicle("B 1", "HINO", "TANKER")

    def test_remove_vehicle(self, registry: FleetRegistry) -> None:
        vehicle = registry.add_vehicle("B 1", "HINO")

        removed = registry.remove_vehicle(vehicle.vehicle_id)

        assert removed is vehicle
        assert registry.vehicles == []

    def test_remove_unknown(self, registry: FleetRegistry) -> None:
        with pytest.raises(RecordNotFoundError):
            registry.remove_vehicle("VEH-NOPE")


class TestTrips:
    """운행 시작/종료 테스트"""

    def test_start_trip(self, trip: TripLog) -> None:
        assert trip.trip_id.startswith("TRP-")
        assert trip.route == "JAKARTA - SURABAYA"
        assert trip.driver_id == "admin-01"
        assert not trip.is_finished
        assert trip.distance == Decimal("0")
        assert trip.start_time.tzinfo is not None

    def test_trips_newest_first(self, registry: FleetRegistry, trip: TripLog) -> None:
        second = registry.start_trip(trip.vehicle_id, "admin-01", "BEKASI", Decimal("5"), Decimal("0"))

        assert registry.trips == [second, trip]

    def test_start_trip_unknown_vehicle(self, registry: FleetRegistry) -> None:
        with pytest.raises(RecordNotFoundError):
            registry.start_trip("VEH-NOPE", "u", "A", Decimal("1"), Decimal("0"))

    def test_start_trip_negative_tonnage(self, registry: FleetRegistry) -> None:
        vehicle = registry.add_vehicle("B 1", "HINO")

        with pytest.raises(RecordValidationError):
            registry.start_trip(vehicle.vehicle_id, "u", "A", Decimal("-1"), Decimal("0"))

    def test_close_trip(self, registry: FleetRegistry, trip: TripLog) -> None:
        end = datetime(2026, 2, 2, 10, 0, tzinfo=timezone.utc)

        closed = registry.close_trip(trip.trip_id, Decimal("1800"), end)

        assert closed.is_finished
        assert closed.end_time == end
        assert closed.distance == Decimal("800")

    def test_close_twice_rejected(self, registry: FleetRegistry, trip: TripLog) -> None:
        registry.close_trip(trip.trip_id, Decimal("1800"))

        with pytest.raises(RecordValidationError, match="이미 종료"):
            registry.close_trip(trip.trip_id, Decimal("1900"))

    def test_km_end_below_start_rejected(self, registry: FleetRegistry, trip: TripLog) -> None:
        with pytest.raises(RecordValidationError):
            registry.close_trip(trip.trip_id, Decimal("999"))
        assert not trip.is_finished


class TestFuelLogs:
    """주유 기록 테스트"""

    def test_log_fuel(self, registry: FleetRegistry, trip: TripLog) -> None:
        log = registry.log_fuel(trip.trip_id, Decimal("120"), Decimal("1500000"), date(2026, 2, 1))

        assert log.fuel_id.startswith("FUEL-")
        assert registry.fuel_logs == [log]
        assert registry.fuel_logs_for(trip.trip_id) == [log]
        assert registry.fuel_logs_for("TRP-OTHER") == []

    @pytest.mark.parametrize(("liters", "cost"), [("0", "10"), ("-1", "10"), ("10", "-1")])
    def test_invalid_values(self, registry: FleetRegistry, trip: TripLog, liters: str, cost: str) -> None:
        with pytest.raises(RecordValidationError):
            registry.log_fuel(trip.trip_id, Decimal(liters), Decimal(cost), date(2026, 2, 1))

    def test_unknown_trip(self, registry: FleetRegistry) -> None:
        with pytest.raises(RecordNotFoundError):
            registry.log_fuel("TRP-NOPE", Decimal("1"), Decimal("1"), date(2026, 2, 1))


class TestFuelEfficiency:
    """fuel_efficiency 테스트"""

    def _fuel(self, trip_id: str, liters: str) -> FuelLog:
        return FuelLog(f"FUEL-{liters}", trip_id, Decimal(liters), Decimal("0"), date(2026, 2, 1))

    def test_l_per_100km(self, registry: FleetRegistry, trip: TripLog) -> None:
        """800km, 280L → 35.00 L/100km"""
        registry.close_trip(trip.trip_id, Decimal("1800"))
        logs = [self._fuel(trip.trip_id, "200"), self._fuel(trip.trip_id, "80"), self._fuel("TRP-X", "999")]

        result = fuel_efficiency(trip, logs)

        assert result.liters == Decimal("280")
        assert result.distance == Decimal("800")
        assert result.l_per_100km == Decimal("35.00")
        assert not result.is_excessive

    def test_excessive(self, registry: FleetRegistry, trip: TripLog) -> None:
        registry.close_trip(trip.trip_id, Decimal("1100"))

        result = fuel_efficiency(trip, [self._fuel(trip.trip_id, "41")])

        assert result.l_per_100km == Decimal("41.00")
        assert result.is_excessive

    def test_zero_distance(self, trip: TripLog) -> None:
        """운행 중(거리 0) → 해당 없음"""
        result = fuel_efficiency(trip, [self._fuel(trip.trip_id, "50")])

        assert result.distance == Decimal("0")
        assert result.l_per_100km is None
        assert not result.is_excessive
