"""운영 API 테스트 (차량, 운행, 주유)"""

from fastapi.testclient import TestClient

from adapters.mock import MockAuditClient
from core.session import AppSession
from core.types import UserRole
from web.dependencies import set_audit_client
from web.services.audit_service import MANIFEST_FALLBACK


def create_vehicle(client: TestClient) -> dict:
    response = client.post(
        "/api/operations/vehicles",
        json={"plate_number": "b 9123 xyz", "model": "hino 500", "vehicle_type": "WINGBOX"},
    )
    assert response.status_code == 201, response.text
    return response.json()


def start_trip(client: TestClient, vehicle_id: str) -> dict:
    response = client.post(
        "/api/operations/trips",
        json={"vehicle_id": vehicle_id, "route": "jakarta - surabaya", "tonnage": "20", "km_start": "1000"},
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestVehicles:
    """차량 API"""

    def test_create_and_list(self, client: TestClient) -> None:
        vehicle = create_vehicle(client)

        assert vehicle["plate_number"] == "B 9123 XYZ"
        assert vehicle["vehicle_type"] == "WINGBOX"
        assert vehicle["status"] == "AKTIF"
        assert client.get("/api/operations/vehicles").json() == [vehicle]

    def test_operator_cannot_create(self, client: TestClient, app_session: AppSession) -> None:
        app_session.switch_role(UserRole.OPERATOR)

        response = client.post("/api/operations/vehicles", json={"plate_number": "B 1", "model": "HINO"})

        assert response.status_code == 403

    def test_operator_can_list(self, client: TestClient, app_session: AppSession) -> None:
        app_session.switch_role(UserRole.OPERATOR)

        assert client.get("/api/operations/vehicles").status_code == 200

    def test_delete(self, client: TestClient) -> None:
        vehicle = create_vehicle(client)

        response = client.delete(f"/api/operations/vehicles/{vehicle['vehicle_id']}")

        assert response.status_code == 200
        assert client.get("/api/operations/vehicles").json() == []

    def test_delete_unknown(self, client: TestClient) -> None:
        assert client.delete("/api/operations/vehicles/VEH-NOPE").status_code == 404

    def test_blank_plate(self, client: TestClient) -> None:
        response = client.post("/api/operations/vehicles", json={"plate_number": " ", "model": "HINO"})

        assert response.status_code == 422


class TestTrips:
    """운행 API"""

    def test_driver_is_current_user(self, client: TestClient, app_session: AppSession) -> None:
        vehicle = create_vehicle(client)
        app_session.switch_role(UserRole.OPERATOR)

        trip = start_trip(client, vehicle["vehicle_id"])

        assert trip["driver_id"] == "drv-01"
        assert trip["route"] == "JAKARTA - SURABAYA"
        assert trip["end_time"] is None
        assert trip["distance"] == "0"

    def test_unknown_vehicle(self, client: TestClient) -> None:
        response = client.post("/api/operations/trips", json={"vehicle_id": "VEH-NOPE", "route": "A"})

        assert response.status_code == 404

    def test_invalid_tonnage(self, client: TestClient) -> None:
        vehicle = create_vehicle(client)

        response = client.post(
            "/api/operations/trips",
            json={"vehicle_id": vehicle["vehicle_id"], "route": "A", "tonnage": "banyak"},
        )

        assert response.status_code == 422

    def test_close_and_efficiency(self, client: TestClient) -> None:
        """800km, 280L → 35.00 L/100km"""
        trip = start_trip(client, create_vehicle(client)["vehicle_id"])
        trip_id = trip["trip_id"]

        closed = client.post(f"/api/operations/trips/{trip_id}/close", json={"km_end": "1800"}).json()
        client.post("/api/operations/fuel", json={"trip_id": trip_id, "liters": "280", "cost": "3500000"})
        efficiency = client.get(f"/api/operations/trips/{trip_id}/efficiency").json()

        assert closed["distance"] == "800"
        assert closed["end_time"] is not None
        assert efficiency["l_per_100km"] == "35.00"
        assert efficiency["is_excessive"] is False

    def test_close_below_start(self, client: TestClient) -> None:
        trip = start_trip(client, create_vehicle(client)["vehicle_id"])

        response = client.post(f"/api/operations/trips/{trip['trip_id']}/close", json={"km_end": "10"})

        assert response.status_code == 422

    def test_trips_newest_first(self, client: TestClient) -> None:
        vehicle_id = create_vehicle(client)["vehicle_id"]
        first = start_trip(client, vehicle_id)
        second = start_trip(client, vehicle_id)

        trips = client.get("/api/operations/trips").json()

        assert [t["trip_id"] for t in trips] == [second["trip_id"], first["trip_id"]]

    def test_manifest_analysis_fallback(self, client: TestClient) -> None:
        """AI 미설정 → 대체 문구"""
        trip = start_trip(client, create_vehicle(client)["vehicle_id"])

        body = client.post(f"/api/operations/trips/{trip['trip_id']}/analysis").json()

        assert body["analysis"] == MANIFEST_FALLBACK
        assert body["efficiency"]["l_per_100km"] is None

    def test_manifest_analysis_with_client(self, client: TestClient) -> None:
        mock = MockAuditClient()
        set_audit_client(mock)
        trip = start_trip(client, create_vehicle(client)["vehicle_id"])

        body = client.post(f"/api/operations/trips/{trip['trip_id']}/analysis").json()

        assert body["analysis"] == "Mock manifest analysis"
        assert mock.calls[0].payload["trip"]["trip_id"] == trip["trip_id"]

    def test_manifest_analysis_unknown_trip(self, client: TestClient) -> None:
        assert client.post("/api/operations/trips/TRP-NOPE/analysis").status_code == 404


class TestFuel:
    """주유 API"""

    def test_defaults_to_today(self, client: TestClient) -> None:
        trip = start_trip(client, create_vehicle(client)["vehicle_id"])

        response = client.post(
            "/api/operations/fuel",
            json={"trip_id": trip["trip_id"], "liters": "50", "cost": "600000"},
        )

        assert response.status_code == 201
        assert response.json()["date"]
        assert len(client.get("/api/operations/fuel").json()) == 1

    def test_explicit_date(self, client: TestClient) -> None:
        trip = start_trip(client, create_vehicle(client)["vehicle_id"])

        body = client.post(
            "/api/operations/fuel",
            json={"trip_id": trip["trip_id"], "liters": "50", "cost": "600000", "date": "2026-02-03"},
        ).json()

        assert body["date"] == "2026-02-03"

    def test_zero_liters(self, client: TestClient) -> None:
        trip = start_trip(client, create_vehicle(client)["vehicle_id"])

        response = client.post(
            "/api/operations/fuel",
            json={"trip_id": trip["trip_id"], "liters": "0", "cost": "1"},
        )

        assert response.status_code == 422

    def test_unknown_trip(self, client: TestClient) -> None:
        response = client.post("/api/operations/fuel", json={"trip_id": "TRP-NOPE", "liters": "1", "cost": "1"})

        assert response.status_code == 404
