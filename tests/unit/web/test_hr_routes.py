"""HR API 테스트 (직원, 출근)"""

from fastapi.testclient import TestClient

from core.session import AppSession
from core.types import UserRole


class TestUsers:
    """직원 API"""

    def test_list(self, client: TestClient) -> None:
        users = client.get("/api/hr/users").json()

        assert [u["user_id"] for u in users] == ["admin-01", "adm-02", "drv-01"]

    def test_owner_adds_user(self, client: TestClient) -> None:
        response = client.post("/api/hr/users", json={"name": "siti", "email": "Siti@X.ID"})

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "SITI"
        assert body["email"] == "siti@x.id"
        assert body["role"] == "OPERATOR"

    def test_admin_cannot_add_user(self, client: TestClient, app_session: AppSession) -> None:
        """직원 관리는 소유자/개발자 전용"""
        app_session.switch_role(UserRole.ADMIN)

        response = client.post("/api/hr/users", json={"name": "siti", "email": "s@x.id"})

        assert response.status_code == 403

    def test_delete_user(self, client: TestClient) -> None:
        response = client.delete("/api/hr/users/drv-01")

        assert response.status_code == 200
        assert len(client.get("/api/hr/users").json()) == 2

    def test_delete_self_forbidden(self, client: TestClient, app_session: AppSession) -> None:
        response = client.delete("/api/hr/users/admin-01")

        assert response.status_code == 403
        assert len(app_session.roster.users) == 3

    def test_delete_unknown(self, client: TestClient) -> None:
        assert client.delete("/api/hr/users/nope").status_code == 404


class TestAttendance:
    """출근 API"""

    def test_gps_check_in(self, client: TestClient, app_session: AppSession) -> None:
        app_session.switch_role(UserRole.OPERATOR)

        response = client.post("/api/hr/attendance", json={"lat": -6.2, "lng": 106.8})

        assert response.status_code == 201
        body = response.json()
        assert body["user_id"] == "drv-01"
        assert body["is_manual"] is False
        assert body["record_id"].startswith("ATT-GPS-")

    def test_manual_check_in(self, client: TestClient) -> None:
        response = client.post("/api/hr/attendance", json={"check_in": "2026-02-02T07:30:00"})

        body = response.json()
        assert body["is_manual"] is True
        assert (body["lat"], body["lng"]) == (0.0, 0.0)
        assert body["check_in"].startswith("2026-02-02T07:30:00")

    def test_partial_coordinates(self, client: TestClient) -> None:
        assert client.post("/api/hr/attendance", json={"lat": -6.2}).status_code == 422

    def test_out_of_range_latitude(self, client: TestClient) -> None:
        assert client.post("/api/hr/attendance", json={"lat": 91, "lng": 0}).status_code == 422

    def test_history_of_current_user(self, client: TestClient, app_session: AppSession) -> None:
        client.post("/api/hr/attendance", json={})
        app_session.switch_role(UserRole.OPERATOR)
        client.post("/api/hr/attendance", json={})

        records = client.get("/api/hr/attendance").json()

        assert len(records) == 1
        assert records[0]["user_id"] == "drv-01"
