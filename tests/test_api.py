"""HTTP API tests over an isolated in-memory store."""
import pytest
from fastapi.testclient import TestClient

from hotdesk.api.deps import get_engine
from hotdesk.core.config import settings
from hotdesk.db.session import get_store
from hotdesk.main import app
from tests.constants import FLOATER_A, FLOATER_B, WEEK1_MON, WEEK1_SAT

pytestmark = pytest.mark.integration

API = settings.API_V1_STR
DAY = WEEK1_MON.isoformat()


@pytest.fixture
def client(store, engine):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_engine] = lambda: engine
    # No context manager: the lifespan would initialise the global store
    yield TestClient(app)
    app.dependency_overrides.clear()


def _register(client, name, batch="batch1", **extra):
    user_data = {
        "name": name.title(),
        "email": f"{name}@company.com",
        "password": "Pass123!",
        "batch": batch,
        **extra,
    }
    path = "/auth/admin/register" if "admin_secret" in extra else "/auth/register"
    response = client.post(f"{API}{path}", json=user_data)
    assert response.status_code == 201, response.text
    return response.json()


def _auth(token_response):
    return {"Authorization": f"Bearer {token_response['access_token']}"}


class TestAuth:
    def test_register_returns_a_token_and_profile(self, client):
        data = _register(client, "alice", designated_seat_id=1)

        assert data["token_type"] == "bearer"
        assert data["user"]["email"] == "alice@company.com"
        assert data["user"]["designated_seat_id"] == 1
        assert data["user"]["is_admin"] is False

    def test_duplicate_email_is_a_conflict(self, client):
        _register(client, "alice")

        response = client.post(f"{API}/auth/register", json={
            "name": "Alice Again",
            "email": "alice@company.com",
            "password": "Pass456!",
            "batch": "batch2",
        })

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "error": "conflict",
            "message": "Email is already registered",
        }

    def test_unknown_batch_is_rejected(self, client):
        response = client.post(f"{API}/auth/register", json={
            "name": "Eve",
            "email": "eve@company.com",
            "password": "Pass123!",
            "batch": "batch9",
        })

        assert response.status_code == 422

    def test_login_and_me(self, client):
        _register(client, "alice")

        response = client.post(
            f"{API}/auth/login",
            data={"username": "alice@company.com", "password": "Pass123!"},
        )
        assert response.status_code == 200

        me = client.get(f"{API}/me/", headers=_auth(response.json()))
        assert me.status_code == 200
        assert me.json()["name"] == "Alice"

    def test_wrong_password(self, client):
        _register(client, "alice")

        response = client.post(
            f"{API}/auth/login",
            data={"username": "alice@company.com", "password": "nope"},
        )

        assert response.status_code == 401

    def test_missing_or_bad_token(self, client):
        assert client.get(f"{API}/me/").status_code == 401
        assert client.get(f"{API}/me/", headers={"Authorization": "Bearer junk"}).status_code == 401

    def test_admin_registration_requires_the_secret(self, client):
        response = client.post(f"{API}/auth/admin/register", json={
            "name": "Mallory",
            "email": "mallory@company.com",
            "password": "Pass123!",
            "batch": "batch1",
            "admin_secret": "guess",
        })

        assert response.status_code == 403


class TestBookingFlow:
    def test_lock_book_and_view(self, client):
        alice = _auth(_register(client, "alice"))
        selection = {"date": DAY, "seat_ids": [FLOATER_A, FLOATER_B]}

        lock = client.post(f"{API}/seats/lock", json=selection, headers=alice)
        assert lock.status_code == 200
        assert lock.json()["locked_seats"] == [FLOATER_A, FLOATER_B]

        booking = client.post(f"{API}/bookings/", json=selection, headers=alice)
        assert booking.status_code == 200
        assert booking.json() == {
            "success": True,
            "message": "Booking successful",
            "booked_seats": [FLOATER_A, FLOATER_B],
        }

        state = client.get(f"{API}/seats/", params={"date": DAY}, headers=alice).json()
        assert len(state["seats"]) == 50
        statuses = {s["seat_id"]: s["status"] for s in state["seats"]}
        assert statuses[FLOATER_A] == statuses[FLOATER_B] == "occupied"
        assert state["policy"]["attendance_count"] == 1

        mine = client.get(f"{API}/me/bookings", headers=alice).json()["bookings"]
        assert [b["seat_id"] for b in mine] == [FLOATER_A, FLOATER_B]

    def test_seat_held_by_someone_else_is_a_conflict(self, client):
        alice = _auth(_register(client, "alice"))
        bob = _auth(_register(client, "bob", batch="batch2"))
        selection = {"date": DAY, "seat_ids": [FLOATER_A]}
        client.post(f"{API}/seats/lock", json=selection, headers=alice)

        response = client.post(f"{API}/seats/lock", json=selection, headers=bob)

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "conflict"
        assert body["message"] == f"Seat {FLOATER_A} is locked by another user"

    def test_policy_violation_is_forbidden(self, client):
        alice = _auth(_register(client, "alice"))

        response = client.post(
            f"{API}/bookings/",
            json={"date": WEEK1_SAT.isoformat(), "seat_ids": [FLOATER_A]},
            headers=alice,
        )

        assert response.status_code == 403
        assert response.json()["error"] == "policy_violation"

    def test_empty_selection_is_a_validation_error(self, client):
        alice = _auth(_register(client, "alice"))

        response = client.post(f"{API}/bookings/", json={"date": DAY}, headers=alice)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    def test_selection_beyond_the_floor_names_an_unknown_seat(self, client):
        alice = _auth(_register(client, "alice"))

        response = client.post(
            f"{API}/seats/lock",
            json={"date": DAY, "seat_ids": list(range(1, 52))},
            headers=alice,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Seat 51 does not exist"

    def test_unlock_cancel_and_leave(self, client):
        alice = _auth(_register(client, "alice", designated_seat_id=1))
        client.post(f"{API}/seats/lock", json={"date": DAY, "seat_ids": [FLOATER_B]}, headers=alice)
        client.post(f"{API}/bookings/", json={"date": DAY, "seat_ids": [1]}, headers=alice)

        unlock = client.post(f"{API}/seats/unlock", json={"date": DAY, "seat_ids": [FLOATER_B]}, headers=alice)
        assert unlock.json()["released_seats"] == [FLOATER_B]

        cancel = client.post(f"{API}/bookings/cancel", json={"date": DAY, "seat_ids": [1]}, headers=alice)
        assert cancel.json() == {"success": True, "message": "Booking cancelled"}

        leave = client.post(f"{API}/leaves/", json={"date": DAY}, headers=alice)
        assert leave.status_code == 200
        assert leave.json()["created"] is True

    def test_switch_batch(self, client):
        alice = _auth(_register(client, "alice"))

        response = client.patch(
            f"{API}/me/batch",
            json={"new_batch": "batch2", "effective_date": DAY},
            headers=alice,
        )

        assert response.status_code == 200
        assert response.json()["batch"] == "batch2"


class TestAdmin:
    def test_normal_user_is_refused(self, client):
        alice = _auth(_register(client, "alice"))

        assert client.get(f"{API}/admin/bookings/", headers=alice).status_code == 403
        assert client.post(f"{API}/admin/reset", headers=alice).status_code == 403

    def test_admin_endpoints(self, client):
        admin = _auth(_register(client, "root", admin_secret=settings.ADMIN_SECRET_KEY))
        alice = _register(client, "alice")

        assign = client.post(
            f"{API}/admin/seats/2/assign",
            json={"user_id": alice["user"]["id"]},
            headers=admin,
        )
        assert assign.status_code == 200

        convert = client.patch(f"{API}/admin/seats/{FLOATER_A}/type", json={"type": "designated"}, headers=admin)
        assert convert.json()["message"] == f"Seat {FLOATER_A} converted to designated"

        holiday = client.post(f"{API}/admin/holidays", json={"date": DAY}, headers=admin)
        assert holiday.status_code == 200

        schedule = client.get(f"{API}/admin/batch-schedule", headers=admin).json()["schedule"]
        assert schedule["batch2"]["week1"] == ["Thu", "Fri"]

        replaced = client.put(f"{API}/admin/batch-schedule", json={"schedule": schedule}, headers=admin)
        assert replaced.status_code == 200

        users = client.get(f"{API}/admin/users", headers=admin).json()["users"]
        assert {u["email"]: u["designated_seat_id"] for u in users}["alice@company.com"] == 2

        assert client.get(f"{API}/admin/leaves", headers=admin).json() == {"leaves": []}
        assert client.get(f"{API}/admin/bookings/", headers=admin).json() == {"bookings": []}

        reset = client.post(f"{API}/admin/reset", headers=admin)
        assert reset.json()["success"] is True

    def test_force_cancel_unknown_seat(self, client):
        admin = _auth(_register(client, "root", admin_secret=settings.ADMIN_SECRET_KEY))

        response = client.post(
            f"{API}/admin/bookings/force-cancel",
            json={"date": DAY, "seat_id": 99},
            headers=admin,
        )

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


def test_root(client):
    assert client.get("/").json() == {"Hello": "Hotdesk"}
