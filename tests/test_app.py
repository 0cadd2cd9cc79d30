from __future__ import annotations

import pytest

from src.laundry_system.laundry_system.main import create_app


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def _hire(app, username, role):
    container = app.extensions["laundry_container"]
    result = container.user_service.add_employee(
        username=username,
        email=f"{username}@govlash.com",
        password="secret1",
        confirm_password="secret1",
        gender="Female",
        date_of_birth="1990-01-01",
        role=role,
    )
    assert result.ok, result.message
    return result.value


def _login(client, username, password="secret1"):
    client.post("/logout")
    return client.post("/login", json={"username": username, "password": password})


def test_requires_login(client):
    res = client.get("/customer/transactions")

    assert res.status_code == 401
    assert res.get_json()["error"] == "authentication"


def test_wrong_role_is_forbidden(app, client):
    _hire(app, "sari", "Receptionist")
    _login(client, "sari")

    res = client.post("/admin/services", json={"name": "x", "description": "y", "price": "1", "duration": "1"})

    assert res.status_code == 403


def test_bad_login(client):
    res = client.post("/login", json={"username": "ghost", "password": "whatever"})

    assert res.status_code == 401
    assert res.get_json()["message"] == "Invalid Username or Password."


def test_register_validation_maps_to_http_status(client):
    payload = {
        "username": "budi",
        "email": "budi@email.com",
        "password": "secret1",
        "confirm_password": "secret1",
        "gender": "Male",
        "date_of_birth": "2000-01-01",
    }
    assert client.post("/register", json=payload).status_code == 201
    dup = client.post("/register", json=dict(payload, email="budi2@email.com"))
    assert dup.status_code == 409
    bad = client.post("/register", json=dict(payload, username="dewi", email="dewi@gmail.com"))
    assert bad.status_code == 400
    assert bad.get_json()["message"] == "Email must end with @email.com"


def test_order_lifecycle_over_http(app, client):
    _hire(app, "admin", "Admin")
    receptionist_id = _hire(app, "sari", "Receptionist")
    staff_id = _hire(app, "joko", "Laundry Staff")
    client.post(
        "/register",
        data={
            "username": "budi",
            "email": "budi@email.com",
            "password": "secret1",
            "confirm_password": "secret1",
            "gender": "Male",
            "date_of_birth": "2000-01-01",
        },
    )

    _login(client, "admin")
    service = client.post(
        "/admin/services", json={"name": "Wash", "description": "Wash and fold", "price": "8000", "duration": "2"}
    )
    assert service.status_code == 201
    service_id = service.get_json()["service_id"]

    assert _login(client, "budi").get_json()["user"]["role"] == "Customer"
    missing = client.post("/customer/transactions", json={"service_id": "", "weight": "10", "notes": ""})
    assert missing.status_code == 400
    assert missing.get_json()["message"] == "Please select a service."
    created = client.post(
        "/customer/transactions", json={"service_id": service_id, "weight": "10.5", "notes": "fold"}
    )
    assert created.status_code == 201
    tx_id = created.get_json()["transaction_id"]
    history = client.get("/customer/transactions").get_json()["transactions"]
    assert history[0]["status"] == "Pending"
    assert history[0]["weight"] == 10.5

    _login(client, "sari")
    queue = client.get("/receptionist/queue").get_json()["transactions"]
    assert [t["transaction_id"] for t in queue] == [tx_id]
    staff = client.get("/receptionist/staff").get_json()["staff"]
    assert [s["user_id"] for s in staff] == [staff_id]
    assert "password_hash" not in staff[0]
    assigned = client.post("/receptionist/assign", json={"transaction_id": tx_id, "staff_id": staff_id})
    assert assigned.get_json() == {"status": "Success"}
    assert client.get("/receptionist/queue").get_json()["transactions"] == []

    _login(client, "joko")
    jobs = client.get("/staff/jobs").get_json()["transactions"]
    assert jobs[0]["receptionist_id"] == receptionist_id
    assert client.post(f"/staff/jobs/{tx_id}/finish").status_code == 200
    assert client.get("/staff/jobs").get_json()["transactions"] == []

    _login(client, "admin")
    finished = client.get("/admin/transactions?status=finished").get_json()["transactions"]
    assert [t["transaction_id"] for t in finished] == [tx_id]
    assert client.post(f"/admin/transactions/{tx_id}/notify").status_code == 201

    _login(client, "budi")
    inbox = client.get("/customer/notifications").get_json()["notifications"]
    assert len(inbox) == 1
    assert f"#{tx_id}" in inbox[0]["message"]
    note_id = inbox[0]["notification_id"]
    assert client.post(f"/customer/notifications/{note_id}/read").status_code == 200
    assert client.delete(f"/customer/notifications/{note_id}").status_code == 200
    assert client.get("/customer/notifications").get_json()["notifications"] == []


def test_admin_service_management(app, client):
    _hire(app, "admin", "Admin")
    _login(client, "admin")

    bad = client.post("/admin/services", json={"name": "Wash", "description": "d", "price": "0", "duration": "2"})
    assert bad.get_json()["message"] == "Price must be > 0"

    sid = client.post(
        "/admin/services", json={"name": "Wash", "description": "d", "price": "5000", "duration": "2"}
    ).get_json()["service_id"]
    assert [s["service_id"] for s in client.get("/services").get_json()["services"]] == [sid]
    assert client.delete(f"/admin/services/{sid}").status_code == 200
    assert client.delete(f"/admin/services/{sid}").status_code == 404

    employees = client.get("/admin/employees").get_json()["employees"]
    assert [e["username"] for e in employees] == ["admin"]


def test_numeric_json_values_are_validated_not_crashing(app, client):
    payload = {
        "username": "budi",
        "email": "budi@email.com",
        "password": 1234567,
        "confirm_password": 1234567,
        "gender": "Male",
        "date_of_birth": "2000-01-01",
    }
    assert client.post("/register", json=payload).status_code == 201
    short = client.post("/register", json=dict(payload, username="dewi", email="dewi@email.com", password=123))
    assert short.status_code == 400
    assert short.get_json()["message"] == "Password must be at least 6 characters long."

    _hire(app, "admin", "Admin")
    _login(client, "admin")
    service_id = client.post(
        "/admin/services", json={"name": "Wash", "description": "d", "price": 5000, "duration": 2}
    ).get_json()["service_id"]

    assert _login(client, "budi", password="1234567").status_code == 200
    created = client.post("/customer/transactions", json={"service_id": service_id, "weight": 4, "notes": 12345})
    assert created.status_code == 201
    history = client.get("/customer/transactions").get_json()["transactions"]
    assert history[0]["notes"] == "12345"
