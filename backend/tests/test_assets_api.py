import pytest
from fastapi.testclient import TestClient

from dependencies import get_ledger
from main import app
from repositories.memory_ledger import InMemoryLedger
from services.identity_resolver import encode_identity


@pytest.fixture
def api_ledger():
    ledger = InMemoryLedger()
    app.dependency_overrides[get_ledger] = lambda: ledger
    yield ledger
    app.dependency_overrides.clear()


@pytest.fixture
def client(api_ledger):
    return TestClient(app)


@pytest.fixture
def headers():
    return {"X-Client-Identity": encode_identity("lenderA")}


def _create(client, headers, asset_id="loan-7", **overrides):
    body = {"asset_id": asset_id, "start_date": 20230101, "end_date": 20240101, "amount": 1000}
    body.update(overrides)
    return client.post("/api/assets", json=body, headers=headers)


def test_create_and_read(client, headers):
    response = _create(client, headers)
    assert response.status_code == 201
    assert response.json()["lender"] == "lenderA"

    response = client.get("/api/assets/loan-7")
    assert response.status_code == 200
    body = response.json()
    assert body["state"] == "ISSUED"
    assert body["amount"] == 1000


def test_duplicate_create_conflicts(client, headers):
    _create(client, headers)
    response = _create(client, headers, amount=5)
    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]


def test_create_requires_identity(client):
    response = _create(client, {})
    assert response.status_code == 401


def test_create_rejects_malformed_identity(client):
    response = _create(client, {"X-Client-Identity": "not base64!"})
    assert response.status_code == 401


@pytest.mark.parametrize("overrides", [
    {"start_date": 2023},
    {"end_date": 20221231},
    {"amount": -1},
    {"asset_id": ""},
])
def test_create_validates_request(client, headers, overrides):
    assert _create(client, headers, **overrides).status_code == 422


def test_read_missing(client):
    assert client.get("/api/assets/ghost").status_code == 404


def test_exists_check(client, headers):
    assert client.get("/api/assets/loan-7/exists").json() == {"asset_id": "loan-7", "exists": False}
    _create(client, headers)
    assert client.get("/api/assets/loan-7/exists").json()["exists"] is True


def test_delete(client, headers, api_ledger):
    _create(client, headers)
    assert client.delete("/api/assets/loan-7").status_code == 204
    assert "loan-7" not in api_ledger
    assert client.delete("/api/assets/loan-7").status_code == 404


def test_transfer(client, headers):
    _create(client, headers)
    response = client.put("/api/assets/loan-7/borrower", json={"new_borrower": "borrowerB"})
    assert response.status_code == 200
    assert response.json()["borrower"] == "borrowerB"
    assert response.json()["lender"] == "lenderA"


def test_state_changes_and_redeemed_lock(client, headers):
    _create(client, headers)
    assert client.put("/api/assets/loan-7/state", json={"state": "trading"}).json()["state"] == "TRADING"
    assert client.put("/api/assets/loan-7/state", json={"state": "REDEEMED"}).status_code == 200

    response = client.put("/api/assets/loan-7/borrower", json={"new_borrower": "borrowerB"})
    assert response.status_code == 409
    assert client.put("/api/assets/loan-7/state", json={"state": "ISSUED"}).status_code == 409


def test_unknown_state_name(client, headers):
    _create(client, headers)
    assert client.put("/api/assets/loan-7/state", json={"state": "CLOSED"}).status_code == 422


def test_payments_and_addresses(client, headers):
    _create(client, headers)
    client.post("/api/assets/loan-7/payments", json={"payment_hash": "0x01"})
    response = client.put(
        "/api/assets/loan-7/addresses",
        json={"borrower_address": "addr-b", "investor_address": "addr-i"}
    )
    body = response.json()
    assert body["payment_hashes"] == ["0x01"]
    assert body["borrower_address"] == "addr-b"


def test_seed_and_list(client, headers):
    response = client.post("/api/assets/init", headers=headers)
    assert response.status_code == 201
    assert response.json()["total_count"] == 6

    listing = client.get("/api/assets").json()
    assert [a["asset_id"] for a in listing["assets"]] == [f"asset{i}" for i in range(1, 7)]


def test_corrupt_record_is_server_error(client, api_ledger):
    api_ledger.put("bad", b"garbage")
    assert client.get("/api/assets/bad").status_code == 500


def test_system_status(client):
    assert client.get("/api/system/status").json()["backend"] == "sql"
