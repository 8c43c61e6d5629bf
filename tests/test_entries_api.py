from fastapi.testclient import TestClient


def test_create_entry_derives_net(client: TestClient, add_entry, user_id):
    entry = add_entry("2024-05-06", "segunda", 100, 20, "Morning shift")

    assert entry["netAmount"] == 80
    assert entry["date"] == "2024-05-06"
    assert entry["userId"] == user_id
    assert entry["description"] == "Morning shift"


def test_create_entry_truncates_time_of_day(add_entry):
    entry = add_entry("2024-05-06T22:45:00", "segunda", 10, 0)
    assert entry["date"] == "2024-05-06"


def test_create_entry_for_unknown_user(client: TestClient, headers):
    resp = client.post("/entries", json={
        "date": "2024-05-06", "dayOfWeek": "segunda", "grossAmount": 10, "expenses": 0, "userId": "ghost"
    }, headers=headers)
    assert resp.status_code == 404


def test_negative_amounts_are_rejected(client: TestClient, headers, user_id):
    resp = client.post("/entries", json={
        "date": "2024-05-06", "dayOfWeek": "segunda", "grossAmount": -1, "expenses": 0, "userId": user_id
    }, headers=headers)
    assert resp.status_code == 422


def test_update_recomputes_net(client: TestClient, headers, add_entry):
    entry = add_entry("2024-05-06", "segunda", 100, 20)

    resp = client.patch(f"/entries/{entry['id']}", json={"expenses": 35.5}, headers=headers)
    assert resp.status_code == 200
    assert resp.json()["grossAmount"] == 100
    assert resp.json()["netAmount"] == 64.5

    resp = client.patch(f"/entries/{entry['id']}", json={"description": "edited"}, headers=headers)
    assert resp.json()["netAmount"] == 64.5
    assert resp.json()["description"] == "edited"


def test_list_entries_paginates_newest_first(client: TestClient, headers, add_entry, user_id):
    add_entry("2024-05-01", "quarta", 10, 0)
    add_entry("2024-05-03", "sexta", 20, 0)
    add_entry("2024-05-02", "quinta", 30, 0)

    page = client.get(f"/entries?userId={user_id}&skip=0&take=2", headers=headers).json()
    assert [e["date"] for e in page["entries"]] == ["2024-05-03", "2024-05-02"]
    assert page["meta"] == {"total": 3, "skip": 0, "take": 2}

    rest = client.get(f"/entries?userId={user_id}&skip=2", headers=headers).json()
    assert [e["date"] for e in rest["entries"]] == ["2024-05-01"]
    assert rest["meta"]["take"] == 20


def test_delete_entry(client: TestClient, headers, add_entry):
    entry = add_entry("2024-05-06", "segunda", 100, 20)

    resp = client.delete(f"/entries/{entry['id']}", headers=headers)
    assert resp.status_code == 200
    assert resp.json()["id"] == entry["id"]

    assert client.get(f"/entries/{entry['id']}", headers=headers).status_code == 404
    assert client.delete(f"/entries/{entry['id']}", headers=headers).status_code == 404


def test_amounts_beyond_cents_are_rejected(client: TestClient, headers, add_entry, user_id):
    resp = client.post("/entries", json={
        "date": "2024-05-06", "dayOfWeek": "segunda", "grossAmount": "0.005", "expenses": "0.004", "userId": user_id
    }, headers=headers)
    assert resp.status_code == 422

    entry = add_entry("2024-05-06", "segunda", "10.25", "0.10")
    resp = client.patch(f"/entries/{entry['id']}", json={"expenses": "0.125"}, headers=headers)
    assert resp.status_code == 422

    stored = client.get(f"/entries/{entry['id']}", headers=headers).json()
    assert stored["netAmount"] == 10.15
    assert stored["expenses"] == 0.1


def test_stored_net_matches_gross_minus_expenses(client: TestClient, headers, add_entry, db_session):
    from app.models import Entry

    created = add_entry("2024-05-06", "segunda", "99.99", "33.33")
    client.patch(f"/entries/{created['id']}", json={"grossAmount": "100.01"}, headers=headers)

    row = db_session.query(Entry).filter(Entry.id == created["id"]).first()
    db_session.refresh(row)
    assert row.net_amount == row.gross_amount - row.expenses


def test_entry_responses_embed_owner(client: TestClient, headers, add_entry, user_id):
    entry = add_entry("2024-05-06", "segunda", 100, 20)
    assert entry["user"] == {"id": user_id, "name": "Driver", "email": "driver@example.com"}

    fetched = client.get(f"/entries/{entry['id']}", headers=headers).json()
    assert fetched["user"]["id"] == user_id

    page = client.get(f"/entries?userId={user_id}", headers=headers).json()
    assert page["entries"][0]["user"]["name"] == "Driver"
