"""Tests for user registration and listing."""


def test_new_user_returns_id_and_username(client, users):
    response = client.post("/api/exercise/new-user", json={"username": "alice"})
    assert response.status_code == 200
    data = response.json()
    assert data["username"] == "alice"
    assert data["_id"]
    assert set(data) == {"_id", "username"}
    assert users.documents[data["_id"]]["log"] == []


def test_new_user_accepts_form_body(client):
    response = client.post("/api/exercise/new-user", data={"username": "bob"})
    assert response.status_code == 200
    assert response.json()["username"] == "bob"


def test_duplicate_username_is_rejected(client, make_user):
    make_user("alice")
    response = client.post("/api/exercise/new-user", json={"username": "alice"})
    assert response.status_code == 403
    assert response.text == "User alice already exists"


def test_missing_username_is_bad_request(client):
    response = client.post("/api/exercise/new-user", json={})
    assert response.status_code == 400
    assert response.text == "Path `username` is required."


def test_blank_username_is_bad_request(client):
    response = client.post("/api/exercise/new-user", data={"username": "   "})
    assert response.status_code == 400
    assert response.text == "Path `username` is required."


def test_malformed_json_is_bad_request(client):
    response = client.post(
        "/api/exercise/new-user",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400


def test_non_utf8_json_is_bad_request(client):
    response = client.post(
        "/api/exercise/new-user",
        content=b'{"username": "\xff\xfe"}',
        headers={"content-type": "application/json"},
    )
    assert response.status_code == 400
    assert response.text == "Malformed JSON body"


def test_list_users_includes_each_user_once(client, make_user):
    created = [make_user(name) for name in ("alice", "bob", "carol")]
    response = client.get("/api/exercise/users")
    assert response.status_code == 200
    listed = response.json()
    assert sorted(u["_id"] for u in listed) == sorted(u["_id"] for u in created)
    assert all(set(u) == {"_id", "username"} for u in listed)


def test_list_users_empty(client):
    response = client.get("/api/exercise/users")
    assert response.status_code == 200
    assert response.json() == []
