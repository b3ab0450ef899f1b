"""Unit tests for the user and auth HTTP API."""

import pytest
from fastapi import status

from src.shop_admin.entities.core.user import UserTable


def _register(client, username="alice", password="correct-horse", **extra):
    payload = {"username": username, "password": password, "email": f"{username}@example.com"}
    payload.update(extra)
    response = client.post("/users", json=payload)
    assert response.status_code == status.HTTP_201_CREATED, response.text
    return response.json()


class TestRegistrationAndLogin:
    def test_register(self, client):
        body = _register(client, first_name="Alice")

        assert body["username"] == "alice"
        assert body["roles"] == ["USER"]
        assert body["status"] == "ACTIVE"
        assert "password" not in body
        assert "password_hash" not in body

    def test_register_duplicate(self, client):
        _register(client)

        response = client.post(
            "/users",
            json={"username": "alice", "password": "correct-horse", "email": "other@example.com"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["code"] == 1101

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "al", "password": "correct-horse", "email": "al@example.com"},
            {"username": "alice", "password": "short", "email": "alice@example.com"},
            {"username": "alice", "password": "correct-horse", "email": "not-an-email"},
        ],
    )
    def test_register_validation(self, client, payload):
        response = client.post("/users", json=payload)

        assert response.status_code == 422

    def test_login_and_me(self, client):
        _register(client)

        token_response = client.post(
            "/auth/token", json={"username": "alice", "password": "correct-horse"}
        )
        assert token_response.status_code == status.HTTP_200_OK
        token = token_response.json()["access_token"]

        me = client.get("/users/me", headers={"Authorization": f"Bearer {token}"})

        assert me.status_code == status.HTTP_200_OK
        assert me.json()["username"] == "alice"

    def test_login_with_wrong_password(self, client):
        _register(client)

        response = client.post("/auth/token", json={"username": "alice", "password": "nope"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["code"] == 1007

    def test_me_requires_token(self, client):
        assert client.get("/users/me").status_code == status.HTTP_401_UNAUTHORIZED

    def test_existence_checks(self, client):
        _register(client)

        assert client.get("/users/exists/username", params={"username": "alice"}).json() == {
            "exists": True
        }
        assert client.get("/users/exists/email", params={"email": "bob@example.com"}).json() == {
            "exists": False
        }


class TestAdministration:
    def test_list_requires_admin(self, client, auth_headers):
        _register(client)

        response = client.get("/users", headers=auth_headers("alice", "USER"))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list_and_search(self, client, admin_headers):
        _register(client, "alice")
        _register(client, "bob", last_name="Alison")
        _register(client, "carol")

        listing = client.get("/users", params={"page": 1, "size": 2}, headers=admin_headers)
        search = client.get("/users/search", params={"keyword": "ali"}, headers=admin_headers)

        assert listing.json()["total_elements"] == 3
        assert len(listing.json()["content"]) == 2
        assert [u["username"] for u in search.json()["content"]] == ["alice", "bob"]

    def test_update_own_profile(self, client, auth_headers):
        alice = _register(client)

        response = client.put(
            f"/users/{alice['id']}", json={"phone": "0123"}, headers=auth_headers("alice", "USER")
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["phone"] == "0123"

    def test_update_other_profile_is_forbidden(self, client, auth_headers):
        alice = _register(client)

        response = client.put(
            f"/users/{alice['id']}", json={"phone": "0123"}, headers=auth_headers("bob", "USER")
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_change_password_with_wrong_old_password(self, client, auth_headers):
        alice = _register(client)

        response = client.put(
            f"/users/{alice['id']}/password",
            json={"old_password": "wrong-password", "new_password": "battery-staple"},
            headers=auth_headers("alice", "USER"),
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == 1006

    def test_admin_changes_password_then_user_logs_in(self, client, admin_headers):
        alice = _register(client)

        response = client.put(
            f"/users/{alice['id']}/password",
            json={"new_password": "battery-staple"},
            headers=admin_headers,
        )
        login = client.post(
            "/auth/token", json={"username": "alice", "password": "battery-staple"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert login.status_code == status.HTTP_200_OK

    def test_update_role_and_status(self, client, admin_headers):
        alice = _register(client)

        role = client.put(
            f"/users/{alice['id']}/role", params={"role_name": "ADMIN"}, headers=admin_headers
        )
        state = client.patch(
            f"/users/{alice['id']}/status", params={"status": "INACTIVE"}, headers=admin_headers
        )

        assert role.json()["roles"] == ["ADMIN"]
        assert state.json()["status"] == "INACTIVE"

    def test_unknown_role(self, client, admin_headers):
        alice = _register(client)

        response = client.put(
            f"/users/{alice['id']}/role", params={"role_name": "OWNER"}, headers=admin_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == 1103

    def test_delete(self, client, session, admin_headers):
        alice = _register(client)

        response = client.delete(f"/users/{alice['id']}", headers=admin_headers)

        assert response.json() == {"message": "User has been deleted"}
        assert session.get(UserTable, alice["id"]) is None

    def test_get_missing_user(self, client, admin_headers):
        response = client.get("/users/missing", headers=admin_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["code"] == 1102
