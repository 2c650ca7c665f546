# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for admin user endpoints."""

from linkhub.models.enums import UserStatus
from linkhub.services import user_service

USERS_URL = "/api/v1/admin/users"


class TestAccessControl:
    def test_requires_authentication(self, client):
        assert client.get(USERS_URL).status_code == 401

    def test_requires_admin(self, authenticated_client):
        response = authenticated_client.get(USERS_URL)
        assert response.status_code == 403
        assert response.json() == {"detail": "Admin access required"}


class TestListUsers:
    def test_list(self, admin_client, test_user):
        response = admin_client.get(USERS_URL)
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total"] == 2
        emails = {u["email"] for u in data["users"]}
        assert emails == {"admin@example.com", "test@example.com"}
        assert all("password_hash" not in u for u in data["users"])

    def test_filters(self, admin_client, test_user):
        response = admin_client.get(USERS_URL, params={"role": "admin"})
        assert [u["email"] for u in response.json()["data"]["users"]] == [
            "admin@example.com"
        ]

        response = admin_client.get(USERS_URL, params={"search": "test"})
        assert response.json()["data"]["total"] == 1

        response = admin_client.get(USERS_URL, params={"status": "inactive"})
        assert response.json()["data"]["total"] == 0

        response = admin_client.get(USERS_URL, params={"search": "%"})
        assert response.json()["data"]["total"] == 0

    def test_pagination(self, admin_client, test_user):
        response = admin_client.get(USERS_URL, params={"limit": 1, "offset": 0})
        data = response.json()["data"]
        assert data["total"] == 2
        assert len(data["users"]) == 1


class TestCreateUser:
    def test_create(self, admin_client):
        response = admin_client.post(
            USERS_URL,
            json={
                "name": " New Person ",
                "email": "New@Example.com",
                "password": "secret1",
                "role": "admin",
            },
        )
        assert response.status_code == 200
        user = response.json()["data"]
        assert user["name"] == "New Person"
        assert user["email"] == "new@example.com"
        assert user["role"] == "admin"
        assert user["status"] == "active"

    def test_short_password(self, admin_client):
        response = admin_client.post(
            USERS_URL,
            json={"name": "X", "email": "x@example.com", "password": "12345"},
        )
        assert response.status_code == 422

    def test_multibyte_password_over_bcrypt_limit(self, admin_client):
        # 40 characters, 80 bytes in UTF-8
        response = admin_client.post(
            USERS_URL,
            json={"name": "X", "email": "mb@example.com", "password": "\u00e9" * 40},
        )
        assert response.status_code == 422

    def test_multibyte_password_within_limit(self, admin_client):
        response = admin_client.post(
            USERS_URL,
            json={"name": "X", "email": "mb@example.com", "password": "\u00e9" * 36},
        )
        assert response.status_code == 200

    def test_invalid_email(self, admin_client):
        response = admin_client.post(
            USERS_URL,
            json={"name": "X", "email": "not-an-email", "password": "secret1"},
        )
        assert response.status_code == 422

    def test_duplicate_email(self, admin_client, test_user):
        response = admin_client.post(
            USERS_URL,
            json={"name": "X", "email": "test@example.com", "password": "secret1"},
        )
        assert response.status_code == 409
        assert response.json()["detail"] == "Email already exists"


class TestUpdateUser:
    def test_update(self, admin_client, test_user):
        response = admin_client.put(
            USERS_URL,
            json={"id": test_user.id, "name": "Renamed", "password": "newpass1"},
        )
        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Renamed"

        login = admin_client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "newpass1"},
        )
        assert login.status_code == 200

    def test_multibyte_password_over_bcrypt_limit(self, admin_client, test_user):
        response = admin_client.put(
            USERS_URL, json={"id": test_user.id, "password": "\u00e9" * 40}
        )
        assert response.status_code == 422

        login = admin_client.post(
            "/api/v1/auth/login",
            json={"email": "test@example.com", "password": "testpassword123"},
        )
        assert login.status_code == 200

    def test_blank_name_rejected(self, admin_client, test_user, db_session):
        response = admin_client.put(USERS_URL, json={"id": test_user.id, "name": "   "})
        assert response.status_code == 422
        db_session.refresh(test_user)
        assert test_user.name == "Test User"

    def test_cannot_deactivate_self(self, admin_client, admin_user):
        response = admin_client.put(
            USERS_URL, json={"id": admin_user.id, "status": "inactive"}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot deactivate your own account"

    def test_not_found(self, admin_client):
        response = admin_client.put(USERS_URL, json={"id": 9999, "name": "X"})
        assert response.status_code == 404

    def test_duplicate_email(self, admin_client, test_user):
        response = admin_client.put(
            USERS_URL, json={"id": test_user.id, "email": "admin@example.com"}
        )
        assert response.status_code == 409


class TestDeleteUser:
    def test_soft_delete_deactivates(self, admin_client, test_user, db_session):
        response = admin_client.delete(USERS_URL, params={"id": test_user.id})
        assert response.status_code == 200
        assert response.json()["message"] == "User deactivated"
        db_session.refresh(test_user)
        assert test_user.status == UserStatus.INACTIVE

    def test_hard_delete(self, admin_client, test_user, db_session):
        user_id = test_user.id
        response = admin_client.delete(
            USERS_URL, params={"id": user_id, "hard": "true"}
        )
        assert response.status_code == 200
        assert response.json()["message"] == "User deleted permanently"
        assert user_service.get_user_by_id(db_session, user_id) is None

    def test_cannot_delete_self(self, admin_client, admin_user):
        response = admin_client.delete(USERS_URL, params={"id": admin_user.id})
        assert response.status_code == 400

    def test_not_found(self, admin_client):
        assert admin_client.delete(USERS_URL, params={"id": 9999}).status_code == 404
        response = admin_client.delete(USERS_URL, params={"id": 9999, "hard": "true"})
        assert response.status_code == 404
