"""HTTP tests for registration and login."""

from tests.integration.api.conftest import API, USER_EMAIL, bearer, login, register


class TestRegister:
    def test_register_success(self, client):
        response = client.post(
            f"{API}/auth/register",
            json={"name": "Jane Doe", "email": "jane@example.com", "password": "secret123"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        assert body["data"]["email"] == "jane@example.com"
        assert body["data"]["role"] == "user"
        assert body["data"]["is_active"] is True
        assert "password" not in body["data"]
        assert "password_hash" not in body["data"]
        assert "token" not in body["data"]
        assert "error" not in body
        assert "meta" not in body

    def test_register_duplicate_email(self, client):
        register(client, "jane@example.com")

        response = client.post(
            f"{API}/auth/register",
            json={"name": "Other", "email": "jane@example.com", "password": "secret123"},
        )

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "message": "email already registered",
            "error": "EMAIL_ALREADY_EXISTS",
        }

    def test_register_validation_errors(self, client):
        response = client.post(
            f"{API}/auth/register",
            json={"name": "J", "email": "not-an-email", "password": "123"},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation failed"
        assert body["error"] == {
            "name": "Value is too short",
            "email": "Invalid email format",
            "password": "Value is too short",
        }

    def test_register_missing_fields(self, client):
        response = client.post(f"{API}/auth/register", json={"email": "a@example.com"})

        assert response.status_code == 422
        assert response.json()["error"] == {
            "name": "This field is required",
            "password": "This field is required",
        }

    def test_register_malformed_json(self, client):
        response = client.post(
            f"{API}/auth/register",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid request body"}

    def test_register_password_over_72_bytes(self, client):
        response = client.post(
            f"{API}/auth/register",
            json={"name": "Jane", "email": "jane@example.com", "password": "é" * 40},
        )

        assert response.status_code == 422
        assert response.json()["error"] == {
            "password": "Password cannot exceed 72 bytes",
        }


class TestLogin:
    def test_login_success(self, client):
        registered = register(client, "jane@example.com")

        response = client.post(
            f"{API}/auth/login",
            json={"email": "jane@example.com", "password": "secret123"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["data"]["token"]
        assert body["data"]["user"]["id"] == registered["id"]

    def test_token_grants_access(self, client):
        register(client, "jane@example.com")
        token = login(client, "jane@example.com", "secret123")

        response = client.get(f"{API}/users/me", headers=bearer(token))

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "jane@example.com"

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        register(client, "jane@example.com")

        wrong_password = client.post(
            f"{API}/auth/login",
            json={"email": "jane@example.com", "password": "wrong-password"},
        )
        unknown_email = client.post(
            f"{API}/auth/login",
            json={"email": "nobody@example.com", "password": "secret123"},
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["message"] == "invalid email or password"

    def test_inactive_account_forbidden(self, client, seeded, admin_headers):
        user = client.get(f"{API}/users/me", headers=bearer(login(client, USER_EMAIL)))
        user_id = user.json()["data"]["id"]
        client.patch(
            f"{API}/admin/users/{user_id}/status",
            json={"is_active": False},
            headers=admin_headers,
        )

        response = client.post(
            f"{API}/auth/login",
            json={"email": USER_EMAIL, "password": "password123"},
        )

        assert response.status_code == 403
        assert response.json()["message"] == "account is not active"

    def test_login_missing_password(self, client):
        response = client.post(f"{API}/auth/login", json={"email": "a@example.com"})

        assert response.status_code == 422
        assert response.json()["error"] == {"password": "This field is required"}
