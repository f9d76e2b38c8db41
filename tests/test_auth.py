# tests/test_auth.py

"""
Tests for authentication endpoints and the admin dependency.
"""

from fastapi.testclient import TestClient
from unittest.mock import patch, Mock


def throttled_error():
    error = Exception("Request rate limit reached")
    error.status = 429
    return error


def admin_lookup(mock_client, rows):
    (
        mock_client.table.return_value
        .select.return_value
        .eq.return_value
        .limit.return_value
        .execute.return_value
    ) = Mock(data=rows)


def login_client(is_admin=True):
    mock_client = Mock()
    mock_session = Mock()
    mock_session.access_token = "test-token"
    mock_session.refresh_token = "refresh-token"
    mock_response = Mock()
    mock_response.session = mock_session
    mock_response.user.id = "user-1"
    mock_client.auth.sign_in_with_password.return_value = mock_response
    admin_lookup(mock_client, [{"id": "user-1"}] if is_admin else [])
    return mock_client


# -----------------------------------------------------
# Login
# -----------------------------------------------------
def test_login_success(client: TestClient):
    """Test successful login."""
    with patch("routers.auth.get_supabase_client") as mock_supabase:
        mock_supabase.return_value = login_client()

        response = client.post(
            "/auth/login",
            json={"email": "Admin@Example.com", "password": "password123"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["access_token"] == "test-token"
        assert data["token_type"] == "bearer"

        credentials = mock_supabase.return_value.auth.sign_in_with_password.call_args[0][0]
        assert credentials["email"] == "admin@example.com"


def test_login_invalid_credentials(client: TestClient):
    """Test login with invalid credentials."""
    with patch("routers.auth.get_supabase_client") as mock_supabase:
        mock_client = Mock()
        mock_client.auth.sign_in_with_password.side_effect = Exception("Invalid credentials")
        mock_supabase.return_value = mock_client

        response = client.post(
            "/auth/login",
            json={"email": "test@example.com", "password": "wrongpassword"}
        )

        assert response.status_code == 401
        assert "Invalid email or password" in response.json()["detail"]


def test_login_provider_throttling(client: TestClient):
    with patch("routers.auth.get_supabase_client") as mock_supabase:
        mock_client = Mock()
        mock_client.auth.sign_in_with_password.side_effect = throttled_error()
        mock_supabase.return_value = mock_client

        response = client.post(
            "/auth/login",
            json={"email": "test@example.com", "password": "password123"}
        )

        assert response.status_code == 429
        assert response.json()["error"] == "rate_limited"


def test_login_non_admin_forbidden(client: TestClient):
    with patch("routers.auth.get_supabase_client") as mock_supabase:
        mock_supabase.return_value = login_client(is_admin=False)

        response = client.post(
            "/auth/login",
            json={"email": "member@example.com", "password": "password123"}
        )

        assert response.status_code == 403


def test_login_admin_lookup_failure(client: TestClient):
    with patch("routers.auth.get_supabase_client") as mock_supabase:
        mock_client = login_client()
        mock_client.table.return_value.select.side_effect = Exception("connection reset")
        mock_supabase.return_value = mock_client

        response = client.post(
            "/auth/login",
            json={"email": "admin@example.com", "password": "password123"}
        )

        assert response.status_code == 500
        assert response.json()["detail"] == "Admin lookup failed"


def test_login_admin_lookup_throttled(client: TestClient):
    with patch("routers.auth.get_supabase_client") as mock_supabase:
        mock_client = login_client()
        mock_client.table.return_value.select.side_effect = throttled_error()
        mock_supabase.return_value = mock_client

        response = client.post(
            "/auth/login",
            json={"email": "admin@example.com", "password": "password123"}
        )

        assert response.status_code == 429
        assert response.json()["error"] == "rate_limited"


def test_login_rate_limiting(client: TestClient):
    """Test local login rate limiting."""
    with patch("routers.auth.get_supabase_client") as mock_supabase:
        mock_client = Mock()
        mock_client.auth.sign_in_with_password.side_effect = Exception("Invalid credentials")
        mock_supabase.return_value = mock_client

        # Make 5 requests (rejected by the provider)
        for i in range(5):
            response = client.post(
                "/auth/login",
                json={"email": "test@example.com", "password": "wrong"}
            )
            assert response.status_code == 401

        # 6th request should be rate limited before reaching the provider
        response = client.post(
            "/auth/login",
            json={"email": "test@example.com", "password": "wrong"}
        )
        assert response.status_code == 429
        assert mock_client.auth.sign_in_with_password.call_count == 5


# -----------------------------------------------------
# get_current_admin
# -----------------------------------------------------
def token_client(is_admin=True):
    mock_client = Mock()
    mock_user = Mock()
    mock_user.id = "user-1"
    mock_user.email = "admin@example.com"
    mock_client.auth.get_user.return_value = Mock(user=mock_user)
    admin_lookup(mock_client, [{"id": "user-1"}] if is_admin else [])
    return mock_client


def test_me_with_valid_admin_token(client: TestClient):
    with patch("dependencies.auth.get_supabase_client") as mock_supabase:
        mock_supabase.return_value = token_client()

        response = client.get("/auth/me", headers={"Authorization": "Bearer good-token"})

        assert response.status_code == 200
        assert response.json() == {"id": "user-1", "email": "admin@example.com"}
        mock_supabase.return_value.auth.get_user.assert_called_once_with("good-token")


def test_invalid_token_unauthorized(client: TestClient):
    with patch("dependencies.auth.get_supabase_client") as mock_supabase:
        mock_client = Mock()
        mock_client.auth.get_user.side_effect = Exception("invalid JWT")
        mock_supabase.return_value = mock_client

        response = client.get("/events", headers={"Authorization": "Bearer bad-token"})

        assert response.status_code == 401


def test_non_admin_token_forbidden(client: TestClient):
    with patch("dependencies.auth.get_supabase_client") as mock_supabase:
        mock_supabase.return_value = token_client(is_admin=False)

        response = client.get("/submissions", headers={"Authorization": "Bearer member-token"})

        assert response.status_code == 403
        assert response.json()["detail"] == "You don't have admin privileges."


def test_token_validation_throttled(client: TestClient):
    with patch("dependencies.auth.get_supabase_client") as mock_supabase:
        mock_client = Mock()
        mock_client.auth.get_user.side_effect = throttled_error()
        mock_supabase.return_value = mock_client

        response = client.get("/dashboard/stats", headers={"Authorization": "Bearer t"})

        assert response.status_code == 429


def test_missing_token_rejected(client: TestClient):
    response = client.get("/feedback")
    assert response.status_code in (401, 403)


# -----------------------------------------------------
# Signup / logout
# -----------------------------------------------------
def test_signup_registers_admin(admin_client: TestClient):
    with patch("routers.auth.get_supabase_client") as mock_supabase:
        mock_client = Mock()
        new_user = Mock()
        new_user.id = "user-2"
        new_user.email = "new@example.com"
        mock_client.auth.admin.create_user.return_value = Mock(user=new_user)
        mock_supabase.return_value = mock_client

        response = admin_client.post(
            "/auth/signup",
            json={"email": "new@example.com", "password": "s3cret-pass"}
        )

        assert response.status_code == 200
        assert response.json()["email"] == "new@example.com"
        mock_client.table.assert_called_with("admin_users")
        mock_client.table.return_value.insert.assert_called_once_with(
            {"id": "user-2", "email": "new@example.com"},
            returning="representation",
        )


def signup_client():
    mock_client = Mock()
    new_user = Mock()
    new_user.id = "user-2"
    new_user.email = "new@example.com"
    mock_client.auth.admin.create_user.return_value = Mock(user=new_user)
    mock_client.table.return_value.insert.return_value.execute.side_effect = Exception("connection reset")
    return mock_client


def test_signup_rolls_back_auth_user_when_registration_fails(admin_client: TestClient):
    with patch("routers.auth.get_supabase_client") as mock_supabase:
        mock_client = signup_client()
        mock_supabase.return_value = mock_client

        response = admin_client.post(
            "/auth/signup",
            json={"email": "new@example.com", "password": "s3cret-pass"}
        )

        assert response.status_code == 500
        assert response.json()["error"] == "store_failure"
        mock_client.auth.admin.delete_user.assert_called_once_with("user-2")


def test_signup_reports_failure_even_if_rollback_fails(admin_client: TestClient):
    with patch("routers.auth.get_supabase_client") as mock_supabase, \
         patch("routers.auth.logger") as mock_logger:
        mock_client = signup_client()
        mock_client.auth.admin.delete_user.side_effect = Exception("user not found")
        mock_supabase.return_value = mock_client

        response = admin_client.post(
            "/auth/signup",
            json={"email": "new@example.com", "password": "s3cret-pass"}
        )

        assert response.status_code == 500
        assert response.json()["error"] == "store_failure"
        assert "user-2" in mock_logger.error.call_args[0][0]


def test_logout_revokes_session(admin_client: TestClient):
    with patch("routers.auth.get_supabase_client") as mock_supabase:
        mock_client = Mock()
        mock_supabase.return_value = mock_client

        response = admin_client.post("/auth/logout")

        assert response.status_code == 200
        mock_client.auth.admin.sign_out.assert_called_once_with("test-token")
