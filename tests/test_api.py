"""Signup, login and service endpoint tests."""

from unittest.mock import MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from linkshare.api.dependencies import get_credential_service
from linkshare.main import app, mount_uploads
from linkshare.models.user import UserAccount
from linkshare.services.auth import CredentialService

NEW_USER = {"name": "Bob", "email": "bob@example.com", "password": "pw123456", "role": "junior"}


def failing_session(reason="connection lost"):
    """Session whose every query fails the way the driver would."""
    session = MagicMock()
    session.query.side_effect = OperationalError("SELECT", {}, Exception(reason))
    return session


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root_reports_running(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Backend is running"}


def test_signup(client, db):
    """Test user registration creates exactly one account."""
    response = client.post(
        "/signup",
        json={"name": "Bob", "email": "bob@example.com", "password": "pw123456", "role": "junior"},
    )
    assert response.status_code == 201
    assert response.json() == {"message": "User registered successfully!"}
    assert db.query(UserAccount).filter(UserAccount.email == "bob@example.com").count() == 1


def test_signup_stores_hash_not_password(client, senior, db):
    user = db.query(UserAccount).filter(UserAccount.email == senior["email"]).one()
    assert user.password_hash != senior["password"]
    assert user.password_hash.startswith("$2")


def test_signup_duplicate_email(client, senior):
    """Test registration with duplicate email fails."""
    response = client.post("/signup", json={**senior, "name": "Someone Else"})
    assert response.status_code == 400
    assert response.json() == {"error": "duplicate_email", "message": "Email already exists"}


def test_signup_email_is_case_sensitive(client, senior):
    response = client.post("/signup", json={**senior, "email": senior["email"].upper()})
    assert response.status_code == 201


def test_signup_missing_field(client):
    response = client.post(
        "/signup", json={"name": "Bob", "email": "bob@example.com", "password": "pw123456"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"
    assert response.json()["message"] == "All fields are required"


def test_signup_blank_field(client):
    response = client.post(
        "/signup",
        json={"name": "  ", "email": "bob@example.com", "password": "pw123456", "role": "junior"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_signup_malformed_body(client):
    """A body that is not an object is a 400, not FastAPI's default 422."""
    response = client.post("/signup", json=["not", "an", "object"])
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"


def test_login(client, senior):
    """Test user login returns the account without the hash."""
    response = client.post(
        "/login", json={"email": senior["email"], "password": senior["password"]}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful!"
    assert set(data["user"]) == {"id", "name", "email", "role"}
    assert data["user"]["email"] == senior["email"]
    assert data["user"]["name"] == senior["name"]
    assert data["user"]["role"] == "senior"
    assert isinstance(data["user"]["id"], int)


def test_login_wrong_password(client, senior):
    """Test login with wrong password."""
    response = client.post("/login", json={"email": senior["email"], "password": "wrongpass"})
    assert response.status_code == 401
    assert response.json() == {"error": "invalid_credentials", "message": "Incorrect password."}


def test_login_unknown_email(client):
    """Unknown email is reported differently from a wrong password."""
    response = client.post("/login", json={"email": "ghost@example.com", "password": "whatever"})
    assert response.status_code == 400
    assert response.json() == {"error": "not_found", "message": "User does not exist."}


def test_login_missing_password(client, senior):
    response = client.post("/login", json={"email": senior["email"]})
    assert response.status_code == 400
    assert response.json() == {
        "error": "validation_error",
        "message": "Email and password are required",
    }


def test_signup_database_failure(client):
    """Store faults on signup are a generic 500."""
    app.dependency_overrides[get_credential_service] = lambda: CredentialService(failing_session())
    response = client.post("/signup", json=NEW_USER)
    assert response.status_code == 500
    assert response.json() == {"error": "internal_error", "message": "Database error"}


def test_login_database_failure(client):
    app.dependency_overrides[get_credential_service] = lambda: CredentialService(failing_session())
    response = client.post("/login", json={"email": "bob@example.com", "password": "pw123456"})
    assert response.status_code == 500
    assert response.json() == {"error": "internal_error", "message": "Database error"}


def test_signup_database_timeout(client):
    """A lock timeout maps to 504, distinct from other store faults."""
    session = failing_session("database is locked")
    app.dependency_overrides[get_credential_service] = lambda: CredentialService(session)
    response = client.post("/signup", json=NEW_USER)
    assert response.status_code == 504
    assert response.json() == {"error": "timeout", "message": "Request timed out"}
    session.rollback.assert_called_once()


def test_unhandled_exception_envelope(client):
    """Unexpected exceptions are rendered without leaking their detail."""
    service = MagicMock()
    service.register.side_effect = RuntimeError("secret internals")
    app.dependency_overrides[get_credential_service] = lambda: service

    response = TestClient(app, raise_server_exceptions=False).post("/signup", json=NEW_USER)
    assert response.status_code == 500
    assert response.json() == {"error": "internal_error", "message": "Internal server error"}


def test_mount_uploads_serves_files(tmp_path):
    (tmp_path / "notes.txt").write_text("chapter one")
    uploads_app = FastAPI()

    assert mount_uploads(uploads_app, str(tmp_path))
    response = TestClient(uploads_app).get("/uploads/notes.txt")
    assert response.status_code == 200
    assert response.text == "chapter one"


def test_mount_uploads_skips_missing_directory(tmp_path):
    uploads_app = FastAPI()
    assert not mount_uploads(uploads_app, str(tmp_path / "missing"))
    assert TestClient(uploads_app).get("/uploads/notes.txt").status_code == 404
