"""
Registration, login, sessions and password changes
"""

# Python Packages
import pytest

from conftest import PASSWORD, flask_app, login, make_broker, make_user

# Database
from benefits_launcher.config.database import db

# Models
from benefits_launcher.models.audit_log import AuditLog
from benefits_launcher.models.user import User

# Helpers
from benefits_launcher.util import messages
from benefits_launcher.util.rate_limiter import rate_limiter
from benefits_launcher.util.security import verify_password

REGISTER_PAYLOAD = {
    "username": "newemployer",
    "password": PASSWORD,
    "email": "owner@newco.com",
    "name": "New Employer",
    "company_name": "NewCo"
}





def test_register_creates_employer_and_logs_in():
    client = flask_app.test_client()

    response = client.post("/api/auth/register", json = REGISTER_PAYLOAD)

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["username"] == "newemployer"
    assert data["role"] == "employer"
    assert "password" not in data

    current = client.get("/api/auth/user")
    assert current.status_code == 200
    assert current.get_json()["data"]["username"] == "newemployer"


def test_register_stores_a_hash_not_the_password():
    flask_app.test_client().post("/api/auth/register", json = REGISTER_PAYLOAD)

    with flask_app.app_context():
        user = User.query.filter_by(username = "newemployer").one()
        assert user.password != PASSWORD
        assert verify_password(PASSWORD, user.password)


def test_register_reports_every_invalid_field():
    response = flask_app.test_client().post(
        "/api/auth/register",
        json = {"username": "ab", "password": "weak", "email": "not-an-email"}
    )

    assert response.status_code == 400
    body = response.get_json()
    assert body["error_code"] == "VALIDATION_ERROR"
    assert {detail["field"] for detail in body["details"]} == {"username", "password", "email"}


def test_register_rejects_duplicate_username():
    make_user("newemployer")

    response = flask_app.test_client().post("/api/auth/register", json = REGISTER_PAYLOAD)

    assert response.status_code == 409
    assert response.get_json()["message"] == messages.ERROR["USERNAME_EXISTS"]


def test_register_rejects_duplicate_email_case_insensitively():
    make_user("someone")

    payload = dict(REGISTER_PAYLOAD, email = "SOMEONE@example.com")
    response = flask_app.test_client().post("/api/auth/register", json = payload)

    assert response.status_code == 409
    assert response.get_json()["message"] == messages.ERROR["EMAIL_EXISTS"]


def test_register_under_disabled_broker_is_rejected():
    broker_id = make_broker(enabled = False)

    payload = dict(REGISTER_PAYLOAD, broker_id = broker_id)
    response = flask_app.test_client().post("/api/auth/register", json = payload)

    assert response.status_code == 400
    assert response.get_json()["message"] == messages.ERROR["BROKER_DISABLED"]


def test_register_keeps_password_characters_intact():
    payload = dict(REGISTER_PAYLOAD, password = "Ab1!<tag>x&y")
    response = flask_app.test_client().post("/api/auth/register", json = payload)
    assert response.status_code == 201

    login("newemployer", "Ab1!<tag>x&y")


def test_login_by_username_or_email():
    make_user("alice")

    assert login("alice").get("/api/auth/user").status_code == 200
    assert login("alice@example.com").get("/api/auth/user").status_code == 200


def test_login_records_audit_entry():
    user_id = make_user("alice")
    login("alice")

    with flask_app.app_context():
        entry = AuditLog.query.filter_by(user_id = user_id, action = "login").one()
        assert entry.entity_type == "user"


@pytest.mark.parametrize("username, password", [
    ("alice", "Wrong123!"),
    ("nobody", PASSWORD)
])
def test_login_failures_share_one_message(username, password):
    make_user("alice")

    response = flask_app.test_client().post(
        "/api/auth/login",
        json = {"username": username, "password": password}
    )

    assert response.status_code == 401
    assert response.get_json()["message"] == messages.ERROR["INVALID_CREDENTIALS"]


def test_disabled_account_cannot_log_in():
    make_user("alice", active = False)

    response = flask_app.test_client().post(
        "/api/auth/login",
        json = {"username": "alice", "password": PASSWORD}
    )

    assert response.status_code == 401
    assert response.get_json()["message"] == messages.ERROR["ACCOUNT_DISABLED"]


def test_disabled_account_loses_existing_session():
    user_id = make_user("alice")
    client = login("alice")

    with flask_app.app_context():
        db.session.get(User, user_id).active = False
        db.session.commit()

    assert client.get("/api/auth/user").status_code == 401


def test_logout_ends_session():
    make_user("alice")
    client = login("alice")

    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert client.get("/api/auth/user").status_code == 401


def test_current_user_requires_login():
    response = flask_app.test_client().get("/api/auth/user")

    assert response.status_code == 401
    assert response.get_json()["error_code"] == "UNAUTHORIZED"


def test_check_availability():
    make_user("alice")

    response = flask_app.test_client().post(
        "/api/auth/check-availability",
        json = {"username": "alice", "email": "free@example.com"}
    )

    assert response.get_json()["data"] == {"username_available": False, "email_available": True}


def test_change_password():
    make_user("alice")
    client = login("alice")

    wrong = client.post(
        "/api/auth/change-password",
        json = {"current_password": "Nope123!", "new_password": "Better123!"}
    )
    assert wrong.status_code == 400

    response = client.post(
        "/api/auth/change-password",
        json = {"current_password": PASSWORD, "new_password": "Better123!"}
    )
    assert response.status_code == 200

    login("alice", "Better123!")


def test_login_is_rate_limited(monkeypatch):
    monkeypatch.setitem(flask_app.config, "RATE_LIMIT_ENABLED", True)
    rate_limiter.reset()
    client = flask_app.test_client()

    statuses = [
        client.post("/api/auth/login", json = {"username": "ghost", "password": "Wrong123!"}).status_code
        for _ in range(6)
    ]

    assert statuses[:5] == [401] * 5
    assert statuses[5] == 429


def test_forged_forwarded_addresses_share_one_limit(monkeypatch):
    monkeypatch.setitem(flask_app.config, "RATE_LIMIT_ENABLED", True)
    rate_limiter.reset()
    client = flask_app.test_client()

    # The proxy appends the real peer after whatever the client sent
    statuses = [
        client.post(
            "/api/auth/login",
            json = {"username": "ghost", "password": "Wrong123!"},
            headers = {"X-Forwarded-For": f"10.0.0.{attempt}, 203.0.113.7"}
        ).status_code
        for attempt in range(8)
    ]

    assert statuses[:5] == [401] * 5
    assert statuses[5:] == [429] * 3


def test_audit_log_records_proxy_reported_address():
    make_user("alice")

    flask_app.test_client().post(
        "/api/auth/login",
        json = {"username": "alice", "password": PASSWORD},
        headers = {"X-Forwarded-For": "198.51.100.1, 203.0.113.7"}
    )

    with flask_app.app_context():
        assert AuditLog.query.filter_by(action = "login").one().ip_address == "203.0.113.7"
