"""
Shared fixtures: an in-memory SQLite app, users for every role and
logged-in test clients.

The environment is configured before the application package is
imported, because constants are read at import time.
"""

# Python Packages
import os
import tempfile

os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix = "benefits-launcher-tests-")
os.environ["FILE_STORAGE_BACKEND"] = "local"
os.environ["RATE_LIMIT_ENABLED"] = "False"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "True"

import pytest

# App
from benefits_launcher.app import app as flask_app
from benefits_launcher.config.database import db

# Models
from benefits_launcher.models.broker import Broker
from benefits_launcher.models.user import User

# Helpers
from benefits_launcher.base import constants
from benefits_launcher.util.rate_limiter import rate_limiter
from benefits_launcher.util.security import hash_password

PASSWORD = "Secret123!"

COMPANY_PAYLOAD = {
    "name": "Sunrise Bakery LLC",
    "address": "100 Main St",
    "city": "Fresno",
    "state": "CA",
    "zip": "93721",
    "phone": "5595551234",
    "tax_id": "12-3456789",
    "industry": "retail"
}

INITIATOR_PAYLOAD = {
    "first_name": "Dana",
    "last_name": "Reyes",
    "email": "dana@sunrisebakery.com",
    "phone": "5595550000",
    "title": "Office Manager",
    "relationship_to_company": "employee"
}





@pytest.fixture(autouse = True)
def app():
    # No context stays pushed across requests: Flask-Login caches the
    # current user on the app context.
    with flask_app.app_context():
        db.create_all()

    rate_limiter.reset()

    yield flask_app

    with flask_app.app_context():
        db.session.remove()
        db.drop_all()


def make_broker(agency_name = "Golden State Benefits", enabled = True, **fields) -> str:
    with flask_app.app_context():
        broker = Broker(agency_name = agency_name, enabled = enabled, **fields)
        db.session.add(broker)
        db.session.commit()
        return broker.id


def make_user(username, role = constants.ROLE_EMPLOYER, broker_id = None, active = True, password = PASSWORD) -> int:
    with flask_app.app_context():
        user = User(
            username = username,
            password = hash_password(password),
            email = f"{username}@example.com",
            name = username.title(),
            role = role,
            broker_id = broker_id,
            active = active
        )
        db.session.add(user)
        db.session.commit()
        return user.id


def login(username, password = PASSWORD):
    client = flask_app.test_client()
    response = client.post("/api/auth/login", json = {"username": username, "password": password})
    assert response.status_code == 200, response.get_json()
    return client


def create_company(client, **overrides) -> dict:
    response = client.post("/api/companies", json = dict(COMPANY_PAYLOAD, **overrides))
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


@pytest.fixture
def broker_id():
    return make_broker()


@pytest.fixture
def admin_client():
    make_user("admin", role = constants.ROLE_ADMIN)
    return login("admin")


@pytest.fixture
def employer_client(broker_id):
    make_user("employer", broker_id = broker_id)
    return login("employer")


@pytest.fixture
def other_employer_client():
    make_user("outsider")
    return login("outsider")


@pytest.fixture
def owner_client(broker_id):
    make_user("brokerowner", role = constants.ROLE_OWNER, broker_id = broker_id)
    return login("brokerowner")


@pytest.fixture
def staff_client(broker_id):
    make_user("brokerstaff", role = constants.ROLE_STAFF, broker_id = broker_id)
    return login("brokerstaff")


@pytest.fixture
def company(employer_client):
    return create_company(employer_client)
