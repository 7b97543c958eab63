"""
Application initiator, step tracking and signature submission
"""

# Python Packages
import pytest

from conftest import INITIATOR_PAYLOAD, flask_app

# Models
from benefits_launcher.models.audit_log import AuditLog

# Config
from benefits_launcher.applications.config import enrollment_steps

# Helpers
from benefits_launcher.util import messages
from benefits_launcher.util.rate_limiter import rate_limiter





def test_initiator_opens_placeholder_company_and_application(employer_client):
    response = employer_client.post("/api/applications/initiator", json = INITIATOR_PAYLOAD)

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["initiator"]["first_name"] == "Dana"
    assert data["application"]["completed_steps"] == ["application-initiator"]
    assert data["application"]["current_step"] == "company-information"

    company = employer_client.get(f"/api/companies/{data['company_id']}").get_json()["data"]
    assert company["name"] == "Employer's Company"
    assert company["application"]["initiator_id"] == data["initiator"]["id"]


def test_initiator_attaches_to_existing_application(employer_client, company):
    data = employer_client.post("/api/applications/initiator", json = INITIATOR_PAYLOAD).get_json()["data"]

    assert data["company_id"] == company["id"]
    assert data["application"]["id"] == company["application"]["id"]
    assert "application-initiator" in data["application"]["completed_steps"]


def test_initiator_requires_every_field(employer_client):
    payload = dict(INITIATOR_PAYLOAD)
    del payload["title"]

    response = employer_client.post("/api/applications/initiator", json = payload)

    assert response.status_code == 400


def test_get_latest_initiator(employer_client):
    assert employer_client.get("/api/applications/initiator").status_code == 404

    employer_client.post("/api/applications/initiator", json = INITIATOR_PAYLOAD)

    response = employer_client.get("/api/applications/initiator")
    assert response.get_json()["data"]["email"] == "dana@sunrisebakery.com"


def test_update_application_is_audited(employer_client, company):
    application_id = company["application"]["id"]

    response = employer_client.patch(
        f"/api/applications/{application_id}",
        json = {"selected_carrier": "Anthem", "current_step": "plans"}
    )

    assert response.status_code == 200
    assert response.get_json()["data"]["selected_carrier"] == "Anthem"

    with flask_app.app_context():
        entry = AuditLog.query.filter_by(action = "application_update").one()
        assert entry.details == "Updated fields: selected_carrier, current_step"


@pytest.mark.parametrize("payload", [
    {"status": "archived"},
    {"current_step": "nowhere"},
    {"completed_steps": "company"},
    {"completed_steps": ["company", "nowhere"]},
    {"completed_steps": ["company", {"id": "plans"}]},
    {"completed_steps": [["plans"]]},
    {"current_step": {"id": "plans"}},
    {"status": ["submitted"]}
])
def test_update_application_rejects_unknown_values(employer_client, company, payload):
    response = employer_client.patch(f"/api/applications/{company['application']['id']}", json = payload)
    assert response.status_code == 400


def test_other_user_cannot_touch_application(other_employer_client, company):
    response = other_employer_client.patch(
        f"/api/applications/{company['application']['id']}",
        json = {"selected_carrier": "Anthem"}
    )
    assert response.status_code == 403


def test_signature_submits_once(employer_client, company):
    path = f"/api/applications/{company['application']['id']}/signature"

    response = employer_client.post(path, json = {"signature": "Dana Reyes"})

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["status"] == "submitted"
    assert data["signed"] is True
    assert data["submitted_at"]
    assert data["current_step"] == "review"

    again = employer_client.post(path, json = {"signature": "Dana Reyes"})
    assert again.status_code == 409
    assert again.get_json()["message"] == messages.ERROR["APPLICATION_ALREADY_SUBMITTED"]


def test_signature_required(employer_client, company):
    response = employer_client.post(
        f"/api/applications/{company['application']['id']}/signature",
        json = {"signature": "   "}
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == messages.ERROR["SIGNATURE_REQUIRED"]


def test_signature_is_rate_limited(monkeypatch, employer_client, company):
    monkeypatch.setitem(flask_app.config, "RATE_LIMIT_ENABLED", True)
    rate_limiter.reset()
    path = f"/api/applications/{company['application']['id']}/signature"

    statuses = [employer_client.post(path, json = {"signature": ""}).status_code for _ in range(11)]

    assert statuses[:10] == [400] * 10
    assert statuses[10] == 429


def test_progress(employer_client, company):
    application_id = company["application"]["id"]
    employer_client.patch(
        f"/api/applications/{application_id}",
        json = {"completed_steps": ["carriers", "company"], "current_step": "ownership"}
    )

    data = employer_client.get(f"/api/applications/{application_id}/progress").get_json()["data"]

    assert data["next_step"] == "authorized-contact"
    assert data["previous_step"] == "company"
    assert "employees" not in data["enabled_steps"]
    assert data["percent_complete"] == 25



class TestEnrollmentSteps:

    def test_employees_step_follows_flag(self, monkeypatch):
        assert "employees" not in enrollment_steps.get_enabled_step_ids()

        monkeypatch.setenv("FEATURE_EMPLOYEE_MANAGEMENT", "True")
        steps = enrollment_steps.get_enabled_step_ids()

        assert steps.index("employees") == steps.index("authorized-contact") + 1

    def test_neighbours_at_the_ends(self):
        assert enrollment_steps.previous_step("carriers") is None
        assert enrollment_steps.next_step("review") is None
        assert enrollment_steps.next_step("unknown") is None
