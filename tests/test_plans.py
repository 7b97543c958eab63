"""
Plan catalogue, plan selection, contributions and admin plan upload
"""

# Python Packages
from datetime import date
from io import BytesIO

import pytest

from conftest import flask_app

# Database
from benefits_launcher.config.database import db

# Models
from benefits_launcher.models.audit_log import AuditLog
from benefits_launcher.models.plan import Plan

# Services
from benefits_launcher.plans.services.plan_service import PlanService
from benefits_launcher.plans.services.plan_upload_service import to_cents

# Helpers
from benefits_launcher.util import messages





@pytest.fixture
def seeded():
    with flask_app.app_context():
        PlanService().seed_plans()
        return {plan.name: plan.id for plan in Plan.query.all()}


def add_plan(**fields) -> int:
    values = dict(carrier = "Kaiser", type = "HMO", network = "Kaiser Network", metal_tier = "Gold", monthly_cost = 40000)
    values.update(fields)

    with flask_app.app_context():
        plan = Plan(**values)
        db.session.add(plan)
        db.session.commit()
        return plan.id


def test_seed_is_idempotent():
    with flask_app.app_context():
        assert PlanService().seed_plans() == 7
        assert PlanService().seed_plans() == 0


def test_seed_command():
    result = flask_app.test_cli_runner().invoke(args = ["seed-plans"])

    assert "Seeded 7 plans" in result.output


def test_catalogue_filters(employer_client, seeded):
    anthem = employer_client.get("/api/plans?carrier=Anthem").get_json()["data"]
    assert len(anthem) == 3
    assert [plan["monthly_cost"] for plan in anthem] == sorted(plan["monthly_cost"] for plan in anthem)
    assert anthem[0]["monthly_cost_dollars"] == 345.80

    silver_hmo = employer_client.get("/api/plans?metal_tier=Silver&type=HMO").get_json()["data"]
    assert [plan["name"] for plan in silver_hmo] == ["CCSB Silver HMO 55/2250"]


def test_catalogue_requires_login(app, seeded):
    assert app.test_client().get("/api/plans").status_code == 401


def test_coverage_date_filter(employer_client):
    add_plan(name = "Kaiser 2025", effective_start = date(2025, 1, 1), effective_end = date(2025, 12, 31))
    add_plan(name = "Kaiser 2026", effective_start = date(2026, 1, 1), effective_end = date(2026, 12, 31))
    add_plan(name = "Kaiser Open", effective_start = date(2025, 1, 1))

    names = [
        plan["name"]
        for plan in employer_client.get("/api/plans?coverage_date=2026-03-01").get_json()["data"]
    ]

    assert sorted(names) == ["Kaiser 2026", "Kaiser Open"]
    assert employer_client.get("/api/plans?coverage_date=soon").status_code == 400


def test_carriers(employer_client, seeded):
    assert employer_client.get("/api/plans/carriers").get_json()["data"] == ["Anthem", "Blue Shield", "CCSB"]


def test_select_plan_once(employer_client, company, seeded):
    plan_id = seeded["Anthem Gold HMO 25/500"]
    path = f"/api/companies/{company['id']}/plans"

    assert employer_client.post(path, json = {"plan_id": plan_id}).status_code == 201

    duplicate = employer_client.post(path, json = {"plan_id": plan_id})
    assert duplicate.status_code == 409
    assert duplicate.get_json()["message"] == messages.ERROR["PLAN_ALREADY_SELECTED"]

    selected = employer_client.get(path).get_json()["data"]
    assert [row["plan_id"] for row in selected] == [plan_id]

    application = employer_client.get(f"/api/companies/{company['id']}/application").get_json()["data"]
    assert "plans" in application["completed_steps"]


def test_select_unknown_plan(employer_client, company):
    response = employer_client.post(f"/api/companies/{company['id']}/plans", json = {"plan_id": 999})
    assert response.status_code == 404


def test_remove_plan_drops_contribution(employer_client, company, seeded):
    plan_id = seeded["CCSB Silver HMO 55/2250"]
    employer_client.post(f"/api/companies/{company['id']}/plans", json = {"plan_id": plan_id})
    employer_client.post(
        f"/api/companies/{company['id']}/contributions",
        json = {"plan_id": plan_id, "employee_contribution": 75, "dependent_contribution": 0}
    )

    response = employer_client.delete(f"/api/companies/{company['id']}/plans/{plan_id}")

    assert response.status_code == 200
    assert employer_client.get(f"/api/companies/{company['id']}/plans").get_json()["data"] == []
    assert employer_client.get(f"/api/companies/{company['id']}/contributions").get_json()["data"] == []
    assert employer_client.delete(f"/api/companies/{company['id']}/plans/{plan_id}").status_code == 404


def test_admin_plan_removal_is_audited(admin_client, employer_client, company, seeded):
    plan_id = seeded["CCSB Silver HMO 55/2250"]
    employer_client.post(f"/api/companies/{company['id']}/plans", json = {"plan_id": plan_id})

    assert admin_client.delete(f"/api/companies/{company['id']}/plans/{plan_id}").status_code == 200

    with flask_app.app_context():
        assert AuditLog.query.filter_by(action = "admin_plan_delete").count() == 1


def test_contribution_create_then_update(employer_client, company, seeded):
    plan_id = seeded["Anthem Silver PPO 2000/20%"]
    path = f"/api/companies/{company['id']}/contributions"
    employer_client.post(f"/api/companies/{company['id']}/plans", json = {"plan_id": plan_id})

    created = employer_client.post(path, json = {"plan_id": plan_id, "employee_contribution": 50, "dependent_contribution": 25})
    assert created.status_code == 201

    updated = employer_client.post(path, json = {"plan_id": plan_id, "employee_contribution": 80, "dependent_contribution": 25})
    assert updated.status_code == 200
    assert updated.get_json()["data"]["employee_contribution"] == 80

    assert len(employer_client.get(path).get_json()["data"]) == 1


def test_contribution_accepts_whole_number_strings(employer_client, company, seeded):
    plan_id = seeded["Anthem Silver PPO 2000/20%"]
    employer_client.post(f"/api/companies/{company['id']}/plans", json = {"plan_id": plan_id})

    response = employer_client.post(
        f"/api/companies/{company['id']}/contributions",
        json = {"plan_id": str(plan_id), "employee_contribution": "60.0", "dependent_contribution": "0"}
    )

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["employee_contribution"] == 60
    assert data["dependent_contribution"] == 0


def test_contribution_below_minimum(employer_client, company, seeded):
    plan_id = seeded["Anthem Silver PPO 2000/20%"]
    employer_client.post(f"/api/companies/{company['id']}/plans", json = {"plan_id": plan_id})

    response = employer_client.post(
        f"/api/companies/{company['id']}/contributions",
        json = {"plan_id": plan_id, "employee_contribution": 49, "dependent_contribution": 0}
    )

    assert response.status_code == 400
    assert response.get_json()["details"][0]["message"] == messages.ERROR["CONTRIBUTION_MINIMUM"].format(50)


def test_contribution_needs_selected_plan(employer_client, company, seeded):
    response = employer_client.post(
        f"/api/companies/{company['id']}/contributions",
        json = {"plan_id": seeded["Anthem Silver PPO 2000/20%"], "employee_contribution": 60, "dependent_contribution": 0}
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == messages.ERROR["PLAN_NOT_SELECTED"]



class TestPlanUpload:

    CSV = (
        "Plan Name,Plan Type,Monthly Premium,Metal Tier\n"
        "Kaiser Gold 20,HMO,$512.40,Gold\n"
        ",,41000,\n"
        "Kaiser Gold 20,HMO,$512.40,Gold\n"
    )

    def upload(self, client, content, filename = "plans.csv", carrier = "Kaiser", plan_year = "2026"):
        return client.post(
            "/api/admin/plans/upload",
            data = {"plan_file": (BytesIO(content), filename), "carrier": carrier, "plan_year": plan_year},
            content_type = "multipart/form-data"
        )

    def test_upload_applies_defaults_and_skips_duplicates(self, admin_client):
        response = self.upload(admin_client, self.CSV.encode())

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["total_plans"] == 3
        assert data["imported_plans"] == 2
        assert data["skipped_plans"] == 1

        with flask_app.app_context():
            gold = Plan.query.filter_by(name = "Kaiser Gold 20").one()
            assert gold.monthly_cost == 51240
            assert gold.plan_year == 2026
            assert gold.network == "Standard"

            fallback = Plan.query.filter_by(name = "Kaiser Plan 2").one()
            assert fallback.monthly_cost == 41000
            assert fallback.type == "PPO"
            assert fallback.metal_tier == "Silver"

            assert AuditLog.query.filter_by(action = "admin_plan_upload").count() == 1

    def test_reupload_skips_existing(self, admin_client):
        self.upload(admin_client, self.CSV.encode())
        data = self.upload(admin_client, self.CSV.encode()).get_json()["data"]

        assert data["imported_plans"] == 0
        assert data["skipped_plans"] == 3

    def test_upload_is_admin_only(self, employer_client):
        assert self.upload(employer_client, self.CSV.encode()).status_code == 403

    def test_upload_requires_carrier(self, admin_client):
        assert self.upload(admin_client, self.CSV.encode(), carrier = "").status_code == 400

    def test_empty_file(self, admin_client):
        response = self.upload(admin_client, b"Plan Name,Plan Type\n")

        assert response.status_code == 400
        assert response.get_json()["message"] == messages.ERROR["PLAN_FILE_EMPTY"]


@pytest.mark.parametrize("value, cents", [
    ("$345.80", 34580),
    ("345.8", 34580),
    ("$1,200", 120000),
    ("34580", 34580),
    (34580, 34580),
    ("", 0),
    (None, 0),
    ("n/a", 0)
])
def test_to_cents(value, cents):
    assert to_cents(value) == cents
