"""
Document uploads and requirement rules
"""

# Python Packages
import os
from io import BytesIO

import pytest

from conftest import flask_app

# Database
from benefits_launcher.config.database import db

# Services
from benefits_launcher.applications.services.progress_service import ProgressService
from benefits_launcher.documents.services import document_rules_service

# Helpers
from benefits_launcher.util import messages





def upload(client, company_id, doc_type, filename = "proof.pdf", content = b"%PDF-1.4 test"):
    return client.post(
        f"/api/companies/{company_id}/documents",
        data = {"file": (BytesIO(content), filename), "type": doc_type},
        content_type = "multipart/form-data"
    )


def test_upload_list_download_delete(employer_client, company):
    created = upload(employer_client, company["id"], "DE9C")
    assert created.status_code == 201
    document = created.get_json()["data"]
    assert document["type"] == "DE9C"

    listing = employer_client.get(f"/api/companies/{company['id']}/documents").get_json()["data"]
    assert listing["total"] == 1

    download = employer_client.get(f"/api/documents/{document['id']}")
    assert download.status_code == 200
    assert download.data == b"%PDF-1.4 test"

    assert employer_client.delete(f"/api/documents/{document['id']}").status_code == 200
    assert employer_client.get(f"/api/documents/{document['id']}").status_code == 404


def stored_files(company_id):
    folder = os.path.join(flask_app.config["UPLOAD_DIR"], "companies", str(company_id), "documents")
    return set(os.listdir(folder)) if os.path.isdir(folder) else set()


def test_failed_upload_leaves_no_stored_file(monkeypatch, employer_client, company):
    before = stored_files(company["id"])

    def fail(*args, **kwargs):
        raise RuntimeError("progress write failed")

    monkeypatch.setattr(ProgressService, "update_application_progress", fail)

    response = upload(employer_client, company["id"], "DE9C")

    assert response.status_code == 400
    assert response.get_json()["message"] == messages.ERROR["DOCUMENT_UPLOAD_FAILED"]
    assert stored_files(company["id"]) == before
    assert employer_client.get(f"/api/companies/{company['id']}/documents").get_json()["data"]["total"] == 0


def test_failed_delete_keeps_the_file(monkeypatch, employer_client, company):
    document = upload(employer_client, company["id"], "DE9C").get_json()["data"]

    def fail():
        raise RuntimeError("commit failed")

    with monkeypatch.context() as patch:
        patch.setattr(db.session, "commit", fail)
        assert employer_client.delete(f"/api/documents/{document['id']}").status_code == 400

    download = employer_client.get(f"/api/documents/{document['id']}")
    assert download.status_code == 200
    assert download.data == b"%PDF-1.4 test"


def test_upload_requires_type_and_allowed_extension(employer_client, company):
    assert upload(employer_client, company["id"], "").get_json()["message"] == messages.ERROR["DOCUMENT_TYPE_REQUIRED"]
    assert upload(employer_client, company["id"], "DE9C", filename = "run.exe").status_code == 400


def test_other_users_cannot_download(employer_client, other_employer_client, company):
    document = upload(employer_client, company["id"], "DE9C").get_json()["data"]

    assert other_employer_client.get(f"/api/documents/{document['id']}").status_code == 403


def test_company_validation_lists_missing_groups(employer_client, company):
    upload(employer_client, company["id"], "DE9C")

    response = employer_client.post("/api/documents/validate", json = {"company_id": company["id"]})

    data = response.get_json()["data"]
    assert data["is_valid"] is False
    assert data["missing_requirements"] == ["Business Documents"]
    assert data["satisfied_groups"] == 1
    assert data["total_groups"] == 2
    assert data["company_data"]["uploaded_documents"] == ["DE9C"]


def test_validation_from_supplied_data(employer_client):
    response = employer_client.post("/api/documents/validate", json = {
        "uploaded_documents": ["Payroll Report", "Business License"],
        "has_prior_coverage": True,
        "employee_count": 10
    })

    data = response.get_json()["data"]
    assert data["is_valid"] is False
    assert data["missing_requirements"] == ["Prior Coverage Documents"]


@pytest.mark.parametrize("payload, field", [
    ({"employee_count": "lots"}, "employee_count"),
    ({"employee_count": -3}, "employee_count"),
    ({"uploaded_documents": "Payroll Report, Business License"}, "uploaded_documents"),
    ({"uploaded_documents": ["Payroll Report", 7]}, "uploaded_documents"),
    ({"has_prior_coverage": "yes"}, "has_prior_coverage")
])
def test_supplied_data_is_validated(employer_client, payload, field):
    response = employer_client.post("/api/documents/validate", json = payload)

    assert response.status_code == 400
    assert [detail["field"] for detail in response.get_json()["details"]] == [field]


def test_validation_rejects_malformed_company_id(employer_client):
    assert employer_client.post("/api/documents/validate", json = {"company_id": "abc"}).status_code == 400


def test_employer_cannot_override(employer_client, company):
    response = employer_client.post(
        "/api/documents/override",
        json = {"company_id": company["id"], "reason": "Paper copy received"}
    )

    assert response.status_code == 403


def test_admin_override_marks_valid(admin_client, company):
    response = admin_client.post(
        "/api/documents/override",
        json = {"company_id": company["id"], "reason": "Paper copy received"}
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["is_valid"] is True
    assert data["errors"] == ["Override applied by admin: Paper copy received"]


def test_override_requires_reason(admin_client, company):
    response = admin_client.post("/api/documents/override", json = {"company_id": company["id"]})

    assert response.status_code == 400
    assert response.get_json()["message"] == messages.ERROR["OVERRIDE_REASON_REQUIRED"]


def test_broker_override_follows_flag(monkeypatch, owner_client, company):
    payload = {"company_id": company["id"], "reason": "Broker verified"}

    assert owner_client.post("/api/documents/override", json = payload).status_code == 403

    monkeypatch.setenv("FEATURE_BROKEROVERRIDE", "True")
    assert owner_client.post("/api/documents/override", json = payload).status_code == 200



class TestRequirementRules:

    def test_base_groups_only(self):
        groups = document_rules_service.get_required_groups({})
        assert [group["id"] for group in groups] == ["payProof", "businessDocs"]

    def test_conditional_groups(self):
        groups = document_rules_service.get_required_groups({
            "has_prior_coverage": True,
            "employee_count": 51,
            "selected_carrier": "Kaiser"
        })
        assert [group["id"] for group in groups] == [
            "payProof", "businessDocs", "priorCoverage", "carrierSpecific", "employeeCount"
        ]

    def test_fifty_employees_is_not_a_large_group(self):
        groups = document_rules_service.get_required_groups({"employee_count": 50})
        assert "employeeCount" not in [group["id"] for group in groups]

    def test_blue_shield_payroll_records_only_without_de9c(self):
        without = document_rules_service.get_required_groups({"selected_carrier": "Blue Shield"})
        with_de9c = document_rules_service.get_required_groups({
            "selected_carrier": "Blue Shield",
            "uploaded_documents": ["DE9C"]
        })

        assert "Payroll Records" in [req["type"] for req in without[-1]["requirements"]]
        assert "Payroll Records" not in [req["type"] for req in with_de9c[-1]["requirements"]]

    def test_optional_requirement_does_not_block(self):
        result = document_rules_service.validate_documents({
            "selected_carrier": "UnitedHealthcare",
            "uploaded_documents": ["DE9C", "Business License", "UHC-GroupApp"]
        })
        assert result["is_valid"] is True
        assert result["satisfied_groups"] == result["total_groups"] == 3

    def test_carrier_group_follows_flag(self, monkeypatch):
        monkeypatch.setenv("FEATURE_CARRIER_SPECIFIC_DOCUMENTS", "False")
        groups = document_rules_service.get_required_groups({"selected_carrier": "Anthem"})
        assert "carrierSpecific" not in [group["id"] for group in groups]

    def test_smart_documents_disabled_accepts_everything(self, monkeypatch):
        monkeypatch.setenv("FEATURE_SMARTDOCUMENTS", "False")
        result = document_rules_service.validate_documents({"uploaded_documents": []})
        assert result["is_valid"] is True
        assert result["total_groups"] == 0

    @pytest.mark.parametrize("role, expected", [
        ("admin", True),
        ("owner", False),
        ("staff", False),
        ("employer", False)
    ])
    def test_default_override_roles(self, role, expected):
        assert document_rules_service.can_override_validation(role) is expected

    def test_override_needs_reason(self):
        result = document_rules_service.validate_with_override({}, "admin", None)
        assert result["is_valid"] is False
