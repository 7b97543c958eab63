"""
PDF templates, field mappings and form generation
"""

# Python Packages
from datetime import date, datetime
from io import BytesIO
from types import SimpleNamespace

import pytest
from PyPDF2 import PdfReader, PdfWriter
from PyPDF2.generic import (
    ArrayObject,
    DictionaryObject,
    FloatObject,
    NameObject,
    TextStringObject
)

from conftest import flask_app

# Services
from benefits_launcher.pdfs.services.pdf_data_service import resolve_value
from benefits_launcher.pdfs.services.pdf_form_service import detect_fields, fill_form
from benefits_launcher.pdfs.services.pdf_generation_service import PdfGenerationService
from benefits_launcher.pdfs.tasks.pdf_tasks import generate_pdf_task

# Helpers
from benefits_launcher.util import messages
from benefits_launcher.util.exceptions import ValidationException





def form_widget(name, field_type, rect):
    return DictionaryObject({
        NameObject("/Type"): NameObject("/Annot"),
        NameObject("/Subtype"): NameObject("/Widget"),
        NameObject("/FT"): NameObject(field_type),
        NameObject("/T"): TextStringObject(name),
        NameObject("/Rect"): ArrayObject([FloatObject(value) for value in rect]),
        NameObject("/DA"): TextStringObject("/Helv 10 Tf 0 g")
    })


def make_form_pdf() -> bytes:
    """ One-page PDF with a text field and a checkbox """

    writer = PdfWriter()
    writer.add_blank_page(width = 612, height = 792)
    page = writer.pages[0]

    refs = [
        writer._add_object(form_widget("company_name", "/Tx", (50, 700, 300, 720))),
        writer._add_object(form_widget("medical_box", "/Btn", (50, 650, 62, 662)))
    ]
    page[NameObject("/Annots")] = ArrayObject(refs)
    writer._root_object[NameObject("/AcroForm")] = DictionaryObject({NameObject("/Fields"): ArrayObject(refs)})

    output = BytesIO()
    writer.write(output)
    return output.getvalue()


def field_values(content: bytes) -> dict:
    page = PdfReader(BytesIO(content)).pages[0]
    return {
        str(widget.get_object()["/T"]): widget.get_object().get("/V")
        for widget in page["/Annots"]
    }


def upload_template(client, content = None, filename = "anthem-app.pdf", **fields):
    data = {"carrier_name": "Anthem", "form_name": "Group Application", "version": "2026.1"}
    data.update(fields)
    data["pdf"] = (BytesIO(content if content is not None else make_form_pdf()), filename)

    return client.post("/api/admin/pdf-templates/upload", data = data, content_type = "multipart/form-data")


@pytest.fixture
def template_id(admin_client):
    template = upload_template(admin_client).get_json()["data"]["template"]

    for mapping in (
        {"field_name": "company_name", "data_source": "company", "data_field": "name"},
        {"field_name": "medical_box", "data_source": "coverage", "data_field": "medical", "field_type": "checkbox"}
    ):
        response = admin_client.post(f"/api/admin/pdf-templates/{template['id']}/mappings", json = mapping)
        assert response.status_code == 201

    return template["id"]


def test_form_fields_are_detected(admin_client):
    response = upload_template(admin_client)

    assert response.status_code == 201
    fields = response.get_json()["data"]["detected_fields"]
    assert fields == [
        {"name": "company_name", "page": 1, "rect": [50.0, 700.0, 300.0, 720.0], "type": "text"},
        {"name": "medical_box", "page": 1, "rect": [50.0, 650.0, 62.0, 662.0], "type": "checkbox"}
    ]


def test_template_upload_rejects_non_pdf(admin_client):
    assert upload_template(admin_client, content = b"hello", filename = "form.txt").status_code == 400

    broken = upload_template(admin_client, content = b"this is not a pdf")
    assert broken.status_code == 400
    assert broken.get_json()["message"] == messages.ERROR["PDF_TEMPLATE_INVALID"]


def test_template_upload_requires_metadata(admin_client):
    assert upload_template(admin_client, version = "").status_code == 400


def test_template_management_is_admin_only(employer_client):
    assert upload_template(employer_client).status_code == 403
    assert employer_client.get("/api/admin/pdf-templates").status_code == 403


def test_mapping_validation(admin_client, template_id):
    response = admin_client.post(
        f"/api/admin/pdf-templates/{template_id}/mappings",
        json = {"field_name": "x", "data_source": "payroll", "data_field": "total", "field_type": "radio"}
    )

    assert response.status_code == 400
    assert {detail["field"] for detail in response.get_json()["details"]} == {"data_source", "field_type"}


def test_template_listing_and_mappings(admin_client, employer_client, template_id):
    templates = admin_client.get("/api/admin/pdf-templates").get_json()["data"]
    assert templates[0]["mapping_count"] == 2

    mappings = admin_client.get(f"/api/admin/pdf-templates/{template_id}/mappings").get_json()["data"]
    assert admin_client.delete(f"/api/admin/pdf-templates/mappings/{mappings[0]['id']}").status_code == 200
    assert len(admin_client.get(f"/api/admin/pdf-templates/{template_id}/mappings").get_json()["data"]) == 1

    assert [row["id"] for row in employer_client.get("/api/pdf-templates").get_json()["data"]] == [template_id]

    assert admin_client.delete(f"/api/admin/pdf-templates/{template_id}").status_code == 200
    assert employer_client.get("/api/pdf-templates").get_json()["data"] == []


def test_generate_fills_the_form(employer_client, company, template_id):
    employer_client.post(f"/api/companies/{company['id']}/coverage", json = {"medical": True})

    response = employer_client.post(
        "/api/pdfs/generate",
        json = {"template_id": template_id, "company_id": company["id"]}
    )

    assert response.status_code == 200
    assert response.mimetype == "application/pdf"

    values = field_values(response.data)
    assert values["company_name"] == "Sunrise Bakery LLC"
    assert str(values["medical_box"]) == "/Yes"

    generated = employer_client.get(f"/api/companies/{company['id']}/generated-pdfs").get_json()["data"]
    assert len(generated) == 1
    assert generated[0]["status"] == "completed"
    assert generated[0]["carrier_name"] == "Anthem"
    assert generated[0]["file_name"].startswith("Anthem_Group-Application_Sunrise-Bakery-LLC_")

    download = employer_client.get(f"/api/pdfs/{generated[0]['id']}")
    assert download.status_code == 200
    assert field_values(download.data)["company_name"] == "Sunrise Bakery LLC"


def test_generate_without_coverage_leaves_checkbox_off(employer_client, company, template_id):
    response = employer_client.post(
        "/api/pdfs/generate",
        json = {"template_id": template_id, "company_id": company["id"]}
    )

    assert str(field_values(response.data)["medical_box"]) == "/Off"


def test_generate_in_background(employer_client, company, template_id):
    response = employer_client.post(
        "/api/pdfs/generate",
        json = {"template_id": template_id, "company_id": company["id"], "process_async": True}
    )

    assert response.status_code == 202
    data = response.get_json()["data"]
    assert data["task_id"]

    generated = employer_client.get(f"/api/companies/{company['id']}/generated-pdfs").get_json()["data"]
    assert generated[0]["id"] == data["generated_pdf"]["id"]
    assert generated[0]["status"] == "completed"


def test_generate_with_inactive_template(admin_client, employer_client, company, template_id):
    admin_client.delete(f"/api/admin/pdf-templates/{template_id}")

    response = employer_client.post(
        "/api/pdfs/generate",
        json = {"template_id": template_id, "company_id": company["id"]}
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == messages.ERROR["PDF_TEMPLATE_INACTIVE"]


def test_generate_for_someone_elses_company(other_employer_client, company, template_id):
    response = other_employer_client.post(
        "/api/pdfs/generate",
        json = {"template_id": template_id, "company_id": company["id"]}
    )

    assert response.status_code == 403


def test_generate_validation(employer_client):
    assert employer_client.post("/api/pdfs/generate", json = {"template_id": "abc", "company_id": 1}).status_code == 400



class TestFormService:

    def test_fill_ignores_unknown_fields(self):
        content = fill_form(make_form_pdf(), {"company_name": "Acme", "not_there": "x"})
        assert field_values(content)["company_name"] == "Acme"

    def test_detect_fields_on_blank_pdf(self):
        writer = PdfWriter()
        writer.add_blank_page(width = 100, height = 100)
        output = BytesIO()
        writer.write(output)

        assert detect_fields(output.getvalue()) == []



class TestResolveValue:

    CONTEXT = {
        "company": {
            "name": "Sunrise Bakery LLC",
            "effective_date": date(2026, 2, 1),
            "has_prior_coverage": True,
            "employee_count": None
        },
        "owner": {"full_name": "Maria Lopez"},
        "application": {
            "signature": "data:image/png;base64,AAAA",
            "submitted_at": datetime(2026, 1, 15, 9, 30)
        },
        "coverage": {"medical": False, "dental": "yes"}
    }

    def resolve(self, source, field, field_type = "text"):
        mapping = SimpleNamespace(data_source = source, data_field = field, field_type = field_type)
        return resolve_value(mapping, self.CONTEXT)

    def test_text(self):
        assert self.resolve("company", "name") == "Sunrise Bakery LLC"

    def test_missing_values_are_empty(self):
        assert self.resolve("company", "employee_count") == ""
        assert self.resolve("broker", "agency_name") == ""

    def test_dates_are_us_format(self):
        assert self.resolve("company", "effective_date", "date") == "02/01/2026"
        assert self.resolve("company", "effective_date") == "02/01/2026"
        assert self.resolve("application", "submitted_at", "date") == "01/15/2026"

    def test_booleans(self):
        assert self.resolve("company", "has_prior_coverage") == "Yes"
        assert self.resolve("coverage", "medical") == "No"

    def test_checkboxes(self):
        assert self.resolve("company", "has_prior_coverage", "checkbox") == "/Yes"
        assert self.resolve("coverage", "dental", "checkbox") == "/Yes"
        assert self.resolve("coverage", "medical", "checkbox") == "/Off"
        assert self.resolve("coverage", "vision", "checkbox") == "/Off"

    def test_drawn_signature_becomes_owner_name(self):
        assert self.resolve("application", "signature", "signature") == "Maria Lopez"



class TestGenerationTask:

    def run_with(self, monkeypatch, error):
        calls = []

        def render(service, generated_pdf_id):
            calls.append(generated_pdf_id)
            raise error

        monkeypatch.setattr(PdfGenerationService, "render", render)
        result = generate_pdf_task.apply(args = (42,))

        return calls, result

    def test_application_errors_are_not_retried(self, monkeypatch):
        calls, result = self.run_with(monkeypatch, ValidationException(message = "broken template"))

        assert calls == [42]
        assert result.failed()

    def test_unexpected_errors_are_retried(self, monkeypatch):
        calls, result = self.run_with(monkeypatch, RuntimeError("storage unavailable"))

        assert len(calls) > 1
        assert set(calls) == {42}
