"""
Companies, owners, employees and coverage information
"""

from conftest import COMPANY_PAYLOAD, create_company

# Helpers
from benefits_launcher.util import messages

OWNER = {
    "first_name": "Maria",
    "last_name": "Lopez",
    "title": "CEO",
    "ownership_percentage": 60,
    "email": "maria@sunrisebakery.com",
    "phone": "5595551111"
}

EMPLOYEE = {
    "first_name": "Sam",
    "last_name": "Chen",
    "dob": "1990-04-12",
    "ssn": "123-45-6789",
    "address": "12 Oak Ave",
    "city": "Fresno",
    "state": "CA",
    "zip": "93722"
}





def test_create_company_starts_application(employer_client):
    company = create_company(employer_client)

    assert company["name"] == "Sunrise Bakery LLC"
    assert company["application"]["status"] == "in_progress"
    assert company["application"]["company_id"] == company["id"]


def test_create_company_reports_invalid_fields(employer_client):
    payload = dict(COMPANY_PAYLOAD, state = "ZZ", tax_id = "123", phone = "555", industry = "space")

    response = employer_client.post("/api/companies", json = payload)

    assert response.status_code == 400
    fields = {detail["field"] for detail in response.get_json()["details"]}
    assert {"state", "tax_id", "phone", "industry"} <= fields


def test_create_company_requires_login(app):
    response = app.test_client().post("/api/companies", json = COMPANY_PAYLOAD)
    assert response.status_code == 401


def test_list_companies_only_shows_own(employer_client, other_employer_client, company):
    create_company(other_employer_client, name = "Other Co")

    data = employer_client.get("/api/companies").get_json()["data"]

    assert data["total"] == 1
    assert data["companies"][0]["id"] == company["id"]


def test_admin_lists_every_company(admin_client, employer_client, other_employer_client):
    create_company(employer_client)
    create_company(other_employer_client, name = "Other Co")

    assert admin_client.get("/api/companies").get_json()["data"]["total"] == 2


def test_company_visibility(employer_client, other_employer_client, owner_client, staff_client, admin_client, company):
    path = f"/api/companies/{company['id']}"

    assert employer_client.get(path).status_code == 200
    assert owner_client.get(path).status_code == 200
    assert staff_client.get(path).status_code == 200
    assert admin_client.get(path).status_code == 200
    assert other_employer_client.get(path).status_code == 403
    assert employer_client.get("/api/companies/9999").status_code == 404


def test_partial_company_update(employer_client, company):
    response = employer_client.put(
        f"/api/companies/{company['id']}",
        json = {"city": "Clovis", "employee_count": 12}
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["city"] == "Clovis"
    assert data["name"] == company["name"]


def test_owner_additions_cannot_exceed_one_hundred(employer_client, company):
    path = f"/api/companies/{company['id']}/owners"

    assert employer_client.post(path, json = OWNER).status_code == 201

    response = employer_client.post(path, json = dict(OWNER, first_name = "Luis", ownership_percentage = 50))

    assert response.status_code == 400
    assert response.get_json()["message"] == messages.ERROR["OWNERSHIP_EXCEEDS_TOTAL"].format(60)

    listing = employer_client.get(path).get_json()["data"]
    assert listing["total_percentage"] == 60
    assert len(listing["owners"]) == 1


def test_owner_replacement_must_total_one_hundred(employer_client, company):
    path = f"/api/companies/{company['id']}/owners"

    short = employer_client.put(path, json = {"owners": [OWNER, dict(OWNER, ownership_percentage = 30)]})
    assert short.status_code == 400
    assert short.get_json()["message"] == messages.ERROR["OWNERSHIP_TOTAL_INVALID"].format(90)

    response = employer_client.put(
        path,
        json = {"owners": [OWNER, dict(OWNER, first_name = "Luis", ownership_percentage = 40)]}
    )

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["total_percentage"] == 100
    assert [owner["first_name"] for owner in data["owners"]] == ["Maria", "Luis"]


def test_owner_replacement_reports_row_errors(employer_client, company):
    response = employer_client.put(
        f"/api/companies/{company['id']}/owners",
        json = {"owners": [dict(OWNER, email = "bad", ownership_percentage = 100)]}
    )

    assert response.status_code == 400
    assert response.get_json()["details"][0]["field"] == "owners[0].email"


def test_fractional_ownership_is_rejected(employer_client, company):
    path = f"/api/companies/{company['id']}/owners"

    response = employer_client.put(path, json = {"owners": [
        dict(OWNER, ownership_percentage = 33.5),
        dict(OWNER, first_name = "Luis", ownership_percentage = "33.5"),
        dict(OWNER, first_name = "Ana", ownership_percentage = 33)
    ]})

    assert response.status_code == 400
    assert {detail["field"] for detail in response.get_json()["details"]} == {
        "owners[0].ownership_percentage",
        "owners[1].ownership_percentage"
    }

    single = employer_client.post(path, json = dict(OWNER, ownership_percentage = 99.9))
    assert single.status_code == 400
    assert employer_client.get(path).get_json()["data"]["total_percentage"] == 0


def test_whole_number_strings_are_accepted_for_ownership(employer_client, company):
    path = f"/api/companies/{company['id']}/owners"

    response = employer_client.put(path, json = {"owners": [
        dict(OWNER, ownership_percentage = "60.0"),
        dict(OWNER, first_name = "Luis", ownership_percentage = "40")
    ]})

    assert response.status_code == 200
    assert employer_client.get(path).get_json()["data"]["total_percentage"] == 100


def test_owner_progress_is_recorded(employer_client, company):
    employer_client.post(f"/api/companies/{company['id']}/owners", json = dict(OWNER, ownership_percentage = 100))

    application = employer_client.get(f"/api/companies/{company['id']}/application").get_json()["data"]

    assert "ownership" in application["completed_steps"]


def test_employee_lifecycle(employer_client, company):
    path = f"/api/companies/{company['id']}/employees"

    created = employer_client.post(path, json = EMPLOYEE)
    assert created.status_code == 201
    employee = created.get_json()["data"]
    assert employee["ssn_last4"] == "6789"
    assert "ssn" not in employee

    updated = employer_client.put(f"{path}/{employee['id']}", json = {"city": "Madera"})
    assert updated.status_code == 200
    assert updated.get_json()["data"]["city"] == "Madera"

    assert employer_client.delete(f"{path}/{employee['id']}").status_code == 200
    assert employer_client.get(path).get_json()["data"]["total"] == 0


def test_employee_with_future_birthdate_is_rejected(employer_client, company):
    response = employer_client.post(
        f"/api/companies/{company['id']}/employees",
        json = dict(EMPLOYEE, dob = "2999-01-01")
    )

    assert response.status_code == 400
    assert response.get_json()["details"][0]["field"] == "dob"


def test_coverage_create_then_update(employer_client, company):
    path = f"/api/companies/{company['id']}/coverage"

    created = employer_client.post(path, json = {"full_time_employees": 8, "medical": True})
    assert created.status_code == 201
    assert created.get_json()["data"]["cobra_type"] == "cal-cobra"

    updated = employer_client.post(path, json = {"had_20_plus_employees_6_months": True})
    assert updated.status_code == 200
    data = updated.get_json()["data"]
    assert data["cobra_type"] == "federal"
    assert data["full_time_employees"] == 8
    assert data["medical"] is True


def test_coverage_rejects_negative_counts(employer_client, company):
    response = employer_client.post(
        f"/api/companies/{company['id']}/coverage",
        json = {"part_time_employees": -1}
    )

    assert response.status_code == 400
