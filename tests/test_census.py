"""
Census spreadsheet import
"""

# Python Packages
from datetime import datetime
from io import BytesIO

import openpyxl

# Helpers
from benefits_launcher.util import messages

CSV_CENSUS = (
    "First Name,Last Name,Date of Birth,SSN,Street Address,City,State,Zip Code\n"
    "Sam,Chen,1990-04-12,123-45-6789,12 Oak Ave,Fresno,CA,93722\n"
    "Ana,Diaz,04/30/1985,987654321,9 Elm St,Fresno,CA,93701\n"
    "Bad,Row,not-a-date,12,1 Pine Rd,Fresno,XX,937\n"
    ",,,,,,,\n"
)





def upload(client, company_id, content, filename):
    return client.post(
        f"/api/companies/{company_id}/employees/census",
        data = {"file": (BytesIO(content), filename)},
        content_type = "multipart/form-data"
    )


def test_csv_census_creates_valid_rows_and_reports_the_rest(employer_client, company):
    response = upload(employer_client, company["id"], CSV_CENSUS.encode(), "census.csv")

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["created"] == 2
    assert data["skipped"] == 1
    assert data["errors"][0]["row"] == 4
    assert any(error.startswith("dob:") for error in data["errors"][0]["errors"])

    employees = employer_client.get(f"/api/companies/{company['id']}/employees").get_json()["data"]
    assert [employee["first_name"] for employee in employees["employees"]] == ["Sam", "Ana"]
    assert employees["employees"][1]["dob"] == "1985-04-30"


def test_xlsx_census(employer_client, company):
    workbook = openpyxl.Workbook()
    sheet = workbook.active
    sheet.append(["FirstName", "LastName", "DOB", "SSN", "Address", "City", "State", "Zip"])
    sheet.append(["Lee", "Park", datetime(1979, 11, 2), "111-22-3333", "5 Bay St", "Oakland", "CA", 94607])
    buffer = BytesIO()
    workbook.save(buffer)

    response = upload(employer_client, company["id"], buffer.getvalue(), "census.xlsx")

    assert response.status_code == 200
    assert response.get_json()["data"]["created"] == 1

    employee = employer_client.get(f"/api/companies/{company['id']}/employees").get_json()["data"]["employees"][0]
    assert employee["dob"] == "1979-11-02"
    assert employee["zip"] == "94607"


def test_census_missing_required_columns(employer_client, company):
    content = b"First Name,Last Name\nSam,Chen\n"

    response = upload(employer_client, company["id"], content, "census.csv")

    assert response.status_code == 400
    assert response.get_json()["message"] == messages.ERROR["CENSUS_MISSING_COLUMNS"].format(
        "dob, ssn, address, city, state, zip"
    )


def test_census_rejects_unsupported_file(employer_client, company):
    response = upload(employer_client, company["id"], b"hello", "census.txt")

    assert response.status_code == 400
    assert "TXT" in response.get_json()["message"]


def test_census_requires_a_file(employer_client, company):
    response = employer_client.post(
        f"/api/companies/{company['id']}/employees/census",
        data = {},
        content_type = "multipart/form-data"
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == messages.ERROR["FILE_REQUIRED"]
