"""
Broker settings, public branding and the broker portfolio
"""

# Python Packages
from io import BytesIO

from conftest import PASSWORD, create_company, flask_app, login, make_broker, make_user

# Models
from benefits_launcher.models.audit_log import AuditLog

# Constants
from benefits_launcher.base import constants

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-logo"





def upload_logo(client, content = PNG_BYTES, filename = "logo.png"):
    return client.post(
        "/api/broker/settings/logo",
        data = {"logo": (BytesIO(content), filename)},
        content_type = "multipart/form-data"
    )


def test_owner_reads_and_updates_settings(owner_client):
    assert owner_client.get("/api/broker/settings").get_json()["data"]["agency_name"] == "Golden State Benefits"

    response = owner_client.put("/api/broker/settings", json = {
        "agency_name": "Golden State Benefits Group",
        "color_primary": "#AA3300",
        "contact_phone": "559-555-1234",
        "contact_email": ""
    })

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["agency_name"] == "Golden State Benefits Group"
    assert data["color_primary"] == "#aa3300"
    assert data["contact_phone"] == "(559) 555-1234"
    assert data["contact_email"] is None


def test_settings_validation(owner_client):
    response = owner_client.put("/api/broker/settings", json = {"color_secondary": "blue", "agency_name": ""})

    assert response.status_code == 400
    assert {detail["field"] for detail in response.get_json()["details"]} == {"color_secondary", "agency_name"}


def test_staff_cannot_change_settings(staff_client):
    assert staff_client.get("/api/broker/settings").status_code == 403
    assert staff_client.put("/api/broker/settings", json = {"agency_name": "Mine"}).status_code == 403


def test_employer_is_not_a_broker(employer_client):
    assert employer_client.get("/api/broker/companies").status_code == 403


def test_public_branding_falls_back_to_defaults(broker_id):
    response = flask_app.test_client().get(f"/api/branding/{broker_id}")

    assert response.status_code == 200
    data = response.get_json()["data"]
    assert data["agency_name"] == "Golden State Benefits"
    assert data["product_name"] == constants.DEFAULT_BRANDING["product_name"]
    assert data["contact_email"] == constants.DEFAULT_BRANDING["contact_email"]
    assert data["logo_url"] is None


def test_branding_of_disabled_or_unknown_broker_is_hidden():
    disabled = make_broker(enabled = False)
    client = flask_app.test_client()

    assert client.get(f"/api/branding/{disabled}").status_code == 404
    assert client.get("/api/branding/does-not-exist").status_code == 404


def test_logo_upload_and_public_download(owner_client, broker_id):
    response = upload_logo(owner_client)

    assert response.status_code == 200
    assert response.get_json()["data"]["logo_url"] == f"/api/branding/{broker_id}/logo"

    branding = flask_app.test_client().get(f"/api/branding/{broker_id}").get_json()["data"]
    assert branding["logo_url"] == f"/api/branding/{broker_id}/logo"

    logo = flask_app.test_client().get(f"/api/branding/{broker_id}/logo")
    assert logo.status_code == 200
    assert logo.data == PNG_BYTES
    assert logo.mimetype == "image/png"


def test_replacing_logo_serves_the_new_file(owner_client, broker_id):
    upload_logo(owner_client)
    upload_logo(owner_client, content = b"second", filename = "logo.svg")

    assert flask_app.test_client().get(f"/api/branding/{broker_id}/logo").data == b"second"


def test_logo_must_be_an_image(owner_client):
    assert upload_logo(owner_client, content = b"%PDF", filename = "logo.pdf").status_code == 400


def test_logo_missing(broker_id):
    assert flask_app.test_client().get(f"/api/branding/{broker_id}/logo").status_code == 404


def test_portfolio_only_shows_agency_clients(staff_client, employer_client, other_employer_client):
    company = create_company(employer_client)
    create_company(other_employer_client, name = "Outside Co")

    companies = staff_client.get("/api/broker/companies").get_json()["data"]
    assert [row["id"] for row in companies] == [company["id"]]

    applications = staff_client.get("/api/broker/applications").get_json()["data"]
    assert len(applications) == 1
    assert applications[0]["company_name"] == "Sunrise Bakery LLC"
    assert applications[0]["owner_username"] == "employer"


def test_owner_creates_agency_users(owner_client, broker_id):
    response = owner_client.post("/api/broker/users", json = {
        "username": "newstaff",
        "password": PASSWORD,
        "email": "newstaff@example.com",
        "role": "staff"
    })

    assert response.status_code == 201
    data = response.get_json()["data"]
    assert data["role"] == "staff"
    assert data["broker_id"] == broker_id

    login("newstaff")

    usernames = [user["username"] for user in owner_client.get("/api/broker/users").get_json()["data"]]
    assert usernames == ["brokerowner", "newstaff"]

    with flask_app.app_context():
        assert AuditLog.query.filter_by(action = "admin_user_create").count() == 1


def test_owner_cannot_create_admins(owner_client):
    response = owner_client.post("/api/broker/users", json = {
        "username": "sneaky",
        "password": PASSWORD,
        "email": "sneaky@example.com",
        "role": "admin"
    })

    assert response.status_code == 400


def test_duplicate_broker_user(owner_client):
    make_user("taken")

    response = owner_client.post("/api/broker/users", json = {
        "username": "taken",
        "password": PASSWORD,
        "email": "fresh@example.com",
        "role": "employer"
    })

    assert response.status_code == 409
