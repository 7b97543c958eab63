"""
Shared helpers: validators, rate limiter, feature flags, spreadsheets, hashing
"""

# Python Packages
from datetime import date

import pytest

# Helpers
from benefits_launcher.base.feature_flags import get_feature_flags, is_feature_enabled
from benefits_launcher.util import validators
from benefits_launcher.util.formatters import cents_to_dollars, format_us_date, ssn_last4
from benefits_launcher.util.rate_limiter import RateLimiter
from benefits_launcher.util.security import hash_password, verify_dummy_password, verify_password
from benefits_launcher.util.spreadsheets import header_key, load_rows, remap_rows
from benefits_launcher.util.exceptions import ValidationException





@pytest.mark.parametrize("value, expected", [
    ("Secret123!", True),
    ("secret123!", False),
    ("SECRET123!", False),
    ("Secret!!!!", False),
    ("Secret123", False),
    ("Se1!", False)
])
def test_password_strength(value, expected):
    assert validators.is_strong_password(value) is expected


@pytest.mark.parametrize("value, expected", [
    ("5595551234", True),
    ("(559) 555-1234", True),
    ("1-559-555-1234", True),
    ("555-1234", False)
])
def test_phone(value, expected):
    assert validators.is_valid_phone(value) is expected


def test_phone_formatting():
    assert validators.format_phone("559.555.1234") == "(559) 555-1234"
    assert validators.format_phone("15595551234") == "(559) 555-1234"
    assert validators.format_phone("55955") == "(559) 55"


def test_identifier_formats():
    assert validators.is_valid_ein("12-3456789")
    assert validators.is_valid_ein("123456789")
    assert not validators.is_valid_ein("1234-56789")
    assert validators.is_valid_ssn("123-45-6789")
    assert not validators.is_valid_ssn("12-345-6789")
    assert validators.is_valid_zip("93721-1234")
    assert not validators.is_valid_zip("9372")
    assert validators.is_valid_state("ca")
    assert not validators.is_valid_state("PR")


@pytest.mark.parametrize("value, expected", [(0, True), ("100", True), (100.5, False), (-1, False), (True, False), ("x", False)])
def test_percentage(value, expected):
    assert validators.is_valid_percentage(value) is expected


def test_parse_date():
    assert validators.parse_date("2026-03-01") == date(2026, 3, 1)
    assert validators.parse_date("03/01/2026") == date(2026, 3, 1)
    assert validators.parse_date("March 1") is None
    assert validators.parse_date(None) is None


def test_sanitize_payload_strips_tags_but_keeps_raw_fields():
    payload = {
        "name": "  <b>Acme</b> ",
        "password": " <Pa55!> ",
        "owner": {"title": "<i>CEO</i>", "password": "<x>"},
        "tags": ["<p>one</p>", 2]
    }

    cleaned = validators.sanitize_payload(payload, ("password",))

    assert cleaned == {
        "name": "Acme",
        "password": " <Pa55!> ",
        "owner": {"title": "CEO", "password": "<x>"},
        "tags": ["one", 2]
    }


def test_formatters():
    assert format_us_date(date(2026, 7, 4)) == "07/04/2026"
    assert format_us_date(None) == ""
    assert ssn_last4("123-45-6789") == "6789"
    assert cents_to_dollars(34580) == 345.8



class TestRateLimiter:

    def make(self):
        self.now = 0.0
        return RateLimiter({"auth": (2, 60)}, clock = lambda: self.now)

    def test_blocks_after_limit_until_window_ends(self):
        limiter = self.make()

        assert limiter.hit("auth", "1.2.3.4") == (True, 0)
        assert limiter.hit("auth", "1.2.3.4") == (True, 0)

        self.now = 15.0
        assert limiter.hit("auth", "1.2.3.4") == (False, 45)

        self.now = 60.0
        assert limiter.hit("auth", "1.2.3.4") == (True, 0)

    def test_keys_are_independent(self):
        limiter = self.make()
        limiter.hit("auth", "a")
        limiter.hit("auth", "a")

        assert limiter.hit("auth", "b") == (True, 0)

    def test_expired_windows_are_dropped(self):
        limiter = self.make()
        limiter.hit("auth", "a")
        limiter.hit("auth", "b")

        self.now = 61.0
        limiter.hit("auth", "c")

        assert set(limiter._windows) == {("auth", "c")}

    def test_reset(self):
        limiter = self.make()
        limiter.hit("auth", "a")
        limiter.hit("auth", "a")
        limiter.reset()

        assert limiter.hit("auth", "a") == (True, 0)



class TestFeatureFlags:

    def test_defaults(self):
        assert is_feature_enabled("smartDocuments") is True
        assert is_feature_enabled("EMPLOYEE_MANAGEMENT") is False
        assert is_feature_enabled("NO_SUCH_FLAG") is False

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("FEATURE_PREMIUM_CALCULATION", "true")
        monkeypatch.setenv("FEATURE_SMARTDOCUMENTS", "0")

        flags = get_feature_flags()

        assert flags["PREMIUM_CALCULATION"]["enabled"] is True
        assert flags["smartDocuments"]["enabled"] is False

    def test_endpoint(self, app):
        response = app.test_client().get("/api/feature-flags")

        assert response.status_code == 200
        assert response.get_json()["data"]["E_SIGNATURE"] == {
            "enabled": True,
            "description": "Enable e-signature capabilities"
        }



class TestSpreadsheets:

    def test_header_key(self):
        assert header_key("First Name") == header_key("first_name") == header_key("FIRST-NAME") == "firstname"

    def test_semicolon_csv(self):
        content = "Name;City;State\nAna;Fresno;CA\nBo;Clovis;CA\n;;\n".encode()

        headers, rows = load_rows("people.csv", content)

        assert headers == ["Name", "City", "State"]
        assert rows == [
            {"Name": "Ana", "City": "Fresno", "State": "CA"},
            {"Name": "Bo", "City": "Clovis", "State": "CA"}
        ]

    def test_unsupported_extension(self):
        with pytest.raises(ValidationException):
            load_rows("people.json", b"{}")

    def test_remap_keeps_first_alias(self):
        present, rows = remap_rows(
            ["Zip", "Zip Code", "Notes"],
            [{"Zip": "93721", "Zip Code": "00000", "Notes": "x"}],
            {"zip": "zip", "zipcode": "zip"}
        )

        assert present == {"zip"}
        assert rows == [{"zip": "93721"}]



class TestPasswordHashing:

    def test_hash_roundtrip(self):
        hashed = hash_password("Secret123!")

        assert hashed.startswith("scrypt:")
        assert verify_password("Secret123!", hashed)
        assert not verify_password("Secret123?", hashed)
        assert not verify_password("", hashed)

    def test_salted(self):
        assert hash_password("Secret123!") != hash_password("Secret123!")

    def test_dummy_verification_always_fails(self):
        assert verify_dummy_password("anything") is False
