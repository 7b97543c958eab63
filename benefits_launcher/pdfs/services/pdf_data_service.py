"""
PDF Data Service

Builds the enrollment data a template's field mappings read from and
resolves one mapping to the string written into the form.

Context sources:
    company      the company row plus full_address
    owner        primary owner (highest ownership percentage)
    application  the company's application
    broker       agency of the company's creator
    initiator    the application initiator
    coverage     coverage information
"""

# Python Packages
from datetime import date, datetime

# Models
from ...models.company import Company
from ...models.owner import Owner
from ...models.pdf_field_mapping import PdfFieldMapping

# Helpers
from ...util.formatters import format_us_date
from ...util.validators import parse_date

CHECKBOX_ON = "/Yes"
CHECKBOX_OFF = "/Off"

# Never written into a form
HIDDEN_COLUMNS = {"password", "ssn"}

FALSE_TEXT = {"", "0", "false", "no", "off", "n"}





def row_values(row) -> dict:
    """ Raw column values of a model row (dates stay date objects)... """

    if row is None:
        return {}

    return {
        column.key: getattr(row, column.key)
        for column in row.__table__.columns
        if column.key not in HIDDEN_COLUMNS
    }


def full_name(values: dict) -> str:
    return " ".join(part for part in (values.get("first_name"), values.get("last_name")) if part)


def primary_owner(company: Company):
    owners = Owner.query.filter_by(company_id = company.id).order_by(Owner.ownership_percentage.desc(), Owner.id).all()
    return owners[0] if owners else None


def build_context(company: Company) -> dict:
    """
    Returns:
        dict: data source name -> {field: value}
    """

    application = company.application
    creator = company.user

    company_values = row_values(company)
    company_values["full_address"] = ", ".join(
        part for part in (
            company.address,
            company.city,
            f"{company.state} {company.zip}".strip()
        ) if part
    )

    owner_values = row_values(primary_owner(company))
    if owner_values:
        owner_values["full_name"] = full_name(owner_values)

    initiator_values = row_values(application.initiator if application else None)
    if initiator_values:
        initiator_values["full_name"] = full_name(initiator_values)

    return {
        "company": company_values,
        "owner": owner_values,
        "application": row_values(application),
        "broker": row_values(creator.broker if creator else None),
        "initiator": initiator_values,
        "coverage": row_values(company.coverage)
    }


def is_checked(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() not in FALSE_TEXT


def resolve_value(mapping: PdfFieldMapping, context: dict) -> str:
    """
    Value written into `mapping.field_name`.

    Dates are MM/DD/YYYY, checkboxes /Yes or /Off, missing values empty.
    """

    value = context.get(mapping.data_source, {}).get(mapping.data_field)

    if mapping.field_type == "checkbox":
        return CHECKBOX_ON if is_checked(value) else CHECKBOX_OFF

    if value is None:
        return ""

    if mapping.field_type == "date":
        if isinstance(value, datetime):
            value = value.date()
        return format_us_date(value if isinstance(value, date) else parse_date(value))

    if mapping.field_type == "signature" and str(value).startswith("data:"):
        # Drawn signatures are images; the form gets the signer's name instead
        return context.get("owner", {}).get("full_name", "")

    if isinstance(value, bool):
        return "Yes" if value else "No"

    if isinstance(value, datetime):
        return format_us_date(value.date())

    if isinstance(value, date):
        return format_us_date(value)

    return str(value)


def resolve_values(mappings, context: dict) -> dict:
    return {mapping.field_name: resolve_value(mapping, context) for mapping in mappings}
