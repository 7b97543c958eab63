"""
Document Requirement Evaluation

Handles:
    - Conditions over company data
    - Required document groups for a company
    - Group satisfaction and the overall result
    - Override by admins / broker users

company_data keys:
    has_prior_coverage (bool), selected_carrier (str), employee_count (int),
    company_state (str), uploaded_documents (list of document types)
"""

# Config
from ..config.document_rules import (
    CONDITION_LARGE_GROUP,
    CONDITION_MISSING_DE9C,
    CONDITION_PRIOR_COVERAGE,
    DOCUMENT_RULES,
    LARGE_GROUP_THRESHOLD
)

# Feature Flags
from ...base.feature_flags import is_feature_enabled

# Constants
from ...base import constants

# Helpers
from ...util.validators import whole_number





def evaluate_condition(condition: str, company_data: dict) -> bool:
    """ Unknown conditions are false... """

    if condition == CONDITION_PRIOR_COVERAGE:
        return company_data.get("has_prior_coverage") is True

    if condition == CONDITION_LARGE_GROUP:
        return (whole_number(company_data.get("employee_count")) or 0) > LARGE_GROUP_THRESHOLD

    if condition == CONDITION_MISSING_DE9C:
        return "DE9C" not in (company_data.get("uploaded_documents") or [])

    return False


def get_required_groups(company_data: dict) -> list:
    groups = [
        {
            "id": "payProof",
            "label": DOCUMENT_RULES["payProof"]["label"],
            "requirements": DOCUMENT_RULES["payProof"]["oneOf"],
            "one_of": True
        },
        {
            "id": "businessDocs",
            "label": DOCUMENT_RULES["businessDocs"]["label"],
            "requirements": DOCUMENT_RULES["businessDocs"]["oneOf"],
            "one_of": True
        }
    ]

    prior = DOCUMENT_RULES["priorCoverage"]
    if evaluate_condition(prior["condition"], company_data):
        groups.append({
            "id": "priorCoverage",
            "label": prior["label"],
            "requirements": prior["required"],
            "one_of": False
        })

    carrier = company_data.get("selected_carrier")
    carrier_docs = DOCUMENT_RULES["carrierSpecific"].get(carrier) if carrier else None
    if carrier_docs and is_feature_enabled("CARRIER_SPECIFIC_DOCUMENTS"):
        groups.append({
            "id": "carrierSpecific",
            "label": f"{carrier} Requirements",
            "requirements": [
                doc for doc in carrier_docs
                if not doc.get("condition") or evaluate_condition(doc["condition"], company_data)
            ],
            "one_of": False
        })

    large_group = DOCUMENT_RULES["employeeCount"]
    if evaluate_condition(large_group["condition"], company_data):
        groups.append({
            "id": "employeeCount",
            "label": large_group["label"],
            "requirements": large_group["required"],
            "one_of": False
        })

    return groups


def is_group_satisfied(group: dict, uploaded: list) -> bool:
    """
    One-of groups need any listed type; the others need every
    requirement not marked required: False.
    """

    if group["one_of"]:
        return any(req["type"] in uploaded for req in group["requirements"])

    return all(
        req["type"] in uploaded
        for req in group["requirements"]
        if req.get("required") is not False
    )


def validate_documents(company_data: dict) -> dict:
    if not is_feature_enabled("smartDocuments"):
        return {
            "is_valid": True,
            "missing_requirements": [],
            "satisfied_groups": 0,
            "total_groups": 0,
            "errors": []
        }

    uploaded = list(company_data.get("uploaded_documents") or [])
    groups = get_required_groups(company_data)

    missing = [group["label"] for group in groups if not is_group_satisfied(group, uploaded)]
    satisfied = len(groups) - len(missing)

    return {
        "is_valid": satisfied == len(groups),
        "missing_requirements": missing,
        "satisfied_groups": satisfied,
        "total_groups": len(groups),
        "errors": [f"Missing required documents: {label}" for label in missing]
    }


def can_override_validation(role: str) -> bool:
    if role == constants.ROLE_ADMIN and is_feature_enabled("adminOverride"):
        return True

    if role in constants.BROKER_ROLES and is_feature_enabled("brokerOverride"):
        return True

    return False


def validate_with_override(company_data: dict, role: str, reason: str = None) -> dict:
    result = validate_documents(company_data)

    if not result["is_valid"] and can_override_validation(role) and reason:
        result = dict(result)
        result["is_valid"] = True
        result["errors"] = [f"Override applied by {role}: {reason}"]

    return result
