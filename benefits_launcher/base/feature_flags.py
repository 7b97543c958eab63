""" Feature flags: each one can be overridden with FEATURE_<NAME> in the environment... """

# Python Packages
from decouple import config





FEATURE_FLAGS = {
    "smartDocuments": {
        "enabled": True,
        "description": "Evaluate document requirements against company data"
    },
    "adminOverride": {
        "enabled": True,
        "description": "Allow platform admins to override document requirements"
    },
    "brokerOverride": {
        "enabled": False,
        "description": "Allow broker owners and staff to override document requirements"
    },
    "EMPLOYEE_MANAGEMENT": {
        "enabled": False,
        "description": "Enable employee census management functionality"
    },
    "CARRIER_SPECIFIC_DOCUMENTS": {
        "enabled": True,
        "description": "Enable carrier-specific document requirements"
    },
    "PREMIUM_CALCULATION": {
        "enabled": False,
        "description": "Enable premium calculation in plan selection"
    },
    "E_SIGNATURE": {
        "enabled": True,
        "description": "Enable e-signature capabilities"
    }
}



def _env_name(flag_name: str) -> str:
    # smartDocuments -> FEATURE_SMARTDOCUMENTS, EMPLOYEE_MANAGEMENT -> FEATURE_EMPLOYEE_MANAGEMENT
    return f"FEATURE_{flag_name.upper()}"


def is_feature_enabled(flag_name: str) -> bool:
    """
    Check a flag, honouring the environment override.
    Unknown flags are disabled.
    """

    flag = FEATURE_FLAGS.get(flag_name)
    if not flag:
        return False

    return config(_env_name(flag_name), default = flag["enabled"], cast = bool)


def get_feature_flags() -> dict:
    """ Resolved flag table for the API... """

    return {
        name: {
            "enabled": is_feature_enabled(name),
            "description": flag["description"]
        }
        for name, flag in FEATURE_FLAGS.items()
    }
