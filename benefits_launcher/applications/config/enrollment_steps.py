""" Enrollment wizard steps, in order... """

# Feature Flags
from ...base.feature_flags import is_feature_enabled





ALL_ENROLLMENT_STEPS = [
    {"id": "carriers",           "label": "Carriers",      "feature_flag": None},
    {"id": "company",            "label": "Company",       "feature_flag": None},
    {"id": "ownership",          "label": "Owners",        "feature_flag": None},
    {"id": "authorized-contact", "label": "Contact",       "feature_flag": None},
    {"id": "employees",          "label": "Employees",     "feature_flag": "EMPLOYEE_MANAGEMENT"},
    {"id": "documents",          "label": "Documents",     "feature_flag": None},
    {"id": "plans",              "label": "Plans",         "feature_flag": None},
    {"id": "contributions",      "label": "Contributions", "feature_flag": None},
    {"id": "review",             "label": "Submit",        "feature_flag": None}
]

# Steps recorded by the application-initiator flow, outside the wizard
INITIATOR_STEP = "application-initiator"
COMPANY_INFORMATION_STEP = "company-information"

KNOWN_STEPS = {step["id"] for step in ALL_ENROLLMENT_STEPS} | {INITIATOR_STEP, COMPANY_INFORMATION_STEP}



def get_enabled_steps() -> list:
    return [
        step for step in ALL_ENROLLMENT_STEPS
        if not step["feature_flag"] or is_feature_enabled(step["feature_flag"])
    ]


def get_enabled_step_ids() -> list:
    return [step["id"] for step in get_enabled_steps()]


def next_step(step_id: str):
    """ Id of the enabled step after `step_id`; None at the end or for unknown ids... """

    steps = get_enabled_step_ids()
    if step_id not in steps:
        return None

    index = steps.index(step_id)
    return steps[index + 1] if index < len(steps) - 1 else None


def previous_step(step_id: str):
    steps = get_enabled_step_ids()
    if step_id not in steps:
        return None

    index = steps.index(step_id)
    return steps[index - 1] if index > 0 else None
