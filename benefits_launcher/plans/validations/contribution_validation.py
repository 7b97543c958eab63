"""
Contribution Validation

Percentages are whole numbers 0..100; the employer pays at least the
carrier minimum of the employee premium.
"""

# Constants
from ...base import constants

# Helpers
from ...util.validators import whole_number

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

FIELDS = ("plan_id", "employee_contribution", "dependent_contribution")





class ContributionValidation:

    def validate(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        errors = []

        for field in FIELDS:
            if args.get(field) in (None, ""):
                errors.append({"field": field, "message": messages.ERROR["FIELD_REQUIRED"].format(field)})

        if errors:
            raise ValidationException(message = messages.ERROR["VALIDATION_FAILED"], details = errors)

        if whole_number(args["plan_id"]) is None:
            errors.append({"field": "plan_id", "message": messages.ERROR["INVALID_FIELD"].format("plan_id")})

        for field in ("employee_contribution", "dependent_contribution"):
            value = whole_number(args[field])
            if value is None or value < 0 or value > 100:
                errors.append({"field": field, "message": messages.ERROR["INVALID_PERCENTAGE"].format(field)})

        employee = whole_number(args["employee_contribution"])
        if employee is not None and 0 <= employee < constants.MIN_EMPLOYER_CONTRIBUTION:
            errors.append({
                "field": "employee_contribution",
                "message": messages.ERROR["CONTRIBUTION_MINIMUM"].format(constants.MIN_EMPLOYER_CONTRIBUTION)
            })

        if errors:
            raise ValidationException(message = messages.ERROR["VALIDATION_FAILED"], details = errors)

        return True
