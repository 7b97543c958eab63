"""
Company Validation
"""

# Helpers
from ...util.validators import (
    is_valid_date,
    is_valid_ein,
    is_valid_industry,
    is_valid_phone,
    is_valid_state,
    is_valid_zip
)

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class CompanyValidation:

    REQUIRED_FIELDS = ("name", "address", "city", "state", "zip", "phone", "tax_id", "industry")

    FORMAT_CHECKS = {
        "state": is_valid_state,
        "zip": is_valid_zip,
        "phone": is_valid_phone,
        "tax_id": is_valid_ein,
        "industry": is_valid_industry
    }

    def validate(self, args, partial: bool = False):
        """
        Validate company payload.

        Args:
            args (dict): company fields
            partial (bool): PUT semantics, only the supplied fields are checked
        """

        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        errors = []

        for field in self.REQUIRED_FIELDS:
            if partial and field not in args:
                continue

            value = args.get(field)
            if value in (None, ""):
                errors.append({"field": field, "message": messages.ERROR["FIELD_REQUIRED"].format(field)})
                continue

            check = self.FORMAT_CHECKS.get(field)
            if check and not check(str(value)):
                errors.append({"field": field, "message": messages.ERROR["INVALID_FIELD"].format(field)})

        if args.get("employee_count") not in (None, ""):
            try:
                if int(args["employee_count"]) < 0:
                    raise ValueError
            except (TypeError, ValueError):
                errors.append({
                    "field": "employee_count",
                    "message": messages.ERROR["INVALID_FIELD"].format("employee_count")
                })

        if args.get("effective_date") and not is_valid_date(args["effective_date"]):
            errors.append({
                "field": "effective_date",
                "message": messages.ERROR["INVALID_FIELD"].format("effective_date")
            })

        if errors:
            raise ValidationException(
                message = messages.ERROR["VALIDATION_FAILED"],
                details = errors
            )

        return True
