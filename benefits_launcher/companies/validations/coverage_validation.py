"""
Coverage Validation
"""

# Models
from ...models.coverage_information import EMPLOYEE_COUNT_FIELDS

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class CoverageValidation:

    def validate(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        errors = []

        for field in EMPLOYEE_COUNT_FIELDS:
            value = args.get(field)
            if value in (None, ""):
                continue

            if isinstance(value, bool):
                valid = False
            else:
                try:
                    valid = int(value) >= 0
                except (TypeError, ValueError):
                    valid = False

            if not valid:
                errors.append({"field": field, "message": messages.ERROR["INVALID_FIELD"].format(field)})

        if errors:
            raise ValidationException(message = messages.ERROR["VALIDATION_FAILED"], details = errors)

        return True
