"""
Employee Validation

Used for single employee writes and for every census row.
"""

# Python Packages
from datetime import date

# Helpers
from ...util.validators import (
    is_valid_email,
    is_valid_phone,
    is_valid_ssn,
    is_valid_state,
    is_valid_zip,
    parse_date
)

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class EmployeeValidation:

    REQUIRED_FIELDS = ("first_name", "last_name", "dob", "ssn", "address", "city", "state", "zip")


    def collect_errors(self, args: dict, partial: bool = False) -> list:
        """
        All problems with one employee record, as {field, message} dicts
        """

        errors = []

        for field in self.REQUIRED_FIELDS:
            if partial and field not in args:
                continue
            if args.get(field) in (None, ""):
                errors.append({"field": field, "message": messages.ERROR["FIELD_REQUIRED"].format(field)})

        if args.get("dob") not in (None, ""):
            dob = parse_date(args["dob"])
            if not dob or dob > date.today():
                errors.append({"field": "dob", "message": messages.ERROR["INVALID_FIELD"].format("dob")})

        checks = (
            ("ssn", is_valid_ssn),
            ("state", is_valid_state),
            ("zip", is_valid_zip),
            ("email", is_valid_email),
            ("phone", is_valid_phone)
        )
        for field, check in checks:
            value = args.get(field)
            if value not in (None, "") and not check(str(value)):
                errors.append({"field": field, "message": messages.ERROR["INVALID_FIELD"].format(field)})

        return errors


    def validate(self, args, partial: bool = False):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        errors = self.collect_errors(args, partial = partial)
        if errors:
            raise ValidationException(message = messages.ERROR["VALIDATION_FAILED"], details = errors)

        return True
