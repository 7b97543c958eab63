"""
Owner Validation
"""

# Constants
from ...base import constants

# Helpers
from ...util.validators import is_valid_email, is_valid_percentage, is_valid_phone, whole_number

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class OwnerValidation:

    REQUIRED_FIELDS = ("first_name", "last_name", "title", "ownership_percentage", "email", "phone")


    def collect_errors(self, owner: dict, prefix: str = "") -> list:
        errors = []

        for field in self.REQUIRED_FIELDS:
            if owner.get(field) in (None, ""):
                errors.append({
                    "field": f"{prefix}{field}",
                    "message": messages.ERROR["FIELD_REQUIRED"].format(field)
                })

        percentage = owner.get("ownership_percentage")
        if percentage not in (None, "") and not is_valid_percentage(percentage):
            errors.append({
                "field": f"{prefix}ownership_percentage",
                "message": messages.ERROR["INVALID_PERCENTAGE"].format("ownership_percentage")
            })

        if owner.get("email") and not is_valid_email(owner["email"]):
            errors.append({"field": f"{prefix}email", "message": messages.ERROR["INVALID_FIELD"].format("email")})

        if owner.get("phone") and not is_valid_phone(owner["phone"]):
            errors.append({"field": f"{prefix}phone", "message": messages.ERROR["INVALID_FIELD"].format("phone")})

        return errors


    def validate(self, args):
        """ Single owner... """

        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        errors = self.collect_errors(args)
        if errors:
            raise ValidationException(message = messages.ERROR["VALIDATION_FAILED"], details = errors)

        return True


    def validate_list(self, owners):
        """ Full replacement list: every owner valid, percentages total exactly 100... """

        if not isinstance(owners, list) or not owners:
            raise ValidationException(message = messages.ERROR["OWNERS_REQUIRED"])

        errors = []
        for index, owner in enumerate(owners):
            if not isinstance(owner, dict):
                errors.append({"field": f"owners[{index}]", "message": messages.ERROR["INVALID_REQUEST"]})
                continue
            errors.extend(self.collect_errors(owner, prefix = f"owners[{index}]."))

        if errors:
            raise ValidationException(message = messages.ERROR["VALIDATION_FAILED"], details = errors)

        total = sum(whole_number(owner["ownership_percentage"]) for owner in owners)
        if total != constants.OWNERSHIP_TOTAL:
            raise ValidationException(message = messages.ERROR["OWNERSHIP_TOTAL_INVALID"].format(total))

        return True