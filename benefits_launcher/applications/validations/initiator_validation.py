"""
Application Initiator Validation
"""

# Helpers
from ...util.validators import is_valid_email, is_valid_phone

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class InitiatorValidation:

    REQUIRED_FIELDS = ("first_name", "last_name", "email", "phone", "title", "relationship_to_company")

    def validate(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        errors = [
            {"field": field, "message": messages.ERROR["FIELD_REQUIRED"].format(field)}
            for field in self.REQUIRED_FIELDS
            if not args.get(field)
        ]

        if args.get("email") and not is_valid_email(args["email"]):
            errors.append({"field": "email", "message": messages.ERROR["INVALID_FIELD"].format("email")})

        if args.get("phone") and not is_valid_phone(args["phone"]):
            errors.append({"field": "phone", "message": messages.ERROR["INVALID_FIELD"].format("phone")})

        if errors:
            raise ValidationException(message = messages.ERROR["VALIDATION_FAILED"], details = errors)

        return True
