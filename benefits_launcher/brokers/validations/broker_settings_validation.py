"""
Broker Settings Validation
"""

# Helpers
from ...util.validators import is_valid_email, is_valid_hex_color, is_valid_phone

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class BrokerSettingsValidation:

    def validate(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        errors = []

        if "agency_name" in args and not args.get("agency_name"):
            errors.append({"field": "agency_name", "message": messages.ERROR["FIELD_REQUIRED"].format("agency_name")})

        for field in ("color_primary", "color_secondary"):
            value = args.get(field)
            if value and not is_valid_hex_color(value):
                errors.append({"field": field, "message": messages.ERROR["INVALID_COLOR"].format(field)})

        if args.get("contact_email") and not is_valid_email(args["contact_email"]):
            errors.append({"field": "contact_email", "message": messages.ERROR["INVALID_FIELD"].format("contact_email")})

        if args.get("contact_phone") and not is_valid_phone(args["contact_phone"]):
            errors.append({"field": "contact_phone", "message": messages.ERROR["INVALID_FIELD"].format("contact_phone")})

        if errors:
            raise ValidationException(message = messages.ERROR["VALIDATION_FAILED"], details = errors)

        return True
