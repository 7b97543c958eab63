"""
Register Validation
"""

# Helpers
from ...util.validators import is_strong_password, is_valid_email

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class RegisterValidation:

    REQUIRED_FIELDS = ("username", "password", "email")

    def validate(self, args):
        """
        Validate registration payload; every problem is reported at once
        """

        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        errors = []

        for field in self.REQUIRED_FIELDS:
            if not args.get(field):
                errors.append({
                    "field": field,
                    "message": messages.ERROR["FIELD_REQUIRED"].format(field)
                })

        username = args.get("username")
        if username and (len(username) < 3 or len(username) > 50):
            errors.append({"field": "username", "message": messages.ERROR["USERNAME_LENGTH"]})

        email = args.get("email")
        if email and not is_valid_email(email):
            errors.append({"field": "email", "message": messages.ERROR["INVALID_FIELD"].format("email")})

        password = args.get("password")
        if password and not is_strong_password(password):
            errors.append({"field": "password", "message": messages.ERROR["WEAK_PASSWORD"]})

        if errors:
            raise ValidationException(
                message = messages.ERROR["VALIDATION_FAILED"],
                details = errors
            )

        return True
