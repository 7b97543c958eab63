"""
Login Validation
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class LoginValidation:

    def validate(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if not args.get("username") or not args.get("password"):
            raise ValidationException(message = messages.ERROR["MISSING_REQUIRED_FIELDS"])

        return True
