"""
Change Password Validation
"""

# Helpers
from ...util.validators import is_strong_password

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class ChangePasswordValidation:

    def validate(self, args):
        if not args or not args.get("current_password") or not args.get("new_password"):
            raise ValidationException(message = messages.ERROR["MISSING_REQUIRED_FIELDS"])

        if not is_strong_password(args["new_password"]):
            raise ValidationException(
                message = messages.ERROR["VALIDATION_FAILED"],
                details = [{"field": "new_password", "message": messages.ERROR["WEAK_PASSWORD"]}]
            )

        return True
