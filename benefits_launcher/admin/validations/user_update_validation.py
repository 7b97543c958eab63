"""
Admin User Update Validation
"""

# Constants
from ...base import constants

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class UserUpdateValidation:

    def validate(self, args):
        if not args or not any(field in args for field in ("active", "role")):
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "active" in args and not isinstance(args["active"], bool):
            raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format("active"))

        if "role" in args and args["role"] not in constants.USER_ROLES:
            raise ValidationException(message = messages.ERROR["INVALID_ROLE"])

        return True
