"""
Document Override Validation
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class OverrideValidation:

    def validate(self, args):
        if not args or not args.get("company_id"):
            raise ValidationException(message = messages.ERROR["FIELD_REQUIRED"].format("company_id"))

        try:
            int(args["company_id"])
        except (TypeError, ValueError):
            raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format("company_id"))

        if not args.get("reason"):
            raise ValidationException(message = messages.ERROR["OVERRIDE_REASON_REQUIRED"])

        return True
