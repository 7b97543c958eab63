"""
PDF Generate Validation
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class GenerateValidation:

    def validate(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        for field in ("template_id", "company_id"):
            value = args.get(field)

            if value in (None, ""):
                raise ValidationException(message = messages.ERROR["FIELD_REQUIRED"].format(field))

            if isinstance(value, bool) or not str(value).isdigit():
                raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format(field))

        return True
