"""
PDF Template Upload Validation
"""

# Constants
from ...base import constants

# Helpers
from ...util.uploads import validate_upload

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

REQUIRED_FIELDS = ("carrier_name", "form_name", "version")





class TemplateUploadValidation:

    def validate(self, args):
        validate_upload(args.get("pdf"), constants.PDF_TEMPLATE_EXTENSIONS)

        errors = [
            {"field": field, "message": messages.ERROR["FIELD_REQUIRED"].format(field)}
            for field in REQUIRED_FIELDS
            if not args.get(field)
        ]

        if errors:
            raise ValidationException(message = messages.ERROR["MISSING_REQUIRED_FIELDS"], details = errors)

        return True
