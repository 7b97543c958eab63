"""
Plan Upload Validation
"""

# Constants
from ...base import constants

# Helpers
from ...util.uploads import validate_upload

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class PlanUploadValidation:

    def validate(self, args):
        validate_upload(args.get("plan_file"), constants.PLAN_FILE_EXTENSIONS)

        if not args.get("carrier"):
            raise ValidationException(message = messages.ERROR["CARRIER_REQUIRED"])

        plan_year = args.get("plan_year")
        if plan_year and not str(plan_year).isdigit():
            raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format("plan_year"))

        return True
