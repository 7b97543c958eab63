"""
Application Update & Signature Validation
"""

# Constants
from ...base import constants

# Config
from ..config.enrollment_steps import KNOWN_STEPS

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





def _is_known_step(step) -> bool:
    return isinstance(step, str) and step in KNOWN_STEPS



class ApplicationValidation:

    def validate_update(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        if "status" in args and args["status"] not in constants.APPLICATION_STATUSES:
            raise ValidationException(message = messages.ERROR["INVALID_STATUS"])

        if "current_step" in args and not _is_known_step(args["current_step"]):
            raise ValidationException(message = messages.ERROR["INVALID_STEP"].format(args["current_step"]))

        if "completed_steps" in args:
            steps = args["completed_steps"]

            if not isinstance(steps, list):
                raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format("completed_steps"))

            for step in steps:
                if not _is_known_step(step):
                    raise ValidationException(message = messages.ERROR["INVALID_STEP"].format(step))

        return True


    def validate_signature(self, args):
        signature = (args or {}).get("signature")

        if not signature or not str(signature).strip():
            raise ValidationException(message = messages.ERROR["SIGNATURE_REQUIRED"])

        return True
