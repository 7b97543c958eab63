"""
Company Plan Validation
"""

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class CompanyPlanValidation:

    def validate(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        plan_id = args.get("plan_id")

        if plan_id in (None, ""):
            raise ValidationException(message = messages.ERROR["FIELD_REQUIRED"].format("plan_id"))

        if isinstance(plan_id, bool) or not str(plan_id).isdigit():
            raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format("plan_id"))

        return True
