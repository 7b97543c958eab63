"""
Plan Filter Validation
"""

# Helpers
from ...util.validators import parse_date

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class PlanFilterValidation:

    def validate(self, args):
        """ Returns the parsed coverage date, or None when not filtered... """

        value = args.get("coverage_date")
        if not value:
            return None

        coverage_date = parse_date(value)
        if not coverage_date:
            raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format("coverage_date"))

        return coverage_date
