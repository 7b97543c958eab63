"""
Audit Log Filter Validation
"""

# Helpers
from ...util.validators import parse_date

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

MAX_LIMIT = 1000





class AuditLogFilterValidation:

    def validate(self, args) -> dict:
        """
        Returns:
            dict: filters with user_id / limit as ints and dates parsed
        """

        filters = dict(args)

        for field in ("user_id", "limit"):
            if field not in filters:
                continue

            if not filters[field].isdigit():
                raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format(field))

            filters[field] = int(filters[field])

        if "limit" in filters:
            filters["limit"] = max(1, min(filters["limit"], MAX_LIMIT))

        for field in ("from_date", "to_date"):
            if field not in filters:
                continue

            parsed = parse_date(filters[field])
            if not parsed:
                raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format(field))

            filters[field] = parsed

        return filters
