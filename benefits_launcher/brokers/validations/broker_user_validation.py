"""
Broker User Validation

Same account rules as registration, plus the role an agency owner may
hand out.
"""

# Constants
from ...base import constants

# Validations
from ...auth.validations.register_validation import RegisterValidation

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

ALLOWED_ROLES = (constants.ROLE_STAFF, constants.ROLE_EMPLOYER)





class BrokerUserValidation(RegisterValidation):

    def validate(self, args):
        super().validate(args)

        if args.get("role") not in ALLOWED_ROLES:
            raise ValidationException(message = messages.ERROR["INVALID_BROKER_USER_ROLE"])

        return True
