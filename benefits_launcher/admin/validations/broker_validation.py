"""
Admin Broker Validation

Handles:
    - Agency creation (with optional owner account)
    - enabled / flagged toggles
"""

# Validations
from ...auth.validations.register_validation import RegisterValidation
from ...brokers.validations.broker_settings_validation import BrokerSettingsValidation

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class BrokerValidation:

    def validate_create(self, args):
        if not args or not args.get("agency_name"):
            raise ValidationException(message = messages.ERROR["FIELD_REQUIRED"].format("agency_name"))

        BrokerSettingsValidation().validate(args)

        owner = args.get("owner")
        if owner is not None:
            if not isinstance(owner, dict):
                raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format("owner"))

            RegisterValidation().validate(owner)

        return True


    def validate_toggle(self, args, field: str):
        if not args or not isinstance(args.get(field), bool):
            raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format(field))

        return True
