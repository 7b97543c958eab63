"""
Field Mapping Validation
"""

# Models
from ...models.pdf_field_mapping import DATA_SOURCES, FIELD_TYPES

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException

REQUIRED_FIELDS = ("field_name", "data_source", "data_field")
NUMERIC_FIELDS = ("page_number", "x_position", "y_position", "width", "height")





class MappingValidation:

    def validate(self, args):
        if not args:
            raise ValidationException(message = messages.ERROR["INVALID_REQUEST"])

        errors = []

        for field in REQUIRED_FIELDS:
            if not args.get(field):
                errors.append({"field": field, "message": messages.ERROR["FIELD_REQUIRED"].format(field)})

        data_source = args.get("data_source")
        if data_source and data_source not in DATA_SOURCES:
            errors.append({
                "field": "data_source",
                "message": messages.ERROR["INVALID_DATA_SOURCE"].format(", ".join(DATA_SOURCES))
            })

        field_type = args.get("field_type")
        if field_type and field_type not in FIELD_TYPES:
            errors.append({
                "field": "field_type",
                "message": messages.ERROR["INVALID_FIELD_TYPE"].format(", ".join(FIELD_TYPES))
            })

        for field in NUMERIC_FIELDS:
            value = args.get(field)
            if value in (None, ""):
                continue
            try:
                float(value)
            except (TypeError, ValueError):
                errors.append({"field": field, "message": messages.ERROR["INVALID_FIELD"].format(field)})

        if errors:
            raise ValidationException(message = messages.ERROR["VALIDATION_FAILED"], details = errors)

        return True
