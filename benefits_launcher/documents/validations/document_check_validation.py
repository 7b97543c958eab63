"""
Document Check Validation

Company data supplied to the requirement check, or a company_id to read it from.
"""

# Helpers
from ...util.validators import whole_number

# App Messages
from ...util import messages

# Exceptions
from ...util.exceptions import ValidationException





class DocumentCheckValidation:

    def validate(self, args):
        if args.get("company_id") not in (None, ""):
            if whole_number(args["company_id"]) is None:
                raise ValidationException(message = messages.ERROR["INVALID_FIELD"].format("company_id"))
            return True

        errors = []

        employee_count = args.get("employee_count")
        if employee_count is not None:
            number = whole_number(employee_count)
            if number is None or number < 0:
                errors.append({
                    "field": "employee_count",
                    "message": messages.ERROR["INVALID_FIELD"].format("employee_count")
                })

        uploaded = args.get("uploaded_documents")
        if uploaded is not None and (
            not isinstance(uploaded, list) or not all(isinstance(item, str) for item in uploaded)
        ):
            errors.append({
                "field": "uploaded_documents",
                "message": messages.ERROR["INVALID_FIELD"].format("uploaded_documents")
            })

        for field in ("has_prior_coverage",):
            if args.get(field) is not None and not isinstance(args[field], bool):
                errors.append({"field": field, "message": messages.ERROR["INVALID_FIELD"].format(field)})

        for field in ("selected_carrier", "company_state"):
            if args.get(field) is not None and not isinstance(args[field], str):
                errors.append({"field": field, "message": messages.ERROR["INVALID_FIELD"].format(field)})

        if errors:
            raise ValidationException(message = messages.ERROR["VALIDATION_FAILED"], details = errors)

        return True
