""" Request body helpers... """

# Flask Packages
from flask import request

# Helpers
from .validators import sanitize_payload, sanitize_text

# Passwords and signatures are compared or stored verbatim
RAW_FIELDS = {"password", "current_password", "new_password", "signature"}





def get_json_body() -> dict:
    """
    JSON body as a dict with every free-text value stripped of whitespace
    and HTML tags. A missing or non-object body comes back as {}.
    """

    data = request.get_json(silent = True)

    if not isinstance(data, dict):
        return {}

    return sanitize_payload(data, RAW_FIELDS)


def get_form_value(name: str, default = None):
    value = request.form.get(name, default)
    return sanitize_text(value) if value is not None else default


def get_query_args(*names) -> dict:
    """ Selected query-string values, blanks dropped... """

    args = {}
    for name in names:
        value = sanitize_text(request.args.get(name))
        if value:
            args[name] = value
    return args
