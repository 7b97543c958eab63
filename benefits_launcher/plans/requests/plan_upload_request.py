"""
Plan Upload Request Definition
Handles:
    - plan_file (form-data, .csv or .xlsx)
    - carrier
    - plan_year (optional)
"""

# Python Packages
from flask import request as flask_request

# Helpers
from ...util.request_data import get_form_value





class PlanUploadRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.doc(consumes = ['multipart/form-data'])(func)
            func = namespace.param('plan_file', 'Plan catalogue (.csv or .xlsx)', type = 'file', _in = 'formData', required = True)(func)
            func = namespace.param('carrier', 'Carrier name', _in = 'formData', required = True)(func)
            func = namespace.param('plan_year', 'Plan year (defaults to the current year)', _in = 'formData')(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        return {
            "plan_file": flask_request.files.get("plan_file"),
            "carrier": get_form_value("carrier"),
            "plan_year": get_form_value("plan_year")
        }
