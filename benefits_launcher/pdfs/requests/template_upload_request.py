"""
PDF Template Upload Request Definition
Handles:
    - pdf (form-data)
    - carrier_name, form_name, version
"""

# Python Packages
from flask import request as flask_request

# Helpers
from ...util.request_data import get_form_value





class TemplateUploadRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.doc(consumes = ['multipart/form-data'])(func)
            func = namespace.param('pdf', 'Fillable carrier PDF', type = 'file', _in = 'formData', required = True)(func)
            func = namespace.param('carrier_name', 'Carrier name', _in = 'formData', required = True)(func)
            func = namespace.param('form_name', 'Form name', _in = 'formData', required = True)(func)
            func = namespace.param('version', 'Form version', _in = 'formData', required = True)(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        return {
            "pdf": flask_request.files.get("pdf"),
            "carrier_name": get_form_value("carrier_name"),
            "form_name": get_form_value("form_name"),
            "version": get_form_value("version")
        }
