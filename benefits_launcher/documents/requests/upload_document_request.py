"""
Upload Document Request Definition
Handles:
    - file (Document upload)
    - type (form-data, requirement type e.g. DE9C)
    - name (form-data, optional display name)
"""

# Python Packages
from flask import request as flask_request

# Helpers
from ...util.request_data import get_form_value





class UploadDocumentRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.doc(consumes = ['multipart/form-data'])(func)
            func = namespace.param(
                'file',
                'Document (pdf, doc, docx, jpg, png)',
                type = 'file',
                _in = 'formData',
                required = True
            )(func)

            func = namespace.param(
                'type',
                'Document type, e.g. DE9C or Business License',
                _in = 'formData',
                required = True
            )(func)

            func = namespace.param(
                'name',
                'Display name',
                _in = 'formData',
                required = False
            )(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        return {
            "file": flask_request.files.get("file"),
            "type": get_form_value("type"),
            "name": get_form_value("name")
        }
