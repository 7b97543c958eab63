"""
Logo Upload Request Definition
Handles:
    - logo (form-data, png / jpg / jpeg / svg)
"""

# Python Packages
from flask import request as flask_request





class LogoUploadRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.doc(consumes = ['multipart/form-data'])(func)
            func = namespace.param('logo', 'Agency logo', type = 'file', _in = 'formData', required = True)(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        return {
            "logo": flask_request.files.get("logo")
        }
