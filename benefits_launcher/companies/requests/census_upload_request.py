"""
Census Upload Request Definition
Handles:
    - file (form-data, .csv or .xlsx)
"""

# Python Packages
from flask import request as flask_request





class CensusUploadRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.doc(consumes = ['multipart/form-data'])(func)
            func = namespace.param(
                'file',
                'Employee census (.csv or .xlsx)',
                type = 'file',
                _in = 'formData',
                required = True
            )(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        return {
            "file": flask_request.files.get("file")
        }
