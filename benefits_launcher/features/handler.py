"""
File: Feature Flag Routes
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Feature Flags
from ..base.feature_flags import get_feature_flags

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
feature_namespace = Namespace('feature-flags', description = 'Feature Flag APIs')





@feature_namespace.route('')
class FeatureFlags(Resource):

    def get(self):
        """
        Flag table with environment overrides applied
        """

        try:
            result = get_feature_flags()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
