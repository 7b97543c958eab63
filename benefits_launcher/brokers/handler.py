"""
File: Broker Routes

Handles:
    - Agency settings and logo (owner)
    - Public branding
    - Agency companies, applications and users
"""

# Python Packages
import mimetypes
from io import BytesIO

# Flask Packages
from flask import send_file
from flask_restx import Namespace, Resource, fields

# Request
from .requests.logo_upload_request import LogoUploadRequest

# Validations
from .validations.broker_settings_validation import BrokerSettingsValidation
from .validations.broker_user_validation import BrokerUserValidation

# Controller
from .controller import BrokerController

# Constants
from ..base import constants

# Helpers
from ..util.access import AccessControl
from ..util.request_data import get_json_body
from ..util.uploads import validate_upload

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
broker_namespace = Namespace('brokers', path = '/', description = 'Broker Agency and Branding APIs')


settings_model = broker_namespace.model('BrokerSettings', {
    'agency_name': fields.String,
    'color_primary': fields.String(description = 'Hex colour, e.g. #3b82f6'),
    'color_secondary': fields.String(description = 'Hex colour, e.g. #1e40af'),
    'contact_email': fields.String,
    'contact_phone': fields.String
})

broker_user_model = broker_namespace.model('BrokerUser', {
    'username': fields.String(required = True),
    'password': fields.String(required = True),
    'email': fields.String(required = True),
    'name': fields.String,
    'role': fields.String(required = True, description = 'staff / employer')
})





@broker_namespace.route('/broker/settings')
class BrokerSettings(Resource):

    def get(self):
        """
        Agency settings (owner only)
        """

        try:
            user = AccessControl.require_broker_owner()
            result = BrokerController().get_settings(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @broker_namespace.expect(settings_model)
    def put(self):
        """
        Update agency name, colours and contact (owner only)
        """

        try:
            user = AccessControl.require_broker_owner()

            args = get_json_body()
            BrokerSettingsValidation().validate(args)

            result = BrokerController().update_settings(user, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@broker_namespace.route('/broker/settings/logo')
class BrokerLogo(Resource):

    @LogoUploadRequest.apply(broker_namespace)
    def post(self):
        """
        Upload the agency logo (owner only)
        """

        try:
            user = AccessControl.require_broker_owner()

            args = LogoUploadRequest.get_data()
            validate_upload(args["logo"], constants.LOGO_EXTENSIONS)

            result = BrokerController().upload_logo(user, args["logo"])

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@broker_namespace.route('/branding/<string:broker_id>')
class Branding(Resource):

    def get(self, broker_id):
        """
        Public branding of an agency, defaults filled in
        """

        try:
            result = BrokerController().get_branding(broker_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@broker_namespace.route('/branding/<string:broker_id>/logo')
class BrandingLogo(Resource):

    def get(self, broker_id):
        """
        Agency logo file
        """

        try:
            content, file_name = BrokerController().read_logo(broker_id)

            return send_file(
                BytesIO(content),
                mimetype = mimetypes.guess_type(file_name)[0] or "application/octet-stream",
                download_name = file_name
            )

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@broker_namespace.route('/broker/companies')
class BrokerCompanies(Resource):

    def get(self):
        """
        Companies created by the agency's users (owner or staff)
        """

        try:
            user = AccessControl.require_broker()
            result = BrokerController().list_companies(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@broker_namespace.route('/broker/applications')
class BrokerApplications(Resource):

    def get(self):
        """
        Applications of the agency's companies (owner or staff)
        """

        try:
            user = AccessControl.require_broker()
            result = BrokerController().list_applications(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@broker_namespace.route('/broker/users')
class BrokerUsers(Resource):

    def get(self):
        """
        Users of the agency (owner only)
        """

        try:
            user = AccessControl.require_broker_owner()
            result = BrokerController().list_users(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @broker_namespace.expect(broker_user_model)
    def post(self):
        """
        Create a staff or employer user inside the agency (owner only)
        """

        try:
            user = AccessControl.require_broker_owner()

            args = get_json_body()
            BrokerUserValidation().validate(args)

            result = BrokerController().create_user(user, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
