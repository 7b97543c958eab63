"""
File: Auth Routes

Handles:
    - Register / Login / Logout
    - Current user
    - Username & email availability
    - Change password
"""

# Flask Packages
from flask_restx import Namespace, Resource, fields

# Validations
from .validations.register_validation import RegisterValidation
from .validations.login_validation import LoginValidation
from .validations.change_password_validation import ChangePasswordValidation

# Controller
from .controller import AuthController

# Helpers
from ..util.access import AccessControl
from ..util.rate_limiter import rate_limiter
from ..util.request_data import get_json_body

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
auth_namespace = Namespace('auth', description = 'Authentication APIs')


register_model = auth_namespace.model('Register', {
    'username': fields.String(required = True),
    'password': fields.String(required = True),
    'email': fields.String(required = True),
    'name': fields.String,
    'company_name': fields.String,
    'broker_id': fields.String
})

login_model = auth_namespace.model('Login', {
    'username': fields.String(required = True, description = 'Username or email'),
    'password': fields.String(required = True)
})

availability_model = auth_namespace.model('Availability', {
    'username': fields.String,
    'email': fields.String
})

change_password_model = auth_namespace.model('ChangePassword', {
    'current_password': fields.String(required = True),
    'new_password': fields.String(required = True)
})





@auth_namespace.route('/register')
class Register(Resource):

    @auth_namespace.expect(register_model)
    def post(self):
        """
        Register an employer account (rate limited)
        """

        try:
            rate_limiter.check("auth")

            args = get_json_body()
            RegisterValidation().validate(args)

            result = AuthController().register(args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@auth_namespace.route('/login')
class Login(Resource):

    @auth_namespace.expect(login_model)
    def post(self):
        """
        Log in with username (or email) and password (rate limited)
        """

        try:
            rate_limiter.check("auth")

            args = get_json_body()
            LoginValidation().validate(args)

            result = AuthController().login(args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@auth_namespace.route('/logout')
class Logout(Resource):

    def post(self):
        """
        End the current session
        """

        try:
            user = AccessControl.require_user()
            result = AuthController().logout(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@auth_namespace.route('/user')
class CurrentUser(Resource):

    def get(self):
        """
        Currently logged-in user
        """

        try:
            user = AccessControl.require_user()

            return {
                "status": "success",
                "data": user.to_dict()
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@auth_namespace.route('/check-availability')
class CheckAvailability(Resource):

    @auth_namespace.expect(availability_model)
    def post(self):
        """
        Check whether a username and/or email is still free
        """

        try:
            args = get_json_body()
            result = AuthController().check_availability(args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@auth_namespace.route('/change-password')
class ChangePassword(Resource):

    @auth_namespace.expect(change_password_model)
    def post(self):
        """
        Change the current user's password
        """

        try:
            user = AccessControl.require_user()

            args = get_json_body()
            ChangePasswordValidation().validate(args)

            result = AuthController().change_password(user, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
