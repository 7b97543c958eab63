"""
File: Application Routes

Handles:
    - Application initiator
    - Company application
    - Status / step updates
    - Signature & submission
    - Progress summary
"""

# Flask Packages
from flask_restx import Namespace, Resource, fields

# Validations
from .validations.initiator_validation import InitiatorValidation
from .validations.application_validation import ApplicationValidation

# Controller
from .controller import ApplicationController

# Helpers
from ..util.access import AccessControl
from ..util.rate_limiter import rate_limiter
from ..util.request_data import get_json_body

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
application_namespace = Namespace('applications', path = '/', description = 'Enrollment Application APIs')


initiator_model = application_namespace.model('ApplicationInitiator', {
    'first_name': fields.String(required = True),
    'last_name': fields.String(required = True),
    'email': fields.String(required = True),
    'phone': fields.String(required = True),
    'title': fields.String(required = True),
    'relationship_to_company': fields.String(required = True),
    'is_owner': fields.Boolean,
    'is_authorized_contact': fields.Boolean
})

application_update_model = application_namespace.model('ApplicationUpdate', {
    'status': fields.String(enum = ["in_progress", "pending_review", "submitted", "approved", "rejected"]),
    'selected_carrier': fields.String,
    'current_step': fields.String,
    'completed_steps': fields.List(fields.String)
})

signature_model = application_namespace.model('ApplicationSignature', {
    'signature': fields.String(required = True)
})





@application_namespace.route('/applications/initiator')
class ApplicationInitiatorResource(Resource):

    @application_namespace.expect(initiator_model)
    def post(self):
        """
        Record the application initiator and open (or advance) the application
        """

        try:
            user = AccessControl.require_user()

            args = get_json_body()
            InitiatorValidation().validate(args)

            result = ApplicationController().create_initiator(user, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def get(self):
        """
        Latest initiator recorded by the current user
        """

        try:
            user = AccessControl.require_user()
            result = ApplicationController().get_initiator(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@application_namespace.route('/companies/<int:company_id>/application')
class CompanyApplication(Resource):

    def get(self, company_id):
        """
        Enrollment application of the company
        """

        try:
            AccessControl.require_company(company_id)
            result = ApplicationController().get_company_application(company_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@application_namespace.route('/applications/<int:application_id>')
class ApplicationDetail(Resource):

    @application_namespace.expect(application_update_model)
    def patch(self, application_id):
        """
        Update status, selected carrier or step tracking
        """

        try:
            controller = ApplicationController()
            user, application = controller.load_accessible(application_id)

            args = get_json_body()
            ApplicationValidation().validate_update(args)

            result = controller.update_application(user, application, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@application_namespace.route('/applications/<int:application_id>/signature')
class ApplicationSignature(Resource):

    @application_namespace.expect(signature_model)
    def post(self, application_id):
        """
        Sign and submit the application (rate limited)
        """

        try:
            rate_limiter.check("submission")

            controller = ApplicationController()
            user, application = controller.load_accessible(application_id)

            args = get_json_body()
            ApplicationValidation().validate_signature(args)

            result = controller.sign_application(user, application, args["signature"])

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@application_namespace.route('/applications/<int:application_id>/progress')
class ApplicationProgress(Resource):

    def get(self, application_id):
        """
        Completed / current / next step and percent complete
        """

        try:
            controller = ApplicationController()
            _, application = controller.load_accessible(application_id)

            result = controller.get_progress(application)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
