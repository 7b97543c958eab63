"""
File: Plan Routes

Handles:
    - Plan catalogue and carriers
    - Plans selected by a company
    - Employer contributions
    - Admin plan upload
"""

# Flask Packages
from flask_restx import Namespace, Resource, fields

# Request
from .requests.plan_upload_request import PlanUploadRequest

# Validations
from .validations.plan_filter_validation import PlanFilterValidation
from .validations.company_plan_validation import CompanyPlanValidation
from .validations.contribution_validation import ContributionValidation
from .validations.plan_upload_validation import PlanUploadValidation

# Controller
from .controller import PlanController

# Helpers
from ..util.access import AccessControl
from ..util.request_data import get_json_body, get_query_args

# App Messages
from ..util import messages

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
plan_namespace = Namespace('plans', path = '/', description = 'Plan Catalogue and Contribution APIs')


company_plan_model = plan_namespace.model('CompanyPlanSelection', {
    'plan_id': fields.Integer(required = True)
})

contribution_model = plan_namespace.model('Contribution', {
    'plan_id': fields.Integer(required = True),
    'employee_contribution': fields.Integer(required = True, description = 'Percent, at least 50'),
    'dependent_contribution': fields.Integer(required = True, description = 'Percent 0-100')
})





@plan_namespace.route('/plans')
class Plans(Resource):

    @plan_namespace.doc(params = {
        'carrier': 'Carrier name',
        'coverage_date': 'YYYY-MM-DD, plans effective on that date',
        'metal_tier': 'Bronze / Silver / Gold / Platinum',
        'type': 'PPO / HMO / EPO / HSA'
    })
    def get(self):
        """
        Plan catalogue with optional filters
        """

        try:
            AccessControl.require_user()

            filters = get_query_args("carrier", "coverage_date", "metal_tier", "type")
            coverage_date = PlanFilterValidation().validate(filters)

            result = PlanController().list_plans(filters, coverage_date)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@plan_namespace.route('/plans/carriers')
class PlanCarriers(Resource):

    def get(self):
        """
        Distinct carriers in the catalogue
        """

        try:
            AccessControl.require_user()
            result = PlanController().list_carriers()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@plan_namespace.route('/companies/<int:company_id>/plans')
class CompanyPlans(Resource):

    def get(self, company_id):
        """
        Plans selected by the company
        """

        try:
            AccessControl.require_company(company_id)
            result = PlanController().list_company_plans(company_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @plan_namespace.expect(company_plan_model)
    def post(self, company_id):
        """
        Select a plan for the company (409 when already selected)
        """

        try:
            AccessControl.require_company(company_id)

            args = get_json_body()
            CompanyPlanValidation().validate(args)

            result = PlanController().select_plan(company_id, args["plan_id"])

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@plan_namespace.route('/companies/<int:company_id>/plans/<int:plan_id>')
class CompanyPlanDetail(Resource):

    def delete(self, company_id, plan_id):
        """
        Remove a selected plan and its contribution
        """

        try:
            user, _ = AccessControl.require_company(company_id)
            result = PlanController().remove_plan(user, company_id, plan_id)

            return {
                "status": "success",
                "message": messages.SUCCESS["COMPANY_PLAN_DELETE_SUCCESS"],
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@plan_namespace.route('/companies/<int:company_id>/contributions')
class CompanyContributions(Resource):

    def get(self, company_id):
        """
        Contributions of the company, one per selected plan
        """

        try:
            AccessControl.require_company(company_id)
            result = PlanController().list_contributions(company_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @plan_namespace.expect(contribution_model)
    def post(self, company_id):
        """
        Create or update the contribution for a selected plan
        """

        try:
            AccessControl.require_company(company_id)

            args = get_json_body()
            ContributionValidation().validate(args)

            result, created = PlanController().save_contribution(company_id, args)

            return {
                "status": "success",
                "data": result
            }, 201 if created else 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@plan_namespace.route('/admin/plans/upload')
class AdminPlanUpload(Resource):

    @PlanUploadRequest.apply(plan_namespace)
    def post(self):
        """
        Import a carrier plan file (admin only)

        - Missing columns take defaults
        - Plans already in the catalogue (same name and carrier) are skipped
        """

        try:
            user = AccessControl.require_admin()

            args = PlanUploadRequest.get_data()
            PlanUploadValidation().validate(args)

            result = PlanController().upload_plans(user, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
