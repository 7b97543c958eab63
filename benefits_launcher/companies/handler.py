"""
File: Company Routes

Handles:
    - Company create / list / get / update
    - Owners (add one, replace all)
    - Employees and census upload
    - Coverage information
"""

# Flask Packages
from flask_restx import Namespace, Resource, fields

# Request
from .requests.census_upload_request import CensusUploadRequest

# Validations
from .validations.company_validation import CompanyValidation
from .validations.owner_validation import OwnerValidation
from .validations.employee_validation import EmployeeValidation
from .validations.coverage_validation import CoverageValidation

# Controller
from .controller import CompanyController

# Constants
from ..base import constants

# Helpers
from ..util.access import AccessControl
from ..util.request_data import get_json_body
from ..util.uploads import validate_upload

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
company_namespace = Namespace('companies', description = 'Company, Owner, Employee and Coverage APIs')


company_model = company_namespace.model('Company', {
    'name': fields.String(required = True),
    'address': fields.String(required = True),
    'city': fields.String(required = True),
    'state': fields.String(required = True, description = 'Two-letter US state'),
    'zip': fields.String(required = True),
    'phone': fields.String(required = True),
    'tax_id': fields.String(required = True, description = 'EIN XX-XXXXXXX'),
    'industry': fields.String(required = True),
    'employee_count': fields.Integer,
    'effective_date': fields.String(description = 'YYYY-MM-DD'),
    'has_prior_coverage': fields.Boolean
})

owner_model = company_namespace.model('Owner', {
    'first_name': fields.String(required = True),
    'last_name': fields.String(required = True),
    'title': fields.String(required = True),
    'ownership_percentage': fields.Integer(required = True),
    'email': fields.String(required = True),
    'phone': fields.String(required = True),
    'is_eligible_for_coverage': fields.Boolean
})

owners_model = company_namespace.model('Owners', {
    'owners': fields.List(fields.Nested(owner_model), required = True)
})

employee_model = company_namespace.model('Employee', {
    'first_name': fields.String(required = True),
    'last_name': fields.String(required = True),
    'dob': fields.String(required = True),
    'ssn': fields.String(required = True),
    'address': fields.String(required = True),
    'city': fields.String(required = True),
    'state': fields.String(required = True),
    'zip': fields.String(required = True),
    'email': fields.String,
    'phone': fields.String
})





@company_namespace.route('')
class Companies(Resource):

    @company_namespace.expect(company_model)
    def post(self):
        """
        Create company and open its enrollment application
        """

        try:
            user = AccessControl.require_user()

            args = get_json_body()
            CompanyValidation().validate(args)

            result = CompanyController().create_company(user, args)

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
        Companies of the current user (admins: all)
        """

        try:
            user = AccessControl.require_user()
            result = CompanyController().list_companies(user)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@company_namespace.route('/<int:company_id>')
class CompanyDetail(Resource):

    def get(self, company_id):
        """
        Company with its application
        """

        try:
            _, company = AccessControl.require_company(company_id)
            result = CompanyController().get_company(company)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @company_namespace.expect(company_model)
    def put(self, company_id):
        """
        Partial update of company information
        """

        try:
            _, company = AccessControl.require_company(company_id)

            args = get_json_body()
            CompanyValidation().validate(args, partial = True)

            result = CompanyController().update_company(company, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@company_namespace.route('/<int:company_id>/owners')
class CompanyOwners(Resource):

    def get(self, company_id):
        """
        Owners of the company and their total percentage
        """

        try:
            AccessControl.require_company(company_id)
            result = CompanyController().list_owners(company_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @company_namespace.expect(owner_model)
    def post(self, company_id):
        """
        Add one owner; the running total may not exceed 100%
        """

        try:
            AccessControl.require_company(company_id)

            args = get_json_body()
            OwnerValidation().validate(args)

            result = CompanyController().add_owner(company_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @company_namespace.expect(owners_model)
    def put(self, company_id):
        """
        Replace all owners; percentages must total exactly 100%
        """

        try:
            AccessControl.require_company(company_id)

            owners = get_json_body().get("owners")
            OwnerValidation().validate_list(owners)

            result = CompanyController().replace_owners(company_id, owners)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@company_namespace.route('/<int:company_id>/employees')
class CompanyEmployees(Resource):

    def get(self, company_id):
        """
        Employees of the company (SSN masked to the last four digits)
        """

        try:
            AccessControl.require_company(company_id)
            result = CompanyController().list_employees(company_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @company_namespace.expect(employee_model)
    def post(self, company_id):
        """
        Add one employee
        """

        try:
            AccessControl.require_company(company_id)

            args = get_json_body()
            EmployeeValidation().validate(args)

            result = CompanyController().create_employee(company_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@company_namespace.route('/<int:company_id>/employees/<int:employee_id>')
class CompanyEmployee(Resource):

    @company_namespace.expect(employee_model)
    def put(self, company_id, employee_id):
        """
        Update one employee
        """

        try:
            AccessControl.require_company(company_id)

            args = get_json_body()
            EmployeeValidation().validate(args, partial = True)

            result = CompanyController().update_employee(company_id, employee_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, company_id, employee_id):
        """
        Delete one employee
        """

        try:
            AccessControl.require_company(company_id)
            result = CompanyController().delete_employee(company_id, employee_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@company_namespace.route('/<int:company_id>/employees/census')
class CompanyCensus(Resource):

    @CensusUploadRequest.apply(company_namespace)
    def post(self, company_id):
        """
        Bulk-create employees from a census spreadsheet

        - Valid rows are created
        - Invalid rows are reported as {row, errors}
        """

        try:
            AccessControl.require_company(company_id)

            args = CensusUploadRequest.get_data()
            validate_upload(args["file"], constants.CENSUS_EXTENSIONS)

            result = CompanyController().import_census(company_id, args["file"])

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@company_namespace.route('/<int:company_id>/coverage')
class CompanyCoverage(Resource):

    def get(self, company_id):
        """
        Coverage information of the company
        """

        try:
            AccessControl.require_company(company_id)
            result = CompanyController().get_coverage(company_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def post(self, company_id):
        """
        Create or update coverage information (COBRA type is derived)
        """

        try:
            AccessControl.require_company(company_id)

            args = get_json_body()
            CoverageValidation().validate(args)

            result, created = CompanyController().save_coverage(company_id, args)

            return {
                "status": "success",
                "data": result
            }, 201 if created else 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
