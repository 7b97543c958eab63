"""
File: Document Routes

Handles:
    - Upload / list company documents
    - Download / delete a document
    - Requirement validation and override
"""

# Python Packages
from io import BytesIO

# Flask Packages
from flask import send_file
from flask_restx import Namespace, Resource, fields

# Request
from .requests.upload_document_request import UploadDocumentRequest

# Validations
from .validations.upload_document_validation import UploadDocumentValidation
from .validations.override_validation import OverrideValidation
from .validations.document_check_validation import DocumentCheckValidation

# Controller
from .controller import DocumentController

# Helpers
from ..util.access import AccessControl
from ..util.request_data import get_json_body
from ..util.validators import whole_number

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
document_namespace = Namespace('documents', path = '/', description = 'Document Management APIs')


validate_model = document_namespace.model('DocumentValidation', {
    'company_id': fields.Integer(description = 'Derive the data from stored records'),
    'has_prior_coverage': fields.Boolean,
    'selected_carrier': fields.String,
    'employee_count': fields.Integer,
    'company_state': fields.String,
    'uploaded_documents': fields.List(fields.String)
})

override_model = document_namespace.model('DocumentOverride', {
    'company_id': fields.Integer(required = True),
    'reason': fields.String(required = True)
})





@document_namespace.route('/companies/<int:company_id>/documents')
class CompanyDocuments(Resource):

    @UploadDocumentRequest.apply(document_namespace)
    def post(self, company_id):
        """
        Upload a company document
        """

        try:
            _, company = AccessControl.require_company(company_id)

            args = UploadDocumentRequest.get_data()
            UploadDocumentValidation().validate(args)

            result = DocumentController().upload_document(company, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def get(self, company_id):
        """
        Documents uploaded for the company
        """

        try:
            AccessControl.require_company(company_id)
            result = DocumentController().list_documents(company_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/documents/<int:document_id>')
class DocumentDetail(Resource):

    def get(self, document_id):
        """
        Download the stored file
        """

        try:
            controller = DocumentController()
            document = controller.get_document(document_id)
            AccessControl.require_company(document.company_id)

            content = controller.read_document(document)

            return send_file(
                BytesIO(content),
                mimetype = document.content_type or "application/octet-stream",
                as_attachment = True,
                download_name = document.name
            )

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def delete(self, document_id):
        """
        Delete the document and its stored file
        """

        try:
            controller = DocumentController()
            document = controller.get_document(document_id)
            AccessControl.require_company(document.company_id)

            result = controller.delete_document(document)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/documents/validate')
class ValidateDocuments(Resource):

    @document_namespace.expect(validate_model)
    def post(self):
        """
        Evaluate document requirements

        - With company_id: from the company's stored documents and application
        - Otherwise: from the supplied company data
        """

        try:
            AccessControl.require_user()

            args = get_json_body()
            DocumentCheckValidation().validate(args)
            controller = DocumentController()

            if args.get("company_id"):
                _, company = AccessControl.require_company(whole_number(args["company_id"]))
                result = controller.validate_company(company)
            else:
                result = controller.validate_data(args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@document_namespace.route('/documents/override')
class OverrideDocuments(Resource):

    @document_namespace.expect(override_model)
    def post(self):
        """
        Override missing document requirements (admin, or broker users when enabled)
        """

        try:
            user = AccessControl.require_user()

            args = get_json_body()
            OverrideValidation().validate(args)

            _, company = AccessControl.require_company(int(args["company_id"]))
            result = DocumentController().override(user, company, args["reason"])

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
