"""
File: PDF Routes

Handles:
    - Admin template upload / list / deactivate
    - Admin field mappings
    - PDF generation and generated PDF history
"""

# Python Packages
from io import BytesIO

# Flask Packages
from flask import send_file
from flask_restx import Namespace, Resource, fields

# Request
from .requests.template_upload_request import TemplateUploadRequest

# Validations
from .validations.template_upload_validation import TemplateUploadValidation
from .validations.mapping_validation import MappingValidation
from .validations.generate_validation import GenerateValidation

# Controller
from .controller import PdfController

# Helpers
from ..util.access import AccessControl
from ..util.request_data import get_json_body

# App Messages
from ..util import messages

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
pdf_namespace = Namespace('pdfs', path = '/', description = 'PDF Template and Generation APIs')


mapping_model = pdf_namespace.model('PdfFieldMapping', {
    'field_name': fields.String(required = True, description = 'Form field name inside the PDF'),
    'data_source': fields.String(required = True, description = 'company / owner / application / broker / initiator / coverage'),
    'data_field': fields.String(required = True),
    'field_type': fields.String(description = 'text / signature / checkbox / date'),
    'page_number': fields.Integer,
    'x_position': fields.Integer,
    'y_position': fields.Integer,
    'width': fields.Integer,
    'height': fields.Integer
})

generate_model = pdf_namespace.model('PdfGenerate', {
    'template_id': fields.Integer(required = True),
    'company_id': fields.Integer(required = True),
    'process_async': fields.Boolean(default = False)
})





@pdf_namespace.route('/admin/pdf-templates')
class AdminPdfTemplates(Resource):

    def get(self):
        """
        All templates with their mapping counts (admin only)
        """

        try:
            AccessControl.require_admin()
            result = PdfController().list_templates()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@pdf_namespace.route('/admin/pdf-templates/upload')
class AdminPdfTemplateUpload(Resource):

    @TemplateUploadRequest.apply(pdf_namespace)
    def post(self):
        """
        Upload a fillable carrier PDF; its form fields are returned
        """

        try:
            user = AccessControl.require_admin()

            args = TemplateUploadRequest.get_data()
            TemplateUploadValidation().validate(args)

            result = PdfController().upload_template(user, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@pdf_namespace.route('/admin/pdf-templates/<int:template_id>')
class AdminPdfTemplate(Resource):

    def delete(self, template_id):
        """
        Deactivate a template (admin only)
        """

        try:
            AccessControl.require_admin()
            result = PdfController().deactivate_template(template_id)

            return {
                "status": "success",
                "message": messages.SUCCESS["TEMPLATE_DEACTIVATED"],
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@pdf_namespace.route('/admin/pdf-templates/<int:template_id>/mappings')
class AdminPdfMappings(Resource):

    def get(self, template_id):
        try:
            AccessControl.require_admin()
            result = PdfController().list_mappings(template_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @pdf_namespace.expect(mapping_model)
    def post(self, template_id):
        """
        Bind a form field to an enrollment data field
        """

        try:
            AccessControl.require_admin()

            args = get_json_body()
            MappingValidation().validate(args)

            result = PdfController().create_mapping(template_id, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@pdf_namespace.route('/admin/pdf-templates/mappings/<int:mapping_id>')
class AdminPdfMapping(Resource):

    def delete(self, mapping_id):
        try:
            AccessControl.require_admin()
            result = PdfController().delete_mapping(mapping_id)

            return {
                "status": "success",
                "message": messages.SUCCESS["MAPPING_DELETE_SUCCESS"],
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@pdf_namespace.route('/pdf-templates')
class PdfTemplates(Resource):

    def get(self):
        """
        Active templates available for generation
        """

        try:
            AccessControl.require_user()
            result = PdfController().list_templates(active_only = True)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@pdf_namespace.route('/pdfs/generate')
class PdfGenerate(Resource):

    @pdf_namespace.expect(generate_model)
    def post(self):
        """
        Fill a template with a company's data

        - Sync: the PDF itself is returned
        - process_async: the pending record is returned (202)
        """

        try:
            AccessControl.require_user()

            args = get_json_body()
            GenerateValidation().validate(args)

            user, company = AccessControl.require_company(int(args["company_id"]))

            result = PdfController().generate(
                user,
                int(args["template_id"]),
                company,
                bool(args.get("process_async"))
            )

            if "content" not in result:
                return {
                    "status": "success",
                    "data": result
                }, 202

            return send_file(
                BytesIO(result["content"]),
                mimetype = "application/pdf",
                as_attachment = True,
                download_name = result["generated_pdf"]["file_name"]
            )

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@pdf_namespace.route('/pdfs/<int:generated_pdf_id>')
class GeneratedPdfFile(Resource):

    def get(self, generated_pdf_id):
        """
        Download a completed generated PDF
        """

        try:
            AccessControl.require_user()

            generated = PdfController().get_generated(generated_pdf_id)
            AccessControl.require_company(generated.company_id)

            content = PdfController().read_generated(generated)

            return send_file(
                BytesIO(content),
                mimetype = "application/pdf",
                as_attachment = True,
                download_name = generated.file_name
            )

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@pdf_namespace.route('/companies/<int:company_id>/generated-pdfs')
class CompanyGeneratedPdfs(Resource):

    def get(self, company_id):
        """
        PDFs generated for the company, newest first
        """

        try:
            AccessControl.require_company(company_id)
            result = PdfController().list_generated(company_id)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
