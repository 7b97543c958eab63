"""
Document Service

Handles:
    - Upload a company document to file storage
    - List / read / delete documents
    - Assemble the company data the requirement rules evaluate
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.document import Document
from ...models.coverage_information import CoverageInformation

# Vendors
from ...vendors import FileStorage

# Services
from ...applications.services.progress_service import ProgressService

# Helpers
from ...util.uploads import file_size, unique_filename

# Exceptions
from ...util.exceptions import NotFoundException, ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





class DocumentService:

    def upload_document(self, company, args: dict) -> dict:
        """
        Store the file and record it

        Args:
            company (Company)
            args (dict):
                {
                    "file": FileStorage,
                    "type": str,
                    "name": str (optional)
                }
        """

        file = args["file"]
        key = f"companies/{company.id}/documents/{unique_filename(file.filename)}"
        size = file_size(file)
        storage = FileStorage()

        try:
            storage.upload_file(file.stream, key)

        except Exception as errors:
            raise ServiceException(
                error_code = "DOCUMENT_UPLOAD_FAILED",
                message = messages.ERROR["DOCUMENT_UPLOAD_FAILED"],
                details = str(errors)
            )

        try:
            document = Document(
                company_id = company.id,
                name = args.get("name") or file.filename,
                type = args["type"],
                path = key,
                content_type = file.mimetype,
                size_bytes = size
            )
            db.session.add(document)

            ProgressService().update_application_progress(company.id, "documents", commit = False)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()
            storage.delete_file(key)

            if isinstance(errors, ServiceException):
                raise

            raise ServiceException(
                error_code = "DOCUMENT_UPLOAD_FAILED",
                message = messages.ERROR["DOCUMENT_UPLOAD_FAILED"],
                details = str(errors)
            )

        logger.info("Document uploaded", extra = {"component": "documents", "path": key})
        return document.to_dict()


    def list_documents(self, company_id: int) -> dict:
        documents = Document.query.filter_by(company_id = company_id).order_by(Document.id).all()

        return {
            "total": len(documents),
            "documents": [document.to_dict() for document in documents]
        }


    def get_document(self, document_id: int) -> Document:
        document = db.session.get(Document, document_id)

        if not document:
            raise NotFoundException(messages.ERROR["DOCUMENT_NOT_FOUND"])

        return document


    def read_document(self, document: Document) -> bytes:
        try:
            return FileStorage().read_file(document.path)

        except Exception as errors:
            raise ServiceException(
                error_code = "STORAGE_READ_FAILED",
                message = messages.ERROR["STORAGE_READ_FAILED"],
                details = str(errors)
            )


    def delete_document(self, document: Document) -> dict:
        document_id = document.id
        key = document.path

        try:
            db.session.delete(document)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "DOCUMENT_DELETE_FAILED",
                message = messages.ERROR["DOCUMENT_DELETE_FAILED"],
                details = str(errors)
            )

        # The row is gone; a file left behind is only logged
        try:
            FileStorage().delete_file(key)

        except Exception:
            logger.exception("Stored document not removed", extra = {"component": "documents", "path": key})

        return {
            "document_id": document_id,
            "message": messages.SUCCESS["DOCUMENT_DELETE_SUCCESS"]
        }


    def build_company_data(self, company) -> dict:
        """
        Rule input derived from stored records: uploaded document types,
        prior coverage, head count and the carrier on the application.
        """

        employee_count = company.employee_count

        if employee_count is None:
            coverage = CoverageInformation.query.filter_by(company_id = company.id).first()
            if coverage:
                employee_count = (coverage.full_time_employees or 0) + (coverage.part_time_employees or 0)

        application = company.application

        return {
            "has_prior_coverage": bool(company.has_prior_coverage),
            "selected_carrier": application.selected_carrier if application else None,
            "employee_count": employee_count or 0,
            "company_state": company.state,
            "uploaded_documents": sorted({document.type for document in company.documents})
        }
