"""
Document Controller

Handles:
    - Orchestration between handler, document service and requirement rules
"""

# Database
from ..config.database import db

# Services
from .services.document_service import DocumentService
from .services import document_rules_service

# Helpers
from ..util import audit

# Exceptions
from ..util.exceptions import ForbiddenException

# App Messages
from ..util import messages





class DocumentController:

    def __init__(self):
        """ Initialize controller with service instances... """

        self.document_service = DocumentService()


    def upload_document(self, company, args: dict) -> dict:
        return self.document_service.upload_document(company, args)


    def list_documents(self, company_id: int) -> dict:
        return self.document_service.list_documents(company_id)


    def get_document(self, document_id: int):
        return self.document_service.get_document(document_id)


    def read_document(self, document) -> bytes:
        return self.document_service.read_document(document)


    def delete_document(self, document) -> dict:
        return self.document_service.delete_document(document)


    def validate_company(self, company) -> dict:
        """ Requirement check against what is stored for the company... """

        company_data = self.document_service.build_company_data(company)
        result = document_rules_service.validate_documents(company_data)
        result["company_data"] = company_data
        return result


    def validate_data(self, company_data: dict) -> dict:
        """ Requirement check against caller-supplied company data... """

        return document_rules_service.validate_documents(company_data)


    def override(self, user, company, reason: str) -> dict:
        """
        Apply an override to the company's document requirements

        Raises:
            ForbiddenException: the role may not override
        """

        if not document_rules_service.can_override_validation(user.role):
            raise ForbiddenException(messages.ERROR["OVERRIDE_NOT_ALLOWED"])

        company_data = self.document_service.build_company_data(company)
        result = document_rules_service.validate_with_override(company_data, user.role, reason)

        audit.record(
            user.id,
            audit.DOCUMENT_OVERRIDE,
            audit.ENTITY_COMPANY,
            company.id,
            details = f"Document override by {user.role}: {reason}"
        )
        db.session.commit()

        result["message"] = messages.SUCCESS["DOCUMENT_OVERRIDE_SUCCESS"]
        return result
