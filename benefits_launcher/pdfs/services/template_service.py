"""
PDF Template Service

Handles:
    - Template list
    - Template upload (stored through the file storage vendor; form
      widgets detected and returned)
    - Deactivation
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.pdf_template import PdfTemplate

# Vendors
from ...vendors import FileStorage

# Services
from .pdf_form_service import detect_fields

# Helpers
from ...util.uploads import unique_filename

# Exceptions
from ...util.exceptions import NotFoundException, ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





class TemplateService:

    def get_template(self, template_id: int) -> PdfTemplate:
        template = db.session.get(PdfTemplate, template_id)

        if not template:
            raise NotFoundException(messages.ERROR["PDF_TEMPLATE_NOT_FOUND"])

        return template


    def list_templates(self, active_only: bool = False) -> list:
        query = PdfTemplate.query
        if active_only:
            query = query.filter_by(is_active = True)

        templates = query.order_by(PdfTemplate.carrier_name, PdfTemplate.form_name, PdfTemplate.id).all()

        return [
            dict(template.to_dict(), mapping_count = len(template.mappings))
            for template in templates
        ]


    def upload_template(self, user, file, args: dict) -> dict:
        """
        Store a template and report its form fields

        Returns:
            dict: {template, detected_fields}
        """

        content = file.read()
        detected_fields = detect_fields(content)

        file.stream.seek(0)
        storage = FileStorage()
        key = storage.upload_file(file.stream, f"pdf-templates/{unique_filename(file.filename)}")

        try:
            template = PdfTemplate(
                carrier_name = args["carrier_name"],
                form_name = args["form_name"],
                version = args["version"],
                file_name = file.filename,
                file_path = key,
                uploaded_by = user.id,
                is_active = True
            )
            db.session.add(template)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()
            storage.delete_file(key)

            raise ServiceException(
                error_code = "PDF_UPLOAD_FAILED",
                message = messages.ERROR["PDF_UPLOAD_FAILED"],
                details = str(errors)
            )

        logger.info(
            "PDF template uploaded with %s fields", len(detected_fields),
            extra = {"user": user.id, "component": "pdfs"}
        )

        return {
            "template": template.to_dict(),
            "detected_fields": detected_fields
        }


    def deactivate_template(self, template_id: int) -> dict:
        template = self.get_template(template_id)
        template.is_active = False
        db.session.commit()

        return template.to_dict()
