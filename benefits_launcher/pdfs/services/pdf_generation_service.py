"""
PDF Generation Service

Handles:
    - Fill a carrier template with a company's enrollment data
    - Store the result and record a GeneratedPdf
    - Queue the work on Celery when asked to
    - Generated PDFs of a company
"""

# Python Packages
import logging
import re
from io import BytesIO
from datetime import datetime, timezone

# Database
from ...config.database import db

# Models
from ...models.company import Company
from ...models.generated_pdf import GeneratedPdf

# Vendors
from ...vendors import FileStorage

# Services
from .template_service import TemplateService
from .pdf_data_service import build_context, resolve_values
from .pdf_form_service import fill_form

# Helpers
from ...util import audit

# Exceptions
from ...util.exceptions import AppException, NotFoundException, ServiceException, ValidationException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)

STATUS_PENDING = "pending"
STATUS_COMPLETED = "completed"
STATUS_FAILED = "failed"





def output_file_name(template, company) -> str:
    """ <carrier>_<form>_<company>_<UTC timestamp>.pdf, filesystem safe... """

    stamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    parts = [template.carrier_name, template.form_name, company.name, stamp]
    return "_".join(re.sub(r"[^A-Za-z0-9]+", "-", part).strip("-") for part in parts) + ".pdf"



class PdfGenerationService:

    def _mark_failed(self, generated: GeneratedPdf):
        db.session.rollback()

        generated.status = STATUS_FAILED
        db.session.commit()

        logger.error(
            "PDF generation failed for %s", generated.id,
            exc_info = True, extra = {"component": "pdfs"}
        )


    def create_request(self, user, template_id: int, company: Company) -> GeneratedPdf:
        """
        Record a pending generation for an active template
        """

        template = TemplateService().get_template(template_id)

        if not template.is_active:
            raise ValidationException(message = messages.ERROR["PDF_TEMPLATE_INACTIVE"])

        generated = GeneratedPdf(
            template_id = template.id,
            company_id = company.id,
            application_id = company.application.id if company.application else None,
            file_name = output_file_name(template, company),
            file_path = "",
            generated_by = user.id,
            status = STATUS_PENDING
        )
        db.session.add(generated)
        db.session.commit()

        return generated


    def render(self, generated_pdf_id: int) -> bytes:
        """
        Fill, store and complete a pending GeneratedPdf

        Returns:
            bytes: the filled PDF

        Raises:
            ServiceException: generation failed (record marked failed)
        """

        generated = db.session.get(GeneratedPdf, generated_pdf_id)

        if not generated:
            raise NotFoundException(messages.ERROR["GENERATED_PDF_NOT_FOUND"])

        template = generated.template
        company = db.session.get(Company, generated.company_id)
        storage = FileStorage()

        try:
            context = build_context(company)
            values = resolve_values(template.mappings, context)
            checkboxes = {mapping.field_name for mapping in template.mappings if mapping.field_type == "checkbox"}

            content = fill_form(storage.read_file(template.file_path), values, checkboxes)

            key = f"companies/{company.id}/generated/{generated.file_name}"
            storage.upload_file(BytesIO(content), key)

            generated.file_path = key
            generated.status = STATUS_COMPLETED

            audit.record(
                generated.generated_by, audit.PDF_GENERATE, audit.ENTITY_PDF, generated.id,
                f"Generated {template.carrier_name} {template.form_name} for company {company.id}"
            )
            db.session.commit()

        except AppException:
            self._mark_failed(generated)
            raise

        except Exception as errors:
            self._mark_failed(generated)

            raise ServiceException(
                error_code = "PDF_GENERATION_FAILED",
                message = messages.ERROR["PDF_GENERATION_FAILED"],
                details = str(errors)
            )

        logger.info("PDF generated: %s", generated.file_name, extra = {"component": "pdfs"})
        return content


    def generate(self, user, template_id: int, company: Company, process_async: bool = False) -> dict:
        """
        Returns:
            dict: {generated_pdf, content?, task_id?}
        """

        generated = self.create_request(user, template_id, company)

        if process_async:
            # Imported here so the task module can import this service
            from ..tasks.pdf_tasks import generate_pdf_task

            task = generate_pdf_task.delay(generated.id)
            logger.info("PDF generation queued: %s", generated.id, extra = {"user": user.id, "component": "pdfs"})

            return {
                "generated_pdf": generated.to_dict(),
                "task_id": task.id
            }

        content = self.render(generated.id)

        return {
            "generated_pdf": generated.to_dict(),
            "content": content
        }


    def list_generated(self, company_id: int) -> list:
        rows = (
            GeneratedPdf.query
            .filter_by(company_id = company_id)
            .order_by(GeneratedPdf.generated_at.desc(), GeneratedPdf.id.desc())
            .all()
        )
        return [
            dict(row.to_dict(), carrier_name = row.template.carrier_name, form_name = row.template.form_name)
            for row in rows
        ]


    def get_generated(self, generated_pdf_id: int) -> GeneratedPdf:
        generated = db.session.get(GeneratedPdf, generated_pdf_id)

        if not generated:
            raise NotFoundException(messages.ERROR["GENERATED_PDF_NOT_FOUND"])

        return generated


    def read_generated(self, generated: GeneratedPdf) -> bytes:
        if generated.status != STATUS_COMPLETED or not generated.file_path:
            raise ValidationException(message = messages.ERROR["GENERATED_PDF_NOT_READY"])

        return FileStorage().read_file(generated.file_path)
