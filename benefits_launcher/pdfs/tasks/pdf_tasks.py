"""
PDF Background Tasks
"""

# Python Packages
from celery import shared_task

# Services only (NO controller import)
from ..services.pdf_generation_service import PdfGenerationService

# Exceptions
from ...util.exceptions import AppException





@shared_task(bind = True, max_retries = 3)
def generate_pdf_task(self, generated_pdf_id: int):
    """
    Background task to fill and store a queued PDF.
    Application errors already marked the record failed and are final.
    """

    try:
        PdfGenerationService().render(generated_pdf_id)

    except AppException:
        raise

    except Exception as e:
        raise self.retry(exc = e, countdown = 10)
