"""
PDF Controller

Handles:
    - Orchestration between handler and the template, mapping and
      generation services
"""

# Services
from .services.template_service import TemplateService
from .services.mapping_service import MappingService
from .services.pdf_generation_service import PdfGenerationService





class PdfController:

    # Templates

    def list_templates(self, active_only: bool = False) -> list:
        return TemplateService().list_templates(active_only)


    def upload_template(self, user, args: dict) -> dict:
        """
        Store a template PDF

        Args:
            user (User): the admin
            args (dict): pdf, carrier_name, form_name, version

        Returns:
            dict: {template, detected_fields}
        """

        return TemplateService().upload_template(user, args["pdf"], args)


    def deactivate_template(self, template_id: int) -> dict:
        return TemplateService().deactivate_template(template_id)


    # Mappings

    def list_mappings(self, template_id: int) -> list:
        return MappingService().list_mappings(template_id)


    def create_mapping(self, template_id: int, args: dict) -> dict:
        return MappingService().create_mapping(template_id, args)


    def delete_mapping(self, mapping_id: int) -> dict:
        return MappingService().delete_mapping(mapping_id)


    # Generation

    def generate(self, user, template_id: int, company, process_async: bool) -> dict:
        return PdfGenerationService().generate(user, template_id, company, process_async)


    def list_generated(self, company_id: int) -> list:
        return PdfGenerationService().list_generated(company_id)


    def get_generated(self, generated_pdf_id: int):
        return PdfGenerationService().get_generated(generated_pdf_id)


    def read_generated(self, generated) -> bytes:
        return PdfGenerationService().read_generated(generated)
