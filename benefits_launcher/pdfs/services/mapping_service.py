"""
Field Mapping Service
"""

# Database
from ...config.database import db

# Models
from ...models.pdf_field_mapping import PdfFieldMapping

# Services
from .template_service import TemplateService

# Exceptions
from ...util.exceptions import NotFoundException, ServiceException

# App Messages
from ...util import messages

POSITION_FIELDS = ("x_position", "y_position", "width", "height")





class MappingService:

    def list_mappings(self, template_id: int) -> list:
        template = TemplateService().get_template(template_id)
        return [mapping.to_dict() for mapping in template.mappings]


    def create_mapping(self, template_id: int, args: dict) -> dict:
        TemplateService().get_template(template_id)

        mapping = PdfFieldMapping(
            template_id = template_id,
            field_name = args["field_name"],
            data_source = args["data_source"],
            data_field = args["data_field"],
            page_number = int(args.get("page_number") or 1),
            field_type = args.get("field_type") or "text"
        )

        for field in POSITION_FIELDS:
            if args.get(field) not in (None, ""):
                setattr(mapping, field, int(float(args[field])))

        try:
            db.session.add(mapping)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "MAPPING_SAVE_FAILED",
                message = messages.ERROR["MAPPING_SAVE_FAILED"],
                details = str(errors)
            )

        return mapping.to_dict()


    def delete_mapping(self, mapping_id: int) -> dict:
        mapping = db.session.get(PdfFieldMapping, mapping_id)

        if not mapping:
            raise NotFoundException(messages.ERROR["MAPPING_NOT_FOUND"])

        db.session.delete(mapping)
        db.session.commit()

        return {"id": mapping_id}
