"""
Model: PdfFieldMapping
Table: pdf_field_mappings

Binds one form field of a template to a value from the enrollment data
(`data_source`.`data_field`).
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db





DATA_SOURCES = ("company", "owner", "application", "broker", "initiator", "coverage")
FIELD_TYPES = ("text", "signature", "checkbox", "date")



class PdfFieldMapping(db.Model):

    # Table Name
    __tablename__ = "pdf_field_mappings"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    template_id = db.Column(
        db.Integer,
        db.ForeignKey("pdf_templates.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    field_name = db.Column(db.String(255), nullable = False, doc = "Form field name inside the PDF.")
    data_source = db.Column(db.String(20), nullable = False)
    data_field = db.Column(db.String(100), nullable = False)

    # Placement, as detected on upload
    page_number = db.Column(db.Integer, nullable = False, default = 1)
    x_position = db.Column(db.Integer, nullable = True)
    y_position = db.Column(db.Integer, nullable = True)
    width = db.Column(db.Integer, nullable = True)
    height = db.Column(db.Integer, nullable = True)

    field_type = db.Column(db.String(20), nullable = False, default = "text")

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    template = db.relationship("PdfTemplate", back_populates = "mappings")


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "template_id": self.template_id,
            "field_name": self.field_name,
            "data_source": self.data_source,
            "data_field": self.data_field,
            "page_number": self.page_number,
            "x_position": self.x_position,
            "y_position": self.y_position,
            "width": self.width,
            "height": self.height,
            "field_type": self.field_type
        }


    def __repr__(self):
        return f"<PdfFieldMapping {self.field_name} <- {self.data_source}.{self.data_field}>"
