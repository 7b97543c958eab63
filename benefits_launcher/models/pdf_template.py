"""
Model: PdfTemplate
Table: pdf_templates

Carrier application form uploaded by an admin. Fillable form fields are
mapped to enrollment data through PdfFieldMapping rows.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class PdfTemplate(db.Model):
    """ A carrier PDF form... """

    # Table Name
    __tablename__ = "pdf_templates"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    carrier_name = db.Column(db.String(100), nullable = False, index = True)
    form_name = db.Column(db.String(255), nullable = False)
    version = db.Column(db.String(50), nullable = False)
    file_name = db.Column(db.String(255), nullable = False)

    file_path = db.Column(
        db.String(500),
        nullable = False,
        doc = "Storage key of the blank form."
    )

    uploaded_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable = False)

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    uploaded_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    mappings = db.relationship(
        "PdfFieldMapping",
        back_populates = "template",
        cascade = "all, delete-orphan",
        order_by = "PdfFieldMapping.id"
    )


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "carrier_name": self.carrier_name,
            "form_name": self.form_name,
            "version": self.version,
            "file_name": self.file_name,
            "uploaded_by": self.uploaded_by,
            "is_active": self.is_active,
            "uploaded_at": format_datetime(self.uploaded_at)
        }


    def __repr__(self):
        return f"<PdfTemplate {self.carrier_name} {self.form_name} v{self.version}>"
