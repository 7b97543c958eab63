""" Generated PDF Model: a filled carrier form for one company... """

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class GeneratedPdf(db.Model):
    # Table Name
    __tablename__ = "generated_pdfs"

    # Columns
    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    template_id = db.Column(db.Integer, db.ForeignKey("pdf_templates.id"), nullable = False)

    company_id = db.Column(
        db.Integer,
        db.ForeignKey("companies.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    application_id = db.Column(db.Integer, db.ForeignKey("applications.id"), nullable = True)

    file_name = db.Column(db.String(255), nullable = False)
    file_path = db.Column(db.String(500), nullable = False, default = "")

    generated_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable = False)

    status = db.Column(
        db.String(20),
        nullable = False,
        default = "pending"
    )  # pending / completed / failed

    generated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    template = db.relationship("PdfTemplate")


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "template_id": self.template_id,
            "company_id": self.company_id,
            "application_id": self.application_id,
            "file_name": self.file_name,
            "generated_by": self.generated_by,
            "status": self.status,
            "generated_at": format_datetime(self.generated_at)
        }


    def __repr__(self):
        return f"<GeneratedPdf {self.file_name} {self.status}>"
