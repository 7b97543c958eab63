"""
Model: Document
Table: documents

Supporting documents uploaded for a company (DE-9C, business license, ...).
The `type` is what the document rules match against.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class Document(db.Model):
    """ An uploaded company document... """

    # Table Name
    __tablename__ = "documents"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    company_id = db.Column(
        db.Integer,
        db.ForeignKey("companies.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    name = db.Column(db.String(255), nullable = False)

    type = db.Column(
        db.String(100),
        nullable = False,
        doc = "Requirement type, e.g. DE9C / Business License / Articles of Incorporation"
    )

    path = db.Column(
        db.String(500),
        nullable = False,
        doc = "Storage key on the configured file storage backend."
    )

    content_type = db.Column(db.String(100), nullable = True)
    size_bytes = db.Column(db.Integer, nullable = True)

    uploaded_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    company = db.relationship("Company", back_populates = "documents")


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "company_id": self.company_id,
            "name": self.name,
            "type": self.type,
            "content_type": self.content_type,
            "size_bytes": self.size_bytes,
            "uploaded_at": format_datetime(self.uploaded_at)
        }


    def __repr__(self):
        return f"<Document {self.name}>"
