"""
Model: ApplicationInitiator
Table: application_initiators

The person filling out the enrollment application on the employer's behalf.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class ApplicationInitiator(db.Model):

    # Table Name
    __tablename__ = "application_initiators"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id"),
        nullable = False,
        index = True
    )

    first_name = db.Column(db.String(100), nullable = False)
    last_name = db.Column(db.String(100), nullable = False)
    email = db.Column(db.String(255), nullable = False)
    phone = db.Column(db.String(20), nullable = False)
    title = db.Column(db.String(100), nullable = False)
    relationship_to_company = db.Column(db.String(50), nullable = False)
    is_owner = db.Column(db.Boolean, nullable = False, default = False)
    is_authorized_contact = db.Column(db.Boolean, nullable = False, default = False)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "title": self.title,
            "relationship_to_company": self.relationship_to_company,
            "is_owner": self.is_owner,
            "is_authorized_contact": self.is_authorized_contact,
            "created_at": format_datetime(self.created_at)
        }


    def __repr__(self):
        return f"<ApplicationInitiator {self.first_name} {self.last_name}>"
