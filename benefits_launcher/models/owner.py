"""
Model: Owner
Table: owners

Business owner of a company. Percentages across one company total 100.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class Owner(db.Model):

    # Table Name
    __tablename__ = "owners"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    company_id = db.Column(
        db.Integer,
        db.ForeignKey("companies.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    first_name = db.Column(db.String(100), nullable = False)
    last_name = db.Column(db.String(100), nullable = False)
    title = db.Column(db.String(100), nullable = False)
    ownership_percentage = db.Column(db.Integer, nullable = False)
    email = db.Column(db.String(255), nullable = False)
    phone = db.Column(db.String(20), nullable = False)
    is_eligible_for_coverage = db.Column(db.Boolean, nullable = False, default = False)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    company = db.relationship("Company", back_populates = "owners")


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "company_id": self.company_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "title": self.title,
            "ownership_percentage": self.ownership_percentage,
            "email": self.email,
            "phone": self.phone,
            "is_eligible_for_coverage": self.is_eligible_for_coverage,
            "created_at": format_datetime(self.created_at)
        }


    def __repr__(self):
        return f"<Owner {self.first_name} {self.last_name} {self.ownership_percentage}%>"
