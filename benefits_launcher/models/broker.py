"""
Model: Broker
Table: brokers

A broker agency tenant. Owns users, and through them, client companies.
Carries the white-label branding shown to the agency's clients.
"""

# Python Packages
import uuid

from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class Broker(db.Model):
    """ A broker agency... """

    # Table Name
    __tablename__ = "brokers"

    id = db.Column(
        db.String(36),
        primary_key = True,
        default = lambda: str(uuid.uuid4())
    )

    agency_name = db.Column(db.String(255), nullable = False)

    logo_url = db.Column(
        db.String(500),
        nullable = True,
        doc = "Storage path of the uploaded agency logo."
    )

    color_primary = db.Column(db.String(7), nullable = False, default = "#3b82f6")
    color_secondary = db.Column(db.String(7), nullable = False, default = "#1e40af")

    contact_email = db.Column(db.String(255), nullable = True)
    contact_phone = db.Column(db.String(20), nullable = True)

    enabled = db.Column(
        db.Boolean,
        nullable = False,
        default = True,
        doc = "Disabled agencies cannot register users or serve branding."
    )

    flagged_for_review = db.Column(db.Boolean, nullable = False, default = False)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now(),
        onupdate = func.now()
    )

    users = db.relationship("User", back_populates = "broker", lazy = "dynamic")


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "agency_name": self.agency_name,
            "logo_url": self.logo_url,
            "color_primary": self.color_primary,
            "color_secondary": self.color_secondary,
            "contact_email": self.contact_email,
            "contact_phone": self.contact_phone,
            "enabled": self.enabled,
            "flagged_for_review": self.flagged_for_review,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at)
        }


    def __repr__(self):
        return f"<Broker {self.agency_name}>"
