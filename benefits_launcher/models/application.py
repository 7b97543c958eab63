"""
Model: Application
Table: applications

Enrollment application of a company. Tracks which wizard steps are
complete and where the employer currently is; one per company.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class Application(db.Model):
    """ A company's enrollment application... """

    # Table Name
    __tablename__ = "applications"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    company_id = db.Column(
        db.Integer,
        db.ForeignKey("companies.id", ondelete = "CASCADE"),
        nullable = False,
        unique = True,
        index = True
    )

    initiator_id = db.Column(
        db.Integer,
        db.ForeignKey("application_initiators.id"),
        nullable = True
    )

    status = db.Column(
        db.String(20),
        nullable = False,
        default = "in_progress",
        doc = "in_progress / pending_review / submitted / approved / rejected"
    )

    selected_carrier = db.Column(db.String(100), nullable = True)

    signature = db.Column(
        db.Text,
        nullable = True,
        doc = "Signature payload captured on the review step (typed name or data URL)."
    )

    submitted_at = db.Column(db.DateTime(timezone = True), nullable = True)

    completed_steps = db.Column(
        db.JSON,
        nullable = False,
        default = lambda: ["company"]
    )

    current_step = db.Column(db.String(50), nullable = False, default = "company")

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

    company = db.relationship("Company", back_populates = "application")
    initiator = db.relationship("ApplicationInitiator")


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "company_id": self.company_id,
            "initiator_id": self.initiator_id,
            "status": self.status,
            "selected_carrier": self.selected_carrier,
            "signed": bool(self.signature),
            "submitted_at": format_datetime(self.submitted_at),
            "completed_steps": list(self.completed_steps or []),
            "current_step": self.current_step,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at)
        }


    def __repr__(self):
        return f"<Application company={self.company_id} {self.status}>"
