""" Company Plan Model: plans selected by a company... """

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class CompanyPlan(db.Model):
    # Table Name
    __tablename__ = "company_plans"

    __table_args__ = (
        db.UniqueConstraint("company_id", "plan_id", name = "uq_company_plans_company_plan"),
    )

    # Columns
    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    company_id = db.Column(
        db.Integer,
        db.ForeignKey("companies.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    plan_id = db.Column(
        db.Integer,
        db.ForeignKey("plans.id"),
        nullable = False
    )

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    plan = db.relationship("Plan")


    def to_dict(self) -> dict:
        data = self.plan.to_dict() if self.plan else {}
        data.update({
            "company_plan_id": self.id,
            "company_id": self.company_id,
            "plan_id": self.plan_id,
            "selected_at": format_datetime(self.created_at)
        })
        return data


    def __repr__(self):
        return f"<CompanyPlan {self.company_id}:{self.plan_id}>"
