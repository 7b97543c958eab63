""" Contribution Model: employer share of premium per selected plan... """

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class Contribution(db.Model):
    # Table Name
    __tablename__ = "contributions"

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

    employee_contribution = db.Column(
        db.Integer,
        nullable = False
    )  # percent of the employee premium paid by the employer

    dependent_contribution = db.Column(
        db.Integer,
        nullable = False
    )  # percent of the dependent premium paid by the employer

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "company_id": self.company_id,
            "plan_id": self.plan_id,
            "employee_contribution": self.employee_contribution,
            "dependent_contribution": self.dependent_contribution,
            "created_at": format_datetime(self.created_at)
        }


    def __repr__(self):
        return f"<Contribution {self.company_id}:{self.plan_id}>"
