"""
Model: CoverageInformation
Table: coverage_information

Benefit lines a company wants to offer, head counts, and the COBRA
regime that follows from its size history.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





BENEFIT_FIELDS = (
    # Core
    "medical", "dental", "vision", "life", "std", "ltd",
    # Voluntary
    "accident", "critical_illness", "pet", "identity_theft", "legal",
    # Company policy
    "pto", "sick_leave", "holidays", "remote_work",
    # Tax-advantaged and wellness
    "hsa", "fsa", "retirement_401k", "simple_ira", "eap", "gym_subsidy"
)

EMPLOYEE_COUNT_FIELDS = ("full_time_employees", "part_time_employees", "temporary_employees")

CARRIER_FIELDS = ("medical_carrier", "dental_carrier", "vision_carrier", "life_carrier")



class CoverageInformation(db.Model):
    """ Coverage selections for one company... """

    # Table Name
    __tablename__ = "coverage_information"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    company_id = db.Column(
        db.Integer,
        db.ForeignKey("companies.id", ondelete = "CASCADE"),
        nullable = False,
        unique = True,
        index = True
    )

    # Employee counts
    full_time_employees = db.Column(db.Integer, nullable = False, default = 0)
    part_time_employees = db.Column(db.Integer, nullable = False, default = 0)
    temporary_employees = db.Column(db.Integer, nullable = False, default = 0)

    # Core Benefits
    medical = db.Column(db.Boolean, nullable = False, default = False)
    dental = db.Column(db.Boolean, nullable = False, default = False)
    vision = db.Column(db.Boolean, nullable = False, default = False)
    life = db.Column(db.Boolean, nullable = False, default = False)
    std = db.Column(db.Boolean, nullable = False, default = False)
    ltd = db.Column(db.Boolean, nullable = False, default = False)

    # Voluntary Benefits
    accident = db.Column(db.Boolean, nullable = False, default = False)
    critical_illness = db.Column(db.Boolean, nullable = False, default = False)
    pet = db.Column(db.Boolean, nullable = False, default = False)
    identity_theft = db.Column(db.Boolean, nullable = False, default = False)
    legal = db.Column(db.Boolean, nullable = False, default = False)

    # Company Policy Benefits
    pto = db.Column(db.Boolean, nullable = False, default = False)
    sick_leave = db.Column(db.Boolean, nullable = False, default = False)
    holidays = db.Column(db.Boolean, nullable = False, default = False)
    remote_work = db.Column(db.Boolean, nullable = False, default = False)

    # Tax-Advantaged & Wellness
    hsa = db.Column(db.Boolean, nullable = False, default = False)
    fsa = db.Column(db.Boolean, nullable = False, default = False)
    retirement_401k = db.Column(db.Boolean, nullable = False, default = False)
    simple_ira = db.Column(db.Boolean, nullable = False, default = False)
    eap = db.Column(db.Boolean, nullable = False, default = False)
    gym_subsidy = db.Column(db.Boolean, nullable = False, default = False)

    # COBRA
    had_20_plus_employees_6_months = db.Column(db.Boolean, nullable = False, default = False)

    cobra_type = db.Column(
        db.String(20),
        nullable = True,
        doc = "federal / cal-cobra, derived from had_20_plus_employees_6_months"
    )

    # Carrier selections
    medical_carrier = db.Column(db.String(100), nullable = True)
    dental_carrier = db.Column(db.String(100), nullable = True)
    vision_carrier = db.Column(db.String(100), nullable = True)
    life_carrier = db.Column(db.String(100), nullable = True)

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


    def to_dict(self) -> dict:
        data = {"id": self.id, "company_id": self.company_id}

        for field in EMPLOYEE_COUNT_FIELDS + BENEFIT_FIELDS + CARRIER_FIELDS:
            data[field] = getattr(self, field)

        data.update({
            "had_20_plus_employees_6_months": self.had_20_plus_employees_6_months,
            "cobra_type": self.cobra_type,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at)
        })
        return data


    def __repr__(self):
        return f"<CoverageInformation company={self.company_id}>"
