"""
Model: Company
Table: companies

The employer group enrolling in coverage. Children (owners, employees,
documents, plan selections, contributions, application) cascade on delete.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_date, format_datetime





class Company(db.Model):
    """ An employer group... """

    # Table Name
    __tablename__ = "companies"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id"),
        nullable = False,
        index = True,
        doc = "The employer user who created the company."
    )

    name = db.Column(db.String(255), nullable = False)
    address = db.Column(db.String(255), nullable = False, default = "")
    city = db.Column(db.String(100), nullable = False, default = "")
    state = db.Column(db.String(2), nullable = False, default = "")
    zip = db.Column(db.String(10), nullable = False, default = "")
    phone = db.Column(db.String(20), nullable = False, default = "")
    tax_id = db.Column(db.String(20), nullable = False, default = "", doc = "Federal EIN.")
    industry = db.Column(db.String(50), nullable = False, default = "")

    employee_count = db.Column(db.Integer, nullable = True)
    effective_date = db.Column(db.Date, nullable = True)
    has_prior_coverage = db.Column(db.Boolean, nullable = False, default = False)

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

    user = db.relationship("User", back_populates = "companies")

    owners = db.relationship(
        "Owner",
        back_populates = "company",
        cascade = "all, delete-orphan",
        order_by = "Owner.id"
    )

    employees = db.relationship(
        "Employee",
        back_populates = "company",
        cascade = "all, delete-orphan",
        order_by = "Employee.id"
    )

    documents = db.relationship(
        "Document",
        back_populates = "company",
        cascade = "all, delete-orphan",
        order_by = "Document.id"
    )

    company_plans = db.relationship("CompanyPlan", cascade = "all, delete-orphan")
    contributions = db.relationship("Contribution", cascade = "all, delete-orphan")
    coverage = db.relationship("CoverageInformation", uselist = False, cascade = "all, delete-orphan")

    application = db.relationship(
        "Application",
        back_populates = "company",
        uselist = False,
        cascade = "all, delete-orphan"
    )


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "phone": self.phone,
            "tax_id": self.tax_id,
            "industry": self.industry,
            "employee_count": self.employee_count,
            "effective_date": format_date(self.effective_date),
            "has_prior_coverage": self.has_prior_coverage,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at)
        }


    def __repr__(self):
        return f"<Company {self.name}>"
