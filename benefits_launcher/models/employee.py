"""
Model: Employee
Table: employees

Census row for one employee. The SSN is stored for carrier forms but
only the last four digits are ever serialized.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_date, format_datetime, ssn_last4





class Employee(db.Model):

    # Table Name
    __tablename__ = "employees"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    company_id = db.Column(
        db.Integer,
        db.ForeignKey("companies.id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    first_name = db.Column(db.String(100), nullable = False)
    last_name = db.Column(db.String(100), nullable = False)
    dob = db.Column(db.Date, nullable = False)
    ssn = db.Column(db.String(11), nullable = False)
    address = db.Column(db.String(255), nullable = False)
    city = db.Column(db.String(100), nullable = False)
    state = db.Column(db.String(2), nullable = False)
    zip = db.Column(db.String(10), nullable = False)
    email = db.Column(db.String(255), nullable = True)
    phone = db.Column(db.String(20), nullable = True)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    company = db.relationship("Company", back_populates = "employees")


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "company_id": self.company_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "dob": format_date(self.dob),
            "ssn_last4": ssn_last4(self.ssn),
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "email": self.email,
            "phone": self.phone,
            "created_at": format_datetime(self.created_at)
        }


    def __repr__(self):
        return f"<Employee {self.first_name} {self.last_name}>"
