"""
Model: User
Table: users

Login account. Role is one of admin / owner / staff / employer;
owner and staff belong to a broker agency.
"""

# Python Packages
from flask_login import UserMixin
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class User(UserMixin, db.Model):
    """ An authenticated user of the platform... """

    # Table Name
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    username = db.Column(db.String(100), nullable = False, unique = True, index = True)

    password = db.Column(
        db.String(255),
        nullable = False,
        doc = "scrypt hash, never the plain password."
    )

    email = db.Column(db.String(255), nullable = False, unique = True, index = True)

    name = db.Column(db.String(255), nullable = False)

    broker_id = db.Column(
        db.String(36),
        db.ForeignKey("brokers.id"),
        nullable = True,
        index = True
    )

    role = db.Column(
        db.String(20),
        nullable = False,
        default = "employer",
        doc = "admin / owner / staff / employer"
    )

    company_name = db.Column(db.String(255), nullable = True)

    active = db.Column(db.Boolean, nullable = False, default = True)

    last_login_at = db.Column(db.DateTime(timezone = True), nullable = True)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )

    broker = db.relationship("Broker", back_populates = "users")
    companies = db.relationship("Company", back_populates = "user", lazy = "dynamic")


    @property
    def is_active(self):
        # Flask-Login refuses to log in inactive users
        return bool(self.active)


    @property
    def is_admin(self):
        return self.role == "admin"


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "name": self.name,
            "broker_id": self.broker_id,
            "role": self.role,
            "company_name": self.company_name,
            "active": self.active,
            "last_login_at": format_datetime(self.last_login_at),
            "created_at": format_datetime(self.created_at)
        }


    def __repr__(self):
        return f"<User {self.username}>"
