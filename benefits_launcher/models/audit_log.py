"""
Model: AuditLog
Table: audit_logs

Append-only trail of user and admin actions (logins, application
signatures, plan uploads, document overrides, ...).
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import format_datetime





class AuditLog(db.Model):

    # Table Name
    __tablename__ = "audit_logs"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id"),
        nullable = False,
        index = True
    )

    action = db.Column(db.String(50), nullable = False, index = True)

    entity_type = db.Column(
        db.String(50),
        nullable = False,
        doc = "user / application / company / plan / document / signature / broker / pdf"
    )

    entity_id = db.Column(db.String(36), nullable = True)

    details = db.Column(db.Text, nullable = True)
    ip_address = db.Column(db.String(64), nullable = True)
    user_agent = db.Column(db.String(500), nullable = True)

    timestamp = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now(),
        index = True
    )

    user = db.relationship("User")


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "details": self.details,
            "ip_address": self.ip_address,
            "user_agent": self.user_agent,
            "timestamp": format_datetime(self.timestamp)
        }


    def __repr__(self):
        return f"<AuditLog {self.action} by {self.user_id}>"
