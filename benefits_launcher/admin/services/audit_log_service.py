"""
Audit Log Service

Handles:
    - Filtered audit trail, newest first, with user name and agency
    - CSV export of the same rows
"""

# Python Packages
import csv
import io
from datetime import datetime, time, timezone

# Database
from ...config.database import db

# Models
from ...models.audit_log import AuditLog
from ...models.user import User
from ...models.broker import Broker

# Constants
from ...base import constants

# Helpers
from ...util.formatters import format_datetime

CSV_HEADER = ["Timestamp", "Action", "User", "Agency", "Details", "IP Address"]





class AuditLogService:

    def query_logs(self, filters: dict) -> list:
        """
        Filters: user_id, action, entity_type, entity_id, from_date,
        to_date (dates, inclusive), limit (default 50)
        """

        query = (
            db.session.query(AuditLog, User, Broker)
            .outerjoin(User, AuditLog.user_id == User.id)
            .outerjoin(Broker, User.broker_id == Broker.id)
        )

        if filters.get("user_id"):
            query = query.filter(AuditLog.user_id == filters["user_id"])

        if filters.get("action"):
            query = query.filter(AuditLog.action == filters["action"])

        if filters.get("entity_type"):
            query = query.filter(AuditLog.entity_type == filters["entity_type"])

        if filters.get("entity_id"):
            query = query.filter(AuditLog.entity_id == str(filters["entity_id"]))

        if filters.get("from_date"):
            query = query.filter(AuditLog.timestamp >= datetime.combine(filters["from_date"], time.min, tzinfo = timezone.utc))

        if filters.get("to_date"):
            query = query.filter(AuditLog.timestamp <= datetime.combine(filters["to_date"], time.max, tzinfo = timezone.utc))

        limit = filters.get("limit") or constants.AUDIT_LOG_DEFAULT_LIMIT

        rows = query.order_by(AuditLog.timestamp.desc(), AuditLog.id.desc()).limit(limit).all()

        logs = []
        for entry, user, broker in rows:
            data = entry.to_dict()
            data["user_name"] = user.name if user else None
            data["username"] = user.username if user else None
            data["agency_name"] = broker.agency_name if broker else None
            logs.append(data)

        return logs


    def export_csv(self, filters: dict) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(CSV_HEADER)

        for log in self.query_logs(filters):
            writer.writerow([
                log["timestamp"] or "",
                log["action"],
                log["user_name"] or log["username"] or "",
                log["agency_name"] or "",
                log["details"] or "",
                log["ip_address"] or ""
            ])

        return output.getvalue()
