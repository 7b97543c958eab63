"""
Audit Trail

Writes AuditLog rows for security-relevant actions. The row joins the
caller's transaction; callers commit.
"""

# Python Packages
import logging

# Flask Packages
from flask import has_request_context, request

# Database
from ..config.database import db

# Models
from ..models.audit_log import AuditLog

logger = logging.getLogger(__name__)





# Actions
LOGIN                   =   "login"
LOGOUT                  =   "logout"
PASSWORD_CHANGE         =   "password_change"
APPLICATION_CREATE      =   "application_create"
APPLICATION_UPDATE      =   "application_update"
APPLICATION_SIGN        =   "application_sign"
DOCUMENT_OVERRIDE       =   "document_override"
PDF_GENERATE            =   "pdf_generate"
ADMIN_PLAN_UPLOAD       =   "admin_plan_upload"
ADMIN_PLAN_DELETE       =   "admin_plan_delete"
ADMIN_USER_CREATE       =   "admin_user_create"
ADMIN_USER_UPDATE       =   "admin_user_update"
ADMIN_BROKER_UPDATE     =   "admin_broker_update"

# Entity Types
ENTITY_USER             =   "user"
ENTITY_APPLICATION      =   "application"
ENTITY_COMPANY          =   "company"
ENTITY_PLAN             =   "plan"
ENTITY_DOCUMENT         =   "document"
ENTITY_SIGNATURE        =   "signature"
ENTITY_BROKER           =   "broker"
ENTITY_PDF              =   "pdf"



def record(user_id: int, action: str, entity_type: str, entity_id = None, details: str = None) -> AuditLog:
    """
    Add an audit row to the current session (not committed)
    """

    ip_address = None
    user_agent = None

    if has_request_context():
        ip_address = request.remote_addr
        user_agent = request.headers.get("User-Agent")

    entry = AuditLog(
        user_id = user_id,
        action = action,
        entity_type = entity_type,
        entity_id = str(entity_id) if entity_id is not None else None,
        details = details,
        ip_address = ip_address,
        user_agent = user_agent
    )
    db.session.add(entry)

    logger.info(
        "Audit %s on %s %s", action, entity_type, entity_id,
        extra = {"user": user_id, "component": "audit"}
    )
    return entry
