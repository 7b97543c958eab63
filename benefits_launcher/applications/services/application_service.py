"""
Application Service

Handles:
    - Fetch a company's application
    - Update status, carrier and step tracking
    - Sign and submit
"""

# Python Packages
import logging
from datetime import datetime, timezone

# Database
from ...config.database import db

# Models
from ...models.application import Application
from ...models.owner import Owner

# Constants
from ...base import constants

# Services
from .progress_service import ProgressService

# Helpers
from ...util import audit

# Exceptions
from ...util.exceptions import (
    ConflictException,
    NotFoundException,
    ServiceException,
    ValidationException
)

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





class ApplicationService:

    UPDATABLE_FIELDS = ("status", "selected_carrier", "current_step", "completed_steps")


    def get_application(self, application_id: int) -> Application:
        application = db.session.get(Application, application_id)

        if not application:
            raise NotFoundException(messages.ERROR["APPLICATION_NOT_FOUND"])

        return application


    def get_company_application(self, company_id: int) -> dict:
        application = Application.query.filter_by(company_id = company_id).first()

        if not application:
            raise NotFoundException(messages.ERROR["APPLICATION_NOT_FOUND"])

        return application.to_dict()


    def update_application(self, user, application: Application, args: dict) -> dict:
        """
        Apply the supplied fields; writes an application_update audit row
        """

        changed = [field for field in self.UPDATABLE_FIELDS if field in args]

        try:
            for field in changed:
                value = args[field]
                if field == "completed_steps":
                    value = list(value)
                setattr(application, field, value)

            audit.record(
                user.id,
                audit.APPLICATION_UPDATE,
                audit.ENTITY_APPLICATION,
                application.id,
                details = f"Updated fields: {', '.join(changed)}" if changed else None
            )
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "APPLICATION_UPDATE_FAILED",
                message = messages.ERROR["APPLICATION_UPDATE_FAILED"],
                details = str(errors)
            )

        return application.to_dict()


    def sign_application(self, user, application: Application, signature: str) -> dict:
        """
        Record the signature and submit

        Raises:
            ConflictException: already submitted
            ValidationException: owners on file do not total 100%
        """

        if application.status == "submitted" or application.submitted_at:
            raise ConflictException(messages.ERROR["APPLICATION_ALREADY_SUBMITTED"])

        owners = Owner.query.filter_by(company_id = application.company_id).all()
        if owners:
            total = sum(owner.ownership_percentage for owner in owners)
            if total != constants.OWNERSHIP_TOTAL:
                raise ValidationException(message = messages.ERROR["OWNERSHIP_TOTAL_INVALID"].format(total))

        try:
            application.signature = signature
            application.status = "submitted"
            application.submitted_at = datetime.now(timezone.utc)

            ProgressService().update_application_progress(application.company_id, "review", commit = False)

            audit.record(
                user.id,
                audit.APPLICATION_SIGN,
                audit.ENTITY_APPLICATION,
                application.id,
                details = f"Application signed and submitted for company {application.company_id}"
            )
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "APPLICATION_UPDATE_FAILED",
                message = messages.ERROR["APPLICATION_UPDATE_FAILED"],
                details = str(errors)
            )

        logger.info("Application submitted", extra = {"user": user.id, "component": "applications"})
        return application.to_dict()
