"""
Application Initiator Service

Handles:
    - Record who starts the enrollment on the employer's behalf
    - Make sure the user has a company and an application to attach it to
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.application import Application
from ...models.application_initiator import ApplicationInitiator
from ...models.company import Company

# Config
from ..config.enrollment_steps import COMPANY_INFORMATION_STEP, INITIATOR_STEP

# Helpers
from ...util.validators import format_phone
from ...util import audit

# Exceptions
from ...util.exceptions import NotFoundException, ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





class InitiatorService:

    def create_initiator(self, user, args: dict) -> dict:
        """
        Create the initiator and attach it to the user's application

        Returns:
            dict: {initiator, company_id, application}
        """

        try:
            initiator = ApplicationInitiator(
                user_id = user.id,
                first_name = args["first_name"],
                last_name = args["last_name"],
                email = args["email"],
                phone = format_phone(args["phone"]),
                title = args["title"],
                relationship_to_company = args["relationship_to_company"],
                is_owner = bool(args.get("is_owner", False)),
                is_authorized_contact = bool(args.get("is_authorized_contact", False))
            )
            db.session.add(initiator)
            db.session.flush()

            company = Company.query.filter_by(user_id = user.id).order_by(Company.id).first()

            if not company:
                # Placeholder until the company-information step fills it in
                company = Company(
                    user_id = user.id,
                    name = user.company_name or f"{user.name}'s Company"
                )
                db.session.add(company)
                db.session.flush()

            application = Application.query.filter_by(company_id = company.id).first()

            if not application:
                application = Application(
                    company_id = company.id,
                    status = "in_progress",
                    completed_steps = [INITIATOR_STEP],
                    current_step = COMPANY_INFORMATION_STEP
                )
                db.session.add(application)
                db.session.flush()

                audit.record(user.id, audit.APPLICATION_CREATE, audit.ENTITY_APPLICATION, application.id)
            else:
                completed = list(application.completed_steps or [])
                if INITIATOR_STEP not in completed:
                    completed.append(INITIATOR_STEP)
                application.completed_steps = completed
                application.current_step = COMPANY_INFORMATION_STEP

            application.initiator_id = initiator.id
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "INITIATOR_SAVE_FAILED",
                message = messages.ERROR["INITIATOR_SAVE_FAILED"],
                details = str(errors)
            )

        logger.info("Application initiator saved", extra = {"user": user.id, "component": "applications"})

        return {
            "initiator": initiator.to_dict(),
            "company_id": company.id,
            "application": application.to_dict()
        }


    def get_initiator(self, user) -> dict:
        initiator = (
            ApplicationInitiator.query
            .filter_by(user_id = user.id)
            .order_by(ApplicationInitiator.id.desc())
            .first()
        )

        if not initiator:
            raise NotFoundException(messages.ERROR["INITIATOR_NOT_FOUND"])

        return initiator.to_dict()
