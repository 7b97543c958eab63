"""
Company Service

Handles:
    - Create company (and its enrollment application)
    - List companies visible to a user
    - Update company information
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.company import Company
from ...models.application import Application

# Constants
from ...base import constants

# Helpers
from ...util.validators import format_phone, parse_date

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





class CompanyService:

    TEXT_FIELDS = ("name", "address", "city", "zip", "tax_id")


    def _apply(self, company: Company, args: dict):
        for field in self.TEXT_FIELDS:
            if field in args:
                setattr(company, field, str(args[field]).strip())

        if "state" in args:
            company.state = str(args["state"]).strip().upper()

        if "phone" in args:
            company.phone = format_phone(args["phone"])

        if "industry" in args:
            company.industry = str(args["industry"]).strip().lower()

        if "employee_count" in args:
            value = args["employee_count"]
            company.employee_count = int(value) if value not in (None, "") else None

        if "effective_date" in args:
            company.effective_date = parse_date(args["effective_date"])

        if "has_prior_coverage" in args:
            company.has_prior_coverage = bool(args["has_prior_coverage"])


    def create_company(self, user, args: dict) -> dict:
        """
        Create company for the user and open its application

        Returns:
            dict: company with its application
        """

        try:
            company = Company(user_id = user.id)
            self._apply(company, args)
            db.session.add(company)
            db.session.flush()

            application = Application(
                company_id = company.id,
                status = "in_progress",
                completed_steps = ["company"],
                current_step = "company"
            )
            db.session.add(application)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "COMPANY_SAVE_FAILED",
                message = messages.ERROR["COMPANY_SAVE_FAILED"],
                details = str(errors)
            )

        logger.info("Company created", extra = {"user": user.id, "component": "companies"})

        data = company.to_dict()
        data["application"] = application.to_dict()
        return data


    def list_companies(self, user) -> dict:
        query = Company.query

        if user.role != constants.ROLE_ADMIN:
            query = query.filter(Company.user_id == user.id)

        companies = query.order_by(Company.id.desc()).all()

        return {
            "total": len(companies),
            "companies": [company.to_dict() for company in companies]
        }


    def get_company(self, company: Company) -> dict:
        data = company.to_dict()
        data["application"] = company.application.to_dict() if company.application else None
        return data


    def update_company(self, company: Company, args: dict) -> dict:
        try:
            self._apply(company, args)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "COMPANY_SAVE_FAILED",
                message = messages.ERROR["COMPANY_SAVE_FAILED"],
                details = str(errors)
            )

        data = company.to_dict()
        data["message"] = messages.SUCCESS["COMPANY_INFO_SAVED"]
        return data
