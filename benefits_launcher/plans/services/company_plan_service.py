"""
Company Plan Service

Handles:
    - Plans selected by a company
    - Select a plan (once per company)
    - Remove a selected plan together with its contribution
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.company_plan import CompanyPlan
from ...models.contribution import Contribution

# Constants
from ...base import constants

# Services
from .plan_service import PlanService
from ...applications.services.progress_service import ProgressService

# Helpers
from ...util import audit

# Exceptions
from ...util.exceptions import ConflictException, NotFoundException, ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





class CompanyPlanService:

    def list_company_plans(self, company_id: int) -> list:
        company_plans = CompanyPlan.query.filter_by(company_id = company_id).order_by(CompanyPlan.id).all()
        return [company_plan.to_dict() for company_plan in company_plans]


    def is_selected(self, company_id: int, plan_id: int) -> bool:
        return CompanyPlan.query.filter_by(company_id = company_id, plan_id = plan_id).first() is not None


    def select_plan(self, company_id: int, plan_id: int) -> dict:
        """
        Raises:
            NotFoundException: unknown plan
            ConflictException: plan already selected for this company
        """

        PlanService().get_plan(plan_id)

        if self.is_selected(company_id, plan_id):
            raise ConflictException(messages.ERROR["PLAN_ALREADY_SELECTED"])

        company_plan = CompanyPlan(company_id = company_id, plan_id = plan_id)

        try:
            db.session.add(company_plan)
            ProgressService().update_application_progress(company_id, "plans", commit = False)
            db.session.commit()

        except ServiceException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "PLAN_SELECT_FAILED",
                message = messages.ERROR["PLAN_SELECT_FAILED"],
                details = str(errors)
            )

        return company_plan.to_dict()


    def remove_plan(self, user, company_id: int, plan_id: int) -> dict:
        company_plan = CompanyPlan.query.filter_by(company_id = company_id, plan_id = plan_id).first()

        if not company_plan:
            raise NotFoundException(messages.ERROR["PLAN_NOT_SELECTED"])

        action = audit.ADMIN_PLAN_DELETE if user.role == constants.ROLE_ADMIN else audit.APPLICATION_UPDATE

        try:
            Contribution.query.filter_by(company_id = company_id, plan_id = plan_id).delete()
            db.session.delete(company_plan)

            audit.record(
                user.id, action, audit.ENTITY_PLAN, plan_id,
                f"Removed plan {plan_id} from company {company_id}"
            )
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "PLAN_SELECT_FAILED",
                message = messages.ERROR["PLAN_SELECT_FAILED"],
                details = str(errors)
            )

        return {"company_id": company_id, "plan_id": plan_id}
