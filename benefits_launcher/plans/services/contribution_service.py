"""
Contribution Service

Handles:
    - Employer contribution per selected plan (one row per plan)
"""

# Database
from ...config.database import db

# Models
from ...models.contribution import Contribution

# Services
from .company_plan_service import CompanyPlanService
from ...applications.services.progress_service import ProgressService

# Helpers
from ...util.validators import whole_number

# Exceptions
from ...util.exceptions import ServiceException, ValidationException

# App Messages
from ...util import messages





class ContributionService:

    def list_contributions(self, company_id: int) -> list:
        contributions = Contribution.query.filter_by(company_id = company_id).order_by(Contribution.id).all()
        return [contribution.to_dict() for contribution in contributions]


    def save_contribution(self, company_id: int, args: dict):
        """
        Create or update the contribution for one selected plan

        Returns:
            (dict, bool): contribution and whether it was created
        """

        plan_id = whole_number(args["plan_id"])

        if not CompanyPlanService().is_selected(company_id, plan_id):
            raise ValidationException(message = messages.ERROR["PLAN_NOT_SELECTED"])

        contribution = Contribution.query.filter_by(company_id = company_id, plan_id = plan_id).first()
        created = contribution is None

        if created:
            contribution = Contribution(company_id = company_id, plan_id = plan_id)
            db.session.add(contribution)

        contribution.employee_contribution = whole_number(args["employee_contribution"])
        contribution.dependent_contribution = whole_number(args["dependent_contribution"])

        try:
            ProgressService().update_application_progress(company_id, "contributions", commit = False)
            db.session.commit()

        except ServiceException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "CONTRIBUTION_SAVE_FAILED",
                message = messages.ERROR["CONTRIBUTION_SAVE_FAILED"],
                details = str(errors)
            )

        return contribution.to_dict(), created
