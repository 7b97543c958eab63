"""
Owner Service

Handles:
    - List owners
    - Add one owner (running total may not exceed 100%)
    - Replace all owners (total must be exactly 100%)
"""

# Database
from ...config.database import db

# Models
from ...models.owner import Owner

# Constants
from ...base import constants

# Services
from ...applications.services.progress_service import ProgressService

# Helpers
from ...util.validators import format_phone, whole_number

# Exceptions
from ...util.exceptions import ServiceException, ValidationException

# App Messages
from ...util import messages





class OwnerService:

    def _build(self, company_id: int, args: dict) -> Owner:
        return Owner(
            company_id = company_id,
            first_name = args["first_name"],
            last_name = args["last_name"],
            title = args["title"],
            ownership_percentage = whole_number(args["ownership_percentage"]),
            email = args["email"],
            phone = format_phone(args["phone"]),
            is_eligible_for_coverage = bool(args.get("is_eligible_for_coverage", False))
        )


    @staticmethod
    def ownership_total(company_id: int) -> int:
        return sum(owner.ownership_percentage for owner in Owner.query.filter_by(company_id = company_id))


    def list_owners(self, company_id: int) -> dict:
        owners = Owner.query.filter_by(company_id = company_id).order_by(Owner.id).all()

        return {
            "total_percentage": sum(owner.ownership_percentage for owner in owners),
            "owners": [owner.to_dict() for owner in owners]
        }


    def add_owner(self, company_id: int, args: dict) -> dict:
        current_total = self.ownership_total(company_id)
        owner = self._build(company_id, args)

        if current_total + owner.ownership_percentage > constants.OWNERSHIP_TOTAL:
            raise ValidationException(
                message = messages.ERROR["OWNERSHIP_EXCEEDS_TOTAL"].format(current_total)
            )

        try:
            db.session.add(owner)
            ProgressService().update_application_progress(company_id, "ownership", commit = False)
            db.session.commit()

        except ServiceException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "OWNER_SAVE_FAILED",
                message = messages.ERROR["OWNER_SAVE_FAILED"],
                details = str(errors)
            )

        return owner.to_dict()


    def replace_owners(self, company_id: int, owners: list) -> dict:
        """
        Swap the company's owners for `owners` in one transaction.
        The list has already been validated to total 100%.
        """

        try:
            Owner.query.filter_by(company_id = company_id).delete()

            created = [self._build(company_id, args) for args in owners]
            db.session.add_all(created)

            ProgressService().update_application_progress(company_id, "ownership", commit = False)
            db.session.commit()

        except ServiceException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "OWNER_SAVE_FAILED",
                message = messages.ERROR["OWNER_SAVE_FAILED"],
                details = str(errors)
            )

        return self.list_owners(company_id)
