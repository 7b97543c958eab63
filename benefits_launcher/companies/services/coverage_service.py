"""
Coverage Information Service

Handles:
    - Read coverage selections of a company
    - Upsert coverage selections, deriving the COBRA type
"""

# Database
from ...config.database import db

# Models
from ...models.coverage_information import (
    BENEFIT_FIELDS,
    CARRIER_FIELDS,
    EMPLOYEE_COUNT_FIELDS,
    CoverageInformation
)

# Exceptions
from ...util.exceptions import NotFoundException, ServiceException

# App Messages
from ...util import messages





def cobra_type_for(had_20_plus_employees_6_months: bool) -> str:
    """ Federal COBRA covers employers with 20+ employees; smaller ones fall under Cal-COBRA... """

    return "federal" if had_20_plus_employees_6_months else "cal-cobra"



class CoverageService:

    def get_coverage(self, company_id: int) -> dict:
        coverage = CoverageInformation.query.filter_by(company_id = company_id).first()

        if not coverage:
            raise NotFoundException(messages.ERROR["COVERAGE_NOT_FOUND"])

        return coverage.to_dict()


    def save_coverage(self, company_id: int, args: dict) -> dict:
        coverage = CoverageInformation.query.filter_by(company_id = company_id).first()
        created = coverage is None

        try:
            if created:
                coverage = CoverageInformation(company_id = company_id)
                db.session.add(coverage)

            for field in EMPLOYEE_COUNT_FIELDS:
                if args.get(field) not in (None, ""):
                    setattr(coverage, field, int(args[field]))

            for field in BENEFIT_FIELDS:
                if field in args:
                    setattr(coverage, field, bool(args[field]))

            for field in CARRIER_FIELDS:
                if field in args:
                    setattr(coverage, field, args[field] or None)

            if "had_20_plus_employees_6_months" in args:
                coverage.had_20_plus_employees_6_months = bool(args["had_20_plus_employees_6_months"])

            coverage.cobra_type = cobra_type_for(bool(coverage.had_20_plus_employees_6_months))

            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "COVERAGE_SAVE_FAILED",
                message = messages.ERROR["COVERAGE_SAVE_FAILED"],
                details = str(errors)
            )

        data = coverage.to_dict()
        data["message"] = messages.SUCCESS["COVERAGE_INFO_SAVED"]
        return data, created
