"""
Plan Controller

Handles:
    - Orchestration between handler and the plan catalogue, company plan,
      contribution and plan upload services
"""

# Services
from .services.plan_service import PlanService
from .services.company_plan_service import CompanyPlanService
from .services.contribution_service import ContributionService
from .services.plan_upload_service import PlanUploadService





class PlanController:

    def list_plans(self, filters: dict, coverage_date) -> list:
        return PlanService().list_plans(
            carrier = filters.get("carrier"),
            coverage_date = coverage_date,
            metal_tier = filters.get("metal_tier"),
            plan_type = filters.get("type")
        )


    def list_carriers(self) -> list:
        return PlanService().list_carriers()


    # Company plans

    def list_company_plans(self, company_id: int) -> list:
        return CompanyPlanService().list_company_plans(company_id)


    def select_plan(self, company_id: int, plan_id) -> dict:
        return CompanyPlanService().select_plan(company_id, int(plan_id))


    def remove_plan(self, user, company_id: int, plan_id: int) -> dict:
        return CompanyPlanService().remove_plan(user, company_id, plan_id)


    # Contributions

    def list_contributions(self, company_id: int) -> list:
        return ContributionService().list_contributions(company_id)


    def save_contribution(self, company_id: int, args: dict):
        return ContributionService().save_contribution(company_id, args)


    # Admin

    def upload_plans(self, user, args: dict) -> dict:
        """
        Import an admin plan file

        Args:
            user (User): the admin
            args (dict): plan_file, carrier, plan_year

        Returns:
            dict: {message, total_plans, imported_plans, skipped_plans}
        """

        return PlanUploadService().upload_plans(
            user,
            args["plan_file"],
            args["carrier"],
            args.get("plan_year")
        )
