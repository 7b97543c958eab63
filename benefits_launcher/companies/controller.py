"""
Company Controller

Handles:
    - Orchestration between handler and the company, owner, employee,
      census and coverage services
"""

# Services
from .services.company_service import CompanyService
from .services.owner_service import OwnerService
from .services.employee_service import EmployeeService
from .services.census_service import CensusService
from .services.coverage_service import CoverageService





class CompanyController:

    def create_company(self, user, args: dict) -> dict:
        return CompanyService().create_company(user, args)


    def list_companies(self, user) -> dict:
        return CompanyService().list_companies(user)


    def get_company(self, company) -> dict:
        return CompanyService().get_company(company)


    def update_company(self, company, args: dict) -> dict:
        return CompanyService().update_company(company, args)


    # Owners

    def list_owners(self, company_id: int) -> dict:
        return OwnerService().list_owners(company_id)


    def add_owner(self, company_id: int, args: dict) -> dict:
        return OwnerService().add_owner(company_id, args)


    def replace_owners(self, company_id: int, owners: list) -> dict:
        return OwnerService().replace_owners(company_id, owners)


    # Employees

    def list_employees(self, company_id: int) -> dict:
        return EmployeeService().list_employees(company_id)


    def create_employee(self, company_id: int, args: dict) -> dict:
        return EmployeeService().create_employee(company_id, args)


    def update_employee(self, company_id: int, employee_id: int, args: dict) -> dict:
        return EmployeeService().update_employee(company_id, employee_id, args)


    def delete_employee(self, company_id: int, employee_id: int) -> dict:
        return EmployeeService().delete_employee(company_id, employee_id)


    def import_census(self, company_id: int, file) -> dict:
        """
        Import a census spreadsheet

        Args:
            company_id (int)
            file (FileStorage): validated .csv / .xlsx upload

        Returns:
            dict: {created, skipped, errors}
        """

        return CensusService().import_census(company_id, file)


    # Coverage

    def get_coverage(self, company_id: int) -> dict:
        return CoverageService().get_coverage(company_id)


    def save_coverage(self, company_id: int, args: dict):
        return CoverageService().save_coverage(company_id, args)
