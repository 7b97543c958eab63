"""
Employee Service

Handles:
    - List / create / update / delete employees of a company
"""

# Database
from ...config.database import db

# Models
from ...models.employee import Employee

# Services
from ...applications.services.progress_service import ProgressService

# Helpers
from ...util.validators import format_phone, parse_date

# Exceptions
from ...util.exceptions import NotFoundException, ServiceException

# App Messages
from ...util import messages





class EmployeeService:

    TEXT_FIELDS = ("first_name", "last_name", "ssn", "address", "city", "zip")


    def apply(self, employee: Employee, args: dict):
        for field in self.TEXT_FIELDS:
            if field in args:
                setattr(employee, field, str(args[field]).strip())

        if "state" in args:
            employee.state = str(args["state"]).strip().upper()

        if "dob" in args:
            employee.dob = parse_date(args["dob"])

        if "email" in args:
            employee.email = args["email"] or None

        if "phone" in args:
            employee.phone = format_phone(args["phone"]) if args["phone"] else None


    def _get(self, company_id: int, employee_id: int) -> Employee:
        employee = Employee.query.filter_by(id = employee_id, company_id = company_id).first()

        if not employee:
            raise NotFoundException(messages.ERROR["EMPLOYEE_NOT_FOUND"])

        return employee


    def list_employees(self, company_id: int) -> dict:
        employees = Employee.query.filter_by(company_id = company_id).order_by(Employee.id).all()

        return {
            "total": len(employees),
            "employees": [employee.to_dict() for employee in employees]
        }


    def create_employee(self, company_id: int, args: dict) -> dict:
        try:
            employee = Employee(company_id = company_id)
            self.apply(employee, args)
            db.session.add(employee)

            ProgressService().update_application_progress(company_id, "employees", commit = False)
            db.session.commit()

        except ServiceException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EMPLOYEE_SAVE_FAILED",
                message = messages.ERROR["EMPLOYEE_SAVE_FAILED"],
                details = str(errors)
            )

        return employee.to_dict()


    def update_employee(self, company_id: int, employee_id: int, args: dict) -> dict:
        employee = self._get(company_id, employee_id)

        try:
            self.apply(employee, args)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EMPLOYEE_SAVE_FAILED",
                message = messages.ERROR["EMPLOYEE_SAVE_FAILED"],
                details = str(errors)
            )

        return employee.to_dict()


    def delete_employee(self, company_id: int, employee_id: int) -> dict:
        employee = self._get(company_id, employee_id)

        db.session.delete(employee)
        db.session.commit()

        return {
            "employee_id": employee_id,
            "message": messages.SUCCESS["EMPLOYEE_DELETE_SUCCESS"]
        }
