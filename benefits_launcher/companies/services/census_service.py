"""
Census Import Service

Handles:
    - Read employee census spreadsheets (.csv / .xlsx)
    - Map header names and common aliases onto employee fields
    - Validate every row, create the valid ones, report the rest
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.employee import Employee

# Services
from .employee_service import EmployeeService
from ...applications.services.progress_service import ProgressService

# Validations
from ..validations.employee_validation import EmployeeValidation

# Exceptions
from ...util.exceptions import ServiceException, ValidationException

# Utils
from ...util.spreadsheets import header_key, load_rows, remap_rows

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





# Normalised header -> employee field
HEADER_ALIASES = {
    "firstname": "first_name",
    "first": "first_name",
    "givenname": "first_name",
    "lastname": "last_name",
    "last": "last_name",
    "surname": "last_name",
    "familyname": "last_name",
    "dob": "dob",
    "dateofbirth": "dob",
    "birthdate": "dob",
    "birthday": "dob",
    "ssn": "ssn",
    "socialsecuritynumber": "ssn",
    "social": "ssn",
    "address": "address",
    "streetaddress": "address",
    "address1": "address",
    "street": "address",
    "city": "city",
    "state": "state",
    "st": "state",
    "zip": "zip",
    "zipcode": "zip",
    "postalcode": "zip",
    "email": "email",
    "emailaddress": "email",
    "phone": "phone",
    "phonenumber": "phone",
    "mobile": "phone"
}

REQUIRED_COLUMNS = EmployeeValidation.REQUIRED_FIELDS



def normalize_header(header: str):
    """ 'First Name' / 'first_name' / 'FIRST-NAME' -> 'first_name'; unknown headers -> None... """

    return HEADER_ALIASES.get(header_key(header))



class CensusService:

    def __init__(self):
        self.validation = EmployeeValidation()
        self.employee_service = EmployeeService()


    def import_census(self, company_id: int, file) -> dict:
        """
        Import employees from an uploaded census file

        Returns:
            dict: {created, skipped, errors: [{row, errors}]}
        """

        try:
            headers, rows = load_rows(file.filename, file.read())

        except ValidationException:
            raise

        except Exception as errors:
            raise ValidationException(
                message = messages.ERROR["CENSUS_UNREADABLE"],
                details = str(errors)
            )

        if not headers or not rows:
            raise ValidationException(message = messages.ERROR["CENSUS_EMPTY"])

        present, records = remap_rows(headers, rows, HEADER_ALIASES)
        missing = [field for field in REQUIRED_COLUMNS if field not in present]

        if missing:
            raise ValidationException(
                message = messages.ERROR["CENSUS_MISSING_COLUMNS"].format(", ".join(missing))
            )

        created = []
        row_errors = []

        # Row 1 is the header
        for row_number, record in enumerate(records, start = 2):
            errors = self.validation.collect_errors(record)

            if errors:
                row_errors.append({
                    "row": row_number,
                    "errors": [f"{error['field']}: {error['message']}" for error in errors]
                })
                continue

            employee = Employee(company_id = company_id)
            self.employee_service.apply(employee, record)
            created.append(employee)

        try:
            if created:
                db.session.add_all(created)
                ProgressService().update_application_progress(company_id, "employees", commit = False)

            db.session.commit()

        except ServiceException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "CENSUS_IMPORT_FAILED",
                message = messages.ERROR["CENSUS_IMPORT_FAILED"],
                details = str(errors)
            )

        logger.info(
            "Census imported: %s created, %s skipped", len(created), len(row_errors),
            extra = {"component": "census"}
        )

        return {
            "created": len(created),
            "skipped": len(row_errors),
            "errors": row_errors
        }
