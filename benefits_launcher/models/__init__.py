"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy.

Import order matters: models with foreign keys must be imported after
the models they reference.
"""

from .broker import Broker
from .user import User

from .company import Company
from .owner import Owner
from .employee import Employee
from .document import Document
from .coverage_information import CoverageInformation

from .plan import Plan
from .company_plan import CompanyPlan
from .contribution import Contribution

from .application_initiator import ApplicationInitiator
from .application import Application

from .audit_log import AuditLog

from .pdf_template import PdfTemplate
from .pdf_field_mapping import PdfFieldMapping
from .generated_pdf import GeneratedPdf

__all__ = [
    "Broker",
    "User",
    "Company",
    "Owner",
    "Employee",
    "Document",
    "CoverageInformation",
    "Plan",
    "CompanyPlan",
    "Contribution",
    "ApplicationInitiator",
    "Application",
    "AuditLog",
    "PdfTemplate",
    "PdfFieldMapping",
    "GeneratedPdf",
]
