"""
Application Controller

Handles:
    - Orchestration between handler and the initiator, application
      and progress services
"""

# Services
from .services.initiator_service import InitiatorService
from .services.application_service import ApplicationService
from .services.progress_service import ProgressService

# Helpers
from ..util.access import AccessControl





class ApplicationController:

    def __init__(self):
        """ Initialize controller with service instances... """

        self.application_service = ApplicationService()


    def create_initiator(self, user, args: dict) -> dict:
        return InitiatorService().create_initiator(user, args)


    def get_initiator(self, user) -> dict:
        return InitiatorService().get_initiator(user)


    def get_company_application(self, company_id: int) -> dict:
        return self.application_service.get_company_application(company_id)


    def load_accessible(self, application_id: int):
        """
        Application plus the caller, checked against the owning company

        Returns:
            (User, Application)
        """

        application = self.application_service.get_application(application_id)
        user, _ = AccessControl.require_company(application.company_id)
        return user, application


    def update_application(self, user, application, args: dict) -> dict:
        return self.application_service.update_application(user, application, args)


    def sign_application(self, user, application, signature: str) -> dict:
        return self.application_service.sign_application(user, application, signature)


    def get_progress(self, application) -> dict:
        return ProgressService().get_progress(application)
