"""
Broker Controller

Handles:
    - Orchestration between handler and the settings, branding and
      portfolio services
"""

# Services
from .services.broker_settings_service import BrokerSettingsService
from .services.branding_service import BrandingService
from .services.broker_portfolio_service import BrokerPortfolioService





class BrokerController:

    def get_settings(self, user) -> dict:
        return BrokerSettingsService().get_settings(user)


    def update_settings(self, user, args: dict) -> dict:
        return BrokerSettingsService().update_settings(user, args)


    def upload_logo(self, user, file) -> dict:
        return BrokerSettingsService().upload_logo(user, file)


    def get_branding(self, broker_id: str) -> dict:
        return BrandingService().get_branding(broker_id)


    def read_logo(self, broker_id: str):
        return BrandingService().read_logo(broker_id)


    def list_companies(self, user) -> list:
        return BrokerPortfolioService().list_companies(user.broker_id)


    def list_applications(self, user) -> list:
        return BrokerPortfolioService().list_applications(user.broker_id)


    def list_users(self, user) -> list:
        return BrokerPortfolioService().list_users(user.broker_id)


    def create_user(self, user, args: dict) -> dict:
        return BrokerPortfolioService().create_user(user, args)
