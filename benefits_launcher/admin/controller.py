"""
Admin Controller

Handles:
    - Orchestration between handler and the user, broker, application,
      audit log and stats services
"""

# Services
from .services.user_admin_service import UserAdminService
from .services.broker_admin_service import BrokerAdminService
from .services.application_admin_service import ApplicationAdminService
from .services.audit_log_service import AuditLogService
from .services.stats_service import StatsService





class AdminController:

    # Users

    def list_users(self) -> list:
        return UserAdminService().list_users()


    def update_user(self, admin, user_id: int, args: dict) -> dict:
        return UserAdminService().update_user(admin, user_id, args)


    # Brokers

    def list_brokers(self) -> list:
        return BrokerAdminService().list_brokers()


    def create_broker(self, admin, args: dict) -> dict:
        return BrokerAdminService().create_broker(admin, args)


    def set_broker_enabled(self, admin, broker_id: str, enabled: bool) -> dict:
        return BrokerAdminService().set_enabled(admin, broker_id, enabled)


    def set_broker_flagged(self, admin, broker_id: str, flagged: bool) -> dict:
        return BrokerAdminService().set_flagged(admin, broker_id, flagged)


    # Applications

    def list_applications(self, status: str = None) -> list:
        return ApplicationAdminService().list_applications(status)


    def update_application(self, admin, application_id: int, args: dict) -> dict:
        return ApplicationAdminService().update_application(admin, application_id, args)


    # Audit logs

    def list_audit_logs(self, filters: dict) -> list:
        return AuditLogService().query_logs(filters)


    def export_audit_logs(self, filters: dict) -> str:
        """
        Audit rows as CSV text

        Returns:
            str: Timestamp,Action,User,Agency,Details,IP Address rows
        """

        return AuditLogService().export_csv(filters)


    # Stats

    def get_stats(self) -> dict:
        return StatsService().get_stats()
