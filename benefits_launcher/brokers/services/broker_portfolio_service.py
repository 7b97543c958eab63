"""
Broker Portfolio Service

Handles:
    - Companies and applications created by the agency's users
    - Agency user list and user creation (owner only)
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.user import User
from ...models.company import Company
from ...models.application import Application

# Services
from ...auth.services.auth_service import AuthService

# Helpers
from ...util import audit

# Exceptions
from ...util.exceptions import ConflictException, ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





class BrokerPortfolioService:

    def list_companies(self, broker_id: str) -> list:
        companies = (
            Company.query
            .join(User, Company.user_id == User.id)
            .filter(User.broker_id == broker_id)
            .order_by(Company.created_at.desc(), Company.id.desc())
            .all()
        )
        return [company.to_dict() for company in companies]


    def list_applications(self, broker_id: str) -> list:
        rows = (
            db.session.query(Application, Company, User)
            .join(Company, Application.company_id == Company.id)
            .join(User, Company.user_id == User.id)
            .filter(User.broker_id == broker_id)
            .order_by(Application.updated_at.desc(), Application.id.desc())
            .all()
        )

        applications = []
        for application, company, owner in rows:
            data = application.to_dict()
            data["company_name"] = company.name
            data["owner_name"] = owner.name
            data["owner_username"] = owner.username
            applications.append(data)

        return applications


    def list_users(self, broker_id: str) -> list:
        users = User.query.filter_by(broker_id = broker_id).order_by(User.id).all()
        return [user.to_dict() for user in users]


    def create_user(self, owner, args: dict) -> dict:
        """
        Create a staff or employer account inside the owner's agency
        """

        try:
            user = AuthService().create_account(args, args["role"], owner.broker_id)
            db.session.flush()

            audit.record(
                owner.id, audit.ADMIN_USER_CREATE, audit.ENTITY_USER, user.id,
                f"Broker owner created {args['role']} user {user.username}"
            )
            db.session.commit()

        except ConflictException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "USER_CREATE_FAILED",
                message = messages.ERROR["USER_CREATE_FAILED"],
                details = str(errors)
            )

        logger.info("Broker user created", extra = {"user": owner.id, "component": "brokers"})
        return user.to_dict()
