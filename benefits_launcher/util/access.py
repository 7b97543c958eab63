"""
Access Control

Handles:
    - Logged-in user lookup
    - Role gates (admin, broker member, broker owner)
    - Company visibility rule shared by every company-scoped endpoint

Called inside the handlers' try blocks, so failures come back through
the usual AppException response path.
"""

# Python Packages
from flask_login import current_user

# Database
from ..config.database import db

# Models
from ..models.company import Company

# Constants
from ..base import constants

# Exceptions
from .exceptions import ForbiddenException, NotFoundException, UnauthorizedException
from . import messages





class AccessControl:

    @staticmethod
    def require_user():
        """ The logged-in user, or 401... """

        if not current_user or not current_user.is_authenticated:
            raise UnauthorizedException(messages.ERROR["LOGIN_REQUIRED"])

        if not current_user.is_active:
            raise UnauthorizedException(messages.ERROR["ACCOUNT_DISABLED"])

        return current_user._get_current_object()


    @staticmethod
    def require_admin():
        user = AccessControl.require_user()

        if user.role != constants.ROLE_ADMIN:
            raise ForbiddenException(messages.ERROR["ADMIN_REQUIRED"])

        return user


    @staticmethod
    def require_broker():
        """ Owner or staff of a broker agency... """

        user = AccessControl.require_user()

        if user.role not in constants.BROKER_ROLES or not user.broker_id:
            raise ForbiddenException(messages.ERROR["BROKER_REQUIRED"])

        return user


    @staticmethod
    def require_broker_owner():
        user = AccessControl.require_broker()

        if user.role != constants.ROLE_OWNER:
            raise ForbiddenException(messages.ERROR["BROKER_OWNER_REQUIRED"])

        return user


    @staticmethod
    def can_access_company(user, company) -> bool:
        """
        A company is visible to its creator, to admins, and to the owner
        and staff of the broker agency its creator belongs to.
        """

        if user.role == constants.ROLE_ADMIN:
            return True

        if company.user_id == user.id:
            return True

        if user.role in constants.BROKER_ROLES and user.broker_id:
            creator = company.user
            return bool(creator and creator.broker_id == user.broker_id)

        return False


    @staticmethod
    def require_company(company_id: int):
        """
        Load a company the current user may access.

        Raises:
            UnauthorizedException: not logged in
            NotFoundException: unknown company
            ForbiddenException: company belongs to someone else
        """

        user = AccessControl.require_user()
        company = db.session.get(Company, company_id)

        if not company:
            raise NotFoundException(messages.ERROR["COMPANY_NOT_FOUND"])

        if not AccessControl.can_access_company(user, company):
            raise ForbiddenException(messages.ERROR["FORBIDDEN"])

        return user, company
