"""
Auth Service

Handles:
    - Register employer accounts
    - Authenticate by username or email (timing-safe for unknown users)
    - Session login / logout
    - Password change
"""

# Python Packages
import logging
from datetime import datetime, timezone

from flask import session
from flask_login import login_user, logout_user
from sqlalchemy import func

# Database
from ...config.database import db

# Models
from ...models.user import User
from ...models.broker import Broker

# Constants
from ...base import constants

# Helpers
from ...util.security import hash_password, verify_dummy_password, verify_password
from ...util import audit

# Exceptions
from ...util.exceptions import (
    ConflictException,
    ServiceException,
    UnauthorizedException,
    ValidationException
)

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





def start_session(user):
    """ Log the user in on a permanent (lifetime-limited) session cookie... """

    session.permanent = True
    login_user(user)



class AuthService:

    def find_user(self, identifier: str):
        """ Look up by username first, then by email (case-insensitive)... """

        if not identifier:
            return None

        user = User.query.filter_by(username = identifier).first()
        if user:
            return user

        return User.query.filter(func.lower(User.email) == identifier.lower()).first()


    def authenticate(self, identifier: str, password: str):
        """
        Verify credentials.

        A missing account still costs one scrypt verification, so the
        response time does not reveal whether the username exists.

        Returns:
            User or None
        """

        user = self.find_user(identifier)

        if not user:
            verify_dummy_password(password)
            return None

        if not verify_password(password, user.password):
            return None

        return user


    def ensure_unique(self, username: str, email: str):
        """
        Raises:
            ConflictException: username or email already taken
        """

        if User.query.filter_by(username = username).first():
            raise ConflictException(messages.ERROR["USERNAME_EXISTS"])

        if User.query.filter(func.lower(User.email) == email.lower()).first():
            raise ConflictException(messages.ERROR["EMAIL_EXISTS"])


    def create_account(self, args: dict, role: str, broker_id: str = None) -> User:
        """
        Insert a user with a hashed password. The row is added to the
        session; the caller commits.
        """

        self.ensure_unique(args["username"], args["email"])

        user = User(
            username = args["username"],
            password = hash_password(args["password"]),
            email = args["email"],
            name = args.get("name") or args["username"],
            company_name = args.get("company_name"),
            broker_id = broker_id or None,
            role = role
        )
        db.session.add(user)
        return user


    def register(self, args: dict) -> dict:
        """
        Create an employer account and log it in

        Args:
            args (dict): username, password, email, name?, company_name?, broker_id?

        Returns:
            dict: the new user
        """

        self.ensure_unique(args["username"], args["email"])

        broker_id = args.get("broker_id")
        if broker_id:
            broker = db.session.get(Broker, broker_id)

            if not broker:
                raise ValidationException(message = messages.ERROR["BROKER_NOT_FOUND"])

            if not broker.enabled:
                raise ValidationException(message = messages.ERROR["BROKER_DISABLED"])

        try:
            user = self.create_account(args, constants.ROLE_EMPLOYER, broker_id)
            db.session.commit()

        except ConflictException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "REGISTRATION_FAILED",
                message = messages.ERROR["REGISTRATION_FAILED"],
                details = str(errors)
            )

        start_session(user)
        logger.info("User registered", extra = {"user": user.id, "component": "auth"})

        return user.to_dict()


    def login(self, identifier: str, password: str) -> dict:
        """
        Authenticate and start a session.

        Raises:
            UnauthorizedException: one generic message for every failure
        """

        user = self.authenticate(identifier, password)

        if not user:
            raise UnauthorizedException(messages.ERROR["INVALID_CREDENTIALS"])

        if not user.active:
            raise UnauthorizedException(messages.ERROR["ACCOUNT_DISABLED"])

        user.last_login_at = datetime.now(timezone.utc)
        audit.record(user.id, audit.LOGIN, audit.ENTITY_USER, user.id)
        db.session.commit()

        start_session(user)
        return user.to_dict()


    def logout(self, user) -> dict:
        audit.record(user.id, audit.LOGOUT, audit.ENTITY_USER, user.id)
        db.session.commit()

        logout_user()
        return {"message": messages.SUCCESS["LOGOUT_SUCCESS"]}


    def check_availability(self, username: str = None, email: str = None) -> dict:
        result = {}

        if username:
            result["username_available"] = User.query.filter_by(username = username).first() is None

        if email:
            result["email_available"] = User.query.filter(
                func.lower(User.email) == email.lower()
            ).first() is None

        return result


    def change_password(self, user, current_password: str, new_password: str) -> dict:
        if not verify_password(current_password, user.password):
            raise ValidationException(message = messages.ERROR["CURRENT_PASSWORD_INVALID"])

        user.password = hash_password(new_password)
        audit.record(user.id, audit.PASSWORD_CHANGE, audit.ENTITY_USER, user.id)
        db.session.commit()

        return {"message": messages.SUCCESS["PASSWORD_CHANGE_SUCCESS"]}
