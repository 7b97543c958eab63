"""
User Administration Service

Handles:
    - All users with their agency name
    - Activate / deactivate, role change
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.user import User

# Helpers
from ...util import audit

# Exceptions
from ...util.exceptions import NotFoundException, ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("active", "role")





def user_row(user: User) -> dict:
    data = user.to_dict()
    data["broker_agency"] = user.broker.agency_name if user.broker else None
    return data



class UserAdminService:

    def list_users(self) -> list:
        users = User.query.order_by(User.id).all()
        return [user_row(user) for user in users]


    def update_user(self, admin, user_id: int, args: dict) -> dict:
        user = db.session.get(User, user_id)

        if not user:
            raise NotFoundException(messages.ERROR["USER_NOT_FOUND"])

        changes = []

        try:
            for field in UPDATABLE_FIELDS:
                if field not in args:
                    continue

                setattr(user, field, args[field])
                changes.append(f"{field}={args[field]}")

            audit.record(
                admin.id, audit.ADMIN_USER_UPDATE, audit.ENTITY_USER, user.id,
                f"Updated user {user.username}: {', '.join(changes)}"
            )
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "USER_UPDATE_FAILED",
                message = messages.ERROR["USER_UPDATE_FAILED"],
                details = str(errors)
            )

        logger.info("User %s updated", user.id, extra = {"user": admin.id, "component": "admin"})
        return user_row(user)
