"""
Broker Administration Service

Handles:
    - Agencies with user and company counts
    - Create an agency, optionally with its owner account
    - Enable / disable, flag for review
"""

# Python Packages
import logging

from sqlalchemy import func

# Database
from ...config.database import db

# Models
from ...models.broker import Broker
from ...models.user import User
from ...models.company import Company

# Constants
from ...base import constants

# Services
from ...auth.services.auth_service import AuthService

# Helpers
from ...util import audit
from ...util.validators import format_phone

# Exceptions
from ...util.exceptions import ConflictException, NotFoundException, ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





class BrokerAdminService:

    def get_broker(self, broker_id: str) -> Broker:
        broker = db.session.get(Broker, broker_id)

        if not broker:
            raise NotFoundException(messages.ERROR["BROKER_NOT_FOUND"])

        return broker


    def list_brokers(self) -> list:
        user_counts = dict(
            db.session.query(User.broker_id, func.count(User.id))
            .filter(User.broker_id.isnot(None))
            .group_by(User.broker_id)
            .all()
        )

        company_counts = dict(
            db.session.query(User.broker_id, func.count(Company.id))
            .join(Company, Company.user_id == User.id)
            .filter(User.broker_id.isnot(None))
            .group_by(User.broker_id)
            .all()
        )

        brokers = Broker.query.order_by(Broker.agency_name).all()

        return [
            dict(
                broker.to_dict(),
                user_count = user_counts.get(broker.id, 0),
                company_count = company_counts.get(broker.id, 0)
            )
            for broker in brokers
        ]


    def create_broker(self, admin, args: dict) -> dict:
        """
        Create an agency; with `owner` in the payload its owner account
        is created in the same transaction.
        """

        owner_args = args.get("owner")

        try:
            broker = Broker(
                agency_name = args["agency_name"],
                contact_email = args.get("contact_email") or None,
                contact_phone = format_phone(args["contact_phone"]) if args.get("contact_phone") else None
            )
            for field in ("color_primary", "color_secondary"):
                if args.get(field):
                    setattr(broker, field, args[field].lower())

            db.session.add(broker)
            db.session.flush()

            owner = None
            if owner_args:
                owner = AuthService().create_account(owner_args, constants.ROLE_OWNER, broker.id)
                db.session.flush()

                audit.record(
                    admin.id, audit.ADMIN_USER_CREATE, audit.ENTITY_USER, owner.id,
                    f"Created owner {owner.username} for {broker.agency_name}"
                )

            audit.record(
                admin.id, audit.ADMIN_BROKER_UPDATE, audit.ENTITY_BROKER, broker.id,
                f"Created broker {broker.agency_name}"
            )
            db.session.commit()

        except ConflictException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "BROKER_SAVE_FAILED",
                message = messages.ERROR["BROKER_SAVE_FAILED"],
                details = str(errors)
            )

        result = broker.to_dict()
        result["owner"] = owner.to_dict() if owner else None
        return result


    def _set_flag(self, admin, broker_id: str, field: str, value: bool) -> dict:
        broker = self.get_broker(broker_id)

        try:
            setattr(broker, field, value)

            audit.record(
                admin.id, audit.ADMIN_BROKER_UPDATE, audit.ENTITY_BROKER, broker.id,
                f"Set {field}={value} on {broker.agency_name}"
            )
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "BROKER_SAVE_FAILED",
                message = messages.ERROR["BROKER_SAVE_FAILED"],
                details = str(errors)
            )

        return broker.to_dict()


    def set_enabled(self, admin, broker_id: str, enabled: bool) -> dict:
        return self._set_flag(admin, broker_id, "enabled", enabled)


    def set_flagged(self, admin, broker_id: str, flagged: bool) -> dict:
        return self._set_flag(admin, broker_id, "flagged_for_review", flagged)
