"""
Broker Settings Service

Handles:
    - Agency settings read / update (owner only)
    - Logo upload through the file storage vendor
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.broker import Broker

# Vendors
from ...vendors import FileStorage

# Services
from .branding_service import logo_endpoint

# Helpers
from ...util.uploads import unique_filename
from ...util.validators import format_phone

# Exceptions
from ...util.exceptions import NotFoundException, ServiceException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)

SETTINGS_FIELDS = ("agency_name", "color_primary", "color_secondary", "contact_email", "contact_phone")





class BrokerSettingsService:

    def get_broker(self, broker_id: str) -> Broker:
        broker = db.session.get(Broker, broker_id)

        if not broker:
            raise NotFoundException(messages.ERROR["BROKER_NOT_FOUND"])

        return broker


    def to_settings(self, broker: Broker) -> dict:
        data = broker.to_dict()
        data["logo_url"] = logo_endpoint(broker.id) if broker.logo_url else None
        return data


    def get_settings(self, user) -> dict:
        return self.to_settings(self.get_broker(user.broker_id))


    def update_settings(self, user, args: dict) -> dict:
        broker = self.get_broker(user.broker_id)

        for field in SETTINGS_FIELDS:
            if field not in args:
                continue

            value = args[field]
            if field == "contact_phone" and value:
                value = format_phone(value)
            if field in ("color_primary", "color_secondary") and value:
                value = value.lower()

            if field.startswith("contact_"):
                value = value or None

            setattr(broker, field, value)

        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "BROKER_SAVE_FAILED",
                message = messages.ERROR["BROKER_SAVE_FAILED"],
                details = str(errors)
            )

        logger.info("Broker settings updated", extra = {"user": user.id, "component": "brokers"})
        return self.to_settings(broker)


    def upload_logo(self, user, file) -> dict:
        """
        Store a new agency logo and drop the previous one
        """

        broker = self.get_broker(user.broker_id)
        storage = FileStorage()

        previous = broker.logo_url
        key = storage.upload_file(file.stream, f"brokers/{broker.id}/logo/{unique_filename(file.filename)}")

        try:
            broker.logo_url = key
            db.session.commit()

        except Exception as errors:
            db.session.rollback()
            storage.delete_file(key)

            raise ServiceException(
                error_code = "BROKER_SAVE_FAILED",
                message = messages.ERROR["BROKER_SAVE_FAILED"],
                details = str(errors)
            )

        if previous:
            storage.delete_file(previous)

        return self.to_settings(broker)
