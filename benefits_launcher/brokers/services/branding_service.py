"""
Branding Service

Public white-label payload of a broker agency; missing values fall
back to the platform defaults.
"""

# Database
from ...config.database import db

# Models
from ...models.broker import Broker

# Constants
from ...base import constants

# Vendors
from ...vendors import FileStorage

# Exceptions
from ...util.exceptions import NotFoundException

# App Messages
from ...util import messages





def logo_endpoint(broker_id: str) -> str:
    return f"/api/branding/{broker_id}/logo"



class BrandingService:

    def get_enabled_broker(self, broker_id: str) -> Broker:
        """
        Raises:
            NotFoundException: unknown or disabled agency
        """

        broker = db.session.get(Broker, broker_id)

        if not broker or not broker.enabled:
            raise NotFoundException(messages.ERROR["BROKER_NOT_FOUND"])

        return broker


    def get_branding(self, broker_id: str) -> dict:
        broker = self.get_enabled_broker(broker_id)
        defaults = constants.DEFAULT_BRANDING

        return {
            "broker_id": broker.id,
            "agency_name": broker.agency_name or defaults["agency_name"],
            "product_name": defaults["product_name"],
            "color_primary": broker.color_primary or defaults["color_primary"],
            "color_secondary": broker.color_secondary or defaults["color_secondary"],
            "logo_url": logo_endpoint(broker.id) if broker.logo_url else defaults["logo_url"],
            "contact_email": broker.contact_email or defaults["contact_email"],
            "contact_phone": broker.contact_phone or defaults["contact_phone"]
        }


    def read_logo(self, broker_id: str):
        """
        Returns:
            (bytes, str): logo content and its file name
        """

        broker = self.get_enabled_broker(broker_id)

        if not broker.logo_url:
            raise NotFoundException(messages.ERROR["LOGO_NOT_FOUND"])

        content = FileStorage().read_file(broker.logo_url)
        return content, broker.logo_url.rsplit("/", 1)[-1]
