""" Control center counters... """

# Python Packages
from sqlalchemy import func

# Database
from ...config.database import db

# Models
from ...models.user import User
from ...models.broker import Broker
from ...models.company import Company
from ...models.application import Application

# Constants
from ...base import constants





class StatsService:

    def get_stats(self) -> dict:
        by_status = dict(
            db.session.query(Application.status, func.count(Application.id))
            .group_by(Application.status)
            .all()
        )

        return {
            "users": User.query.count(),
            "active_users": User.query.filter_by(active = True).count(),
            "brokers": Broker.query.count(),
            "companies": Company.query.count(),
            "applications": {
                "total": sum(by_status.values()),
                "by_status": {status: by_status.get(status, 0) for status in constants.APPLICATION_STATUSES}
            }
        }
