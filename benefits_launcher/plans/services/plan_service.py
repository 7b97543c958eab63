"""
Plan Catalogue Service

Handles:
    - Filtered plan listing
    - Distinct carriers
    - Seeding the sample catalogue
"""

# Python Packages
import logging
from datetime import date
from typing import Optional

# Database
from ...config.database import db

# Models
from ...models.plan import Plan

# Config
from ..config.seed_plans import SEED_PLANS

# Exceptions
from ...util.exceptions import NotFoundException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





def covers_date(plan: Plan, coverage_date: Optional[date]) -> bool:
    """
    A plan is offered on `coverage_date` unless both effective bounds
    are set and the date falls outside them.
    """

    if not coverage_date or not plan.effective_start or not plan.effective_end:
        return True

    return plan.effective_start <= coverage_date <= plan.effective_end



class PlanService:

    def list_plans(self, carrier: str = None, coverage_date: date = None, metal_tier: str = None, plan_type: str = None) -> list:
        query = Plan.query

        if carrier:
            query = query.filter(Plan.carrier == carrier)

        if metal_tier:
            query = query.filter(Plan.metal_tier == metal_tier)

        if plan_type:
            query = query.filter(Plan.type == plan_type)

        plans = query.order_by(Plan.carrier, Plan.monthly_cost).all()

        return [plan.to_dict() for plan in plans if covers_date(plan, coverage_date)]


    def list_carriers(self) -> list:
        rows = db.session.query(Plan.carrier).distinct().order_by(Plan.carrier).all()
        return [row[0] for row in rows]


    def get_plan(self, plan_id: int) -> Plan:
        plan = db.session.get(Plan, plan_id)

        if not plan:
            raise NotFoundException(messages.ERROR["PLAN_NOT_FOUND"])

        return plan


    def seed_plans(self) -> int:
        """
        Insert the sample catalogue entries that are not there yet

        Returns:
            int: number of plans created
        """

        created = 0

        for entry in SEED_PLANS:
            exists = Plan.query.filter_by(name = entry["name"], carrier = entry["carrier"]).first()
            if exists:
                continue

            db.session.add(Plan(**entry))
            created += 1

        db.session.commit()

        logger.info("Seeded %s plans", created, extra = {"component": "plans"})
        return created
