"""
Plan Upload Service

Handles:
    - Admin import of a carrier plan catalogue (.csv / .xlsx)
    - Defaults for missing columns
    - Skipping plans that already exist for the carrier
"""

# Python Packages
import logging
import re
from datetime import date
from decimal import Decimal, InvalidOperation

# Database
from ...config.database import db

# Models
from ...models.plan import Plan

# Config
from ..config import seed_plans

# Helpers
from ...util import audit
from ...util.spreadsheets import load_rows, remap_rows
from ...util.validators import parse_date

# Exceptions
from ...util.exceptions import ServiceException, ValidationException

# App Messages
from ...util import messages

logger = logging.getLogger(__name__)





HEADER_ALIASES = {
    "name": "name",
    "planname": "name",
    "plan": "name",
    "carrier": "carrier",
    "carriername": "carrier",
    "type": "type",
    "plantype": "type",
    "network": "network",
    "networkname": "network",
    "metaltier": "metal_tier",
    "metal": "metal_tier",
    "tier": "metal_tier",
    "contractcode": "contract_code",
    "code": "contract_code",
    "monthlycost": "monthly_cost",
    "monthlypremium": "monthly_cost",
    "premium": "monthly_cost",
    "cost": "monthly_cost",
    "details": "details",
    "description": "details",
    "effectivestart": "effective_start",
    "startdate": "effective_start",
    "effectiveend": "effective_end",
    "enddate": "effective_end"
}



def to_cents(value) -> int:
    """
    Monthly cost as integer cents.

    '$345.80' and '345.80' are dollar amounts; a bare integer such as
    '34580' is already in cents. Anything unreadable is 0.
    """

    text = str(value or "").strip()
    if not text:
        return 0

    is_dollars = "$" in text or "." in text
    text = re.sub(r"[^0-9.\-]", "", text)

    try:
        amount = Decimal(text)
    except InvalidOperation:
        return 0

    if is_dollars:
        amount = amount * 100

    return int(amount.quantize(Decimal("1")))



class PlanUploadService:

    def build_plans(self, rows: list, carrier: str, plan_year: int) -> list:
        """
        Apply upload defaults to remapped rows. Row n without a name
        becomes '<carrier> Plan n'.
        """

        plans = []

        for index, row in enumerate(rows, start = 1):
            plans.append({
                "carrier": row.get("carrier") or carrier,
                "name": row.get("name") or f"{carrier} Plan {index}",
                "type": row.get("type") or seed_plans.UPLOAD_DEFAULT_TYPE,
                "network": row.get("network") or seed_plans.UPLOAD_DEFAULT_NETWORK,
                "metal_tier": row.get("metal_tier") or seed_plans.UPLOAD_DEFAULT_METAL_TIER,
                "contract_code": row.get("contract_code") or None,
                "monthly_cost": to_cents(row.get("monthly_cost")),
                "details": row.get("details") or "",
                "plan_year": plan_year,
                "effective_start": parse_date(row.get("effective_start")),
                "effective_end": parse_date(row.get("effective_end"))
            })

        return plans


    def upload_plans(self, user, file, carrier: str, plan_year = None) -> dict:
        """
        Import a plan file for `carrier`

        Returns:
            dict: {total_plans, imported_plans, skipped_plans}
        """

        plan_year = int(plan_year) if plan_year else date.today().year

        try:
            headers, rows = load_rows(file.filename, file.read())

        except ValidationException:
            raise

        except Exception as errors:
            raise ValidationException(
                message = messages.ERROR["PLAN_FILE_UNREADABLE"],
                details = str(errors)
            )

        if not headers or not rows:
            raise ValidationException(message = messages.ERROR["PLAN_FILE_EMPTY"])

        _, records = remap_rows(headers, rows, HEADER_ALIASES)
        parsed = self.build_plans(records, carrier, plan_year)

        imported = 0
        skipped = 0
        seen = set()

        try:
            for entry in parsed:
                key = (entry["name"], entry["carrier"])

                if key in seen or Plan.query.filter_by(name = entry["name"], carrier = entry["carrier"]).first():
                    skipped += 1
                    continue

                seen.add(key)
                db.session.add(Plan(created_by = user.id, **entry))
                imported += 1

            audit.record(
                user.id, audit.ADMIN_PLAN_UPLOAD, audit.ENTITY_PLAN, None,
                f"Admin uploaded {imported} plans for carrier: {carrier}, plan year: {plan_year}"
            )
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "PLAN_UPLOAD_FAILED",
                message = messages.ERROR["PLAN_UPLOAD_FAILED"],
                details = str(errors)
            )

        logger.info(
            "Plan upload for %s: %s imported, %s skipped", carrier, imported, skipped,
            extra = {"user": user.id, "component": "plans"}
        )

        return {
            "message": messages.SUCCESS["PLAN_UPLOAD_SUCCESS"].format(imported),
            "total_plans": len(parsed),
            "imported_plans": imported,
            "skipped_plans": skipped
        }
