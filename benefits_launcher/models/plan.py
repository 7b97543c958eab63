"""
Model: Plan
Table: plans

Carrier plan catalogue. Monthly cost is stored in cents.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db

# Helpers
from ..util.formatters import cents_to_dollars, format_date, format_datetime





class Plan(db.Model):

    # Table Name
    __tablename__ = "plans"

    __table_args__ = (
        db.UniqueConstraint("carrier", "name", name = "uq_plans_carrier_name"),
    )

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    carrier = db.Column(db.String(100), nullable = False, index = True, doc = "e.g. Anthem, Blue Shield")
    name = db.Column(db.String(255), nullable = False)
    type = db.Column(db.String(20), nullable = False, doc = "PPO / HMO / EPO / HSA")
    network = db.Column(db.String(255), nullable = False)
    metal_tier = db.Column(db.String(20), nullable = True, doc = "Bronze / Silver / Gold / Platinum")
    contract_code = db.Column(db.String(50), nullable = True)
    monthly_cost = db.Column(db.Integer, nullable = False, default = 0)
    details = db.Column(db.Text, nullable = True)
    plan_year = db.Column(db.Integer, nullable = True)
    effective_start = db.Column(db.Date, nullable = True)
    effective_end = db.Column(db.Date, nullable = True)

    created_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable = True)

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        server_default = func.now()
    )


    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "carrier": self.carrier,
            "name": self.name,
            "type": self.type,
            "network": self.network,
            "metal_tier": self.metal_tier,
            "contract_code": self.contract_code,
            "monthly_cost": self.monthly_cost,
            "monthly_cost_dollars": cents_to_dollars(self.monthly_cost),
            "details": self.details,
            "plan_year": self.plan_year,
            "effective_start": format_date(self.effective_start),
            "effective_end": format_date(self.effective_end),
            "created_at": format_datetime(self.created_at)
        }


    def __repr__(self):
        return f"<Plan {self.carrier} {self.name}>"
