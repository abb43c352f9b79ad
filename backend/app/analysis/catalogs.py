"""Green metrics, sustainability goals and incentive catalogs.

Goals and incentives are static seed data. Green metrics scale carbon and
water estimates by investment size; the other three metrics are constant.
"""
import math
from datetime import datetime, timezone

from app.analysis.exceptions import InvalidArgumentError
from app.schemas.esg import GreenIncentive, GreenMetric, SustainabilityGoal

SUSTAINABILITY_GOALS: tuple[SustainabilityGoal, ...] = (
    SustainabilityGoal(
        id="goal-001",
        title="Achieve Carbon Neutrality",
        description="Offset 100% of carbon emissions through renewable energy and carbon credits",
        target_date="2028-12-31",
        progress=35,
        status="on-track",
        related_sdg=13,  # Climate Action
    ),
    SustainabilityGoal(
        id="goal-002",
        title="Zero Waste to Landfill",
        description="Recycle or repurpose 100% of operational waste",
        target_date="2027-06-30",
        progress=65,
        status="on-track",
        related_sdg=12,  # Responsible Consumption
    ),
    SustainabilityGoal(
        id="goal-003",
        title="50% Female Leadership",
        description="Achieve gender parity in management positions",
        target_date="2029-12-31",
        progress=28,
        status="at-risk",
        related_sdg=5,  # Gender Equality
    ),
    SustainabilityGoal(
        id="goal-004",
        title="LEED Gold Certification",
        description="Obtain LEED Gold certification for all facilities",
        target_date="2027-12-31",
        progress=50,
        status="on-track",
        related_sdg=11,  # Sustainable Cities
    ),
)

GREEN_INCENTIVES: tuple[GreenIncentive, ...] = (
    GreenIncentive(
        name="Green Factory Certification Bonus",
        description="Additional 5% tax deduction for LEED-certified facilities",
        value="5% tax deduction",
        eligibility="LEED Silver or higher",
    ),
    GreenIncentive(
        name="Renewable Energy Subsidy",
        description="Government subsidy for solar panel installation",
        value="Up to 30% of installation cost",
        eligibility="All industries",
    ),
    GreenIncentive(
        name="ETP Installation Grant",
        description="Grant for effluent treatment plant setup",
        value="Up to $100,000",
        eligibility="Manufacturing sectors",
    ),
    GreenIncentive(
        name="Green Bond Financing",
        description="Preferential interest rates for sustainable projects",
        value="2% lower interest rate",
        eligibility="ESG score > 70",
    ),
)


def _iso_utc(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def get_green_metrics(sector: str, investment_size: float, as_of: datetime | None = None) -> list[GreenMetric]:
    if not math.isfinite(investment_size):
        raise InvalidArgumentError("investment_size", f"must be a finite number, got {investment_size!r}")

    last_updated = _iso_utc(as_of or datetime.now(timezone.utc))
    return [
        GreenMetric(
            metric="Carbon Emissions",
            value=investment_size * 0.5,
            unit="tons CO2e/year",
            target=investment_size * 0.3,
            trend="stable",
            last_updated=last_updated,
        ),
        GreenMetric(
            metric="Renewable Energy Usage",
            value=25,
            unit="% of total energy",
            target=50,
            trend="improving",
            last_updated=last_updated,
        ),
        GreenMetric(
            metric="Water Consumption",
            value=investment_size * 10,
            unit="m³/year",
            target=investment_size * 7,
            trend="improving",
            last_updated=last_updated,
        ),
        GreenMetric(
            metric="Waste Recycled",
            value=65,
            unit="% of total waste",
            target=80,
            trend="stable",
            last_updated=last_updated,
        ),
        GreenMetric(
            metric="Female Workforce",
            value=45,
            unit="% of workforce",
            target=50,
            trend="improving",
            last_updated=last_updated,
        ),
    ]


def get_sustainability_goals(sector: str) -> list[SustainabilityGoal]:
    # Same catalog for every sector for now
    return list(SUSTAINABILITY_GOALS)


def get_green_incentives() -> list[GreenIncentive]:
    return list(GREEN_INCENTIVES)
