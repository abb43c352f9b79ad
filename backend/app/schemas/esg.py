from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Rating = Literal["AAA", "AA", "A", "BBB", "BB", "B", "CCC", "CC", "C"]


class CamelModel(BaseModel):
    """Frozen model serialized with camelCase keys (snake_case accepted on input)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ESGBreakdown(CamelModel):
    carbon_footprint: int = 0
    energy_efficiency: int = 0
    waste_management: int = 0
    water_usage: int = 0
    labor_practices: int = 0
    community_impact: int = 0
    diversity_inclusion: int = 0
    transparency: int = 0
    ethical_governance: int = 0
    compliance_record: int = 0


class ESGScore(CamelModel):
    overall: int = 0
    environmental: int = 0
    social: int = 0
    governance: int = 0
    breakdown: ESGBreakdown = ESGBreakdown()
    rating: Rating = "C"
    certifications: list[str] = []
    strengths: list[str] = []
    improvements: list[str] = []


class PillarGap(CamelModel):
    environmental: int = 0
    social: int = 0
    governance: int = 0


class PeerComparison(CamelModel):
    percentile_rank: float = 50  # 5-95
    better_than: int = 50
    gap: PillarGap = PillarGap()


class CarbonBreakdown(CamelModel):
    energy: int = 0
    operations: int = 0
    transport: int = 0


class CarbonFootprint(CamelModel):
    total_co2_tons: int = Field(0, alias="totalCO2Tons")
    per_employee: float = 0
    breakdown: CarbonBreakdown = CarbonBreakdown()
    offset_required: int = 0
    offset_cost: int = 0


class GreenMetric(CamelModel):
    metric: str
    value: float
    unit: str
    target: float | None = None
    trend: Literal["improving", "stable", "declining"] = "stable"
    last_updated: str = ""


class SustainabilityGoal(CamelModel):
    id: str
    title: str
    description: str
    target_date: str
    progress: int = 0  # 0-100
    status: Literal["on-track", "at-risk", "achieved", "delayed"] = "on-track"
    related_sdg: int = Field(..., alias="relatedSDG")  # UN SDG number


class GreenIncentive(CamelModel):
    name: str
    description: str
    value: str
    eligibility: str


class PillarBands(CamelModel):
    environmental: str = "weak"  # strong, moderate, weak
    social: str = "weak"
    governance: str = "weak"


# --- Requests ---


class ESGScoreRequest(CamelModel):
    sector: str = ""
    certifications: list[str] = []
    has_etp: bool = Field(False, alias="hasETP")
    has_solar_power: bool = False
    green_cover_percent: float = 0
    female_workforce_percent: float = 0
    safety_incidents: int = 0


class PeerComparisonRequest(ESGScoreRequest):
    pass


class CarbonFootprintRequest(CamelModel):
    sector: str = ""
    employee_count: int
    annual_energy_kwh: float = Field(0, alias="annualEnergyKWh")
    has_renewable_energy: bool = False


class InvestorProfile(ESGScoreRequest):
    investment_size: float = 0
    employee_count: int | None = None
    annual_energy_kwh: float | None = Field(None, alias="annualEnergyKWh")
    has_renewable_energy: bool | None = None


class ESGReport(CamelModel):
    sector: str
    score: ESGScore
    rating_tier: str = "laggard"  # leader, average, laggard
    pillar_bands: PillarBands = PillarBands()
    peer_comparison: PeerComparison = PeerComparison()
    carbon_footprint: CarbonFootprint = CarbonFootprint()
    green_metrics: list[GreenMetric] = []
    sustainability_goals: list[SustainabilityGoal] = []
    green_incentives: list[GreenIncentive] = []
    generated_at: str = ""
