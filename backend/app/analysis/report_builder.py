"""
ESG report builder - combines score, peer comparison, carbon footprint and
catalogs into the single report shown on the investor dashboard.

Profile defaults when a field is omitted:
  employee_count       = settings.report_default_employee_count (500)
  annual_energy_kwh    = investment_size * settings.report_kwh_per_investment_unit (100)
  has_renewable_energy = has_solar_power
"""
import logging
from datetime import datetime, timezone

from app.analysis.carbon_calculator import calculate_carbon_footprint
from app.analysis.catalogs import get_green_incentives, get_green_metrics, get_sustainability_goals
from app.analysis.esg_engine import calculate_esg_score, compare_esg_with_peers
from app.analysis.grading import rating_to_tier, score_to_band
from app.config import Settings, get_settings
from app.schemas.esg import ESGReport, InvestorProfile, PillarBands

logger = logging.getLogger(__name__)


class ESGReportBuilder:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def build(self, profile: InvestorProfile, as_of: datetime | None = None) -> ESGReport:
        as_of = as_of or datetime.now(timezone.utc)

        score = calculate_esg_score(
            profile.sector,
            profile.certifications,
            has_etp=profile.has_etp,
            has_solar_power=profile.has_solar_power,
            green_cover_percent=profile.green_cover_percent,
            female_workforce_percent=profile.female_workforce_percent,
            safety_incidents=profile.safety_incidents,
        )

        employee_count = profile.employee_count
        if employee_count is None:
            employee_count = self.settings.report_default_employee_count

        annual_energy_kwh = profile.annual_energy_kwh
        if annual_energy_kwh is None:
            annual_energy_kwh = profile.investment_size * self.settings.report_kwh_per_investment_unit

        has_renewable = profile.has_renewable_energy
        if has_renewable is None:
            has_renewable = profile.has_solar_power

        carbon = calculate_carbon_footprint(
            profile.sector, employee_count, annual_energy_kwh, has_renewable
        )

        report = ESGReport(
            sector=profile.sector,
            score=score,
            rating_tier=rating_to_tier(score.rating),
            pillar_bands=PillarBands(
                environmental=score_to_band(score.environmental),
                social=score_to_band(score.social),
                governance=score_to_band(score.governance),
            ),
            peer_comparison=compare_esg_with_peers(score, profile.sector),
            carbon_footprint=carbon,
            green_metrics=get_green_metrics(profile.sector, profile.investment_size, as_of=as_of),
            sustainability_goals=get_sustainability_goals(profile.sector),
            green_incentives=get_green_incentives(),
            generated_at=as_of.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        )

        logger.info(
            "Built ESG report for sector=%r: overall=%d rating=%s",
            profile.sector, score.overall, score.rating,
        )
        return report
