"""
ESG engine - scores an investor on Environmental, Social and Governance pillars
and compares the result with sector peers.

environmental = mean(carbon_footprint, energy_efficiency, waste_management, water_usage)
social        = mean(labor_practices, community_impact, diversity_inclusion)
governance    = mean(transparency, ethical_governance, compliance_record)
overall       = environmental*0.40 + social*0.35 + governance*0.25

Modifiers are step functions, not curves: green cover only counts above 20%,
female workforce only above 40%, and safety incidents only at 0 (bonus) or
above 5 (penalty). One to five incidents leave labor practices untouched.
"""
import logging
from typing import Sequence

from app.analysis.certifications import certification_adjustments
from app.analysis.grading import clamp, finite_or, round_half_up, score_to_rating
from app.analysis.sector_baselines import get_baseline, get_peer_average
from app.schemas.esg import ESGBreakdown, ESGScore, PeerComparison, PillarGap

logger = logging.getLogger(__name__)

ENVIRONMENTAL_WEIGHT = 0.40
SOCIAL_WEIGHT = 0.35
GOVERNANCE_WEIGHT = 0.25

COMMUNITY_IMPACT_BASE = 60
DIVERSITY_INCLUSION_BASE = 50
TRANSPARENCY_BASE = 70  # registered firms are assumed reasonably transparent
ETHICAL_GOVERNANCE_BASE = 75
COMPLIANCE_RECORD_BASE = 90
COMPLIANCE_RECORD_FLOOR = 50
COMPLIANCE_PENALTY_PER_INCIDENT = 5

SOLAR_BONUS = 15
ETP_BONUS = 20
GREEN_COVER_THRESHOLD = 20
GREEN_COVER_BONUS = 10
FEMALE_WORKFORCE_THRESHOLD = 40
DIVERSITY_BONUS = 20
ZERO_INCIDENT_BONUS = 15
HIGH_INCIDENT_THRESHOLD = 5
HIGH_INCIDENT_PENALTY = 20

PERCENTILE_FLOOR = 5
PERCENTILE_CEILING = 95


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def calculate_esg_score(
    sector: str,
    certifications: Sequence[str] | None = None,
    has_etp: bool = False,
    has_solar_power: bool = False,
    green_cover_percent: float = 0,
    female_workforce_percent: float = 0,
    safety_incidents: int = 0,
) -> ESGScore:
    certifications = list(certifications or [])
    green_cover_percent = clamp(finite_or(green_cover_percent))
    female_workforce_percent = clamp(finite_or(female_workforce_percent))
    safety_incidents = max(0, finite_or(safety_incidents))

    baseline = get_baseline(sector)
    bonuses = certification_adjustments(certifications)

    # Environmental
    carbon_footprint = baseline["carbon_footprint"]
    energy_efficiency = baseline["energy_efficiency"]
    waste_management = baseline["waste_management"]
    water_usage = baseline["water_usage"]

    if has_solar_power:
        energy_efficiency += SOLAR_BONUS
    if has_etp:
        waste_management += ETP_BONUS
    if green_cover_percent > GREEN_COVER_THRESHOLD:
        carbon_footprint += GREEN_COVER_BONUS

    carbon_footprint += bonuses.get("carbon_footprint", 0)
    waste_management += bonuses.get("waste_management", 0)

    # Social
    labor_practices = baseline["labor_practices"]
    community_impact = COMMUNITY_IMPACT_BASE
    diversity_inclusion = DIVERSITY_INCLUSION_BASE

    if female_workforce_percent > FEMALE_WORKFORCE_THRESHOLD:
        diversity_inclusion += DIVERSITY_BONUS
    if safety_incidents == 0:
        labor_practices += ZERO_INCIDENT_BONUS
    elif safety_incidents > HIGH_INCIDENT_THRESHOLD:
        labor_practices -= HIGH_INCIDENT_PENALTY

    labor_practices += bonuses.get("labor_practices", 0)

    # Governance
    transparency = TRANSPARENCY_BASE
    ethical_governance = ETHICAL_GOVERNANCE_BASE
    compliance_record = max(
        COMPLIANCE_RECORD_FLOOR,
        COMPLIANCE_RECORD_BASE - safety_incidents * COMPLIANCE_PENALTY_PER_INCIDENT,
    )

    breakdown = {
        "carbon_footprint": clamp(carbon_footprint),
        "energy_efficiency": clamp(energy_efficiency),
        "waste_management": clamp(waste_management),
        "water_usage": clamp(water_usage),
        "labor_practices": clamp(labor_practices),
        "community_impact": clamp(community_impact),
        "diversity_inclusion": clamp(diversity_inclusion),
        "transparency": clamp(transparency),
        "ethical_governance": clamp(ethical_governance),
        "compliance_record": clamp(compliance_record),
    }

    environmental = _mean([
        breakdown["carbon_footprint"],
        breakdown["energy_efficiency"],
        breakdown["waste_management"],
        breakdown["water_usage"],
    ])
    social = _mean([
        breakdown["labor_practices"],
        breakdown["community_impact"],
        breakdown["diversity_inclusion"],
    ])
    governance = _mean([
        breakdown["transparency"],
        breakdown["ethical_governance"],
        breakdown["compliance_record"],
    ])

    overall = clamp(
        environmental * ENVIRONMENTAL_WEIGHT
        + social * SOCIAL_WEIGHT
        + governance * GOVERNANCE_WEIGHT
    )
    overall_rounded = round_half_up(overall)

    strengths, improvements = _assess(environmental, social, governance, len(certifications))

    logger.debug(
        "ESG score for sector=%r: overall=%.2f E=%.2f S=%.2f G=%.2f",
        sector, overall, environmental, social, governance,
    )

    return ESGScore(
        overall=overall_rounded,
        environmental=round_half_up(environmental),
        social=round_half_up(social),
        governance=round_half_up(governance),
        breakdown=ESGBreakdown(**{name: round_half_up(value) for name, value in breakdown.items()}),
        rating=score_to_rating(overall_rounded),
        certifications=certifications,
        strengths=strengths,
        improvements=improvements,
    )


def _assess(
    environmental: float, social: float, governance: float, certification_count: int
) -> tuple[list[str], list[str]]:
    strengths: list[str] = []
    improvements: list[str] = []

    if environmental > 70:
        strengths.append("Strong environmental practices")
    elif environmental < 50:
        improvements.append("Improve environmental management")

    if social > 70:
        strengths.append("Excellent social responsibility")
    elif social < 50:
        improvements.append("Enhance labor and community programs")

    if governance > 75:
        strengths.append("Robust governance framework")
    elif governance < 60:
        improvements.append("Strengthen compliance and transparency")

    if certification_count > 3:
        strengths.append("Well-certified operations")
    elif certification_count == 0:
        improvements.append("Obtain relevant certifications")

    return strengths, improvements


def compare_esg_with_peers(score: ESGScore, sector: str) -> PeerComparison:
    """Estimate where a score sits among sector peers.

    Each point above the sector average moves the percentile up by two. The
    result never leaves [5, 95]: the model does not claim certainty at the
    extremes.
    """
    average = get_peer_average(sector)

    percentile_rank = clamp(
        50 + (score.overall - average["overall"]) * 2,
        PERCENTILE_FLOOR,
        PERCENTILE_CEILING,
    )

    return PeerComparison(
        percentile_rank=percentile_rank,
        better_than=round_half_up(percentile_rank),
        gap=PillarGap(
            environmental=round_half_up(score.environmental - average["environmental"]),
            social=round_half_up(score.social - average["social"]),
            governance=round_half_up(score.governance - average["governance"]),
        ),
    )
