import logging

from fastapi import APIRouter, HTTPException

from app.analysis.carbon_calculator import calculate_carbon_footprint
from app.analysis.catalogs import get_green_incentives, get_green_metrics, get_sustainability_goals
from app.analysis.esg_engine import calculate_esg_score, compare_esg_with_peers
from app.analysis.exceptions import InvalidArgumentError
from app.analysis.report_builder import ESGReportBuilder
from app.schemas.esg import (
    CarbonFootprint,
    CarbonFootprintRequest,
    ESGReport,
    ESGScore,
    ESGScoreRequest,
    GreenIncentive,
    GreenMetric,
    InvestorProfile,
    PeerComparison,
    PeerComparisonRequest,
    SustainabilityGoal,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/esg", tags=["esg"])


def _score(request: ESGScoreRequest) -> ESGScore:
    return calculate_esg_score(
        request.sector,
        request.certifications,
        has_etp=request.has_etp,
        has_solar_power=request.has_solar_power,
        green_cover_percent=request.green_cover_percent,
        female_workforce_percent=request.female_workforce_percent,
        safety_incidents=request.safety_incidents,
    )


@router.post("/score", response_model=ESGScore)
async def score_investor(request: ESGScoreRequest):
    return _score(request)


@router.post("/peer-comparison", response_model=PeerComparison)
async def peer_comparison(request: PeerComparisonRequest):
    return compare_esg_with_peers(_score(request), request.sector)


@router.post("/carbon-footprint", response_model=CarbonFootprint)
async def carbon_footprint(request: CarbonFootprintRequest):
    try:
        return calculate_carbon_footprint(
            request.sector,
            request.employee_count,
            request.annual_energy_kwh,
            request.has_renewable_energy,
        )
    except InvalidArgumentError as e:
        logger.warning("Rejected carbon footprint request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/metrics", response_model=list[GreenMetric])
async def green_metrics(sector: str = "", investment_size: float = 0):
    return get_green_metrics(sector, investment_size)


@router.get("/goals", response_model=list[SustainabilityGoal])
async def sustainability_goals(sector: str = ""):
    return get_sustainability_goals(sector)


@router.get("/incentives", response_model=list[GreenIncentive])
async def green_incentives():
    return get_green_incentives()


@router.post("/report", response_model=ESGReport)
async def esg_report(profile: InvestorProfile):
    # InvalidArgumentError is mapped to 400 by the app-level handler
    return ESGReportBuilder().build(profile)
