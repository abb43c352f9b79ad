"""
Sector ESG baselines and peer averages.

Baselines are the sub-scores assumed for an industry before any
investor-specific adjustment. Peer averages are the pillar scores a typical
firm in the sector reaches and drive the percentile comparison.

Sector names are matched exactly. Unknown sectors are not an error: they fall
back to a uniform default.
"""
import logging
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

BASELINE_FIELDS = (
    "carbon_footprint",
    "energy_efficiency",
    "waste_management",
    "water_usage",
    "labor_practices",
)

SECTOR_ESG_BASELINES: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "Textile & Garments":   MappingProxyType({"carbon_footprint": 45, "energy_efficiency": 50, "waste_management": 55, "water_usage": 40, "labor_practices": 60}),
    "Technology & IT":      MappingProxyType({"carbon_footprint": 75, "energy_efficiency": 80, "waste_management": 70, "water_usage": 85, "labor_practices": 75}),
    "Pharmaceuticals":      MappingProxyType({"carbon_footprint": 55, "energy_efficiency": 60, "waste_management": 70, "water_usage": 65, "labor_practices": 70}),
    "Heavy Manufacturing":  MappingProxyType({"carbon_footprint": 35, "energy_efficiency": 40, "waste_management": 50, "water_usage": 45, "labor_practices": 55}),
})

# Uniform baseline for sectors without a seeded profile
DEFAULT_BASELINE: Mapping[str, float] = MappingProxyType({field: 50 for field in BASELINE_FIELDS})

# Simulated industry averages per pillar
SECTOR_PEER_AVERAGES: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "Textile & Garments":   MappingProxyType({"overall": 58, "environmental": 55, "social": 62, "governance": 60}),
    "Technology & IT":      MappingProxyType({"overall": 72, "environmental": 78, "social": 70, "governance": 68}),
    "Pharmaceuticals":      MappingProxyType({"overall": 65, "environmental": 62, "social": 68, "governance": 66}),
})

DEFAULT_PEER_AVERAGE: Mapping[str, float] = MappingProxyType(
    {"overall": 60, "environmental": 60, "social": 60, "governance": 60}
)


def get_baseline(sector: str | None) -> Mapping[str, float]:
    """Return the baseline sub-scores for a sector (exact, case-sensitive match)."""
    if sector and sector in SECTOR_ESG_BASELINES:
        return SECTOR_ESG_BASELINES[sector]
    logger.debug("No ESG baseline for sector %r, using default", sector)
    return DEFAULT_BASELINE


def get_peer_average(sector: str | None) -> Mapping[str, float]:
    """Return the peer-average pillar scores for a sector."""
    if sector and sector in SECTOR_PEER_AVERAGES:
        return SECTOR_PEER_AVERAGES[sector]
    logger.debug("No peer average for sector %r, using default", sector)
    return DEFAULT_PEER_AVERAGE
