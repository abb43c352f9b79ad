"""
Certification bonuses and routing.

The bonus for a certification is looked up by its exact name. Which sub-score
receives that bonus is decided by keyword containment, so free-text names such
as "ISO 14001:2015" still route to carbon footprint (while earning no bonus,
because the exact lookup misses). Compatibility with existing scores depends
on keeping both rules as they are.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Literal, Mapping

CERTIFICATION_BONUS: Mapping[str, float] = MappingProxyType({
    "LEED": 15,
    "ISO 14001": 12,
    "ISO 45001": 10,
    "B Corp": 20,
    "Fair Trade": 15,
    "GOTS": 12,
    "OEKO-TEX": 10,
    "Higg Index": 15,
    "ZDHC": 12,
    "SA8000": 18,
    "Carbon Neutral": 20,
})


RoutedField = Literal["carbon_footprint", "waste_management", "labor_practices"]


@dataclass(frozen=True)
class CertificationRoute:
    keyword: str
    affects: RoutedField  # breakdown field receiving the bonus


CERTIFICATION_ROUTES: tuple[CertificationRoute, ...] = (
    CertificationRoute("LEED", "carbon_footprint"),
    CertificationRoute("ISO 14001", "carbon_footprint"),
    CertificationRoute("Carbon", "carbon_footprint"),
    CertificationRoute("ZDHC", "waste_management"),
    CertificationRoute("ETP", "waste_management"),
    CertificationRoute("SA8000", "labor_practices"),
    CertificationRoute("Fair Trade", "labor_practices"),
)


def get_bonus(certification: str) -> float:
    return CERTIFICATION_BONUS.get(certification, 0)


def routed_fields(certification: str) -> list[RoutedField]:
    """Breakdown fields a certification contributes to, each listed once."""
    fields: list[RoutedField] = []
    for route in CERTIFICATION_ROUTES:
        if route.keyword in certification and route.affects not in fields:
            fields.append(route.affects)
    return fields


def certification_adjustments(certifications: Iterable[str]) -> dict[str, float]:
    """Sum certification bonuses per breakdown field.

    Duplicates are credited each time they appear.
    """
    adjustments: dict[str, float] = {}
    for cert in certifications:
        bonus = get_bonus(cert)
        for field in routed_fields(cert):
            adjustments[field] = adjustments.get(field, 0) + bonus
    return adjustments
