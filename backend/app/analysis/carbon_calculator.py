"""
Annual carbon footprint estimate.

energy     = annual_kwh * emission_factor / 1000   (tons CO2e)
operations = employees * 0.5 t
transport  = employees * 0.3 t

The emission factor is a switch between the grid and renewable lifecycle
figures, not a blend. Operations and transport use flat per-employee
constants for every sector; this is a known limitation of the model.
"""
import logging
import math

from app.analysis.exceptions import InvalidArgumentError
from app.analysis.grading import round_half_up
from app.schemas.esg import CarbonBreakdown, CarbonFootprint

logger = logging.getLogger(__name__)

GRID_EMISSION_FACTOR = 0.75  # kg CO2 per kWh (national grid)
RENEWABLE_EMISSION_FACTOR = 0.05  # kg CO2 per kWh (lifecycle)
OPERATIONS_TONS_PER_EMPLOYEE = 0.5
TRANSPORT_TONS_PER_EMPLOYEE = 0.3
OFFSET_PRICE_PER_TON = 15


def calculate_carbon_footprint(
    sector: str,
    employee_count: int,
    annual_energy_kwh: float,
    has_renewable_energy: bool,
) -> CarbonFootprint:
    """Estimate annual CO2e emissions and the cost of offsetting them.

    Raises:
        InvalidArgumentError: if employee_count is not positive, since the
            per-employee figure would be undefined, or if either number is
            not finite.
    """
    if employee_count is None or not math.isfinite(employee_count) or employee_count <= 0:
        raise InvalidArgumentError("employee_count", f"must be a positive integer, got {employee_count!r}")
    if annual_energy_kwh is None or not math.isfinite(annual_energy_kwh):
        raise InvalidArgumentError("annual_energy_kwh", f"must be a finite number, got {annual_energy_kwh!r}")

    annual_energy_kwh = max(0, annual_energy_kwh)

    emission_factor = RENEWABLE_EMISSION_FACTOR if has_renewable_energy else GRID_EMISSION_FACTOR
    energy_emissions = annual_energy_kwh * emission_factor / 1000
    operations_emissions = employee_count * OPERATIONS_TONS_PER_EMPLOYEE
    transport_emissions = employee_count * TRANSPORT_TONS_PER_EMPLOYEE

    total = energy_emissions + operations_emissions + transport_emissions
    per_employee = total / employee_count
    offset_cost = total * OFFSET_PRICE_PER_TON

    logger.debug(
        "Carbon footprint for sector=%r: %.2f t (energy=%.2f, renewable=%s)",
        sector, total, energy_emissions, has_renewable_energy,
    )

    return CarbonFootprint(
        total_co2_tons=round_half_up(total),
        per_employee=round(per_employee, 2),
        breakdown=CarbonBreakdown(
            energy=round_half_up(energy_emissions),
            operations=round_half_up(operations_emissions),
            transport=round_half_up(transport_emissions),
        ),
        offset_required=round_half_up(total),
        offset_cost=round_half_up(offset_cost),
    )
