from dataclasses import dataclass
from typing import Tuple

from config.defaults import (
    INITIAL_UNITS, TARGET_OCCUPANCY, HORIZON_MONTHS,
    DEFAULT_MONTHLY_INFLOW, DEFAULT_STAY_LENGTH_YEARS,
    DEFAULT_GROWTH_RATE_PCT, DEFAULT_HOUSING_COST,
)


@dataclass(frozen=True)
class SimulationParameters:
    initial_units: int = INITIAL_UNITS
    monthly_inflow: int = DEFAULT_MONTHLY_INFLOW
    stay_length_years: float = DEFAULT_STAY_LENGTH_YEARS
    annual_growth_rate_pct: float = DEFAULT_GROWTH_RATE_PCT  # e.g. 2.5 for 2.5%/yr
    housing_cost_per_unit: int = DEFAULT_HOUSING_COST  # budget only, no effect on dynamics
    target_occupancy: float = TARGET_OCCUPANCY
    horizon_months: int = HORIZON_MONTHS

    @property
    def monthly_turnover_rate(self) -> float:
        return 1 / (self.stay_length_years * 12)


@dataclass(frozen=True)
class HousingState:
    total_units: int
    occupied_units: int


@dataclass(frozen=True)
class MonthStep:
    """One month's transition: the resulting state and the flows that produced it."""
    state: HousingState
    new_units: int
    turnover: int


@dataclass(frozen=True)
class MonthlyRecord:
    month_index: int
    year_index: int
    total_units: int
    occupied_units: int
    occupancy_rate_pct: float  # one decimal
    turnover_units: int
    inflow_units: int


SimulationTrace = Tuple[MonthlyRecord, ...]


@dataclass(frozen=True)
class AvailabilitySummary:
    month1_available_units: int
    month1_annual_available: int
    year10_available_units: int
    year10_annual_available: int
    cumulative_available_units: int


@dataclass(frozen=True)
class SimulationResult:
    trace: SimulationTrace
    availability: AvailabilitySummary


@dataclass(frozen=True)
class SummaryStatistics:
    month1_occupancy_rate: float
    year10_occupancy_rate: float
    year1_units: int
    year10_units: int
    year1_budget: int
    year10_budget: int
