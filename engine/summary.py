"""Display-ready aggregates pulled from a simulation trace."""

from typing import Optional

import pandas as pd

from models.housing import SimulationTrace, SummaryStatistics
from engine.rounding import js_round
from config.defaults import INITIAL_UNITS, ON_TARGET_MIN_PCT, ON_TARGET_MAX_PCT


def _units_at(trace: SimulationTrace, index: int, fallback: int) -> int:
    if -len(trace) <= index < len(trace):
        return trace[index].total_units
    return fallback


def _rate_at(trace: SimulationTrace, index: int) -> float:
    if -len(trace) <= index < len(trace):
        return trace[index].occupancy_rate_pct
    return 0.0


def extract_summary(
    trace: SimulationTrace,
    housing_cost_per_unit: int,
    initial_units: Optional[int] = None,
) -> SummaryStatistics:
    """Month-1 / year-10 occupancy and year-1 / year-10 budget from a trace.

    "Month 1" is trace index 0 and "year 10" is the last record (index 120 for
    the default horizon). Year-1 units are read at index 12.
    """
    fallback = initial_units if initial_units is not None else INITIAL_UNITS
    year1_units = _units_at(trace, 12, fallback)
    year10_units = _units_at(trace, -1, fallback)

    return SummaryStatistics(
        month1_occupancy_rate=_rate_at(trace, 0),
        year10_occupancy_rate=_rate_at(trace, -1),
        year1_units=year1_units,
        year10_units=year10_units,
        year1_budget=year1_units * housing_cost_per_unit,
        year10_budget=year10_units * housing_cost_per_unit,
    )


def is_on_target(rate_pct: float) -> bool:
    return ON_TARGET_MIN_PCT <= rate_pct <= ON_TARGET_MAX_PCT


def year_one_unit_change(initial_units: int, annual_growth_rate_pct: float) -> int:
    """Approximate units added (or removed, if negative) over the first year."""
    return js_round(initial_units * (annual_growth_rate_pct / 100))


def trace_to_frame(trace: SimulationTrace) -> pd.DataFrame:
    """One row per month for charting and tables."""
    return pd.DataFrame([
        {
            "month": r.month_index,
            "year": r.year_index,
            "units": r.total_units,
            "occupied": r.occupied_units,
            "occupancy_rate": r.occupancy_rate_pct,
            "turnover": r.turnover_units,
            "inflow": r.inflow_units,
        }
        for r in trace
    ])
