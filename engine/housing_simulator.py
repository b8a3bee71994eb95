"""Permanent supportive housing occupancy simulator — month-by-month stock and flow."""

import logging
import math
from dataclasses import replace
from typing import List, Tuple

from models.housing import (
    SimulationParameters, HousingState, MonthStep, MonthlyRecord,
    SimulationTrace, AvailabilitySummary, SimulationResult,
)
from engine.availability import AvailabilityAccumulator
from engine.rounding import js_round
from config.defaults import (
    MIN_STAY_LENGTH_YEARS, MIN_GROWTH_RATE_PCT, MAX_GROWTH_RATE_PCT,
    OCCUPANCY_FLOOR_POLICY, OCCUPANCY_FLOOR_POLICIES,
    INITIAL_UNITS, HORIZON_MONTHS, DEFAULT_MONTHLY_INFLOW,
    DEFAULT_STAY_LENGTH_YEARS, DEFAULT_GROWTH_RATE_PCT,
)

logger = logging.getLogger(__name__)


def _finite_or(value, default):
    if value is None or not math.isfinite(value):
        return default
    return value


def normalize_parameters(params: SimulationParameters) -> SimulationParameters:
    """Clamp parameters to the ranges the simulator can handle."""
    stay = _finite_or(params.stay_length_years, DEFAULT_STAY_LENGTH_YEARS)
    growth = _finite_or(params.annual_growth_rate_pct, DEFAULT_GROWTH_RATE_PCT)
    units = _finite_or(params.initial_units, INITIAL_UNITS)
    inflow = _finite_or(params.monthly_inflow, DEFAULT_MONTHLY_INFLOW)
    horizon = _finite_or(params.horizon_months, HORIZON_MONTHS)

    normalized = replace(
        params,
        initial_units=max(1, int(units)),
        monthly_inflow=max(0, int(inflow)),
        stay_length_years=max(MIN_STAY_LENGTH_YEARS, stay),
        annual_growth_rate_pct=max(MIN_GROWTH_RATE_PCT, min(MAX_GROWTH_RATE_PCT, growth)),
        horizon_months=max(0, int(horizon)),
    )
    if normalized != params:
        logger.warning("Simulation parameters clamped: %s -> %s", params, normalized)
    return normalized


def initial_state(params: SimulationParameters) -> HousingState:
    """Month-0 inventory, starting exactly at target occupancy."""
    return HousingState(
        total_units=params.initial_units,
        occupied_units=js_round(params.initial_units * params.target_occupancy),
    )


def step_month(
    state: HousingState,
    params: SimulationParameters,
    floor_policy: str = OCCUPANCY_FLOOR_POLICY,
) -> MonthStep:
    """Advance the housing stock by one month."""
    # Step 1: Inventory growth (floor rounds negative growth further down)
    new_units = math.floor(state.total_units * params.annual_growth_rate_pct / 1200)
    total_units = state.total_units + new_units

    # Step 2: Turnover from average length of stay
    turnover = js_round(state.occupied_units * params.monthly_turnover_rate)

    # Step 3: Inflow, capped at available inventory
    occupied_units = min(state.occupied_units - turnover + params.monthly_inflow, total_units)
    if floor_policy == "zero":
        occupied_units = max(0, occupied_units)

    return MonthStep(
        state=HousingState(total_units=total_units, occupied_units=occupied_units),
        new_units=new_units,
        turnover=turnover,
    )


def occupancy_rate_pct(state: HousingState) -> float:
    if state.total_units <= 0:
        return 0.0
    return js_round(state.occupied_units / state.total_units * 1000) / 10


def make_record(month: int, step: MonthStep, inflow: int) -> MonthlyRecord:
    return MonthlyRecord(
        month_index=month,
        year_index=month // 12,
        total_units=step.state.total_units,
        occupied_units=step.state.occupied_units,
        occupancy_rate_pct=occupancy_rate_pct(step.state),
        turnover_units=step.turnover,
        inflow_units=inflow,
    )


def build_trace(
    params: SimulationParameters,
    floor_policy: str = OCCUPANCY_FLOOR_POLICY,
) -> Tuple[SimulationTrace, AvailabilitySummary]:
    """Fold step_month over months 0..horizon, accumulating availability in the same pass."""
    if floor_policy not in OCCUPANCY_FLOOR_POLICIES:
        raise ValueError(
            f"Unknown occupancy floor policy: {floor_policy}. "
            f"Use one of {', '.join(OCCUPANCY_FLOOR_POLICIES)}."
        )

    state = initial_state(params)
    availability = AvailabilityAccumulator.start(state, params.target_occupancy)
    records: List[MonthlyRecord] = []

    for month in range(params.horizon_months + 1):
        step = step_month(state, params, floor_policy)
        records.append(make_record(month, step, params.monthly_inflow))
        availability = availability.add(step)
        state = step.state

    return tuple(records), availability.finish(state)


def simulate(
    params: SimulationParameters,
    floor_policy: str = OCCUPANCY_FLOOR_POLICY,
) -> SimulationResult:
    """Run the full horizon for one parameter set and return a fresh trace + availability."""
    params = normalize_parameters(params)
    trace, availability = build_trace(params, floor_policy)
    logger.debug(
        "Simulated %d months: units %d -> %d, occupancy %.1f%% -> %.1f%%",
        len(trace), trace[0].total_units, trace[-1].total_units,
        trace[0].occupancy_rate_pct, trace[-1].occupancy_rate_pct,
    )
    return SimulationResult(trace=trace, availability=availability)
