"""Closed-form tax-revenue and breadth-vs-depth allocation model."""

import logging
import math

from models.tradeoff import TradeoffInputs, TradeoffOutputs, TradeoffResult
from engine.curve_sampler import sample_curve
from engine.explainer import explain_tradeoff
from config.defaults import (
    LAFFER_SCALE, LAFFER_P,
    PEOPLE_MIN, PEOPLE_MAX,
    OVERHEAD_BROAD, OVERHEAD_NARROW,
    UTILITY_SCALE,
    REVENUE_CURVE_STEPS, ALLOCATION_CURVE_STEPS,
)

logger = logging.getLogger(__name__)


def clamp01(x: float) -> float:
    if x is None or math.isnan(x):
        return 0.0
    return max(0.0, min(1.0, x))


def percent_to_fraction(pct: float) -> float:
    return clamp01(pct / 100) if pct is not None else 0.0


def tax_revenue(tax_fraction: float) -> float:
    """Laffer curve: zero at 0% and 100%, hump in between."""
    t = clamp01(tax_fraction)
    return LAFFER_SCALE * (t * (1 - t ** LAFFER_P))


def people_served(breadth_fraction: float) -> float:
    b = clamp01(breadth_fraction)
    return PEOPLE_MIN + (PEOPLE_MAX - PEOPLE_MIN) * b


def overhead_factor(breadth_fraction: float) -> float:
    b = clamp01(breadth_fraction)
    return 1 + OVERHEAD_BROAD * b + OVERHEAD_NARROW * (1 - b)


def help_per_person(revenue: float, breadth_fraction: float) -> float:
    effective_budget = revenue / overhead_factor(breadth_fraction)
    return effective_budget / people_served(breadth_fraction)


def utility_per_person(help_amount: float) -> float:
    """Diminishing returns on depth of help, in [0, 1) for non-negative help."""
    return 1 - math.exp(-help_amount / UTILITY_SCALE)


def total_impact(revenue: float, breadth_fraction: float) -> float:
    return people_served(breadth_fraction) * utility_per_person(help_per_person(revenue, breadth_fraction))


def compute_outputs(inputs: TradeoffInputs) -> TradeoffOutputs:
    revenue = tax_revenue(inputs.tax_fraction)
    return TradeoffOutputs(
        tax_revenue=revenue,
        people_served=people_served(inputs.breadth_fraction),
        help_per_person=help_per_person(revenue, inputs.breadth_fraction),
        impact_score=total_impact(revenue, inputs.breadth_fraction),
    )


def tradeoff(breadth_pct: float, tax_pct: float) -> TradeoffResult:
    """Scalar outputs plus both sampled curves for slider positions given in percent."""
    inputs = TradeoffInputs(
        breadth_fraction=percent_to_fraction(breadth_pct),
        tax_fraction=percent_to_fraction(tax_pct),
    )
    outputs = compute_outputs(inputs)

    revenue_curve = sample_curve(tax_revenue, REVENUE_CURVE_STEPS)
    # Depends on the current revenue, so it is resampled whenever the tax rate moves
    allocation_curve = sample_curve(
        lambda b: help_per_person(outputs.tax_revenue, b),
        ALLOCATION_CURVE_STEPS,
    )

    logger.debug(
        "Tradeoff breadth=%.2f tax=%.2f -> revenue=%.2f impact=%.1f",
        inputs.breadth_fraction, inputs.tax_fraction, outputs.tax_revenue, outputs.impact_score,
    )

    return TradeoffResult(
        inputs=inputs,
        outputs=outputs,
        revenue_curve=revenue_curve,
        allocation_curve=allocation_curve,
        explanation_steps=explain_tradeoff(inputs, outputs),
    )
