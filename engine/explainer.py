"""Generates human-readable labels and explanations for both models."""

from typing import List

from models.tradeoff import TradeoffInputs, TradeoffOutputs
from engine.rounding import js_round
from engine.summary import year_one_unit_change
from config.defaults import BREADTH_CONCENTRATED_MAX, BREADTH_BROAD_MIN


def describe_breadth(breadth_pct: float) -> str:
    if breadth_pct <= BREADTH_CONCENTRATED_MAX:
        return "Concentrated (few people)"
    if breadth_pct >= BREADTH_BROAD_MIN:
        return "Broad (many people)"
    return f"Mix ({breadth_pct:g} / 100)"


def describe_growth(annual_growth_rate_pct: float, initial_units: int) -> str:
    change = year_one_unit_change(initial_units, annual_growth_rate_pct)
    direction = "added" if change >= 0 else "removed"
    return f"{annual_growth_rate_pct:g}% = {abs(change):,} units {direction} in Year 1"


def describe_inflow(monthly_inflow: int) -> str:
    return f"{monthly_inflow} Occupied units/month ({monthly_inflow * 12} annually)"


def describe_stay_length(stay_length_years: float) -> str:
    monthly_churn = js_round((1 / (stay_length_years * 12)) * 1000) / 10
    annual_churn = js_round((1 / stay_length_years) * 1000) / 10
    return f"{stay_length_years:g} years = {monthly_churn:g}% monthly churn ({annual_churn:g}% annual)"


def explain_tradeoff(inputs: TradeoffInputs, outputs: TradeoffOutputs) -> List[str]:
    """Produce step-by-step explanation for a tradeoff calculation."""
    steps = []

    steps.append(
        f"Step 1 - Revenue: Tax rate {inputs.tax_fraction:.0%} on the Laffer curve "
        f"=> {outputs.tax_revenue:.2f} units"
    )

    steps.append(
        f"Step 2 - Reach: Breadth {inputs.breadth_fraction:.0%} "
        f"=> {outputs.people_served:.0f} people (relative)"
    )

    steps.append(
        f"Step 3 - Depth: Revenue after overhead split across {outputs.people_served:.0f} people "
        f"=> {outputs.help_per_person:.3f} units/person"
    )

    steps.append(
        f"Step 4 - Impact: {outputs.people_served:.0f} people x diminishing-returns utility "
        f"=> {outputs.impact_score:.1f} impact units"
    )

    return steps
