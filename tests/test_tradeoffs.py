"""Tests for the tax-revenue and allocation tradeoff model."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import math

import pytest

from models.tradeoff import TradeoffInputs
from engine.tradeoffs import (
    clamp01,
    percent_to_fraction,
    tax_revenue,
    people_served,
    overhead_factor,
    help_per_person,
    utility_per_person,
    total_impact,
    compute_outputs,
    tradeoff,
)


GRID = [i / 50 for i in range(51)]


class TestClamp:
    def test_clamp01(self):
        assert clamp01(-0.5) == 0.0
        assert clamp01(1.5) == 1.0
        assert clamp01(0.3) == 0.3
        assert clamp01(float("nan")) == 0.0

    def test_percent_to_fraction(self):
        assert percent_to_fraction(55) == pytest.approx(0.55)
        assert percent_to_fraction(250) == 1.0
        assert percent_to_fraction(-10) == 0.0
        assert percent_to_fraction(float("inf")) == 1.0


class TestTaxRevenue:
    def test_endpoints_and_midpoint(self):
        assert tax_revenue(0) == 0
        assert tax_revenue(1) == 0
        assert tax_revenue(0.5) == pytest.approx(25)

    def test_out_of_range_clamped(self):
        assert tax_revenue(-1) == 0
        assert tax_revenue(2) == 0

    def test_interior_positive(self):
        assert all(tax_revenue(t) > 0 for t in GRID[1:-1])


class TestBreadth:
    def test_people_served(self):
        assert people_served(0) == 5
        assert people_served(1) == 100
        assert people_served(3) == 100

    def test_overhead_factor(self):
        assert overhead_factor(0) == pytest.approx(1.02)
        assert overhead_factor(1) == pytest.approx(1.06)

    def test_help_per_person_decreasing(self):
        revenue = 22.75
        values = [help_per_person(revenue, b) for b in GRID]
        assert all(a > b for a, b in zip(values, values[1:]))

    def test_help_per_person_value(self):
        assert help_per_person(25, 0) == pytest.approx(25 / 1.02 / 5)


class TestImpact:
    def test_utility_bounds(self):
        assert utility_per_person(0) == 0
        assert 0 <= utility_per_person(5) < 1

    @pytest.mark.parametrize("revenue", [0, 1, 10, 25])
    def test_impact_non_negative(self, revenue):
        assert all(total_impact(revenue, b) >= 0 for b in GRID)

    def test_impact_saturates_at_people_served(self):
        for b in (0, 0.3, 1):
            assert total_impact(1e6, b) == pytest.approx(people_served(b))


class TestTradeoff:
    def test_default_sliders(self):
        result = tradeoff(55, 35)
        assert result.inputs == TradeoffInputs(breadth_fraction=0.55, tax_fraction=0.35)
        assert result.outputs.tax_revenue == pytest.approx(22.75)
        assert result.outputs.people_served == pytest.approx(57.25)
        assert result.outputs == compute_outputs(result.inputs)
        assert len(result.explanation_steps) == 4

    def test_curve_sizes(self):
        result = tradeoff(55, 35)
        assert len(result.revenue_curve.points) == 221
        assert len(result.allocation_curve.points) == 241

    def test_revenue_curve_peak(self):
        curve = tradeoff(55, 35).revenue_curve
        assert curve.peak_index == 110
        assert curve.peak_x == 0.5
        assert curve.peak_value == pytest.approx(25)

    def test_allocation_curve_follows_tax(self):
        low = tradeoff(55, 10).allocation_curve
        high = tradeoff(55, 50).allocation_curve
        assert low.peak_index == 0
        assert high.peak_value > low.peak_value
        assert high.points[0].y == pytest.approx(help_per_person(25, 0))

    def test_out_of_range_inputs(self):
        result = tradeoff(150, -20)
        assert result.inputs.breadth_fraction == 1.0
        assert result.inputs.tax_fraction == 0.0
        assert result.outputs.tax_revenue == 0
        assert result.outputs.impact_score == 0
        assert result.allocation_curve.peak_index == 0
        assert all(math.isfinite(p.y) for p in result.allocation_curve.points)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
