"""Tests for labels and explanations."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from engine.explainer import (
    describe_breadth,
    describe_growth,
    describe_inflow,
    describe_stay_length,
    explain_tradeoff,
)
from engine.tradeoffs import tradeoff


class TestDescribeBreadth:
    def test_thresholds(self):
        assert describe_breadth(0) == "Concentrated (few people)"
        assert describe_breadth(10) == "Concentrated (few people)"
        assert describe_breadth(90) == "Broad (many people)"
        assert describe_breadth(100) == "Broad (many people)"

    def test_mix(self):
        assert describe_breadth(55) == "Mix (55 / 100)"


class TestHousingLabels:
    def test_growth_added(self):
        assert describe_growth(1.5, 9070) == "1.5% = 136 units added in Year 1"

    def test_growth_removed(self):
        assert describe_growth(-2, 9070) == "-2% = 181 units removed in Year 1"

    def test_growth_thousands_separator(self):
        assert describe_growth(20, 9070) == "20% = 1,814 units added in Year 1"

    def test_inflow(self):
        assert describe_inflow(70) == "70 Occupied units/month (840 annually)"

    def test_stay_length(self):
        assert describe_stay_length(10) == "10 years = 0.8% monthly churn (10% annual)"
        assert describe_stay_length(2.5) == "2.5 years = 3.3% monthly churn (40% annual)"


class TestExplainTradeoff:
    def test_steps(self):
        result = tradeoff(55, 35)
        steps = explain_tradeoff(result.inputs, result.outputs)
        assert len(steps) == 4
        assert steps[0].startswith("Step 1 - Revenue")
        assert "22.75" in steps[0]
        assert "57 people" in steps[1]
