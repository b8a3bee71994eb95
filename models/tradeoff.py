from dataclasses import dataclass, field
from typing import List, Tuple

import pandas as pd


@dataclass(frozen=True)
class TradeoffInputs:
    breadth_fraction: float  # 0 = few people, 1 = many people
    tax_fraction: float


@dataclass(frozen=True)
class TradeoffOutputs:
    tax_revenue: float
    people_served: float
    help_per_person: float
    impact_score: float


@dataclass(frozen=True)
class CurvePoint:
    x: float
    y: float


@dataclass(frozen=True)
class CurveSample:
    points: Tuple[CurvePoint, ...]
    peak_index: int
    peak_value: float

    @property
    def steps(self) -> int:
        return len(self.points) - 1

    @property
    def peak_x(self) -> float:
        return self.points[self.peak_index].x

    def normalized(self, value: float) -> float:
        """Scale a y value against the sampled maximum (falls back to 1 if the max is 0)."""
        return value / (self.peak_value or 1)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"x": [p.x for p in self.points], "y": [p.y for p in self.points]})


@dataclass(frozen=True)
class PlotRect:
    x0: float
    y0: float
    width: float
    height: float


@dataclass(frozen=True)
class TradeoffResult:
    inputs: TradeoffInputs
    outputs: TradeoffOutputs
    revenue_curve: CurveSample
    allocation_curve: CurveSample
    explanation_steps: List[str] = field(default_factory=list)
