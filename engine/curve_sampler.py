"""Uniform-grid curve sampling with peak tracking for the tradeoff charts."""

from typing import Callable, List, Tuple

from models.tradeoff import CurvePoint, CurveSample, PlotRect


def sample_curve(f: Callable[[float], float], steps: int) -> CurveSample:
    """Sample f at x = i / steps for i in 0..steps and locate the first maximum."""
    if steps < 1:
        raise ValueError(f"Curve needs at least 1 step, got {steps}.")

    points = []
    peak_index = 0
    for i in range(steps + 1):
        x = i / steps
        y = f(x)
        points.append(CurvePoint(x=x, y=y))
        # Strict comparison keeps the first occurrence on ties
        if y > points[peak_index].y:
            peak_index = i

    return CurveSample(
        points=tuple(points),
        peak_index=peak_index,
        peak_value=points[peak_index].y,
    )


def to_plot_coordinates(sample: CurveSample, rect: PlotRect) -> List[Tuple[float, float]]:
    """Map samples into a pixel rectangle, y flipped so larger values sit higher."""
    coords = []
    for p in sample.points:
        px = rect.x0 + p.x * rect.width
        py = rect.y0 + rect.height - sample.normalized(p.y) * rect.height
        coords.append((px, py))
    return coords


def marker_coordinates(sample: CurveSample, rect: PlotRect, x: float, y: float) -> Tuple[float, float]:
    """Position of an off-grid point (e.g. the current slider value) on the same scale."""
    return (
        rect.x0 + x * rect.width,
        rect.y0 + rect.height - sample.normalized(y) * rect.height,
    )
