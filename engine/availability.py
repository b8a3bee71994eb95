"""Newly-available unit accounting, folded alongside the occupancy trace."""

from dataclasses import dataclass, replace

from models.housing import AvailabilitySummary, HousingState, MonthStep
from engine.rounding import js_round
from config.defaults import TARGET_OCCUPANCY


def occupancy_gap(state: HousingState, target_occupancy: float = TARGET_OCCUPANCY) -> int:
    """Units needed to bring the state up to target occupancy (negative = over target)."""
    return js_round(state.total_units * target_occupancy) - state.occupied_units


@dataclass(frozen=True)
class AvailabilityAccumulator:
    month1_gap: int
    cumulative: int = 0
    target_occupancy: float = TARGET_OCCUPANCY

    @classmethod
    def start(cls, state: HousingState, target_occupancy: float = TARGET_OCCUPANCY) -> "AvailabilityAccumulator":
        return cls(
            month1_gap=occupancy_gap(state, target_occupancy),
            target_occupancy=target_occupancy,
        )

    def add(self, step: MonthStep) -> "AvailabilityAccumulator":
        # Shrinking inventory frees nothing; vacancies from turnover always count.
        added = step.turnover
        if step.new_units > 0:
            added += step.new_units
        return replace(self, cumulative=self.cumulative + added)

    def finish(self, final_state: HousingState) -> AvailabilitySummary:
        year10_gap = occupancy_gap(final_state, self.target_occupancy)
        return AvailabilitySummary(
            month1_available_units=self.month1_gap,
            month1_annual_available=self.month1_gap * 12,
            year10_available_units=year10_gap,
            year10_annual_available=year10_gap * 12,
            cumulative_available_units=self.cumulative,
        )
