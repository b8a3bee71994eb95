from models.housing import (
    SimulationParameters, HousingState, MonthStep, MonthlyRecord,
    SimulationTrace, AvailabilitySummary, SimulationResult, SummaryStatistics,
)
from models.tradeoff import (
    TradeoffInputs, TradeoffOutputs, CurvePoint, CurveSample, PlotRect, TradeoffResult,
)
