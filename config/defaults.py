"""Default configuration constants for the Policy Models app."""

# --- Housing simulation ---

HORIZON_YEARS = 10
HORIZON_MONTHS = HORIZON_YEARS * 12  # months 0..120 inclusive are simulated

TARGET_OCCUPANCY = 0.93  # 7% target vacancy
INITIAL_UNITS = 9070     # PSH inventory at month 0

# On-target occupancy band (percent, inclusive)
ON_TARGET_MIN_PCT = 92.0
ON_TARGET_MAX_PCT = 94.0

# Stay length must stay strictly positive or the turnover rate is undefined
MIN_STAY_LENGTH_YEARS = 0.1

# Growth rate is a percentage; anything outside this range is clamped
MIN_GROWTH_RATE_PCT = -100.0
MAX_GROWTH_RATE_PCT = 100.0

# "zero": occupied units never drop below 0. "none": raw arithmetic, may go negative.
OCCUPANCY_FLOOR_POLICY = "zero"
OCCUPANCY_FLOOR_POLICIES = ["zero", "none"]

# Slider ranges and defaults: (min, max, step, default)
HOUSING_COST_SLIDER = (20000, 70000, 1000, 40000)
GROWTH_RATE_SLIDER = (-10.0, 10.0, 0.1, 0.0)
MONTHLY_INFLOW_SLIDER = (0, 500, 5, 70)
STAY_LENGTH_SLIDER = (1.0, 20.0, 0.5, 10.0)

DEFAULT_HOUSING_COST = HOUSING_COST_SLIDER[3]
DEFAULT_GROWTH_RATE_PCT = GROWTH_RATE_SLIDER[3]
DEFAULT_MONTHLY_INFLOW = MONTHLY_INFLOW_SLIDER[3]
DEFAULT_STAY_LENGTH_YEARS = STAY_LENGTH_SLIDER[3]

# --- Allocation tradeoffs ---

LAFFER_SCALE = 100.0
LAFFER_P = 1.0

PEOPLE_MIN = 5
PEOPLE_MAX = 100

OVERHEAD_BROAD = 0.06   # extra overhead when serving everyone
OVERHEAD_NARROW = 0.02  # extra overhead when serving a few

UTILITY_SCALE = 1.2

# Curve sample counts (grid has steps + 1 points)
REVENUE_CURVE_STEPS = 220
ALLOCATION_CURVE_STEPS = 240

DEFAULT_BREADTH_PCT = 55
DEFAULT_TAX_PCT = 35

# Breadth label thresholds (percent)
BREADTH_CONCENTRATED_MAX = 10
BREADTH_BROAD_MIN = 90
