# Fixed point scale factors
PRECISION = 1_000_000_000_000_000_000  # 1e18 for health factor
UINT256_MAX = 2**256 - 1

# Borrow constants
COLLATERALIZATION_RATIO = 150  # 150%, max borrow is ~66.6% of collateral
BORROW_PRECISION = 100

# Liquidation constants
LIQUIDATION_THRESHOLD = 80  # collateral counts at 80% of its value
LIQUIDATION_PRECISION = 100
MIN_HEALTH_FACTOR = PRECISION  # 1.0 scaled
MAX_HEALTH_FACTOR = UINT256_MAX  # returned when there is no debt

# Interest curve constants (percentage units)
BASE_RATE = 2
OPTIMAL_UTILIZATION = 80
SLOPE1 = 4   # below optimal
SLOPE2 = 75  # above optimal
INTEREST_PRECISION = 100
MAX_UTILIZATION = 100

# Oracle constants
DEFAULT_PRICE_DECIMALS = 8
