"""Health factor of a position against the live oracle price"""
from ..constants import MAX_HEALTH_FACTOR
from ..fixed_point import checked_div, checked_mul
from ..oracle import validate_price
from ..state.pool_state import PoolState

class HealthFactorEngine:
    """Scores positions; 1e18 (MIN_HEALTH_FACTOR) is the liquidation line"""

    def __init__(self, state: PoolState):
        self.state = state

    def collateral_value(self, user: str) -> int:
        """Collateral in debt-token units at the current oracle price"""
        # queried fresh on every call
        price, decimals = validate_price(self.state.price_oracle.latest_price())
        collateral = self.state.collateral_of(user)
        return checked_mul(collateral, price) // 10**decimals

    def health_factor(self, user: str) -> int:
        debt = self.state.debt_of(user)
        if debt == 0:
            return MAX_HEALTH_FACTOR
        return self.calculate_health_factor(self.collateral_value(user), debt)

    def calculate_health_factor(self, collateral_value: int, debt: int) -> int:
        """hf = value * threshold * precision / (liquidation_precision * debt)"""
        if debt == 0:
            return MAX_HEALTH_FACTOR
        config = self.state.config
        numerator = checked_mul(
            checked_mul(collateral_value, config.liquidation_threshold), config.precision
        )
        return checked_div(numerator, checked_mul(config.liquidation_precision, debt))

    def is_liquidatable(self, user: str) -> bool:
        return self.health_factor(user) < self.state.config.min_health_factor
