"""Utilization-based interest rate curve"""
from ..constants import MAX_UTILIZATION
from ..errors import InvalidUtilizationError
from ..fixed_point import checked_div, checked_mul
from ..state.pool_config import PoolConfig

def calculate_interest(utilization: int, config: PoolConfig) -> int:
    """Piecewise linear rate with a kink at the optimal utilization.

    Below the kink:  base + u * slope1 / precision
    Above the kink:  base + optimal * slope1 / precision
                          + (u - optimal) * slope2 / precision
    Each term is floor divided on its own, so the result matches integer
    contract math exactly.
    """
    if isinstance(utilization, bool) or not isinstance(utilization, int):
        raise InvalidUtilizationError(f"Utilization must be an integer, got {utilization!r}")
    if not 0 <= utilization <= MAX_UTILIZATION:
        raise InvalidUtilizationError(f"Utilization {utilization} outside [0, {MAX_UTILIZATION}]")

    if utilization <= config.optimal_utilization:
        return config.base_rate + checked_div(
            checked_mul(utilization, config.slope1), config.interest_precision
        )

    below_kink = checked_div(
        checked_mul(config.optimal_utilization, config.slope1), config.interest_precision
    )
    above_kink = checked_div(
        checked_mul(utilization - config.optimal_utilization, config.slope2),
        config.interest_precision,
    )
    return config.base_rate + below_kink + above_kink

def calculate_utilization(total_debt: int, total_collateral: int) -> int:
    """Borrowed share of supplied collateral, in whole percent"""
    if total_collateral == 0:
        return 0
    utilization = checked_mul(total_debt, MAX_UTILIZATION) // total_collateral
    return min(utilization, MAX_UTILIZATION)

class InterestRateModel:
    """Stateless rate curve bound to a pool configuration"""

    def __init__(self, config: PoolConfig):
        self.config = config

    def calculate_interest(self, utilization: int) -> int:
        return calculate_interest(utilization, self.config)

    def max_rate(self) -> int:
        return self.calculate_interest(MAX_UTILIZATION)
