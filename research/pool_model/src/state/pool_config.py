"""Pool configuration"""
from dataclasses import dataclass
from ..constants import (
    COLLATERALIZATION_RATIO,
    BORROW_PRECISION,
    LIQUIDATION_THRESHOLD,
    LIQUIDATION_PRECISION,
    MIN_HEALTH_FACTOR,
    PRECISION,
    BASE_RATE,
    OPTIMAL_UTILIZATION,
    SLOPE1,
    SLOPE2,
    INTEREST_PRECISION,
    MAX_UTILIZATION,
)
from ..errors import InvalidConfigError

@dataclass(frozen=True)
class PoolConfig:
    """Immutable pool parameters, fixed at construction"""
    collateralization_ratio: int = COLLATERALIZATION_RATIO
    borrow_precision: int = BORROW_PRECISION
    liquidation_threshold: int = LIQUIDATION_THRESHOLD
    liquidation_precision: int = LIQUIDATION_PRECISION
    min_health_factor: int = MIN_HEALTH_FACTOR
    precision: int = PRECISION
    base_rate: int = BASE_RATE
    optimal_utilization: int = OPTIMAL_UTILIZATION
    slope1: int = SLOPE1
    slope2: int = SLOPE2
    interest_precision: int = INTEREST_PRECISION

    def __post_init__(self):
        for name in ("borrow_precision", "liquidation_precision", "precision", "interest_precision"):
            if getattr(self, name) <= 0:
                raise InvalidConfigError(f"{name} must be positive")
        if self.collateralization_ratio < self.borrow_precision:
            # a ratio below 100% would let debt exceed collateral at issuance
            raise InvalidConfigError("collateralization_ratio must be at least borrow_precision")
        if not 0 < self.liquidation_threshold <= self.liquidation_precision:
            raise InvalidConfigError("liquidation_threshold must be in (0, liquidation_precision]")
        if not 0 < self.optimal_utilization <= MAX_UTILIZATION:
            raise InvalidConfigError("optimal_utilization must be in (0, 100]")
        if self.base_rate < 0 or self.slope1 < 0:
            raise InvalidConfigError("base_rate and slope1 must be non-negative")
        if self.slope2 <= self.slope1:
            raise InvalidConfigError("slope2 must be steeper than slope1")
        if self.min_health_factor <= 0:
            raise InvalidConfigError("min_health_factor must be positive")
