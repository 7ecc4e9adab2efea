"""Price oracle helpers"""
from dataclasses import dataclass
from typing import Tuple
from .constants import DEFAULT_PRICE_DECIMALS
from .errors import InvalidPriceError

def get_mock_price() -> Tuple[int, int]:
    """Mock price feed answer
    Returns:
        Tuple[price, decimals] - 1.0 collateral unit in debt-token units, 8 decimals
    """
    return (10**DEFAULT_PRICE_DECIMALS, DEFAULT_PRICE_DECIMALS)

def validate_price(answer: Tuple[int, int]) -> Tuple[int, int]:
    """Sanity check an oracle answer. No staleness bound is applied."""
    value, decimals = answer
    if value <= 0:
        raise InvalidPriceError(f"Oracle returned non-positive price {value}")
    if decimals < 0:
        raise InvalidPriceError(f"Oracle returned negative decimals {decimals}")
    return value, decimals

@dataclass
class MockPriceOracle:
    """Settable in-memory price feed"""
    value: int = 10**DEFAULT_PRICE_DECIMALS
    decimals: int = DEFAULT_PRICE_DECIMALS

    def latest_price(self) -> Tuple[int, int]:
        return self.value, self.decimals

    def set_price(self, value: int) -> None:
        self.value = value

    def scale_price(self, numerator: int, denominator: int) -> None:
        """Move the price by a rational factor, e.g. (80, 100) for a 20% drop"""
        self.value = self.value * numerator // denominator
