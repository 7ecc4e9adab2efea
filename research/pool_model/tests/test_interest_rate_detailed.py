"""Detailed test suite for the utilization interest curve - integer math vs numpy"""
import numpy as np
import pytest
from dataclasses import dataclass
from hypothesis import given, settings, strategies as st
from pool_model.src.constants import (
    BASE_RATE,
    OPTIMAL_UTILIZATION,
    SLOPE1,
    SLOPE2,
    INTEREST_PRECISION,
)
from pool_model.src.errors import InvalidUtilizationError
from pool_model.src.instructions.interest_rate import (
    InterestRateModel,
    calculate_interest,
    calculate_utilization,
)
from pool_model.src.state.pool_config import PoolConfig

CONFIG = PoolConfig()

@dataclass
class RateCase:
    """Test case for interest rate calculation"""
    description: str
    utilization: int
    expected_rate: int

def calculate_interest_numpy(utilization: np.ndarray) -> np.ndarray:
    """Vectorized float version, each term floored like the integer math"""
    below = np.minimum(utilization, OPTIMAL_UTILIZATION)
    above = np.maximum(utilization - OPTIMAL_UTILIZATION, 0)
    return (
        BASE_RATE
        + np.floor(below * SLOPE1 / INTEREST_PRECISION)
        + np.floor(above * SLOPE2 / INTEREST_PRECISION)
    )

def test_interest_rate_calculation():
    """Known points on the default curve"""
    test_cases = [
        RateCase("Empty pool", 0, 2),
        RateCase("Low utilization truncates to base", 10, 2),
        RateCase("Half utilized", 50, 4),  # 2 + 50 * 4 / 100
        RateCase("At optimal", 80, 5),     # 2 + floor(3.2)
        RateCase("Just above optimal", 81, 5),  # second slope term floors to 0
        RateCase("Above optimal", 90, 12),      # 5 + floor(7.5)
        RateCase("Fully utilized", 100, 20),    # 5 + 15
    ]

    print("\nTesting Interest Rate Calculations")
    print("=" * 80)

    for case in test_cases:
        rate = calculate_interest(case.utilization, CONFIG)
        print(f"{case.description:<40} u={case.utilization:>3}%  rate={rate}%")
        assert rate == case.expected_rate, f"{case.description}: got {rate}, expected {case.expected_rate}"

def test_matches_numpy_for_every_utilization():
    utilization = np.arange(0, 101)
    integer_rates = np.array([calculate_interest(int(u), CONFIG) for u in utilization])
    numpy_rates = calculate_interest_numpy(utilization)

    np.testing.assert_array_equal(integer_rates, numpy_rates.astype(int))

def test_curve_endpoints():
    assert calculate_interest(0, CONFIG) == BASE_RATE
    expected_max = (
        BASE_RATE
        + SLOPE1 * OPTIMAL_UTILIZATION // INTEREST_PRECISION
        + SLOPE2 * (100 - OPTIMAL_UTILIZATION) // INTEREST_PRECISION
    )
    assert calculate_interest(100, CONFIG) == expected_max == 20

def test_slope_is_steeper_after_optimal():
    low = calculate_interest(10, CONFIG)
    optimal = calculate_interest(80, CONFIG)
    high = calculate_interest(90, CONFIG)

    low_slope = (optimal - low) / 70
    high_slope = (high - optimal) / 10
    assert high_slope > low_slope

@settings(max_examples=200)
@given(st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=100))
def test_rate_is_monotonic_and_bounded(u1, u2):
    low, high = sorted((u1, u2))
    assert calculate_interest(low, CONFIG) <= calculate_interest(high, CONFIG)
    for u in (low, high):
        rate = calculate_interest(u, CONFIG)
        assert BASE_RATE <= rate <= BASE_RATE + SLOPE1 + SLOPE2

@pytest.mark.parametrize("utilization", [-1, 101, 1000])
def test_out_of_range_utilization_rejected(utilization):
    with pytest.raises(InvalidUtilizationError):
        calculate_interest(utilization, CONFIG)

@pytest.mark.parametrize("utilization", [50.0, "50", True])
def test_non_integer_utilization_rejected(utilization):
    with pytest.raises(InvalidUtilizationError):
        calculate_interest(utilization, CONFIG)

def test_custom_curve():
    config = PoolConfig(base_rate=1, optimal_utilization=50, slope1=10, slope2=200)
    model = InterestRateModel(config)

    assert model.calculate_interest(50) == 1 + 5
    assert model.calculate_interest(60) == 1 + 5 + 20
    assert model.max_rate() == 1 + 5 + 100

def test_utilization():
    assert calculate_utilization(0, 0) == 0
    assert calculate_utilization(5, 10) == 50
    assert calculate_utilization(2, 3) == 66  # floored
    assert calculate_utilization(30, 10) == 100  # capped
