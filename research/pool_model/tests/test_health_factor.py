"""
test_health_factor.py - Health factor against the oracle price
"""

import pytest

from pool_factory import ALICE, BOB, ETH, build_pool
from pool_model.src.constants import MAX_HEALTH_FACTOR, PRECISION
from pool_model.src.errors import InvalidPriceError
from pool_model.src.oracle import MockPriceOracle, get_mock_price


def test_no_debt_is_infinitely_healthy(funded):
    assert funded.pool.health_factor(ALICE) == MAX_HEALTH_FACTOR
    assert funded.pool.health_factor(BOB) == MAX_HEALTH_FACTOR
    assert not funded.pool.is_liquidatable(ALICE)


def test_health_factor_at_ceiling(at_ceiling):
    # 1.5 collateral * 80% / 1.0 debt
    assert at_ceiling.pool.health_factor(ALICE) == 6 * PRECISION // 5


def test_price_is_read_on_every_call(at_ceiling):
    pool, oracle = at_ceiling.pool, at_ceiling.oracle
    oracle.scale_price(50, 100)
    assert pool.health_factor(ALICE) == 3 * PRECISION // 5

    oracle.scale_price(200, 100)
    assert pool.health_factor(ALICE) == 6 * PRECISION // 5


def test_liquidatable_below_one(at_ceiling):
    pool, oracle = at_ceiling.pool, at_ceiling.oracle
    oracle.scale_price(80, 100)

    assert pool.health_factor(ALICE) == 24 * PRECISION // 25  # 0.96
    assert pool.is_liquidatable(ALICE)


def test_decimals_do_not_change_result():
    setup = build_pool(oracle=MockPriceOracle(value=10**18, decimals=18))
    pool = setup.pool
    pool.deposit_collateral(ALICE, 3 * ETH // 2, value=3 * ETH // 2)
    pool.borrow(ALICE, ETH)

    assert pool.health_factor(ALICE) == 6 * PRECISION // 5


def test_collateral_value(at_ceiling):
    at_ceiling.oracle.set_price(2 * 10**8)
    assert at_ceiling.pool.health.collateral_value(ALICE) == 3 * ETH


@pytest.mark.parametrize("price", [0, -10**8])
def test_non_positive_price_rejected(at_ceiling, price):
    at_ceiling.oracle.set_price(price)
    with pytest.raises(InvalidPriceError):
        at_ceiling.pool.health_factor(ALICE)


def test_position_snapshot(at_ceiling):
    position = at_ceiling.pool.position(ALICE)

    assert position.collateral_balance == 3 * ETH // 2
    assert position.debt_balance == ETH
    assert position.health_factor == 6 * PRECISION // 5
    assert position.has_debt


def test_mock_price_is_one():
    value, decimals = get_mock_price()
    assert value == 10**decimals
