"""
conftest.py - Shared pytest fixtures for the lending pool tests
"""

import pytest

from pool_factory import ALICE, ETH, build_pool


@pytest.fixture
def setup():
    return build_pool()


@pytest.fixture
def pool(setup):
    return setup.pool


@pytest.fixture
def funded(setup):
    """Alice has 1.5 ETH of collateral and no debt"""
    setup.pool.deposit_collateral(ALICE, 3 * ETH // 2, value=3 * ETH // 2)
    return setup


@pytest.fixture
def at_ceiling(funded):
    """Alice has borrowed the full 1.0 ETH her 1.5 ETH allows"""
    funded.pool.borrow(ALICE, ETH)
    return funded
