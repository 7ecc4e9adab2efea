"""Lending pool: the operations callers invoke"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple
from .events import EventLog
from .guard import Journal, ReentrancyGuard
from .instructions.borrow import BorrowEngine
from .instructions.collateral import CollateralLedger
from .instructions.health_factor import HealthFactorEngine
from .instructions.interest_rate import InterestRateModel, calculate_utilization
from .instructions.liquidate import LiquidationEngine
from .interfaces import AssetRail, DebtTokenLedger, PriceOracle
from .state.pool_config import PoolConfig
from .state.pool_state import PoolState
from .state.position import Position

logger = logging.getLogger(__name__)

class LendingPool:
    """Single-asset pool. Every mutating call is atomic and non-reentrant."""

    def __init__(
        self,
        debt_token: DebtTokenLedger,
        price_oracle: PriceOracle,
        asset_rail: AssetRail,
        config: Optional[PoolConfig] = None,
        address: str = "pool",
    ):
        self.address = address
        self.state = PoolState(
            debt_token=debt_token,
            price_oracle=price_oracle,
            asset_rail=asset_rail,
            config=config if config is not None else PoolConfig(),
        )
        self.events = EventLog()
        self.guard = ReentrancyGuard()

        self.interest_model = InterestRateModel(self.state.config)
        self.ledger = CollateralLedger(self.state, self.events)
        self.health = HealthFactorEngine(self.state)
        self.borrow_engine = BorrowEngine(self.state, self.health, self.events)
        self.liquidation_engine = LiquidationEngine(self.state, self.ledger, self.health, self.events)

    @property
    def config(self) -> PoolConfig:
        return self.state.config

    @contextmanager
    def _operation(self, name: str) -> Iterator[Journal]:
        """Guard plus journal: either every effect commits or none does"""
        with self.guard.enter(name):
            journal = Journal()
            try:
                yield journal
            except Exception:
                journal.rollback()
                self.events.discard()
                raise
            committed = self.events.commit()
        # subscribers run outside the guard so they may call back into the pool
        self.events.notify(committed)

    # Mutating operations

    def deposit_collateral(self, caller: str, amount: int, value: int) -> None:
        """`value` is what the caller actually sent along with the call"""
        with self._operation("deposit_collateral") as journal:
            self.ledger.deposit(caller, amount, value, journal)
        logger.info("Collateral deposited", extra={"user": caller, "amount": amount})

    def withdraw_collateral(self, caller: str, amount: int) -> None:
        with self._operation("withdraw_collateral") as journal:
            self.ledger.withdraw(caller, amount, journal)
        logger.info("Collateral withdrawn", extra={"user": caller, "amount": amount})

    def borrow(self, caller: str, amount: int) -> None:
        with self._operation("borrow") as journal:
            self.borrow_engine.borrow(caller, amount, journal)
        logger.info("LendToken borrowed", extra={"user": caller, "amount": amount})

    def liquidate(self, caller: str, user: str, amount: int) -> Tuple[int, int]:
        """Liquidate up to `amount` of `user`'s collateral. Returns (seized, burned)."""
        with self._operation("liquidate") as journal:
            seized, burned = self.liquidation_engine.liquidate(user, amount, journal)
        logger.info(
            "Collateral liquidated",
            extra={"liquidator": caller, "user": user, "collateral": seized, "burned": burned},
        )
        return seized, burned

    # Read-only queries

    def health_factor(self, user: str) -> int:
        with self.guard.view():
            return self.health.health_factor(user)

    def is_liquidatable(self, user: str) -> bool:
        with self.guard.view():
            return self.health.is_liquidatable(user)

    def calculate_interest(self, utilization: int) -> int:
        return self.interest_model.calculate_interest(utilization)

    def collateral_balance(self, user: str) -> int:
        with self.guard.view():
            return self.state.collateral_of(user)

    def debt_balance(self, user: str) -> int:
        with self.guard.view():
            return self.state.debt_of(user)

    def max_borrow(self, user: str) -> int:
        with self.guard.view():
            return self.borrow_engine.max_borrow(user)

    def utilization(self) -> int:
        with self.guard.view():
            return calculate_utilization(
                self.state.total_debt_outstanding, self.state.total_collateral_supplied
            )

    def current_interest_rate(self) -> int:
        return self.calculate_interest(self.utilization())

    def position(self, user: str) -> Position:
        with self.guard.view():
            return Position(
                user=user,
                collateral_balance=self.state.collateral_of(user),
                debt_balance=self.state.debt_of(user),
                health_factor=self.health.health_factor(user),
            )
