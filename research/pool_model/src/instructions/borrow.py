"""Borrowing LendToken against deposited collateral"""
import logging
from ..errors import AmountTooHighError, HealthFactorTooLowError, InsufficientBalanceError
from ..events import EventLog, LendTokenBorrowed
from ..fixed_point import checked_add, checked_mul, require_amount
from ..guard import Journal
from ..state.pool_state import PoolState
from .health_factor import HealthFactorEngine

logger = logging.getLogger(__name__)

class BorrowEngine:
    def __init__(self, state: PoolState, health: HealthFactorEngine, events: EventLog):
        self.state = state
        self.health = health
        self.events = events

    def max_borrow(self, user: str) -> int:
        """Per-call ceiling: collateral * 100 / 150, floor divided"""
        config = self.state.config
        collateral = self.state.collateral_of(user)
        return checked_mul(collateral, config.borrow_precision) // config.collateralization_ratio

    def borrow(self, user: str, amount: int, journal: Journal) -> None:
        require_amount(amount)
        if self.state.collateral_of(user) == 0:
            logger.warning("Borrow rejected - no collateral", extra={"user": user, "amount": amount})
            raise InsufficientBalanceError(f"{user} has no collateral")

        ceiling = self.max_borrow(user)
        if amount > ceiling:
            logger.warning(
                "Borrow rejected - exceeds collateralization ratio",
                extra={"user": user, "amount": amount, "max_borrow": ceiling},
            )
            raise AmountTooHighError(f"Requested {amount}, max borrow is {ceiling}")

        self._mint(user, amount, journal)

        # checked after minting; a failure here rolls the mint back
        health_factor = self.health.health_factor(user)
        if health_factor < self.state.config.min_health_factor:
            logger.warning(
                "Borrow rejected - health factor too low",
                extra={"user": user, "amount": amount, "health_factor": health_factor},
            )
            raise HealthFactorTooLowError(
                f"Health factor {health_factor} below {self.state.config.min_health_factor}"
            )

        self.events.emit(LendTokenBorrowed(user, amount))

    def _mint(self, user: str, amount: int, journal: Journal) -> None:
        state = self.state
        old_total = state.total_debt_outstanding
        state.debt_token.mint(user, amount)
        state.total_debt_outstanding = checked_add(old_total, amount)

        def undo():
            state.debt_token.burn(user, amount)
            state.total_debt_outstanding = old_total

        journal.record(undo)
