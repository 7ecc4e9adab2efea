"""Partial liquidation of unhealthy positions"""
import logging
from typing import Tuple
from ..errors import HealthFactorIsOkError, InsufficientDebtTokensError
from ..events import CollateralLiquidated, EventLog
from ..fixed_point import checked_mul, require_amount
from ..guard import Journal
from ..state.pool_state import PoolState
from .collateral import CollateralLedger
from .health_factor import HealthFactorEngine

logger = logging.getLogger(__name__)

class LiquidationEngine:
    """Seizes collateral and burns the matching debt.

    Debt is priced at the same ratio used when it was issued, and the
    liquidator receives nothing; seized collateral stays in the pool.
    """

    def __init__(
        self,
        state: PoolState,
        ledger: CollateralLedger,
        health: HealthFactorEngine,
        events: EventLog,
    ):
        self.state = state
        self.ledger = ledger
        self.health = health
        self.events = events

    def tokens_to_burn(self, collateral_amount: int) -> int:
        config = self.state.config
        return checked_mul(collateral_amount, config.borrow_precision) // config.collateralization_ratio

    def liquidate(self, user: str, requested_amount: int, journal: Journal) -> Tuple[int, int]:
        """Returns (collateral seized, tokens burned)"""
        require_amount(requested_amount)
        health_factor = self.health.health_factor(user)
        if health_factor >= self.state.config.min_health_factor:
            logger.warning(
                "Liquidation rejected - position healthy",
                extra={"user": user, "health_factor": health_factor},
            )
            raise HealthFactorIsOkError(f"Health factor of {user} is {health_factor}")

        collateral_amount = min(requested_amount, self.state.collateral_of(user))
        burn_amount = self.tokens_to_burn(collateral_amount)

        debt = self.state.debt_of(user)
        if debt < burn_amount:
            logger.warning(
                "Liquidation rejected - not enough debt tokens",
                extra={"user": user, "debt": debt, "tokens_to_burn": burn_amount},
            )
            raise InsufficientDebtTokensError(f"{user} owes {debt}, liquidation burns {burn_amount}")

        self.ledger.seize(user, collateral_amount, journal)
        self._burn(user, burn_amount, journal)
        self.events.emit(CollateralLiquidated(user, collateral_amount, burn_amount))
        return collateral_amount, burn_amount

    def _burn(self, user: str, amount: int, journal: Journal) -> None:
        state = self.state
        old_total = state.total_debt_outstanding
        state.debt_token.burn(user, amount)
        # debt minted outside the pool is not in the aggregate
        state.total_debt_outstanding = max(old_total - amount, 0)

        def undo():
            state.debt_token.mint(user, amount)
            state.total_debt_outstanding = old_total

        journal.record(undo)
