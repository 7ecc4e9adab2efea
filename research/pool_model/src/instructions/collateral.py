"""Collateral ledger: deposits and withdrawals of the base asset"""
import logging
from ..errors import (
    AmountMismatchError,
    InsufficientBalanceError,
    OutstandingDebtError,
    TransferFailedError,
)
from ..events import CollateralDeposited, CollateralWithdrawn, EventLog
from ..fixed_point import checked_add, checked_sub, require_amount
from ..guard import Journal
from ..state.pool_state import PoolState

logger = logging.getLogger(__name__)

class CollateralLedger:
    """The only writer of the collateral map"""

    def __init__(self, state: PoolState, events: EventLog):
        self.state = state
        self.events = events

    def balance_of(self, user: str) -> int:
        return self.state.collateral_of(user)

    def deposit(self, user: str, amount: int, paid_amount: int, journal: Journal) -> None:
        """Credit `amount`; the caller must have paid exactly that much"""
        require_amount(amount)
        require_amount(paid_amount, "paid_amount")
        if paid_amount != amount:
            logger.warning(
                "Deposit rejected - amount mismatch",
                extra={"user": user, "amount": amount, "paid_amount": paid_amount},
            )
            raise AmountMismatchError(f"Declared {amount} but paid {paid_amount}")

        self._credit(user, amount, journal)
        self.events.emit(CollateralDeposited(user, amount))

    def withdraw(self, user: str, amount: int, journal: Journal) -> None:
        """Debit `amount` and pay it back out. Any outstanding debt blocks this."""
        require_amount(amount)
        balance = self.state.collateral_of(user)
        if balance < amount:
            logger.warning(
                "Withdraw rejected - insufficient balance",
                extra={"user": user, "amount": amount, "balance": balance},
            )
            raise InsufficientBalanceError(f"{user} has {balance} collateral, requested {amount}")

        debt = self.state.debt_of(user)
        if debt != 0:
            logger.warning(
                "Withdraw rejected - outstanding debt",
                extra={"user": user, "amount": amount, "debt": debt},
            )
            raise OutstandingDebtError(f"{user} still owes {debt}")

        self._debit(user, amount, journal)
        self.events.emit(CollateralWithdrawn(user, amount))

        # state is final before the asset leaves the pool
        if not self.state.asset_rail.send(user, amount):
            raise TransferFailedError(f"Transfer of {amount} to {user} failed")

    def seize(self, user: str, amount: int, journal: Journal) -> None:
        """Remove collateral during liquidation"""
        require_amount(amount)
        self._debit(user, amount, journal)

    def _credit(self, user: str, amount: int, journal: Journal) -> None:
        balance = self.state.collateral_of(user)
        self._write(user, balance, checked_add(balance, amount), journal)

    def _debit(self, user: str, amount: int, journal: Journal) -> None:
        balance = self.state.collateral_of(user)
        if balance < amount:
            raise InsufficientBalanceError(f"{user} has {balance} collateral, requested {amount}")
        self._write(user, balance, balance - amount, journal)

    def _write(self, user: str, old: int, new: int, journal: Journal) -> None:
        state = self.state
        old_total = state.total_collateral_supplied
        state.set_collateral(user, new)
        if new >= old:
            state.total_collateral_supplied = checked_add(old_total, new - old)
        else:
            state.total_collateral_supplied = checked_sub(old_total, old - new)

        def undo():
            state.set_collateral(user, old)
            state.total_collateral_supplied = old_total

        journal.record(undo)
