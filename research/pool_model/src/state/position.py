"""Position state management"""
from dataclasses import dataclass
from ..constants import MAX_HEALTH_FACTOR

@dataclass(frozen=True)
class Position:
    """Read-only snapshot of one user's position.

    Only the collateral balance is owned by the pool; debt_balance is copied
    from the debt-token ledger at the time the snapshot is taken.
    """
    user: str
    collateral_balance: int
    debt_balance: int
    health_factor: int = MAX_HEALTH_FACTOR

    @property
    def has_debt(self) -> bool:
        return self.debt_balance > 0

    def is_empty(self) -> bool:
        """A zero-balance position is indistinguishable from no position"""
        return self.collateral_balance == 0 and self.debt_balance == 0
