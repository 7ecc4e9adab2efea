"""Pool state: the collateral map and advisory aggregates"""
from dataclasses import dataclass, field
from typing import Dict
from .pool_config import PoolConfig
from ..interfaces import AssetRail, DebtTokenLedger, PriceOracle

@dataclass
class PoolState:
    """Owns the collateral map; holds non-owning handles to the collaborators"""
    debt_token: DebtTokenLedger
    price_oracle: PriceOracle
    asset_rail: AssetRail
    config: PoolConfig = field(default_factory=PoolConfig)
    collateral: Dict[str, int] = field(default_factory=dict)
    total_collateral_supplied: int = 0
    total_debt_outstanding: int = 0

    def collateral_of(self, user: str) -> int:
        return self.collateral.get(user, 0)

    def debt_of(self, user: str) -> int:
        return self.debt_token.balance_of(user)

    def set_collateral(self, user: str, amount: int) -> None:
        """Write a balance; a zero balance keeps the entry like any other"""
        self.collateral[user] = amount
