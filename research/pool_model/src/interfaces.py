"""Capabilities the pool consumes but does not own"""
from typing import Protocol, Tuple

class DebtTokenLedger(Protocol):
    """Fungible debt-token ledger; mint and burn are restricted to the pool"""

    def mint(self, to: str, amount: int) -> None: ...

    def burn(self, from_: str, amount: int) -> None: ...

    def balance_of(self, address: str) -> int: ...

class PriceOracle(Protocol):
    """Latest price of one collateral unit, quoted in debt-token units"""

    def latest_price(self) -> Tuple[int, int]:
        """Returns (value, decimals)"""
        ...

class AssetRail(Protocol):
    """Moves the base asset out of the pool; returns False when the send fails"""

    def send(self, to: str, amount: int) -> bool: ...
