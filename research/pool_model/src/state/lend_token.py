"""In-memory LendToken: an ownable fungible token used as the pool's debt token"""
import logging
from dataclasses import dataclass, field
from typing import Dict
from ..errors import InsufficientBalanceError, UnauthorizedError
from ..fixed_point import checked_add, require_amount

logger = logging.getLogger(__name__)

@dataclass
class LendToken:
    """Standard token ledger; only the owner may mint and burn"""
    owner: str
    symbol: str = "LEND"
    balances: Dict[str, int] = field(default_factory=dict)
    total_supply: int = 0

    def _only_owner(self, caller: str) -> None:
        if caller != self.owner:
            raise UnauthorizedError(f"{caller} is not the owner of {self.symbol}")

    def balance_of(self, address: str) -> int:
        return self.balances.get(address, 0)

    def mint(self, to: str, amount: int, caller: str) -> None:
        self._only_owner(caller)
        require_amount(amount)
        self.balances[to] = checked_add(self.balance_of(to), amount)
        self.total_supply = checked_add(self.total_supply, amount)
        logger.debug("minted %d %s to %s", amount, self.symbol, to)

    def burn(self, from_: str, amount: int, caller: str) -> None:
        self._only_owner(caller)
        require_amount(amount)
        balance = self.balance_of(from_)
        if balance < amount:
            raise InsufficientBalanceError(f"cannot burn {amount} from {from_}, balance is {balance}")
        self.balances[from_] = balance - amount
        self.total_supply -= amount
        logger.debug("burned %d %s from %s", amount, self.symbol, from_)

    def transfer(self, sender: str, to: str, amount: int) -> None:
        require_amount(amount)
        balance = self.balance_of(sender)
        if balance < amount:
            raise InsufficientBalanceError(f"{sender} has {balance} {self.symbol}, needs {amount}")
        self.balances[sender] = balance - amount
        self.balances[to] = self.balance_of(to) + amount

    def transfer_ownership(self, new_owner: str, caller: str) -> None:
        self._only_owner(caller)
        logger.info("%s ownership transferred from %s to %s", self.symbol, self.owner, new_owner)
        self.owner = new_owner

    def capability(self, caller: str) -> "LendTokenCapability":
        """Handle that mints and burns as `caller`"""
        return LendTokenCapability(self, caller)

@dataclass(frozen=True)
class LendTokenCapability:
    """Binds a caller to a LendToken so it satisfies DebtTokenLedger"""
    token: LendToken
    caller: str

    def mint(self, to: str, amount: int) -> None:
        self.token.mint(to, amount, caller=self.caller)

    def burn(self, from_: str, amount: int) -> None:
        self.token.burn(from_, amount, caller=self.caller)

    def balance_of(self, address: str) -> int:
        return self.token.balance_of(address)
