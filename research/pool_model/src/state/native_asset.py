"""In-memory base-asset rail used to pay collateral back out of the pool"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict
from ..errors import ProtocolError
from ..fixed_point import require_amount

logger = logging.getLogger(__name__)

ReceiveHook = Callable[[str, int], None]

@dataclass
class NativeAssetRail:
    """Tracks what each address has received from the pool.

    A receive hook runs when an address is paid, like a contract's fallback.
    A hook raising ProtocolError makes the send fail, and nothing is credited.
    """
    received: Dict[str, int] = field(default_factory=dict)
    hooks: Dict[str, ReceiveHook] = field(default_factory=dict)
    rejecting: set = field(default_factory=set)

    def register_hook(self, address: str, hook: ReceiveHook) -> None:
        self.hooks[address] = hook

    def reject_payments(self, address: str) -> None:
        self.rejecting.add(address)

    def balance_of(self, address: str) -> int:
        return self.received.get(address, 0)

    def send(self, to: str, amount: int) -> bool:
        require_amount(amount)
        if to in self.rejecting:
            logger.debug("send of %d to %s rejected by recipient", amount, to)
            return False
        hook = self.hooks.get(to)
        if hook is not None:
            try:
                hook(to, amount)
            except ProtocolError as e:
                # the recipient reverted; report failure like a low-level call
                logger.debug("receive hook of %s reverted: %s", to, e)
                return False
        self.received[to] = self.balance_of(to) + amount
        return True
