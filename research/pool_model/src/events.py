"""Pool events and the log that records them"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Type, TypeVar

@dataclass(frozen=True)
class CollateralDeposited:
    user: str
    amount: int

@dataclass(frozen=True)
class CollateralWithdrawn:
    user: str
    amount: int

@dataclass(frozen=True)
class LendTokenBorrowed:
    user: str
    amount: int

@dataclass(frozen=True)
class CollateralLiquidated:
    user: str
    collateral_amount: int
    tokens_burned: int

E = TypeVar("E")

logger = logging.getLogger(__name__)

class EventLog:
    """Committed events, in order. Pending events only become visible on commit."""

    def __init__(self):
        self.events: List[object] = []
        self._pending: List[object] = []
        self._subscribers: List[Callable[[object], None]] = []

    def subscribe(self, callback: Callable[[object], None]) -> None:
        self._subscribers.append(callback)

    def emit(self, event: object) -> None:
        self._pending.append(event)

    def commit(self) -> List[object]:
        """Record pending events; returns them for a later notify()"""
        committed, self._pending = self._pending, []
        self.events.extend(committed)
        return committed

    def notify(self, events: List[object]) -> None:
        """Deliver committed events. A failing subscriber cannot undo a commit."""
        for event in events:
            for callback in self._subscribers:
                try:
                    callback(event)
                except Exception:
                    logger.exception("Event subscriber failed on %s", type(event).__name__)

    def discard(self) -> None:
        self._pending = []

    def filter(self, kind: Type[E]) -> List[E]:
        return [e for e in self.events if isinstance(e, kind)]

    def __len__(self):
        return len(self.events)
