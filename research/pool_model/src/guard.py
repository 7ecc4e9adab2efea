"""Reentrancy guard and undo journal wrapped around every mutating pool call"""
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional
from .errors import ReentrantCallError

logger = logging.getLogger(__name__)

class ReentrancyGuard:
    """Serializes pool operations and rejects nested ones.

    Other threads block until the running operation finishes. The thread
    already inside an operation gets ReentrantCallError instead of deadlocking.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._owner: Optional[int] = None
        self._operation: Optional[str] = None

    @property
    def entered(self) -> bool:
        return self._owner is not None

    @contextmanager
    def enter(self, operation: str) -> Iterator[None]:
        if self._owner == threading.get_ident():
            raise ReentrantCallError(f"{operation} called while {self._operation} is in progress")
        with self._lock:
            self._owner = threading.get_ident()
            self._operation = operation
            try:
                yield
            finally:
                self._owner = None
                self._operation = None

    @contextmanager
    def view(self) -> Iterator[None]:
        """Read access: nested reads from the running thread see finalized state"""
        if self._owner == threading.get_ident():
            yield
            return
        with self._lock:
            yield

class Journal:
    """Undo log for one operation"""

    def __init__(self):
        self._undo: List[Callable[[], None]] = []

    def record(self, undo: Callable[[], None]) -> None:
        self._undo.append(undo)

    def rollback(self) -> None:
        logger.debug("rolling back %d effects", len(self._undo))
        while self._undo:
            self._undo.pop()()

    def __len__(self):
        return len(self._undo)
