"""Cache of recent message IDs for duplicate detection."""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Dict, Optional, Set, Type

from kvik.local_addr import LocalAddr
from kvik.timer import Interval, Timer

_U16 = 0xFFFF


class LocalMsgIdCache:
    """Tracks recent message IDs per peer address and detects duplicates.

    Every entry lives between ``max_age`` and ``max_age + 1`` time units.
    """

    def __init__(self, time_unit: Interval, max_age: int) -> None:
        self._max_age = max_age
        self._lock = threading.Lock()
        # address -> expiration tick -> message IDs
        self._cache: Dict[LocalAddr, Dict[int, Set[int]]] = {}
        self._tick_num = 0
        self._timer = Timer(time_unit, self._tick)

    def insert(self, addr: LocalAddr, msg_id: int) -> bool:
        """Record ``msg_id`` from ``addr``; return False if it is a duplicate."""
        msg_id &= _U16
        with self._lock:
            per_addr = self._cache.setdefault(addr, {})
            if any(msg_id in ids for ids in per_addr.values()):
                return False
            expiration = (self._tick_num + self._max_age + 1) & _U16
            per_addr.setdefault(expiration, set()).add(msg_id)
            return True

    def __len__(self) -> int:
        with self._lock:
            return sum(len(ids) for per_addr in self._cache.values() for ids in per_addr.values())

    def close(self) -> None:
        """Stop the expiration timer."""
        self._timer.stop()

    def __enter__(self) -> "LocalMsgIdCache":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def _tick(self) -> None:
        with self._lock:
            self._tick_num = (self._tick_num + 1) & _U16
            for addr in list(self._cache):
                per_addr = self._cache[addr]
                per_addr.pop(self._tick_num, None)
                if not per_addr:
                    del self._cache[addr]