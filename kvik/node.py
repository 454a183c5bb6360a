"""Functionality shared by every node type."""

from __future__ import annotations

import threading
import time
from datetime import timedelta
from types import TracebackType
from typing import Optional, Type

from kvik.constants import VERSION, VERSION_UNKNOWN
from kvik.errors import ErrCode, KvikError
from kvik.local_addr import LocalAddr
from kvik.local_msg_id_cache import LocalMsgIdCache
from kvik.logger import get_logger
from kvik.node_config import NodeConfig
from kvik.random import get_random_bytes

_log = get_logger("Node")

_U16 = 0xFFFF
_MS = timedelta(milliseconds=1)


class Node:
    """Base of all nodes: message IDs, replay protection and report topics."""

    def __init__(self, conf: Optional[NodeConfig] = None) -> None:
        self.conf = conf if conf is not None else NodeConfig()
        if self.conf.msg_id_cache.max_age == 0:
            raise KvikError("NodeConfig.msg_id_cache.max_age can't be 0!", ErrCode.INVALID_ARG)

        self._id_lock = threading.Lock()
        self._msg_id = int.from_bytes(get_random_bytes(2), "little")
        self._msg_id_cache = LocalMsgIdCache(
            self.conf.msg_id_cache.time_unit, self.conf.msg_id_cache.max_age
        )

        if not VERSION_UNKNOWN:
            _log.info("Kvik version: %s", VERSION)

    def next_msg_id(self) -> int:
        """Return a fresh 16-bit message ID."""
        with self._id_lock:
            msg_id = self._msg_id
            self._msg_id = (self._msg_id + 1) & _U16
        return msg_id

    def validate_msg_id(self, addr: LocalAddr, msg_id: int) -> bool:
        """Return False if ``msg_id`` from ``addr`` was seen recently."""
        return self._msg_id_cache.insert(addr, msg_id)

    def validate_msg_timestamp(self, msg_ts_units: int, ts_diff: timedelta = timedelta()) -> bool:
        """Return whether a 16-bit timestamp is within the accepted drift.

        ``ts_diff`` is added to the local monotonic clock before comparison.
        """
        max_drift = self.conf.msg_id_cache.max_age - 1
        unit_ms = self.conf.msg_id_cache.time_unit // _MS
        now_ms = time.monotonic_ns() // 1_000_000 + ts_diff // _MS
        now_units = (now_ms // unit_ms) & _U16
        age = (now_units - (msg_ts_units & _U16)) & _U16
        return age <= max_drift

    def build_report_rssi_topic(self, peer: LocalAddr) -> str:
        """Return the topic for reporting the RSSI of ``peer``."""
        sep = self.conf.topic_sep.level_separator
        reporting = self.conf.reporting
        return f"{reporting.base_topic}{sep}{reporting.rssi_subtopic}{sep}{peer}"

    def close(self) -> None:
        """Stop background activity."""
        self._msg_id_cache.close()

    def __enter__(self) -> "Node":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()