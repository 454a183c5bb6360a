"""Messages exchanged over the local layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum, IntEnum, auto
from typing import List

from kvik.constants import PREF_UNKNOWN, RSSI_UNKNOWN, NodeType
from kvik.local_addr import LocalAddr
from kvik.pub_sub import PubData, SubData


class LocalMsgType(Enum):
    """Type of a local message."""

    NONE = auto()
    OK = auto()
    FAIL = auto()
    PROBE_REQ = auto()
    PROBE_RES = auto()
    PUB_SUB_UNSUB = auto()
    SUB_DATA = auto()


class LocalMsgFailReason(IntEnum):
    """Reason carried by a FAIL message."""

    NONE = 0
    DUP_ID = 1
    INVALID_TS = 2
    PROCESSING_FAILED = 3
    UNKNOWN_SENDER = 4


@dataclass(eq=False)
class LocalMsg:
    """Local layer message.

    Equality compares type, addresses and carried data, not the
    per-transmission fields (IDs, timestamps, node type, RSSI, ...).
    """

    type: LocalMsgType = LocalMsgType.NONE
    addr: LocalAddr = field(default_factory=LocalAddr)
    relayed_addr: LocalAddr = field(default_factory=LocalAddr)
    pubs: List[PubData] = field(default_factory=list)
    subs: List[str] = field(default_factory=list)
    unsubs: List[str] = field(default_factory=list)
    subs_data: List[SubData] = field(default_factory=list)
    node_type: NodeType = NodeType.UNKNOWN
    rssi: int = RSSI_UNKNOWN
    pref: int = PREF_UNKNOWN
    ts_diff: timedelta = field(default_factory=timedelta)
    fail_reason: LocalMsgFailReason = LocalMsgFailReason.NONE
    id: int = 0
    req_id: int = 0
    ts: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalMsg):
            return NotImplemented
        return (
            self.type == other.type
            and self.addr == other.addr
            and self.relayed_addr == other.relayed_addr
            and self.pubs == other.pubs
            and self.subs == other.subs
            and self.unsubs == other.unsubs
            and self.subs_data == other.subs_data
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        base = f"{self.type.name} " + (
            str(self.addr) if not self.addr.is_empty() else "(no addr)"
        )
        if not self.relayed_addr.is_empty():
            base += f" {self.relayed_addr}"

        if self.type is LocalMsgType.FAIL:
            return f"{base} | failed due to {self.fail_reason.name}"
        if self.type is LocalMsgType.PROBE_RES:
            return f"{base} | pref {self.pref}"
        if self.type is LocalMsgType.PUB_SUB_UNSUB:
            parts = [f"PUB {p}" for p in self.pubs]
            parts += [f"SUB {s}" for s in self.subs]
            parts += [f"UNSUB {u}" for u in self.unsubs]
            return _with_parts(base, parts)
        if self.type is LocalMsgType.SUB_DATA:
            return _with_parts(base, [str(d) for d in self.subs_data])
        return base


def _with_parts(base: str, parts: List[str]) -> str:
    if not parts:
        return base + " "
    return base + " | " + ", ".join(parts)