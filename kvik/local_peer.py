"""Local layer peer information and its compact retained form."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from kvik.constants import PREF_UNKNOWN, RSSI_UNKNOWN
from kvik.local_addr import LocalAddr

#: Maximum number of address bytes kept in a retained peer.
RETAINED_ADDR_MAX = 32


@dataclass
class RetainedLocalPeer:
    """Fixed-size form of a peer, meant to survive a deep sleep.

    ``addr`` always holds :data:`RETAINED_ADDR_MAX` bytes, of which the first
    ``addr_len`` are the address.
    """

    addr: bytes = bytes(RETAINED_ADDR_MAX)
    addr_len: int = 0
    channel: int = 0

    def __post_init__(self) -> None:
        raw = bytes(self.addr)
        if len(raw) > RETAINED_ADDR_MAX:
            raise ValueError(
                f"retained address holds at most {RETAINED_ADDR_MAX} bytes, got {len(raw)}"
            )
        if not 0 <= self.addr_len <= RETAINED_ADDR_MAX:
            raise ValueError(f"address length {self.addr_len} out of range")
        self.addr = raw.ljust(RETAINED_ADDR_MAX, b"\x00")

    def unretain(self) -> "LocalPeer":
        """Return the full peer this was retained from."""
        return LocalPeer(addr=LocalAddr(self.addr[: self.addr_len]), channel=self.channel)


@dataclass(eq=False)
class LocalPeer:
    """Peer of the local layer; identified by its address alone."""

    addr: LocalAddr = field(default_factory=LocalAddr)
    #: Communication channel; 0 is the default channel.
    channel: int = 0
    #: Preference for gateway selection; higher is better.
    pref: int = PREF_UNKNOWN
    #: RSSI of the probe response from the peer.
    rssi: int = RSSI_UNKNOWN
    #: Gateway timestamp minus the local monotonic clock.
    ts_diff: timedelta = field(default_factory=timedelta)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalPeer):
            return NotImplemented
        return self.addr == other.addr

    def __hash__(self) -> int:
        return hash(self.addr)

    def is_empty(self) -> bool:
        """Return whether the peer has no address."""
        return self.addr.is_empty()

    def __str__(self) -> str:
        text = str(self.addr)
        if self.channel != 0:
            text += f" (channel {self.channel})"
        if self.pref != 0:
            text += f" (pref {self.pref})"
        return text

    def retain(self) -> RetainedLocalPeer:
        """Return the compact form, keeping at most 32 address bytes."""
        raw = self.addr.addr[:RETAINED_ADDR_MAX]
        return RetainedLocalPeer(addr=raw, addr_len=len(raw), channel=self.channel)