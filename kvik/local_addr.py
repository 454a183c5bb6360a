"""Local layer address container and MAC address helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

#: Length of a MAC address in bytes.
MAC_LEN = 6

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


@dataclass(frozen=True)
class LocalAddr:
    """Local layer address; two addresses are equal when their bytes are."""

    addr: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "addr", bytes(self.addr))

    def is_empty(self) -> bool:
        """Return whether the address holds no bytes."""
        return not self.addr

    def __str__(self) -> str:
        return self.addr.hex()


def mac_addr(mac: Optional[BytesLike] = None) -> LocalAddr:
    """Build a MAC address from its first six bytes (all zeroes if ``None``)."""
    if mac is None:
        return LocalAddr(bytes(MAC_LEN))
    raw = bytes(mac)
    if len(raw) < MAC_LEN:
        raise ValueError(f"MAC address needs {MAC_LEN} bytes, got {len(raw)}")
    return LocalAddr(raw[:MAC_LEN])


def mac_zeroes() -> LocalAddr:
    """Return the all-zero MAC address."""
    return mac_addr()


def mac_broadcast() -> LocalAddr:
    """Return the broadcast MAC address."""
    return mac_addr(b"\xff" * MAC_LEN)