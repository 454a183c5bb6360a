"""Numerical limits, node types and version information."""

from __future__ import annotations

from enum import IntEnum

#: Peer preference "unknown" value (minimum of a signed 16-bit integer).
PREF_UNKNOWN = -(2**15)

#: RSSI "unknown" value (minimum of a signed 16-bit integer).
RSSI_UNKNOWN = -(2**15)

#: Version string; "unknown" when no build version was stamped in.
VERSION = "unknown"

#: Whether the version is unknown.
VERSION_UNKNOWN = VERSION == "unknown"


class NodeType(IntEnum):
    """Node types; the value fits in 4 bits."""

    UNKNOWN = 0x00
    CLIENT = 0x01
    GATEWAY = 0x02
    RELAY = 0x03