"""Publication and subscription data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

Payload = Union[str, bytes]


def _byte_length(payload: Payload) -> int:
    if isinstance(payload, str):
        return len(payload.encode("utf-8"))
    return len(payload)


def _describe(topic: str, payload: Payload) -> str:
    return f"{topic or '(no topic)'} ({_byte_length(payload)} B payload)"


@dataclass
class SubData:
    """Data received for a subscription."""

    topic: str = ""
    payload: Payload = ""

    def __str__(self) -> str:
        return _describe(self.topic, self.payload)


@dataclass
class PubData:
    """Data to publish."""

    topic: str = ""
    payload: Payload = ""

    def __str__(self) -> str:
        return _describe(self.topic, self.payload)

    def to_sub_data(self) -> SubData:
        """Return the same topic and payload as subscription data."""
        return SubData(topic=self.topic, payload=self.payload)


SubCallback = Callable[[SubData], None]


@dataclass(eq=False)
class SubReq:
    """Subscription request; the callback is not part of its identity."""

    topic: str = ""
    cb: Optional[SubCallback] = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubReq):
            return NotImplemented
        return self.topic == other.topic

    def __hash__(self) -> int:
        return hash(self.topic)