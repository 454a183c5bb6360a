"""Remote layer acting as a broker inside the local process."""

from __future__ import annotations

import threading
from typing import Callable, Optional

from kvik.errors import ErrCode, KvikError
from kvik.logger import get_logger
from kvik.pub_sub import PubData, SubData
from kvik.wildcard_trie import WildcardTrie

_log = get_logger("LocalBroker")

RecvCallback = Callable[[SubData], None]


class LocalBroker:
    """Delivers published data straight back when a matching subscription exists."""

    def __init__(self, recv_callback: Optional[RecvCallback] = None) -> None:
        self.recv_callback = recv_callback
        self._lock = threading.Lock()
        self._subs: WildcardTrie[bool] = WildcardTrie()
        _log.debug("Initialized")

    def publish(self, data: PubData) -> None:
        """Publish ``data``; calls the receive callback if subscribed.

        Exceptions raised by the callback propagate to the caller.
        """
        _log.debug("Publishing %d bytes to topic '%s'", len(data.payload), data.topic)
        with self._lock:
            subscribed = bool(self._subs.find(data.topic))

        callback = self.recv_callback
        if subscribed and callback is not None:
            _log.debug(
                "Subscription exists for published data, calling callback on topic '%s'",
                data.topic,
            )
            callback(data.to_sub_data())

    def subscribe(self, topic: str) -> None:
        """Subscribe to ``topic`` (wildcards allowed)."""
        with self._lock:
            _log.debug("Subscribe to topic '%s'", topic)
            self._subs.insert(topic, True)

    def unsubscribe(self, topic: str) -> None:
        """Unsubscribe from ``topic``; raises NOT_FOUND if not subscribed."""
        with self._lock:
            if not self._subs.remove(topic):
                _log.debug("Unsubscribe from topic '%s': subscription doesn't exist", topic)
                raise KvikError(f"Not subscribed to topic '{topic}'", ErrCode.NOT_FOUND)
            _log.debug("Unsubscribe from topic '%s': success", topic)