"""Configuration common to every node type."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta


@dataclass
class LocalDelivery:
    """Local message delivery settings."""

    #: Timeout for PROBE_RES, OK and FAIL responses.
    resp_timeout: timedelta = timedelta(milliseconds=500)


@dataclass
class MsgIdCacheConfig:
    """Message ID cache and replay protection settings.

    ``time_unit`` is also the unit of message timestamps, so it must be the
    same on all communicating nodes. Cache entries live between ``max_age``
    and ``max_age + 1`` units; ``(max_age - 1)`` units is the accepted time
    drift. ``max_age`` must not be 0.
    """

    time_unit: timedelta = timedelta(milliseconds=500)
    max_age: int = 3


@dataclass
class Reporting:
    """Topics used for reporting."""

    base_topic: str = "_report"
    rssi_subtopic: str = "rssi"


@dataclass
class TopicSeparators:
    """Topic level separator and wildcard tokens."""

    level_separator: str = "/"
    single_level_wildcard: str = "+"
    multi_level_wildcard: str = "#"


@dataclass
class NodeConfig:
    """Generic configuration of any node."""

    local_delivery: LocalDelivery = field(default_factory=LocalDelivery)
    msg_id_cache: MsgIdCacheConfig = field(default_factory=MsgIdCacheConfig)
    reporting: Reporting = field(default_factory=Reporting)
    topic_sep: TopicSeparators = field(default_factory=TopicSeparators)