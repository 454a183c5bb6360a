import time
from datetime import timedelta

import pytest

from kvik.errors import ErrCode, KvikError
from kvik.local_addr import LocalAddr
from kvik.node import Node
from kvik.node_config import MsgIdCacheConfig, NodeConfig, Reporting, TopicSeparators

TIME_UNIT = timedelta(seconds=10)
MAX_AGE = 3
GW2_ADDR = LocalAddr(bytes([2, 1, 2, 3]))
GW3_ADDR = LocalAddr(bytes([3, 11, 22, 33, 44]))


def _now_units(ts_diff=timedelta()):
    now = timedelta(microseconds=time.monotonic_ns() // 1000) + ts_diff
    return (now // TIME_UNIT) & 0xFFFF


@pytest.fixture
def node():
    conf = NodeConfig(msg_id_cache=MsgIdCacheConfig(time_unit=TIME_UNIT, max_age=MAX_AGE))
    with Node(conf) as n:
        yield n


def test_max_age_zero_rejected():
    conf = NodeConfig(msg_id_cache=MsgIdCacheConfig(max_age=0))
    with pytest.raises(KvikError) as info:
        Node(conf)
    assert info.value.code == ErrCode.INVALID_ARG


def test_msg_ids_increment_and_wrap(node):
    first = node.next_msg_id()
    second = node.next_msg_id()
    assert 0 <= first <= 0xFFFF
    assert second == (first + 1) & 0xFFFF


def test_msg_ids_distinct_over_many(node):
    ids = [node.next_msg_id() for _ in range(1000)]
    assert len(set(ids)) == 1000


def test_validate_msg_id_detects_duplicates(node):
    assert node.validate_msg_id(GW2_ADDR, 42)
    assert not node.validate_msg_id(GW2_ADDR, 42)
    assert not node.validate_msg_id(GW2_ADDR, 42)
    assert node.validate_msg_id(GW3_ADDR, 42)
    assert node.validate_msg_id(GW2_ADDR, 43)


def test_current_timestamp_valid(node):
    assert node.validate_msg_timestamp(_now_units())


def test_oldest_accepted_timestamp_valid(node):
    assert node.validate_msg_timestamp((_now_units() - (MAX_AGE - 1)) & 0xFFFF)


def test_too_old_timestamp_invalid(node):
    assert not node.validate_msg_timestamp((_now_units() - (MAX_AGE + 1)) & 0xFFFF)


def test_future_timestamp_invalid(node):
    assert not node.validate_msg_timestamp((_now_units() + 2) & 0xFFFF)


def test_timestamp_with_time_difference(node):
    diff = TIME_UNIT * 1000
    assert node.validate_msg_timestamp(_now_units(diff), diff)
    assert not node.validate_msg_timestamp(_now_units(), diff)


def test_report_rssi_topic_default(node):
    assert node.build_report_rssi_topic(GW2_ADDR) == "_report/rssi/" + str(GW2_ADDR)


def test_report_rssi_topic_custom_config():
    conf = NodeConfig(
        reporting=Reporting(base_topic="rep", rssi_subtopic="sig"),
        topic_sep=TopicSeparators(level_separator="."),
    )
    with Node(conf) as n:
        assert n.build_report_rssi_topic(GW3_ADDR) == "rep.sig." + str(GW3_ADDR)