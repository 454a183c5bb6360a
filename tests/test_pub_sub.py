import pytest

from kvik.pub_sub import PubData, SubData, SubReq


@pytest.mark.parametrize("cls", [SubData, PubData])
def test_equality(cls):
    data1 = cls()
    data2 = cls()
    assert data1.topic == ""
    assert data1.payload == ""
    assert data1 == data2


@pytest.mark.parametrize("cls", [SubData, PubData])
def test_different_topics(cls):
    data1 = cls()
    data2 = cls()
    data2.topic = "1"
    assert data1 != data2


@pytest.mark.parametrize("cls", [SubData, PubData])
def test_different_payloads(cls):
    data1 = cls()
    data2 = cls()
    data2.payload = "1"
    assert data1 != data2


def test_pub_data_to_sub_data():
    pub = PubData(topic="aaa", payload="123")
    assert pub.to_sub_data() == SubData(topic="aaa", payload="123")


def test_sub_req_equality():
    req1 = SubReq()
    req2 = SubReq()
    assert req1.topic == ""
    assert req1 == req2


def test_sub_req_different_topics():
    req2 = SubReq()
    req2.topic = "1"
    assert SubReq() != req2


def test_sub_req_callbacks_ignored():
    req2 = SubReq(cb=lambda data: None)
    assert SubReq() == req2
    assert hash(SubReq()) == hash(req2)


def test_sub_req_hash_follows_topic():
    reqs = {SubReq("abc", lambda d: None), SubReq("abc"), SubReq("def")}
    assert {r.topic for r in reqs} == {"abc", "def"}
    assert len(reqs) == 2


@pytest.mark.parametrize("cls", [SubData, PubData])
def test_str_without_topic(cls):
    assert str(cls()) == "(no topic) (0 B payload)"


@pytest.mark.parametrize("cls", [SubData, PubData])
def test_str_reports_topic_and_payload_size(cls):
    text = str(cls(topic="abc", payload="payload1"))
    assert text.startswith("abc ")
    assert f"({len('payload1')} B payload)" in text


def test_str_counts_bytes():
    assert str(PubData("t", b"\x00\x01")) == str(PubData("t", "ab"))