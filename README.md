# kvik

Building blocks for a small publish/subscribe network. In such a network,
clients talk to gateways over a local link such as a radio or a serial line,
either directly or through relays.

## What is included

- `kvik.errors`: the `ErrCode` enumeration and the `KvikError` exception.
  Each `KvikError` carries an `ErrCode` in its `code` attribute.
- `kvik.constants`: the `NodeType` enumeration (`UNKNOWN`, `CLIENT`,
  `GATEWAY`, `RELAY`), `PREF_UNKNOWN`, `RSSI_UNKNOWN` and `VERSION`.
- `kvik.local_addr`: `LocalAddr`, the byte address of a peer. It prints as
  hex. The module also provides `mac_addr()`, `mac_zeroes()` and
  `mac_broadcast()`.
- `kvik.local_peer`: `LocalPeer` and its fixed-size `RetainedLocalPeer` form,
  which holds at most 32 address bytes. `LocalPeer.retain()` and
  `RetainedLocalPeer.unretain()` convert between the two.
- `kvik.pub_sub`: `PubData`, `SubData` and `SubReq`. Two `SubReq` objects are
  equal when their topics are equal; the callback is ignored.
- `kvik.local_msg`: `LocalMsg` with `LocalMsgType` and `LocalMsgFailReason`.
- `kvik.wildcard_trie`: `WildcardTrie`, which matches MQTT-like topics. The
  separator and the wildcard tokens can be configured; the defaults are `/`,
  `+` and `#`.
- `kvik.timer`: `Timer`, which calls a function periodically on a background
  thread. The interval is given in seconds or as a `timedelta`. The next run
  can be moved with `set_next_exec()`, using the `time.monotonic()` clock.
- `kvik.local_msg_id_cache`: `LocalMsgIdCache`, which detects duplicate
  message IDs for each peer address.
- `kvik.local_broker`: `LocalBroker`, an in-process broker. It hands a
  publication back to its receive callback when a matching subscription
  exists.
- `kvik.node_config` and `kvik.node`:
  - `NodeConfig` holds the dataclasses `LocalDelivery`, `MsgIdCacheConfig`,
    `Reporting` and `TopicSeparators`.
  - `Node` is the base of all nodes. It provides 16-bit message IDs, duplicate
    and timestamp checks for replay protection, and the topics for RSSI
    reports.
- `kvik.random`: `get_random_bytes()`.
- `kvik.logger`: `get_logger()` and `ColorFormatter`. Log lines go to
  standard error as `[L] tag: message`, coloured when standard error is a
  terminal.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from kvik.wildcard_trie import WildcardTrie
from kvik.pub_sub import PubData
from kvik.local_broker import LocalBroker

trie = WildcardTrie("/", "+", "#")
trie.insert("sensors/+/temp", "temperature")
trie.insert("sensors/#", "everything")
print(trie.find("sensors/kitchen/temp"))
# {'sensors/#': 'everything', 'sensors/+/temp': 'temperature'}

received = []
broker = LocalBroker(received.append)
broker.subscribe("home/#")
broker.publish(PubData(topic="home/light", payload="on"))
print(received)  # [SubData(topic='home/light', payload='on')]
```

Errors are raised as `KvikError`, and each one carries an `ErrCode`:

```python
from kvik.errors import ErrCode, KvikError

try:
    broker.unsubscribe("not/subscribed")
except KvikError as exc:
    assert exc.code is ErrCode.NOT_FOUND
```

`Timer`, `LocalMsgIdCache` and `Node` run background threads. Stop them with
`stop()` or `close()`, or use them as context managers:

```python
from kvik.node import Node

with Node() as node:
    msg_id = node.next_msg_id()
    print(node.build_report_rssi_topic(...))  # pass a LocalAddr
```

## What this package does not do

This package provides the shared pieces only. It does not provide:

- a client, relay or gateway node built on `Node`;
- any transport that actually sends a `LocalMsg` over a radio or serial link,
  and no encoding of messages into bytes;
- a connection to an external MQTT server; `LocalBroker` works within the
  process only;
- a command-line tool.