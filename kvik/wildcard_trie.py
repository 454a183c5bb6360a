"""String-keyed trie with MQTT-like wildcard support."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from kvik.errors import ErrCode, KvikError

V = TypeVar("V")


class _Node(Generic[V]):
    __slots__ = ("value", "children", "level_index", "is_leaf")

    def __init__(self, level_index: int = 0) -> None:
        self.value: Optional[V] = None
        self.children: Dict[str, _Node[V]] = {}
        self.level_index = level_index
        self.is_leaf = False


class WildcardTrie(Generic[V]):
    """Trie whose keys are split into levels by a separator.

    Stored keys may contain a single-level wildcard as a whole level and a
    multi-level wildcard as the last level. Keys are not validated: a
    semantically invalid key is stored but simply never matched.
    """

    def __init__(
        self,
        level_separator: str = "/",
        single_level_wildcard: str = "+",
        multi_level_wildcard: str = "#",
    ) -> None:
        if not level_separator or not single_level_wildcard or not multi_level_wildcard:
            raise KvikError(
                "Separator or wildcard strings can't be empty", ErrCode.INVALID_ARG
            )
        if (
            level_separator == single_level_wildcard
            or level_separator == multi_level_wildcard
            or single_level_wildcard == multi_level_wildcard
        ):
            raise KvikError(
                "Duplicate separator or wildcard strings", ErrCode.INVALID_ARG
            )
        self._sep = level_separator
        self._single = single_level_wildcard
        self._multi = multi_level_wildcard
        self._root: _Node[V] = _Node()

    def _split(self, key: str) -> List[str]:
        return key.split(self._sep)

    def _join(self, prefix: str, level: str) -> str:
        return level if prefix == "" else prefix + self._sep + level

    def _node_for(self, key: str) -> _Node[V]:
        node = self._root
        for index, level in enumerate(self._split(key), start=1):
            child = node.children.get(level)
            if child is None:
                child = _Node(index)
                node.children[level] = child
            node = child
        return node

    def insert(self, key: str, value: V) -> None:
        """Insert ``key`` with ``value``, replacing any previous value."""
        node = self._node_for(key)
        node.value = value
        node.is_leaf = True

    def setdefault(self, key: str, default: Optional[V] = None) -> Optional[V]:
        """Return the value of ``key``, storing ``default`` first if absent."""
        node = self._node_for(key)
        if not node.is_leaf:
            node.value = default
            node.is_leaf = True
        return node.value

    def remove(self, key: str) -> bool:
        """Remove ``key``; return whether it was present."""
        levels = self._split(key)
        node = self._root
        stack: List[_Node[V]] = []
        for level in levels:
            stack.append(node)
            child = node.children.get(level)
            if child is None:
                return False
            node = child

        if not node.is_leaf:
            return False

        node.is_leaf = False
        node.value = None

        if not node.children:
            # Drop the chain of ancestors that existed only for this key
            for ancestor, level in zip(reversed(stack), reversed(levels)):
                if (
                    ancestor.is_leaf
                    or len(ancestor.children) > 1
                    or ancestor is self._root
                ):
                    del ancestor.children[level]
                    break
        return True

    def find(self, key: str) -> Dict[str, V]:
        """Return every stored key matching ``key`` with its value."""
        levels = self._split(key)
        depth = len(levels)
        matches: Dict[str, V] = {}
        queue: Deque[Tuple[str, _Node[V]]] = deque([("", self._root)])

        while queue:
            node_key, node = queue.popleft()
            if node.level_index == depth and node.is_leaf:
                matches[node_key] = node.value  # type: ignore[assignment]
            elif node.level_index < depth:
                wanted = levels[node.level_index]
                for child_level, child in node.children.items():
                    child_key = self._join(node_key, child_level)
                    if child_level == wanted or child_level == self._single:
                        queue.append((child_key, child))
                    elif child_level == self._multi and child.is_leaf:
                        matches[child_key] = child.value  # type: ignore[assignment]
        return matches

    def items(self) -> Iterator[Tuple[str, V]]:
        """Iterate over all stored ``(key, value)`` pairs, shallowest first."""
        result: List[Tuple[str, V]] = []
        queue: Deque[Tuple[str, _Node[V]]] = deque([("", self._root)])
        while queue:
            node_key, node = queue.popleft()
            if node.is_leaf:
                result.append((node_key, node.value))  # type: ignore[arg-type]
            for child_level, child in node.children.items():
                queue.append((self._join(node_key, child_level), child))
        return iter(result)

    def __bool__(self) -> bool:
        return bool(self._root.children)

    def clear(self) -> None:
        """Remove every key."""
        self._root = _Node()