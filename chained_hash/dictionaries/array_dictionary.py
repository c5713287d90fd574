from typing import Any, Iterator, Optional

from chained_hash.errors import ConcurrentModification, KeyNotFound, TraversalExhausted
from chained_hash.kv_pair import KVPair

INITIAL_SLOTS = 10


class _Pair:
    __slots__ = ("key", "value")

    def __init__(self, key: Any, value: Any):
        self.key = key
        self.value = value


def _same_key(stored: Any, key: Any) -> bool:
    return stored is key or stored == key


class ArrayDictionary:
    """Linear-scan mapping over a doubling array of pairs.

    Used as the per-bucket chain of ChainedHashDictionary, so every
    operation is O(size) but size stays small.
    """

    def __init__(self) -> None:
        self._pairs: list[Optional[_Pair]] = [None] * INITIAL_SLOTS
        self._size = 0
        self._version = 0

    def _index_of(self, key: Any) -> int:
        for i in range(self._size):
            if _same_key(self._pairs[i].key, key):
                return i
        return -1

    def _grow(self) -> None:
        self._pairs.extend([None] * len(self._pairs))

    def get(self, key: Any) -> Any:
        idx = self._index_of(key)
        if idx == -1:
            raise KeyNotFound(key)
        return self._pairs[idx].value

    def put(self, key: Any, value: Any) -> None:
        idx = self._index_of(key)
        if idx != -1:
            self._pairs[idx].value = value
            return

        if self._size == len(self._pairs):
            self._grow()
        self._pairs[self._size] = _Pair(key, value)
        self._size += 1
        self._version += 1

    def remove(self, key: Any) -> Any:
        idx = self._index_of(key)
        if idx == -1:
            raise KeyNotFound(key)

        value = self._pairs[idx].value
        # shift left to keep insertion order
        for i in range(idx, self._size - 1):
            self._pairs[i] = self._pairs[i + 1]
        self._pairs[self._size - 1] = None
        self._size -= 1
        self._version += 1
        return value

    def contains_key(self, key: Any) -> bool:
        return self._index_of(key) != -1

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self.put(key, value)

    def __delitem__(self, key: Any) -> None:
        self.remove(key)

    def __iter__(self) -> Iterator[KVPair]:
        return ArrayDictionaryIterator(self)

    def __repr__(self) -> str:
        body = ", ".join(str(pair) for pair in self)
        return f"ArrayDictionary({{{body}}})"


class ArrayDictionaryIterator:
    def __init__(self, dictionary: ArrayDictionary):
        self._dictionary = dictionary
        self._expected_version = dictionary._version
        self._index = 0

    def __iter__(self):
        return self

    def has_next(self) -> bool:
        if self._dictionary._version != self._expected_version:
            raise ConcurrentModification()
        return self._index < self._dictionary._size

    def __next__(self) -> KVPair:
        if not self.has_next():
            raise TraversalExhausted()
        pair = self._dictionary._pairs[self._index]
        self._index += 1
        return KVPair(pair.key, pair.value)
