from typing import Any, Callable, Iterator, Optional

from chained_hash import config
from chained_hash.bucket_store import BucketStore
from chained_hash.dictionaries.array_dictionary import ArrayDictionaryIterator
from chained_hash.errors import ConcurrentModification, KeyNotFound, TraversalExhausted
from chained_hash.kv_pair import KVPair
from chained_hash.logger.log_types import LogEvent
from chained_hash.logger.logger import log_resize_event


class ChainedHashDictionary:
    """Hash table whose buckets are small ArrayDictionary chains.

    Keys land in bucket ``abs(hash(key)) % capacity`` (None always lands in
    bucket 0). Once there are more than ``load_factor`` keys per bucket the
    table doubles and every key is rehashed against the new capacity. The
    table never shrinks.

    Iteration walks the buckets in index order and is fail-fast: adding or
    removing a key while a traversal is open makes that traversal raise
    ConcurrentModification on its next step.
    """

    def __init__(
        self,
        hash_function: Optional[Callable[[Any], int]] = None,
        min_capacity: int = config.MIN_CAPACITY,
        load_factor: int = config.LOAD_FACTOR,
    ) -> None:
        if load_factor < 1:
            raise ValueError(f"load_factor must be at least 1, got {load_factor}")
        self._hash = hash_function or hash
        self._load_factor = load_factor
        self._buckets = BucketStore(min_capacity)
        self._size = 0
        self._version = 0

    @property
    def capacity(self) -> int:
        return self._buckets.capacity

    def _bucket_index(self, key: Any, capacity: int) -> int:
        if key is None:
            return 0
        return abs(self._hash(key)) % capacity

    def _needs_growth(self) -> bool:
        return self._size > self._load_factor * self._buckets.capacity

    def _grow(self) -> None:
        old_capacity = self._buckets.capacity
        new_buckets = BucketStore(old_capacity * 2)
        for key, value in self:
            new_buckets.chain_at(self._bucket_index(key, new_buckets.capacity)).put(key, value)

        self._buckets = new_buckets
        self._version += 1
        log_resize_event(LogEvent.TABLE_RESIZED, old_capacity, new_buckets.capacity, self._size)

    def get(self, key: Any) -> Any:
        chain = self._buckets[self._bucket_index(key, self._buckets.capacity)]
        if chain is None:
            raise KeyNotFound(key)
        return chain.get(key)

    def put(self, key: Any, value: Any) -> None:
        chain = self._buckets.chain_at(self._bucket_index(key, self._buckets.capacity))
        if not chain.contains_key(key):
            self._size += 1
            self._version += 1
        chain.put(key, value)

        while self._needs_growth():
            self._grow()

    def remove(self, key: Any) -> Any:
        chain = self._buckets[self._bucket_index(key, self._buckets.capacity)]
        if chain is None:
            raise KeyNotFound(key)

        value = chain.remove(key)
        self._size -= 1
        self._version += 1
        return value

    def contains_key(self, key: Any) -> bool:
        chain = self._buckets[self._bucket_index(key, self._buckets.capacity)]
        return chain is not None and chain.contains_key(key)

    def size(self) -> int:
        return self._size

    def keys(self) -> Iterator[Any]:
        return (pair.key for pair in self)

    def values(self) -> Iterator[Any]:
        return (pair.value for pair in self)

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

    def __iter__(self) -> "ChainedIterator":
        return ChainedIterator(self)

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self)
        return f"ChainedHashDictionary({{{body}}})"


class ChainedIterator:
    """Walks non-empty buckets in index order, one chain iterator at a time."""

    def __init__(self, dictionary: ChainedHashDictionary):
        self._dictionary = dictionary
        self._buckets = dictionary._buckets
        self._expected_version = dictionary._version
        self._current = self._buckets.next_occupied(0)
        self._chain_iter: Optional[ArrayDictionaryIterator] = None
        self._exhausted = False
        if self._current != -1:
            self._chain_iter = iter(self._buckets[self._current])

    def __iter__(self):
        return self

    def has_next(self) -> bool:
        # once finished, stays finished even if the dictionary changes later
        if self._exhausted:
            return False
        if self._dictionary._version != self._expected_version:
            raise ConcurrentModification()

        if self._chain_iter is not None and self._chain_iter.has_next():
            return True
        if self._current != -1:
            self._current = self._buckets.next_occupied(self._current + 1)
        if self._current == -1:
            self._chain_iter = None
            self._exhausted = True
            return False
        self._chain_iter = iter(self._buckets[self._current])
        return True

    def __next__(self) -> KVPair:
        if not self.has_next():
            raise TraversalExhausted()
        return next(self._chain_iter)
