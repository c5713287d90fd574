from typing import Callable, Optional

from chained_hash.dictionaries.array_dictionary import ArrayDictionary


class BucketStore:
    """Fixed number of optional chains, one per hash bucket.

    Slots start out empty (None) and get a chain on first write through
    chain_at(). The store never resizes; growing a table means building a
    new store and swapping it in.
    """

    def __init__(self, capacity: int, chain_factory: Callable[[], ArrayDictionary] = ArrayDictionary):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._chain_factory = chain_factory
        self._chains: list[Optional[ArrayDictionary]] = [None] * capacity

    @property
    def capacity(self) -> int:
        return len(self._chains)

    def __len__(self) -> int:
        return len(self._chains)

    def __getitem__(self, index: int) -> Optional[ArrayDictionary]:
        return self._chains[index]

    def chain_at(self, index: int) -> ArrayDictionary:
        chain = self._chains[index]
        if chain is None:
            chain = self._chain_factory()
            self._chains[index] = chain
        return chain

    def next_occupied(self, start: int) -> int:
        for i in range(start, len(self._chains)):
            chain = self._chains[i]
            if chain is not None and chain.size() > 0:
                return i
        return -1
