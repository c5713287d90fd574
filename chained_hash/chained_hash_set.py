from typing import Any, Callable, Iterator, Optional

from chained_hash.dictionaries.chained_hash_dictionary import ChainedHashDictionary, ChainedIterator
from chained_hash.errors import ElementNotFound, KeyNotFound

PRESENT = True


class ChainedHashSet:
    """Unique elements stored as keys of a ChainedHashDictionary."""

    def __init__(self, hash_function: Optional[Callable[[Any], int]] = None) -> None:
        self._map = ChainedHashDictionary(hash_function=hash_function)

    def add(self, item: Any) -> None:
        if not self._map.contains_key(item):
            self._map.put(item, PRESENT)

    def remove(self, item: Any) -> None:
        try:
            self._map.remove(item)
        except KeyNotFound:
            raise ElementNotFound(item) from None

    def contains(self, item: Any) -> bool:
        return self._map.contains_key(item)

    def size(self) -> int:
        return self._map.size()

    def __len__(self) -> int:
        return self._map.size()

    def __contains__(self, item: Any) -> bool:
        return self._map.contains_key(item)

    def __iter__(self) -> Iterator[Any]:
        return ChainedHashSetIterator(iter(self._map))

    def __repr__(self) -> str:
        return f"ChainedHashSet({{{', '.join(repr(item) for item in self)}}})"


class ChainedHashSetIterator:
    def __init__(self, pairs: ChainedIterator):
        self._pairs = pairs

    def __iter__(self):
        return self

    def has_next(self) -> bool:
        return self._pairs.has_next()

    def __next__(self) -> Any:
        return next(self._pairs).key
