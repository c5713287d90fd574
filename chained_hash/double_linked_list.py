from typing import Any, Iterator, Optional

from chained_hash.errors import EmptyContainer, IndexOutOfRange, TraversalExhausted


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any, prev: Optional["_Node"] = None, next: Optional["_Node"] = None):
        self.data = data
        self.prev = prev
        self.next = next


class DoubleLinkedList:
    def __init__(self) -> None:
        self._front: Optional[_Node] = None
        self._back: Optional[_Node] = None
        self._size = 0

    def _check_index(self, index: int, upper: int) -> None:
        if index < 0 or index >= upper:
            raise IndexOutOfRange(index, self._size)

    def _node_at(self, index: int) -> _Node:
        # walk from whichever end is closer
        if index < self._size // 2:
            node = self._front
            for _ in range(index):
                node = node.next
        else:
            node = self._back
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _unlink(self, node: _Node) -> Any:
        if node.prev:
            node.prev.next = node.next
        else:
            self._front = node.next
        if node.next:
            node.next.prev = node.prev
        else:
            self._back = node.prev
        self._size -= 1
        return node.data

    def add(self, item: Any) -> None:
        node = _Node(item, prev=self._back)
        if self._back:
            self._back.next = node
        else:
            self._front = node
        self._back = node
        self._size += 1

    def remove(self) -> Any:
        if self._back is None:
            raise EmptyContainer()
        return self._unlink(self._back)

    def get(self, index: int) -> Any:
        self._check_index(index, self._size)
        return self._node_at(index).data

    def set(self, index: int, item: Any) -> None:
        self._check_index(index, self._size)
        self._node_at(index).data = item

    def insert(self, index: int, item: Any) -> None:
        self._check_index(index, self._size + 1)
        if index == self._size:
            self.add(item)
            return

        successor = self._node_at(index)
        node = _Node(item, prev=successor.prev, next=successor)
        if successor.prev:
            successor.prev.next = node
        else:
            self._front = node
        successor.prev = node
        self._size += 1

    def delete(self, index: int) -> Any:
        self._check_index(index, self._size)
        return self._unlink(self._node_at(index))

    def index_of(self, item: Any) -> int:
        for i, data in enumerate(self):
            if data is item or data == item:
                return i
        return -1

    def contains(self, item: Any) -> bool:
        return self.index_of(item) != -1

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __setitem__(self, index: int, item: Any) -> None:
        self.set(index, item)

    def __delitem__(self, index: int) -> None:
        self.delete(index)

    def __iter__(self) -> Iterator[Any]:
        return DoubleLinkedListIterator(self._front)

    def __repr__(self) -> str:
        return f"DoubleLinkedList([{', '.join(repr(item) for item in self)}])"


class DoubleLinkedListIterator:
    def __init__(self, current: Optional[_Node]):
        self._current = current

    def __iter__(self):
        return self

    def has_next(self) -> bool:
        return self._current is not None

    def __next__(self) -> Any:
        if self._current is None:
            raise TraversalExhausted()
        data = self._current.data
        self._current = self._current.next
        return data
