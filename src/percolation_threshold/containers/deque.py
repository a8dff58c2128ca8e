"""Double-ended queue on a doubly linked list with sentinel nodes."""

from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar('T')


class _Node:
    __slots__ = ('item', 'prev', 'next')

    def __init__(self, item: Any = None):
        self.item = item
        self.prev: Optional['_Node'] = None
        self.next: Optional['_Node'] = None


class Deque(Generic[T]):
    """
    Deque supporting constant-time add/remove at both ends.

    The head and tail sentinels are never removed, so insertion and removal
    never special-case an empty list.
    """

    def __init__(self):
        self._head = _Node()
        self._tail = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def _insert_after(self, node: _Node, item: T) -> None:
        if item is None:
            raise ValueError("Cannot add None to a deque")
        new = _Node(item)
        new.prev = node
        new.next = node.next
        node.next.prev = new
        node.next = new
        self._size += 1

    def _unlink(self, node: _Node) -> T:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.item

    def add_first(self, item: T) -> None:
        self._insert_after(self._head, item)

    def add_last(self, item: T) -> None:
        self._insert_after(self._tail.prev, item)

    def remove_first(self) -> T:
        if self.is_empty():
            raise IndexError("remove from an empty deque")
        return self._unlink(self._head.next)

    def remove_last(self) -> T:
        if self.is_empty():
            raise IndexError("remove from an empty deque")
        return self._unlink(self._tail.prev)

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not self._tail:
            yield node.item
            node = node.next

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"
