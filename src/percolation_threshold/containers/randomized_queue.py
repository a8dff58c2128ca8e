"""
Randomized queue: dequeue and sample return a uniformly random item.

Items are kept in a dense list. Dequeue swaps the chosen item with the
last one and pops it, so there are never gaps to skip over.
"""

import numpy as np
from typing import Generic, Iterator, List, Optional, TypeVar, Union

T = TypeVar('T')


class RandomizedQueue(Generic[T]):
    """
    Queue whose removal order is uniformly random.

    Example:
        queue = RandomizedQueue(rng=0)
        for word in ['a', 'b', 'c']:
            queue.enqueue(word)
        print(queue.dequeue())
    """

    def __init__(self, rng: Optional[Union[int, np.random.Generator]] = None):
        self._items: List[T] = []
        self._rng = np.random.default_rng(rng)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, item: T) -> None:
        if item is None:
            raise ValueError("Cannot enqueue None")
        self._items.append(item)

    def _random_index(self) -> int:
        if not self._items:
            raise IndexError("randomized queue is empty")
        return int(self._rng.integers(len(self._items)))

    def dequeue(self) -> T:
        """Remove and return a uniformly random item."""
        i = self._random_index()
        items = self._items
        items[i], items[-1] = items[-1], items[i]
        return items.pop()

    def sample(self) -> T:
        """Return a uniformly random item without removing it."""
        return self._items[self._random_index()]

    def __iter__(self) -> Iterator[T]:
        # Each iterator walks its own independent shuffle.
        order = self._rng.permutation(len(self._items))
        snapshot = list(self._items)
        for i in order:
            yield snapshot[i]

    def __repr__(self) -> str:
        return f"RandomizedQueue(size={len(self._items)})"
