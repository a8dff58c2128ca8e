"""Generic containers: deque and randomized queue."""

from .deque import Deque
from .randomized_queue import RandomizedQueue

__all__ = ['Deque', 'RandomizedQueue']
