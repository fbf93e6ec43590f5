"""Array-backed queue"""

import logging
from typing import Iterator, Optional, TypeVar

from ..logging import OperationStep
from ..logging import VERBOSE
from .queue_base import QueueBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ArrayQueue(QueueBase[T]):
    """Queue stored in a contiguous list.

    Dequeue shifts every remaining element one slot towards the front, so it
    costs O(n). This is the baseline that `LinkedQueue` is compared against.
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def enqueue(self, value: T) -> None:
        """Time complexity: amortized O(1)"""
        self._items.append(value)

    def dequeue(self, default: Optional[T] = None) -> Optional[T]:
        """Time complexity: O(n)"""
        items = self._items
        if not items:
            logger.debug("Dequeue on empty %s", self.__class__.__name__)
            return default
        value = items[0]
        for i in range(1, len(items)):
            logger.log(VERBOSE, OperationStep.SHIFT_ELEMENT.value)
            items[i - 1] = items[i]
        items.pop()
        return value

    def peek(self, default: Optional[T] = None) -> Optional[T]:
        """Time complexity: O(1)"""
        if not self._items:
            return default
        return self._items[0]

    def size(self) -> int:
        """Time complexity: O(1)"""
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()

    def values(self) -> Iterator[T]:
        """Time complexity: O(n)"""
        yield from self._items
