"""Queue backed by singly linked nodes"""

import logging
from typing import Iterator, Optional, TypeVar
import warnings

from ..logging import OperationStep
from ..logging import VERBOSE
from .node import Node
from .queue_base import QueueBase

logger = logging.getLogger(__name__)

T = TypeVar("T")


class LinkedQueue(QueueBase[T]):
    """Queue with head and tail references. Enqueue and dequeue are O(1)."""

    def __init__(self) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional[Node[T]] = None
        self._count = 0

    def sanity_check(self) -> None:
        """Check if the queue is sane"""
        if not __debug__:
            warnings.warn("Sanity checks are disabled", RuntimeWarning)
            return
        if self._head is None:
            assert self._tail is None
            assert self._count == 0
            return
        assert self._tail is not None
        assert self._tail.next is None
        steps = 0
        current = self._head
        while current.next is not None:
            current = current.next
            steps += 1
        assert current is self._tail
        assert steps == self._count - 1, (steps, self._count)

    @property
    def head(self) -> Optional[Node[T]]:
        return self._head

    @property
    def tail(self) -> Optional[Node[T]]:
        return self._tail

    def enqueue(self, value: T) -> None:
        """Time complexity: O(1)"""
        node = Node(value)
        logger.log(VERBOSE, OperationStep.LINK_NODE.value)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._count += 1
        if __debug__:
            LinkedQueue.sanity_check(self)

    def dequeue(self, default: Optional[T] = None) -> Optional[T]:
        """Time complexity: O(1)"""
        node = self._head
        if node is None:
            logger.debug("Dequeue on empty %s", self.__class__.__name__)
            return default
        logger.log(VERBOSE, OperationStep.UNLINK_NODE.value)
        self._head = node.next
        if self._head is None:
            # Last element removed
            self._tail = None
        node.next = None
        self._count -= 1
        if __debug__:
            LinkedQueue.sanity_check(self)
        return node.value

    def peek(self, default: Optional[T] = None) -> Optional[T]:
        """Time complexity: O(1)"""
        if self._head is None:
            return default
        return self._head.value

    def size(self) -> int:
        """Time complexity: O(1)"""
        return self._count

    def clear(self) -> None:
        current = self._head
        while current is not None:
            following = current.next
            current.next = None
            current = following
        self._head = None
        self._tail = None
        self._count = 0

    def values(self) -> Iterator[T]:
        """Time complexity: O(n)"""
        current = self._head
        while current is not None:
            logger.log(VERBOSE, OperationStep.VISIT_NODE.value)
            yield current.value
            current = current.next
