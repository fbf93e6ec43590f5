"""Doubly linked list implementation in Python."""

import logging
from typing import Generic, Iterable, Iterator, Optional, Self, TypeVar
import warnings

from ..logging import OperationStep
from ..logging import VERBOSE
from .node import DoublyNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DoublyLinkedList(Generic[T], Iterable[T]):
    """Doubly linked list with head and tail references.

    Both ends support O(1) insertion and removal. `prev` links are
    back-references used for tail removal and backward traversal.
    """

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[DoublyNode[T]] = None
        self._tail: Optional[DoublyNode[T]] = None
        self._count = 0
        if iterable is not None:
            for value in iterable:
                self.push_back(value)

    def sanity_check(self) -> None:
        """Check if the linked list is sane"""
        if not __debug__:
            warnings.warn("Sanity checks are disabled", RuntimeWarning)
            return
        if self._head is None:
            assert self._tail is None
            assert self._count == 0
            return
        assert self._tail is not None
        assert self._head.prev is None
        assert self._tail.next is None
        steps = 0
        current = self._head
        while current.next is not None:
            assert current.next.prev is current
            current = current.next
            steps += 1
        assert current is self._tail
        assert steps == self._count - 1, (steps, self._count)

    @property
    def head(self) -> Optional[DoublyNode[T]]:
        return self._head

    @property
    def tail(self) -> Optional[DoublyNode[T]]:
        return self._tail

    def is_empty(self) -> bool:
        return self._head is None

    def push_back(self, value: T) -> DoublyNode[T]:
        """Time complexity: O(1)"""
        node = DoublyNode(value)
        logger.log(VERBOSE, OperationStep.LINK_NODE.value)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._count += 1
        if __debug__:
            DoublyLinkedList.sanity_check(self)
        return node

    def push_front(self, value: T) -> DoublyNode[T]:
        """Time complexity: O(1)"""
        node = DoublyNode(value)
        logger.log(VERBOSE, OperationStep.LINK_NODE.value)
        if self._head is None:
            self._head = node
            self._tail = node
        else:
            self._head.prev = node
            node.next = self._head
            self._head = node
        self._count += 1
        if __debug__:
            DoublyLinkedList.sanity_check(self)
        return node

    def pop_back(self) -> None:
        """Time complexity: O(1). No-op on an empty list."""
        node = self._tail
        if node is None:
            logger.debug("Pop on empty %s", self.__class__.__name__)
            return
        self.remove(node)

    def pop_front(self) -> None:
        """Time complexity: O(1). No-op on an empty list."""
        node = self._head
        if node is None:
            logger.debug("Pop on empty %s", self.__class__.__name__)
            return
        self.remove(node)

    def remove(self, node: DoublyNode[T]) -> DoublyNode[T]:
        """Unlink `node`, which must belong to this list. Time complexity: O(1)

        Membership is only checked when assertions are enabled; under
        `python -O` a foreign node corrupts the count and the end links.
        """
        if __debug__:
            assert self._owns(node), f"{node!r} is not in this list"
        logger.log(VERBOSE, OperationStep.UNLINK_NODE.value)
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        if node is self._head:
            self._head = node.next
        if node is self._tail:
            self._tail = node.prev
        node.unlink()
        self._count -= 1
        if __debug__:
            DoublyLinkedList.sanity_check(self)
        return node

    def _owns(self, node: DoublyNode[T]) -> bool:
        current: Optional[DoublyNode[T]] = node
        while current is not None and current.prev is not None:
            current = current.prev
        return current is self._head and self._head is not None

    def insert_after(self, node: DoublyNode[T], value: T) -> DoublyNode[T]:
        """Time complexity: O(1)"""
        new_node = DoublyNode(value)
        logger.log(VERBOSE, OperationStep.LINK_NODE.value)
        new_node.prev = node
        new_node.next = node.next
        if node.next is not None:
            node.next.prev = new_node
        node.next = new_node
        if node is self._tail:
            self._tail = new_node
        self._count += 1
        if __debug__:
            DoublyLinkedList.sanity_check(self)
        return new_node

    def front(self, default: Optional[T] = None) -> Optional[T]:
        if self._head is None:
            return default
        return self._head.value

    def back(self, default: Optional[T] = None) -> Optional[T]:
        if self._tail is None:
            return default
        return self._tail.value

    def find_node(self, value: T) -> Optional[DoublyNode[T]]:
        """Time complexity: O(n)"""
        current = self._head
        while current is not None:
            logger.log(VERBOSE, OperationStep.VISIT_NODE.value)
            if current.value == value:
                return current
            current = current.next
        return None

    def find(self, value: T) -> bool:
        """Time complexity: O(n)"""
        return self.find_node(value) is not None

    def clear(self) -> None:
        current = self._head
        while current is not None:
            following = current.next
            current.unlink()
            current = following
        self._head = None
        self._tail = None
        self._count = 0

    def values(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            logger.log(VERBOSE, OperationStep.VISIT_NODE.value)
            yield current.value
            current = current.next

    def reversed_values(self) -> Iterator[T]:
        current = self._tail
        while current is not None:
            logger.log(VERBOSE, OperationStep.VISIT_NODE.value)
            yield current.value
            current = current.prev

    def __iter__(self) -> Iterator[T]:
        return self.values()

    def __reversed__(self) -> Iterator[T]:
        return self.reversed_values()

    def __contains__(self, value: object) -> bool:
        return self.find(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._count

    def __str__(self) -> str:
        return " <-> ".join(map(str, self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)})"

    def __copy__(self) -> Self:
        new = self.__class__()
        for value in self:
            new.push_back(value)
        return new
