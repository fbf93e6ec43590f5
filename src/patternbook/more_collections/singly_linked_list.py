"""Singly linked list implementation in Python."""

import logging
from typing import Generic, Iterable, Iterator, Optional, Self, TypeVar
import warnings

from ..logging import OperationStep
from ..logging import VERBOSE
from .node import Node

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SinglyLinkedList(Generic[T], Iterable[T]):
    """Singly linked list. Only the head is tracked, so `push_back` is O(n)."""

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        if iterable is not None:
            for value in iterable:
                self.push_back(value)

    def sanity_check(self) -> None:
        """Check if the linked list is sane"""
        if not __debug__:
            warnings.warn("Sanity checks are disabled", RuntimeWarning)
            return
        seen: set[int] = set()
        current = self._head
        while current is not None:
            assert id(current) not in seen, "cycle in singly linked list"
            seen.add(id(current))
            current = current.next

    @property
    def head(self) -> Optional[Node[T]]:
        return self._head

    def is_empty(self) -> bool:
        return self._head is None

    def push_front(self, value: T) -> None:
        """Time complexity: O(1)"""
        node = Node(value)
        logger.log(VERBOSE, OperationStep.LINK_NODE.value)
        node.next = self._head
        self._head = node
        if __debug__:
            SinglyLinkedList.sanity_check(self)

    def push_back(self, value: T) -> None:
        """Time complexity: O(n)"""
        if self._head is None:
            self.push_front(value)
            return
        current = self._head
        while current.next is not None:
            logger.log(VERBOSE, OperationStep.VISIT_NODE.value)
            current = current.next
        logger.log(VERBOSE, OperationStep.LINK_NODE.value)
        current.next = Node(value)
        if __debug__:
            SinglyLinkedList.sanity_check(self)

    def pop_front(self) -> None:
        """Time complexity: O(1). No-op on an empty list."""
        node = self._head
        if node is None:
            logger.debug("Pop on empty %s", self.__class__.__name__)
            return
        logger.log(VERBOSE, OperationStep.UNLINK_NODE.value)
        self._head = node.next
        node.next = None
        if __debug__:
            SinglyLinkedList.sanity_check(self)

    def front(self, default: Optional[T] = None) -> Optional[T]:
        """Time complexity: O(1)"""
        if self._head is None:
            return default
        return self._head.value

    def find(self, value: T) -> bool:
        """Time complexity: O(n)"""
        current = self._head
        while current is not None:
            logger.log(VERBOSE, OperationStep.VISIT_NODE.value)
            if current.value == value:
                return True
            current = current.next
        return False

    def clear(self) -> None:
        current = self._head
        while current is not None:
            following = current.next
            current.next = None
            current = following
        self._head = None

    def values(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            logger.log(VERBOSE, OperationStep.VISIT_NODE.value)
            yield current.value
            current = current.next

    def __iter__(self) -> Iterator[T]:
        return self.values()

    def __contains__(self, value: object) -> bool:
        return self.find(value)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return " -> ".join(map(str, self))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)})"

    def __copy__(self) -> Self:
        new = self.__class__()
        tail: Optional[Node[T]] = None
        for value in self:
            node = Node(value)
            if tail is None:
                new._head = node
            else:
                tail.next = node
            tail = node
        return new
