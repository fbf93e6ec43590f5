"""Node classes for singly and doubly linked structures."""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    next: Optional["Node[T]"]
    value: T

    def __init__(self, value: T) -> None:
        self.next = None
        self.value = value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


class DoublyNode(Generic[T]):
    next: Optional["DoublyNode[T]"]
    prev: Optional["DoublyNode[T]"]
    value: T

    def __init__(self, value: T) -> None:
        self.next = None
        self.prev = None
        self.value = value

    def unlink(self) -> None:
        self.next = None
        self.prev = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"
