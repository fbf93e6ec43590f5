"""Queue Base"""

import abc
from typing import Generic, Iterator, Optional, Self, TypeVar

T = TypeVar("T")


class QueueBase(abc.ABC, Generic[T]):
    """
    First-in first-out queue. Inspection and removal on an empty queue return
    the absent value instead of raising.
    """

    @abc.abstractmethod
    def enqueue(self, value: T) -> None:
        """Add a value at the back of the queue."""
        pass

    @abc.abstractmethod
    def dequeue(self, default: Optional[T] = None) -> Optional[T]:
        """Remove and return the front value, or `default` if empty."""
        pass

    @abc.abstractmethod
    def peek(self, default: Optional[T] = None) -> Optional[T]:
        """Return the front value without removing it, or `default` if empty."""
        pass

    @abc.abstractmethod
    def size(self) -> int:
        pass

    @abc.abstractmethod
    def clear(self) -> None:
        pass

    @abc.abstractmethod
    def values(self) -> Iterator[T]:
        """Values from front to back."""
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        return self.values()

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({list(self)})"

    def __repr__(self) -> str:
        return str(self)

    def __copy__(self) -> Self:
        new = self.__class__()
        for value in self:
            new.enqueue(value)
        return new
