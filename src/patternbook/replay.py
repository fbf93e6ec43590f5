"""Replay textual operation scripts against the containers."""

import logging
from typing import Any, Iterable, Iterator, Type, Union

from patternbook.more_collections import (
    ArrayQueue,
    DoublyLinkedList,
    LinkedQueue,
    SinglyLinkedList,
)

logger = logging.getLogger(__name__)

Structure = Union[
    ArrayQueue[Any], LinkedQueue[Any], SinglyLinkedList[Any], DoublyLinkedList[Any]
]

QUEUE_OPERATIONS = {
    "enqueue": 1,
    "dequeue": 0,
    "peek": 0,
    "is_empty": 0,
    "size": 0,
}

STRUCTURES: dict[str, Type[Any]] = {
    "array_queue": ArrayQueue,
    "linked_queue": LinkedQueue,
    "singly_linked_list": SinglyLinkedList,
    "doubly_linked_list": DoublyLinkedList,
}

# Operation name -> number of arguments
OPERATIONS: dict[Type[Any], dict[str, int]] = {
    ArrayQueue: QUEUE_OPERATIONS,
    LinkedQueue: QUEUE_OPERATIONS,
    SinglyLinkedList: {
        "push_front": 1,
        "push_back": 1,
        "pop_front": 0,
        "front": 0,
        "find": 1,
        "is_empty": 0,
    },
    DoublyLinkedList: {
        "push_back": 1,
        "push_front": 1,
        "pop_back": 0,
        "pop_front": 0,
        "front": 0,
        "back": 0,
        "find": 1,
        "is_empty": 0,
    },
}


class UnknownStructureError(KeyError):
    """Raised when a structure name is not in `STRUCTURES`."""


class UnknownOperationError(ValueError):
    """Raised when a structure does not offer the requested operation."""


class OperationArityError(ValueError):
    """Raised when an operation gets the wrong number of arguments."""


def create(name: str) -> Structure:
    if name not in STRUCTURES:
        raise UnknownStructureError(name)
    return STRUCTURES[name]()


def apply_operation(structure: Structure, name: str, args: list[Any]) -> Any:
    operations = OPERATIONS[type(structure)]
    if name not in operations:
        raise UnknownOperationError(
            f"{type(structure).__name__} has no operation {name!r}"
        )
    arity = operations[name]
    if len(args) != arity:
        raise OperationArityError(
            f"{name} takes {arity} argument(s) but {len(args)} were given"
        )
    logger.debug(
        "Applying %s%s to %s", name, tuple(args), type(structure).__name__
    )
    # Linked-list insertions return the new node, which is not part of the
    # public result of the operation.
    result = getattr(structure, name)(*args)
    if name.startswith("push_"):
        return None
    return result


def replay(
    structure: Structure, operations: Iterable[tuple[str, list[Any]]]
) -> Iterator[tuple[str, list[Any], Any]]:
    for name, args in operations:
        yield name, args, apply_operation(structure, name, args)
