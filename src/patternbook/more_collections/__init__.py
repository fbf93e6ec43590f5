"""More Collections"""

from .array_queue import ArrayQueue
from .linked_list import DoublyLinkedList
from .linked_queue import LinkedQueue
from .node import DoublyNode, Node
from .queue_base import QueueBase
from .singly_linked_list import SinglyLinkedList

__all__ = [
    "ArrayQueue",
    "DoublyLinkedList",
    "DoublyNode",
    "LinkedQueue",
    "Node",
    "QueueBase",
    "SinglyLinkedList",
]
