"""Main"""

from collections import deque
import logging
import os
import sys
from typing import Any

from patternbook.replay import QUEUE_OPERATIONS, apply_operation, create
from patternbook.utils import read_operations


class ReferenceQueue:
    """The queue operations expressed with `collections.deque`"""

    def __init__(self) -> None:
        self.items: deque[Any] = deque()

    def __call__(self, name: str, args: list[Any]) -> Any:
        if name == "enqueue":
            self.items.append(args[0])
            return None
        if name == "dequeue":
            return self.items.popleft() if self.items else None
        if name == "peek":
            return self.items[0] if self.items else None
        if name == "is_empty":
            return not self.items
        if name == "size":
            return len(self.items)
        raise ValueError(f"Unknown queue operation {name!r}")


def same_result(actual: Any, expected: Any) -> bool:
    # NaN arguments come back as the same object but never compare equal
    return actual is expected or actual == expected


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOGLEVEL", "WARNING"))

    reference = ReferenceQueue()
    array_queue = create("array_queue")
    linked_queue = create("linked_queue")
    mismatches = 0
    for name, args in read_operations(sys.stdin):
        try:
            if name not in QUEUE_OPERATIONS:
                raise ValueError(f"Unknown queue operation {name!r}")
            array_result = apply_operation(array_queue, name, args)
            linked_result = apply_operation(linked_queue, name, args)
            expected = reference(name, args)
        except ValueError as e:
            logging.error("Skipping %s %s: %s", name, args, e)
            continue

        logging.info("Operation: %s %s", name, args)
        if not same_result(array_result, expected):
            mismatches += 1
            logging.error("Operation: %s %s", name, args)
            logging.error("Reference: %s", expected)
            logging.error("    Array: %s", array_result)
        if not same_result(linked_result, expected):
            mismatches += 1
            logging.error("Operation: %s %s", name, args)
            logging.error("Reference: %s", expected)
            logging.error("   Linked: %s", linked_result)

    sys.exit(1 if mismatches else 0)
