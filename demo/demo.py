import argparse

from patternbook.more_collections import (
    ArrayQueue,
    DoublyLinkedList,
    LinkedQueue,
    SinglyLinkedList,
)

# Walks through the textbook examples for one container.


def main() -> None:

    parser = argparse.ArgumentParser(description="Demo of the textbook containers.")
    parser.add_argument("--structure", type=int, default=1, help="Select container: 1 - array queue; 2 - linked queue; 3 - singly linked list; 4 - doubly linked list")

    args = parser.parse_args()

    match args.structure:
        case 1 | 2:
            queue = ArrayQueue() if args.structure == 1 else LinkedQueue()
            for value in (1, 2, 3):
                queue.enqueue(value)
                print(f"enqueue({value}) -> {queue}")
            print(f"dequeue() -> {queue.dequeue()}")
            print(f"size() -> {queue.size()}, peek() -> {queue.peek()}")
            while not queue.is_empty():
                print(f"dequeue() -> {queue.dequeue()}")
            print(f"dequeue() on empty -> {queue.dequeue()}")
        case 3:
            singly = SinglyLinkedList()
            singly.push_front(10)
            singly.push_front(20)
            singly.push_back(30)
            print(singly)
            print(f"find(10) -> {singly.find(10)}, find(40) -> {singly.find(40)}")
            singly.pop_front()
            print(singly)
        case 4:
            doubly = DoublyLinkedList([1, 2, 3])
            print(doubly)
            for _ in range(4):
                doubly.pop_back()
                print(f"pop_back() -> {list(doubly)}")
        case _:
            raise ValueError("Invalid container selection.")


if __name__ == "__main__":
    main()
