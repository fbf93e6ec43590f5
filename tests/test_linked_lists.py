"""Unit tests for the singly and doubly linked lists"""

from copy import copy
import unittest

from patternbook.more_collections import DoublyLinkedList, SinglyLinkedList


class TestSinglyLinkedList(unittest.TestCase):
    def test_push_front_and_back(self) -> None:
        linked_list: SinglyLinkedList[int] = SinglyLinkedList()
        linked_list.push_front(10)
        linked_list.push_front(20)
        linked_list.push_back(30)
        self.assertEqual(list(linked_list), [20, 10, 30])
        self.assertEqual(str(linked_list), "20 -> 10 -> 30")

    def test_push_back_on_empty(self) -> None:
        linked_list: SinglyLinkedList[int] = SinglyLinkedList()
        linked_list.push_back(1)
        self.assertEqual(list(linked_list), [1])
        self.assertEqual(linked_list.front(), 1)

    def test_pop_front_single(self) -> None:
        linked_list = SinglyLinkedList([1])
        linked_list.pop_front()
        self.assertIsNone(linked_list.head)
        self.assertTrue(linked_list.is_empty())

    def test_pop_front_on_empty(self) -> None:
        linked_list: SinglyLinkedList[int] = SinglyLinkedList()
        linked_list.pop_front()
        self.assertTrue(linked_list.is_empty())
        self.assertIsNone(linked_list.front())
        self.assertEqual(len(linked_list), 0)

    def test_pop_front_order(self) -> None:
        linked_list = SinglyLinkedList([1, 2, 3])
        linked_list.pop_front()
        self.assertEqual(list(linked_list), [2, 3])
        linked_list.pop_front()
        linked_list.pop_front()
        self.assertEqual(list(linked_list), [])
        linked_list.push_front(4)
        self.assertEqual(list(linked_list), [4])

    def test_find(self) -> None:
        linked_list = SinglyLinkedList(["a", "b", "c"])
        self.assertTrue(linked_list.find("b"))
        self.assertFalse(linked_list.find("z"))
        self.assertIn("c", linked_list)
        self.assertNotIn("d", linked_list)
        self.assertFalse(SinglyLinkedList().find("a"))

    def test_traversal_is_restartable(self) -> None:
        linked_list = SinglyLinkedList([3, 1, 2])
        self.assertEqual(list(linked_list.values()), [3, 1, 2])
        self.assertEqual(list(linked_list.values()), [3, 1, 2])
        self.assertEqual(len(linked_list), 3)

    def test_copy(self) -> None:
        linked_list = SinglyLinkedList([1, 2, 3])
        new = copy(linked_list)
        new.pop_front()
        new.sanity_check()
        self.assertEqual(list(linked_list), [1, 2, 3])
        self.assertEqual(list(new), [2, 3])

    def test_clear(self) -> None:
        linked_list = SinglyLinkedList([1, 2])
        linked_list.clear()
        self.assertTrue(linked_list.is_empty())


class TestDoublyLinkedList(unittest.TestCase):
    def test_push_and_pop_back(self) -> None:
        linked_list: DoublyLinkedList[int] = DoublyLinkedList()
        linked_list.push_back(1)
        linked_list.push_back(2)
        linked_list.push_back(3)
        linked_list.pop_back()
        self.assertEqual(list(linked_list), [1, 2])
        linked_list.pop_back()
        self.assertEqual(list(linked_list), [1])
        linked_list.pop_back()
        self.assertEqual(list(linked_list), [])
        self.assertIsNone(linked_list.head)
        self.assertIsNone(linked_list.tail)
        linked_list.pop_back()
        self.assertEqual(list(linked_list), [])
        self.assertEqual(len(linked_list), 0)

    def test_forward_is_reverse_of_backward(self) -> None:
        linked_list: DoublyLinkedList[int] = DoublyLinkedList()
        operations = [
            ("push", 1),
            ("push", 2),
            ("pop", None),
            ("push", 3),
            ("push", 4),
            ("push", 5),
            ("pop", None),
            ("pop", None),
            ("pop", None),
            ("pop", None),
            ("pop", None),
            ("push", 6),
        ]
        for operation, value in operations:
            if operation == "push":
                assert value is not None
                linked_list.push_back(value)
            else:
                linked_list.pop_back()
            forward = list(linked_list)
            backward = list(reversed(linked_list))
            self.assertEqual(forward, backward[::-1])
            self.assertEqual(len(linked_list), len(forward))
            linked_list.sanity_check()
        self.assertEqual(list(linked_list), [6])

    def test_end_links(self) -> None:
        linked_list = DoublyLinkedList([1, 2, 3])
        assert linked_list.head is not None
        assert linked_list.tail is not None
        self.assertIsNone(linked_list.head.prev)
        self.assertIsNone(linked_list.tail.next)
        self.assertEqual(linked_list.front(), 1)
        self.assertEqual(linked_list.back(), 3)

    def test_pop_back_unlinks_node(self) -> None:
        linked_list = DoublyLinkedList([1, 2])
        old_tail = linked_list.tail
        linked_list.pop_back()
        assert old_tail is not None
        self.assertIsNone(old_tail.prev)
        self.assertIsNone(old_tail.next)
        assert linked_list.tail is not None
        self.assertIsNone(linked_list.tail.next)

    def test_push_and_pop_front(self) -> None:
        linked_list: DoublyLinkedList[str] = DoublyLinkedList()
        linked_list.push_front("b")
        linked_list.push_front("a")
        linked_list.push_back("c")
        self.assertEqual(list(linked_list), ["a", "b", "c"])
        linked_list.pop_front()
        self.assertEqual(list(linked_list), ["b", "c"])
        self.assertEqual(str(linked_list), "b <-> c")

    def test_insert_after_and_remove(self) -> None:
        linked_list = DoublyLinkedList([1, 3])
        node = linked_list.find_node(1)
        assert node is not None
        linked_list.insert_after(node, 2)
        assert linked_list.tail is not None
        linked_list.insert_after(linked_list.tail, 4)
        self.assertEqual(list(linked_list), [1, 2, 3, 4])
        self.assertEqual(linked_list.back(), 4)

        middle = linked_list.find_node(3)
        assert middle is not None
        linked_list.remove(middle)
        self.assertEqual(list(linked_list), [1, 2, 4])
        self.assertEqual(list(reversed(linked_list)), [4, 2, 1])

    @unittest.skipUnless(__debug__, "membership is asserted only in debug mode")
    def test_remove_foreign_node(self) -> None:
        linked_list = DoublyLinkedList([1, 2])
        other = DoublyLinkedList([1, 2])
        foreign = other.find_node(2)
        assert foreign is not None
        with self.assertRaises(AssertionError):
            linked_list.remove(foreign)
        removed = linked_list.find_node(1)
        assert removed is not None
        linked_list.remove(removed)
        with self.assertRaises(AssertionError):
            linked_list.remove(removed)
        self.assertEqual(len(linked_list), 1)
        self.assertEqual(list(other), [1, 2])
        linked_list.sanity_check()

    def test_find(self) -> None:
        linked_list = DoublyLinkedList([5, 6])
        self.assertTrue(linked_list.find(6))
        self.assertFalse(linked_list.find(7))
        self.assertIn(5, linked_list)
        self.assertIsNone(linked_list.find_node(7))

    def test_empty_peeks(self) -> None:
        linked_list: DoublyLinkedList[int] = DoublyLinkedList()
        self.assertIsNone(linked_list.front())
        self.assertIsNone(linked_list.back())
        self.assertEqual(linked_list.back(0), 0)
        linked_list.pop_front()
        self.assertTrue(linked_list.is_empty())

    def test_copy(self) -> None:
        linked_list = DoublyLinkedList([1, 2, 3])
        new = copy(linked_list)
        new.pop_back()
        self.assertEqual(list(linked_list), [1, 2, 3])
        self.assertEqual(list(new), [1, 2])
        self.assertEqual(repr(new), "DoublyLinkedList([1, 2])")

    def test_clear(self) -> None:
        linked_list = DoublyLinkedList([1, 2, 3])
        linked_list.clear()
        linked_list.sanity_check()
        self.assertTrue(linked_list.is_empty())
        self.assertEqual(len(linked_list), 0)


if __name__ == "__main__":
    unittest.main()
