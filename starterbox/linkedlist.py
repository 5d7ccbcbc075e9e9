"""A doubly linked list of values with an interactive menu front end."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList:
    """A list whose nodes link both forwards and backwards."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def insert_first(self, value: Any) -> None:
        """Insert value at the front."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert value at the back."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _Node:
        if not 0 <= position < self._size:
            raise IndexError(f"there are less than {position} elements")
        node = self._head
        for _ in range(position):
            node = node.next
        return node

    def insert_after(self, position: int, value: Any) -> None:
        """Insert value after the node at the zero-based position."""
        node = self._node_at(position)
        new = _Node(value, node, node.next)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def pop_first(self) -> Any:
        """Remove and return the first value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._head)

    def pop_last(self) -> Any:
        """Remove and return the last value; raise IndexError when empty."""
        if self._tail is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._tail)

    def _find_node(self, value: Any) -> _Node | None:
        node = self._head
        while node is not None:
            if node.value == value:
                return node
            node = node.next
        return None

    def delete_after(self, value: Any) -> Any:
        """Remove the node following the first node holding value and return its value."""
        node = self._find_node(value)
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        if node.next is None:
            raise IndexError(f"no node follows {value!r}")
        return self._unlink(node.next)

    def find(self, value: Any) -> int | None:
        """Return the zero-based index of the first occurrence of value, or None."""
        for index, item in enumerate(self):
            if item == value:
                return index
        return None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


_MENU = (
    "\n****Main Menu****\n"
    "\nChoose one option from the following list ...\n"
    "\n===============================================\n"
    "\n1.Insert in beginning\n2.Insert at last\n3.Insert at any random location"
    "\n4.Delete from Beginning\n5.Delete from last\n6.Delete the node after the given data"
    "\n7.Search\n8.Show\n9.Exit\n"
)


def _ask(prompt: str) -> int:
    while True:
        answer = input(prompt)
        try:
            return int(answer.strip())
        except ValueError:
            print("Please enter a whole number.")


def _run(items: DoublyLinkedList, choice: int) -> None:
    match choice:
        case 1:
            items.insert_first(_ask("Enter Item value: "))
            print("Node inserted")
        case 2:
            items.append(_ask("Enter value: "))
            print("node inserted")
        case 3:
            position = _ask("Enter the location: ")
            if not 0 <= position < len(items):
                print(f"There are less than {position} elements")
                return
            items.insert_after(position, _ask("Enter value: "))
            print("node inserted")
        case 4 | 5:
            if not items:
                print("UNDERFLOW")
                return
            if choice == 4:
                items.pop_first()
            else:
                items.pop_last()
            print("node deleted")
        case 6:
            value = _ask("Enter the data after which the node is to be deleted : ")
            try:
                items.delete_after(value)
            except (ValueError, IndexError):
                print("Can't delete")
            else:
                print("node deleted")
        case 7:
            if not items:
                print("Empty List")
                return
            index = items.find(_ask("Enter item which you want to search?\n"))
            if index is None:
                print("Item not found")
            else:
                print(f"item found at location {index + 1}")
        case 8:
            print("printing values...")
            for value in items:
                print(value)
        case _:
            print("Please enter valid choice..")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive linked-list menu on standard input."""
    argparse.ArgumentParser(
        description="Interactive doubly linked list of integers."
    ).parse_args(argv)
    items = DoublyLinkedList()
    try:
        while True:
            print(_MENU)
            choice = _ask("Enter your choice?\n")
            if choice == 9:
                return 0
            _run(items, choice)
    except EOFError:
        return 0