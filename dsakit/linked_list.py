"""Singly linked list with a size cap, plus an interactive demo."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

DEFAULT_CAPACITY = 5


class ListFullError(Exception):
    """Raised when adding to a list that already holds ``capacity`` items."""


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list that holds at most ``capacity`` items."""

    def __init__(self, values: Iterable[Any] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._head: _Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def is_empty(self) -> bool:
        return self._head is None

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def add(self, data: Any, position: int = 0) -> None:
        """Insert ``data`` at ``position``; positions past the end append."""
        if self._length >= self.capacity:
            raise ListFullError(f"list has reached its maximum size of {self.capacity}")
        if position < 0:
            raise IndexError("position must not be negative")
        position = min(position, self._length)
        if position == 0:
            self._head = _Node(data, self._head)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(data, previous.next)
        self._length += 1

    def remove(self, position: int) -> Any:
        """Remove the item at ``position`` and return it."""
        if self.is_empty():
            raise IndexError("list is empty")
        if position < 0 or position >= self._length:
            raise IndexError("position out of range")
        if position == 0:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            assert removed is not None
            previous.next = removed.next
        self._length -= 1
        return removed.data

    def pop(self) -> Any:
        """Remove and return the last item."""
        if self.is_empty():
            raise IndexError("list is empty")
        return self.remove(self._length - 1)

    def index(self, data: Any) -> int:
        """Return the position of the first item equal to ``data``."""
        for position, value in enumerate(self):
            if value == data:
                return position
        raise ValueError(f"{data!r} is not in list")

    def append(self, data: Any) -> None:
        """Add ``data`` at the end."""
        self.add(data, self._length)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"


def _run_operation(items: LinkedList, operation: str) -> None:
    if operation == "1":
        data, position = (int(part) for part in input("Enter data and position: ").split())
        try:
            items.add(data, position)
        except ListFullError:
            print(f"List has reached its maximum size of {items.capacity}")
        except IndexError:
            print("Position out of range")
    elif operation == "2":
        position = int(input("Enter position to remove: "))
        try:
            items.remove(position)
        except IndexError as exc:
            print("List is empty" if items.is_empty() else "Position out of range")
            del exc
    elif operation == "3":
        try:
            print(f"Popped value: {items.pop()}")
        except IndexError:
            print("List is empty")
    elif operation == "4":
        data = int(input("Enter data to find index: "))
        try:
            found = items.index(data)
        except ValueError:
            found = -1
        print(f"Index of {data}: {found}")
    elif operation == "5":
        print(f"Size of the list: {len(items)}")
    elif operation == "6":
        data = int(input("Enter data to append: "))
        try:
            items.append(data)
        except ListFullError:
            print(f"List has reached its maximum size of {items.capacity}")
    elif operation == "7":
        print(items)
    else:
        print("Invalid operation.")


def main(argv: list[str] | None = None) -> int:
    """Fill a list from standard input, then run one chosen operation."""
    parser = argparse.ArgumentParser(description="Interactive linked list demo.")
    parser.parse_args(argv)

    items = LinkedList()
    try:
        for position in range(items.capacity):
            items.add(int(input("Enter a number: ")), position)
        print(items)
        operation = input(
            "Choose operation (\n 1.add \n 2.remove\n 3.pop\n 4.index\n 5.size\n 6.append\n 7.display): "
        ).strip()
        _run_operation(items, operation)
    except ValueError:
        print("Invalid number.")
        return 1
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())