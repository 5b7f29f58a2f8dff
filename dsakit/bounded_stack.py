"""Fixed-capacity LIFO stack, plus an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class StackFullError(Exception):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """LIFO stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(self._items)


def _ask_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive stack menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive bounded stack.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    try:
        stack = BoundedStack(args.capacity)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        while True:
            print("\nStack Operations:")
            print("1. Push\n2. Pop\n3. Peek\n4. Display\n5. Exit")
            choice = _ask_int("Enter your choice: ")
            if choice == 1:
                value = _ask_int("Enter value to push: ")
                if value is None:
                    print("Invalid value!")
                    continue
                try:
                    stack.push(value)
                except StackFullError:
                    print("Stack is full! Cannot push.")
                else:
                    print(f"Pushed {value} onto the stack successfully.")
            elif choice == 2:
                try:
                    print(f"Popped {stack.pop()} from the stack.")
                except StackEmptyError:
                    print("Stack is empty! Cannot pop.")
            elif choice == 3:
                try:
                    print(f"Top element: {stack.peek()}")
                except StackEmptyError:
                    print("Stack is empty!")
            elif choice == 4:
                if stack.is_empty():
                    print("Stack is empty!")
                else:
                    print("Stack elements: " + " ".join(str(v) for v in stack))
            elif choice == 5:
                print("Exiting program.")
                return 0
            else:
                print("Invalid choice! Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())