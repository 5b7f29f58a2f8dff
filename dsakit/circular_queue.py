"""Fixed-capacity FIFO queue, plus an interactive menu."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class QueueFullError(Exception):
    """Raised when enqueueing onto a full queue."""


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class CircularQueue:
    """FIFO queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front item without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to rear."""
        return iter(self._items)


def _ask_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive queue menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive bounded queue.")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    try:
        queue = CircularQueue(args.capacity)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        while True:
            print("\nQueue Operations:")
            print("1. Enqueue\n2. Dequeue\n3. Peek\n4. Display\n5. Exit")
            choice = _ask_int("Enter your choice: ")
            if choice == 1:
                value = _ask_int("Enter value to enqueue: ")
                if value is None:
                    print("Invalid value!")
                    continue
                try:
                    queue.enqueue(value)
                except QueueFullError:
                    print("Queue is full! Cannot enqueue.")
                else:
                    print(f"Inserted {value} into queue.")
            elif choice == 2:
                try:
                    print(f"Removed {queue.dequeue()} from queue.")
                except QueueEmptyError:
                    print("Queue is empty! Cannot dequeue.")
            elif choice == 3:
                try:
                    print(f"Front element: {queue.peek()}")
                except QueueEmptyError:
                    print("Queue is empty!")
            elif choice == 4:
                if queue.is_empty():
                    print("Queue is empty!")
                else:
                    print("Queue elements: " + " ".join(str(v) for v in queue))
            elif choice == 5:
                print("Exiting program.")
                return 0
            else:
                print("Invalid choice! Please try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())