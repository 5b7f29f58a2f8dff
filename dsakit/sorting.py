"""Classic comparison sorts, each returning a new ascending list."""

from __future__ import annotations

import argparse
import heapq
from collections.abc import Callable, Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return list(heapq.merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quicksort using the last element of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot_index = _partition(items, low, high)
        pending.append((low, pivot_index - 1))
        pending.append((pivot_index + 1, high))
    return items


SORTERS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "bubble": bubble_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "merge": merge_sort,
    "quick": quick_sort,
}


def _read_numbers(algorithm: str) -> list[int]:
    count = int(input(f"How many elements do you want to sort using {algorithm} sort? "))
    return [int(input(f"Enter element {i}: ")) for i in range(1, count + 1)]


def _join(values: Iterable[Any]) -> str:
    return " ".join(str(v) for v in values)


def main(argv: list[str] | None = None) -> int:
    """Sort integers given on the command line, or asked for interactively."""
    parser = argparse.ArgumentParser(description="Sort integers in ascending order.")
    parser.add_argument("--algorithm", choices=sorted(SORTERS), default="merge")
    parser.add_argument("numbers", nargs="*", type=int)
    args = parser.parse_args(argv)

    numbers = args.numbers
    if not numbers:
        try:
            numbers = _read_numbers(args.algorithm)
        except ValueError:
            print("Invalid number.")
            return 1
        except EOFError:
            return 1

    print(f"You have entered: {_join(numbers)}")
    print(f"Sorted numbers: {_join(SORTERS[args.algorithm](numbers))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())