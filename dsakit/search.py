"""Binary search over an ascending sequence."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        candidate = values[mid]
        if candidate == key:
            return mid
        if key < candidate:
            high = mid - 1
        else:
            low = mid + 1
    return None


def main(argv: list[str] | None = None) -> int:
    """Search for a key in a sorted list of integers given on the command line."""
    parser = argparse.ArgumentParser(description="Binary search a sorted list of integers.")
    parser.add_argument("key", type=int, help="value to look for")
    parser.add_argument("values", nargs="*", type=int, help="sorted values to search")
    args = parser.parse_args(argv)

    print("Here is your array: " + " ".join(str(v) for v in args.values))
    index = binary_search(args.values, args.key)
    if index is None:
        print("Search unsuccessful, no results found")
    else:
        print(f"The value {args.key} found at index {index}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())