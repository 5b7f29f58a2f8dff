"""Binary search tree without duplicate keys, plus an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A tree node holding a value and its two subtrees."""

    data: Any
    left: Node | None = None
    right: Node | None = None


class BinarySearchTree:
    """Unbalanced binary search tree; inserting an existing value is a no-op."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert ``value``; return False if it was already present."""
        if self.root is None:
            self.root = Node(value)
            self._size = 1
            return True
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            elif value > node.data:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def find(self, value: Any) -> Node | None:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None and node.data != value:
            node = node.left if value < node.data else node.right
        return node

    def children(self, value: Any) -> tuple[Any, Any]:
        """Return the (left, right) child values of ``value``; None marks a missing child."""
        node = self.find(value)
        if node is None:
            raise KeyError(value)
        left = node.left.data if node.left is not None else None
        right = node.right.data if node.right is not None else None
        return left, right

    def inorder(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def preorder(self) -> Iterator[Any]:
        """Yield each node before its left and then right subtree."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def postorder(self) -> Iterator[Any]:
        """Yield each node after its left and then right subtree."""
        stack = [(self.root, False)] if self.root is not None else []
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.data
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()


def _ask_int(prompt: str) -> int | None:
    try:
        return int(input(prompt).strip())
    except ValueError:
        return None


def _traverse(tree: BinarySearchTree) -> None:
    print("Choose traversal: \n1. In-order\n2. Pre-order\n3. Post-order")
    traversals = {1: tree.inorder, 2: tree.preorder, 3: tree.postorder}
    choice = _ask_int("Enter choice: ")
    if choice in traversals:
        print("Traversal result: " + " ".join(str(v) for v in traversals[choice]()))
    else:
        print("Traversal result: Invalid traversal choice.")


def _show_children(tree: BinarySearchTree, value: int) -> None:
    try:
        left, right = tree.children(value)
    except KeyError:
        print("Node not found.")
        return
    for side, child in (("Left", left), ("Right", right)):
        if child is None:
            print(f"{side} child of {value} does not exist.")
        else:
            print(f"{side} child of {value} is {child}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive binary search tree menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive binary search tree.")
    parser.parse_args(argv)

    tree = BinarySearchTree()
    print("Binary Search Tree Simulation")
    try:
        while True:
            print("\n1. Insert node\n2. Traverse tree\n3. Show root\n4. Show children of a node\n5. Exit")
            choice = _ask_int("Enter choice: ")
            if choice == 1:
                value = _ask_int("Enter value to insert: ")
                if value is None:
                    print("Invalid value.")
                else:
                    tree.insert(value)
            elif choice == 2:
                _traverse(tree)
            elif choice == 3:
                if tree.root is None:
                    print("Tree is empty.")
                else:
                    print(f"Root of the tree is: {tree.root.data}")
            elif choice == 4:
                value = _ask_int("Enter the node value to find its children: ")
                if value is None:
                    print("Invalid value.")
                else:
                    _show_children(tree, value)
            elif choice == 5:
                print("Exiting program.")
                return 0
            else:
                print("Invalid choice. Try again.")
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())