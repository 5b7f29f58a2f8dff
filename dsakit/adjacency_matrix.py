"""Weighted graph stored as an adjacency matrix, plus an interactive menu."""

from __future__ import annotations

import argparse


class AdjacencyMatrix:
    """Graph over vertices ``0 .. vertices - 1``; a weight of 0 means no edge."""

    def __init__(self, vertices: int, directed: bool = False) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.directed = directed
        self._rows: list[list[int]] = [[0] * vertices for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._rows)

    def _check(self, u: int, v: int) -> None:
        size = len(self._rows)
        if not (0 <= u < size and 0 <= v < size):
            raise IndexError("invalid vertex index")

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Set the edge ``u``-``v`` to ``weight`` (both ways unless directed)."""
        self._check(u, v)
        self._rows[u][v] = weight
        if not self.directed:
            self._rows[v][u] = weight

    def remove_edge(self, u: int, v: int) -> None:
        """Clear the edge ``u``-``v`` (both ways unless directed)."""
        self.add_edge(u, v, 0)

    def weight(self, u: int, v: int) -> int:
        """Return the weight stored for ``u`` to ``v``."""
        self._check(u, v)
        return self._rows[u][v]

    def format(self) -> str:
        """Render the matrix one row per line."""
        return "\n".join(" ".join(str(value) for value in row) for row in self._rows)


def _read_ints(prompt: str, count: int) -> list[int]:
    parts = [int(part) for part in input(prompt).split()]
    if len(parts) != count:
        raise ValueError(f"expected {count} numbers")
    return parts


def _add(graph: AdjacencyMatrix, prompt: str) -> None:
    u, v, weight = _read_ints(prompt, 3)
    try:
        graph.add_edge(u, v, weight)
    except IndexError:
        print("Invalid vertex index!")


def main(argv: list[str] | None = None) -> int:
    """Build a graph from standard input and edit it through a menu."""
    parser = argparse.ArgumentParser(description="Interactive adjacency matrix.")
    parser.parse_args(argv)

    try:
        vertices = int(input("Enter number of vertices: "))
        directed = int(input("Is the graph directed? (1 for Yes, 0 for No): ")) != 0
        graph = AdjacencyMatrix(vertices, directed)
        edges = int(input("Enter number of edges: "))
        for number in range(1, edges + 1):
            _add(graph, f"Enter edge {number} (u v weight): ")

        while True:
            print("\nMenu:\n1. Add Edge\n2. Remove Edge\n3. Display Matrix\n4. Exit")
            choice = input("Enter your choice: ").strip()
            if choice == "1":
                _add(graph, "Enter edge (u v weight): ")
            elif choice == "2":
                u, v = _read_ints("Enter edge to remove (u v): ", 2)
                try:
                    graph.remove_edge(u, v)
                except IndexError:
                    print("Invalid vertex index!")
            elif choice == "3":
                print("Adjacency Matrix:")
                print(graph.format())
            elif choice == "4":
                print("Exiting...")
                return 0
            else:
                print("Invalid choice!")
    except ValueError:
        print("Invalid number.")
        return 1
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())