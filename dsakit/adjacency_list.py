"""Undirected graph stored as adjacency lists."""

from __future__ import annotations

import argparse


class AdjacencyList:
    """Undirected graph over vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self._adjacent: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacent)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacent):
            raise IndexError(f"invalid vertex {vertex}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adjacent[u].append(v)
        self._adjacent[v].append(u)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in the order edges were added."""
        self._check(vertex)
        return list(self._adjacent[vertex])

    def format(self) -> str:
        """Render one ``vertex: neighbours`` line per vertex."""
        return "\n".join(
            f"{vertex}:" + "".join(f" {n}" for n in adjacent)
            for vertex, adjacent in enumerate(self._adjacent)
        )


def main(argv: list[str] | None = None) -> int:
    """Read a graph's edges from standard input and print its adjacency lists."""
    parser = argparse.ArgumentParser(description="Build and show an adjacency list.")
    parser.parse_args(argv)

    try:
        vertices = int(input("Enter the number of vertices: "))
        edges = int(input("Enter the number of edges: "))
        graph = AdjacencyList(vertices)
        print("Enter each edge (u v) on a new line:")
        for _ in range(edges):
            u, v = (int(part) for part in input().split())
            try:
                graph.add_edge(u, v)
            except IndexError:
                print(f"Invalid edge: ({u}, {v}). Skipping...")
    except ValueError:
        print("Invalid number.")
        return 1
    except EOFError:
        return 1

    print("\nAdjacency List Representation:")
    print(graph.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())