"""Weighted directed graph with Dijkstra and Yen's k-shortest-paths search."""

from __future__ import annotations

import heapq
import math
import os
import re
from typing import NamedTuple, Sequence

_UNSIGNED = re.compile(r"\d+")
_SIGNED = re.compile(r"[+-]?\d+")


class Edge(NamedTuple):
    """A directed, weighted edge."""

    start: int
    end: int
    value: int


class _Scanner:
    """Whitespace-separated reader over a text, in the manner of stream extraction."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    @property
    def at_end(self) -> bool:
        self._skip_space()
        return self._pos >= len(self._text)

    def char(self) -> str | None:
        if self.at_end:
            return None
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def number(self, signed: bool = False) -> int | None:
        self._skip_space()
        pattern = _SIGNED if signed else _UNSIGNED
        match = pattern.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group())

    def record(self) -> tuple[int, int, int] | None:
        """Read one ``<char> start end value <char>`` record."""
        if self.char() is None:
            return None
        fields = []
        for _ in range(3):
            value = self.number()
            if value is None:
                return None
            fields.append(value)
        if self.char() is None:
            return None
        return fields[0], fields[1], fields[2]


class Graph:
    """Directed graph stored as adjacency lists of ``(end, value)`` pairs."""

    def __init__(self, vertex_count: int = 0) -> None:
        if vertex_count < 0:
            raise ValueError("Vertex count must not be negative!")
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Graph:
        """Load a graph from a file in the text format accepted by :meth:`parse`."""
        with open(path, encoding="utf-8") as handle:
            return cls.parse(handle.read())

    @classmethod
    def parse(cls, text: str) -> Graph:
        """Build a graph from a vertex count followed by records like ``(0 1 5)``."""
        scanner = _Scanner(text)
        count = scanner.number(signed=True)
        if count is None:
            if not scanner.at_end:
                raise ValueError("Ended reading file early!")
            count = 0
        graph = cls(count)
        while (record := scanner.record()) is not None:
            graph.add_edge(*record)
        if not scanner.at_end:
            raise ValueError("Ended reading file early!")
        return graph

    def __len__(self) -> int:
        return len(self._adjacency)

    def __str__(self) -> str:
        return "\n".join(
            "".join(f"({vertex} {end} {value})" for end, value in edges)
            for vertex, edges in enumerate(self._adjacency)
        )

    def _contains(self, node: int) -> bool:
        return 0 <= node < len(self._adjacency)

    def add_edge(self, start: int, end: int, value: int) -> None:
        """Add an edge; each ordered pair of vertices may hold only one."""
        if not (self._contains(start) and self._contains(end)):
            raise IndexError("Invalid node! .addEdge failed!")
        if any(existing == end for existing, _ in self._adjacency[start]):
            raise ValueError("There is already a node with that cordinates!")
        self._adjacency[start].append((end, value))

    def remove_edge(self, start: int, end: int) -> list[Edge]:
        """Remove the edge ``start -> end`` and return what was removed."""
        if not (self._contains(start) and self._contains(end)):
            return []
        edges = self._adjacency[start]
        removed = [Edge(start, target, value) for target, value in edges if target == end]
        if removed:
            self._adjacency[start] = [(t, v) for t, v in edges if t != end]
        return removed

    def dijkstra(self, start: int, end: int) -> list[int]:
        """Return the cheapest path from ``start`` to ``end``, or ``[]`` if none exists."""
        if not (self._contains(start) and self._contains(end)):
            raise IndexError("Given param is out of range!")
        distances = [math.inf] * len(self._adjacency)
        previous: list[int | None] = [None] * len(self._adjacency)
        distances[start] = 0
        heap = [(0, start)]
        while heap:
            distance, vertex = heapq.heappop(heap)
            if distance > distances[vertex]:
                continue
            for neighbour, value in self._adjacency[vertex]:
                candidate = distance + value
                if candidate < distances[neighbour]:
                    distances[neighbour] = candidate
                    previous[neighbour] = vertex
                    heapq.heappush(heap, (candidate, neighbour))

        if distances[end] == math.inf:
            return []
        path = [end]
        while (before := previous[path[-1]]) is not None:
            path.append(before)
        path.reverse()
        return path

    def yen_ksp(self, start: int, end: int, k: int) -> list[list[int]]:
        """Return up to ``k`` shortest loopless paths, cheapest first.

        The first entry is empty when ``end`` cannot be reached from ``start``.
        """
        if k < 1:
            raise ValueError("Kth must be >= 1")
        if not (self._contains(start) and self._contains(end)):
            raise IndexError("Given param is out of range!")

        found = [self.dijkstra(start, end)]
        candidates: list[list[int]] = []

        while len(found) < k:
            previous_path = found[-1]
            if not previous_path:
                break

            for i, spur_node in enumerate(previous_path[:-1]):
                root_path = previous_path[: i + 1]
                removed: list[Edge] = []
                try:
                    for path in found:
                        if len(path) > i + 1 and path[:i] == root_path[:i]:
                            removed.extend(self.remove_edge(path[i], path[i + 1]))
                    for node in root_path[:-1]:
                        for target, _ in list(self._adjacency[node]):
                            removed.extend(self.remove_edge(node, target))
                    spur_path = self.dijkstra(spur_node, end)
                finally:
                    for edge in removed:
                        self.add_edge(*edge)

                if not spur_path:
                    continue
                total_path = root_path[:-1] if root_path[-1] == spur_path[0] else list(root_path)
                total_path.extend(spur_path)
                if total_path not in found and total_path not in candidates:
                    candidates.append(total_path)

            if not candidates:
                break
            candidates.sort(key=self.path_value)
            found.append(candidates.pop(0))

        return found

    def edge_value(self, start: int, end: int) -> int:
        """Return the value of the edge ``start -> end``."""
        if not (self._contains(start) and self._contains(end)):
            raise IndexError("Invalid node! .getValueOfEdge failed!")
        for target, value in self._adjacency[start]:
            if target == end:
                return value
        raise KeyError((start, end))

    def path_value(self, path: Sequence[int]) -> int:
        """Return the summed edge values along ``path``."""
        return sum(self.edge_value(a, b) for a, b in zip(path, path[1:]))