"""Directed, weighted graph of cities connected by roads."""

from __future__ import annotations

import heapq
import math
import re
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

DEFAULT_DATA_FILE = "vertex.txt"

_EDGE_PATTERN = re.compile(r"(.*?)--(-?\d+)(?: |$)")


@dataclass
class Edge:
    """A road from ``source`` to ``destination`` of a given length in km."""

    source: str
    destination: str
    weight: int


@dataclass
class Vertex:
    """A city and the roads leaving it."""

    name: str
    edges: list[Edge] = field(default_factory=list)

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)


class Graph:
    """Cities keyed by name, each holding its outgoing roads."""

    def __init__(self) -> None:
        self.vertices: dict[str, Vertex] = {}

    def __contains__(self, name: object) -> bool:
        return name in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vertices)

    # -- cities ---------------------------------------------------------

    def add_vertex(self, name: str) -> None:
        if name in self.vertices:
            raise ValueError(f"City {name} already exists!")
        self.vertices[name] = Vertex(name)

    def has_vertex(self, name: str) -> bool:
        return name in self.vertices

    def update_vertex(self, old_name: str, new_name: str) -> None:
        """Rename a city, redirecting every road that touches it."""
        if old_name not in self.vertices:
            raise LookupError(f"City {old_name} doesn't exist!")
        if new_name in self.vertices:
            raise ValueError(f"City {new_name} already exists!")

        old_vertex = self.vertices[old_name]
        renamed = Vertex(
            new_name,
            [Edge(new_name, e.destination, e.weight) for e in old_vertex.edges],
        )
        items = [
            (new_name, renamed) if name == old_name else (name, vertex)
            for name, vertex in self.vertices.items()
        ]
        self.vertices.clear()
        self.vertices.update(items)

        for name, vertex in self.vertices.items():
            if name == new_name:
                continue
            vertex.edges = [
                Edge(name, new_name, e.weight) if e.destination == old_name else e
                for e in vertex.edges
            ]

    def delete_vertex(self, name: str) -> None:
        """Remove a city together with every road leading to it."""
        if name not in self.vertices:
            raise LookupError(f"City {name} doesn't exist!")
        del self.vertices[name]
        for vertex in self.vertices.values():
            vertex.edges = [e for e in vertex.edges if e.destination != name]

    # -- roads ----------------------------------------------------------

    def add_edge(self, source: str, destination: str, weight: int) -> None:
        if source not in self.vertices or destination not in self.vertices:
            raise LookupError("one or both cities are not in the graph")
        self.vertices[source].add_edge(Edge(source, destination, weight))

    def update_edge(self, source: str, destination: str, weight: int) -> bool:
        """Set the length of every road from source to destination.

        Returns whether any road was changed.
        """
        vertex = self.vertices.get(source)
        if vertex is None:
            return False
        changed = False
        for edge in vertex.edges:
            if edge.source == source and edge.destination == destination:
                edge.weight = weight
                changed = True
        return changed

    def delete_edge(self, source: str, destination: str) -> None:
        """Remove the first road from source to destination."""
        vertex = self.vertices.get(source)
        if vertex is not None:
            for position, edge in enumerate(vertex.edges):
                if edge.source == source and edge.destination == destination:
                    del vertex.edges[position]
                    return
        raise LookupError("this edge is not found")

    def are_neighbors(self, source: str, destination: str) -> bool:
        if source not in self.vertices or destination not in self.vertices:
            return False
        return any(e.destination == destination for e in self.vertices[source].edges)

    def neighbors(self, name: str) -> list[str]:
        vertex = self.vertices.get(name)
        if vertex is None:
            return []
        return [e.destination for e in vertex.edges]

    def edges(self) -> Iterator[Edge]:
        """Yield every road, city by city."""
        for vertex in self.vertices.values():
            yield from vertex.edges

    # -- text -----------------------------------------------------------

    def describe_neighbors(self, name: str) -> str:
        if name not in self.vertices:
            raise LookupError(f"City {name} doesn't exist!")
        edges = self.vertices[name].edges
        if not edges:
            return f"City {name} has no connections."
        lines = [f"Connections from {name}:"]
        lines.extend(f"  -> {e.destination} (Distance: {e.weight}km)" for e in edges)
        return "\n".join(lines) + "\n"

    def describe(self) -> str:
        if not self.vertices:
            return "Graph is empty."
        parts = ["\nGraph Contents:\n", "---------------\n"]
        for name, vertex in self.vertices.items():
            if vertex.edges:
                body = "".join(
                    f"{e.destination}( Destince: {e.weight}km ) " for e in vertex.edges
                )
            else:
                body = "No connections"
            parts.append(f"City {name} ({vertex.name}): {body}\n")
        return "".join(parts)

    # -- traversals -----------------------------------------------------

    def bfs(self, name: str) -> str:
        """Breadth-first visiting order from ``name``."""
        if name not in self.vertices:
            raise LookupError("City not found!")
        visited = {name}
        queue = deque([name])
        order = []
        while queue:
            current = queue.popleft()
            order.append(current)
            vertex = self.vertices.get(current)
            for edge in vertex.edges if vertex else ():
                if edge.destination not in visited:
                    visited.add(edge.destination)
                    queue.append(edge.destination)
        header = f"BFS traversal starting from  {name}:\n"
        return header + "".join(f"{city}  " for city in order)

    def dfs(self, name: str) -> str:
        """Every maximal depth-first path from ``name``, one per line."""
        visited: set[str] = set()
        stack: list[tuple[str, list[str]]] = [(name, [name])]
        ways = []
        while stack:
            current, path = stack.pop()
            visited.add(current)
            extended = False
            vertex = self.vertices.get(current)
            for edge in vertex.edges if vertex else ():
                if edge.destination not in visited:
                    extended = True
                    stack.append((edge.destination, [*path, edge.destination]))
            if not extended:
                ways.append(" -> ".join(path))
        return "".join(f"{way}\n" for way in ways)

    def dijkstra(self, start: str, end: str) -> str:
        """Shortest route from ``start`` to ``end``, described as text."""
        if start not in self.vertices or end not in self.vertices:
            raise LookupError("Start or end city does not exist.")

        names = list(self.vertices)
        index = {name: position for position, name in enumerate(names)}
        dist = [math.inf] * len(names)
        parent = [-1] * len(names)
        source, target = index[start], index[end]
        dist[source] = 0
        heap = [(0, source)]
        while heap:
            current_dist, current = heapq.heappop(heap)
            if current_dist > dist[current]:
                continue
            if current == target:
                break
            for edge in self.vertices[names[current]].edges:
                neighbor = index.get(edge.destination)
                if neighbor is None:
                    continue
                candidate = dist[current] + edge.weight
                if candidate < dist[neighbor]:
                    dist[neighbor] = candidate
                    parent[neighbor] = current
                    heapq.heappush(heap, (candidate, neighbor))

        if dist[target] == math.inf:
            return f"there is no path between {start} and {end}\n"

        path = []
        node = target
        while node != -1:
            path.append(names[node])
            node = parent[node]
        path.reverse()
        header = f"Shortest path between {start} and {end} is: {dist[target]}Km\n"
        return header + " --->".join(path) + " "

    # -- storage --------------------------------------------------------

    def save(self, path: str | Path = DEFAULT_DATA_FILE) -> None:
        """Write the graph: a line per city, then a line of its roads."""
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            for vertex in self.vertices.values():
                stream.write(f"{vertex.name}\n")
                stream.write("".join(f"{e.destination}--{e.weight} " for e in vertex.edges))
                stream.write("\n")

    @classmethod
    def load(cls, path: str | Path = DEFAULT_DATA_FILE) -> Graph:
        """Read a graph written by :meth:`save`."""
        graph = cls()
        lines = iter(Path(path).read_text(encoding="utf-8").splitlines())
        for source in lines:
            roads = next(lines, "")
            vertex = Vertex(source)
            position = 0
            for match in _EDGE_PATTERN.finditer(roads):
                if match.start() != position or not match.group(1):
                    raise ValueError(f"malformed road list for {source!r}: {roads!r}")
                vertex.add_edge(Edge(source, match.group(1), int(match.group(2))))
                position = match.end()
            if roads[position:].strip():
                raise ValueError(f"malformed road list for {source!r}: {roads!r}")
            graph.vertices[source] = vertex
        return graph