"""City and road management with the checks the user interface relies on."""

from __future__ import annotations

from pathlib import Path

from .graph import DEFAULT_DATA_FILE, Edge, Graph


class InputError(ValueError):
    """Raised when a request is missing data or contradicts the current graph."""


def _require(value: str | None, message: str) -> str:
    if not value:
        raise InputError(message)
    return value


class CityManager:
    """Front end to a :class:`Graph` that validates what the user asks for."""

    def __init__(self, graph: Graph | None = None) -> None:
        self.graph = graph if graph is not None else Graph()

    # -- cities ---------------------------------------------------------

    def cities(self) -> list[str]:
        return list(self.graph)

    def add_city(self, name: str | None) -> str:
        """Add a city; surrounding whitespace is dropped. Returns the stored name."""
        name = _require((name or "").strip(), "Please enter city name")
        if self.graph.has_vertex(name):
            raise InputError("City already exists!")
        self.graph.add_vertex(name)
        return name

    def update_city(self, old_name: str | None, new_name: str | None) -> str:
        """Rename a city. Returns the new name."""
        old_name = _require(old_name, "Please select a city to update")
        new_name = _require((new_name or "").strip(), "Please enter new name")
        self.graph.update_vertex(old_name, new_name)
        return new_name

    def delete_city(self, name: str | None) -> None:
        name = _require(name, "Please select a city to delete")
        self.graph.delete_vertex(name)

    # -- roads ----------------------------------------------------------

    def add_road(self, source: str | None, destination: str | None, distance: int) -> None:
        if not source or not destination:
            raise InputError("Please select source and destination cities")
        if source == destination:
            raise InputError("Cannot add road between same city")
        if self.graph.are_neighbors(source, destination):
            raise InputError("Road already exists between these cities")
        self.graph.add_edge(source, destination, distance)

    def update_road(self, source: str | None, destination: str | None, distance: int) -> bool:
        """Change a road's length. Returns whether a road was changed."""
        if not source or not destination:
            raise InputError("Please select a road to update")
        return self.graph.update_edge(source, destination, distance)

    def delete_road(self, source: str | None, destination: str | None) -> None:
        if not source or not destination:
            raise InputError("Please select a road to delete")
        self.graph.delete_edge(source, destination)

    def roads(self) -> list[Edge]:
        return list(self.graph.edges())

    # -- display --------------------------------------------------------

    def full_graph_text(self) -> str:
        """Every city followed by the roads leaving it."""
        parts = []
        for name, vertex in self.graph.vertices.items():
            parts.append(f"City: {name}\nConnections:\n")
            if vertex.edges:
                parts.extend(f"  -> {e.destination} ({e.weight} km)\n" for e in vertex.edges)
            else:
                parts.append("  No connections\n")
            parts.append("\n")
        return "".join(parts)

    def neighbors_text(self, city: str | None) -> str:
        city = _require(city, "Please select a city")
        neighbors = self.graph.neighbors(city)
        text = f"City: {city}\n\nNeighbors:\n"
        if not neighbors:
            return text + "No neighboring cities"
        return text + "".join(f"{name}\n" for name in neighbors)

    # -- searches -------------------------------------------------------

    def shortest_path(self, start: str | None, end: str | None) -> str:
        if not start or not end:
            raise InputError("Please select start and end cities")
        return self.graph.dijkstra(start, end)

    def dfs(self, start: str | None) -> str:
        start = _require(start, "Please select start city")
        return self.graph.dfs(start)

    def bfs(self, start: str | None) -> str:
        start = _require(start, "Please select start city")
        return self.graph.bfs(start)

    # -- storage --------------------------------------------------------

    def save(self, path: str | Path = DEFAULT_DATA_FILE) -> None:
        self.graph.save(path)

    def load(self, path: str | Path = DEFAULT_DATA_FILE) -> None:
        self.graph = Graph.load(path)