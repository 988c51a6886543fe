"""Placement of cities and roads on a 2-D canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from .graph import Graph

CENTER_X = 400.0
CENTER_Y = 300.0
GRAPH_RADIUS = 360.0
GRAPH_NODE_RADIUS = 70.0
NEIGHBOR_RADIUS = 150.0
NEIGHBOR_NODE_RADIUS = 30.0


@dataclass(frozen=True)
class Node:
    """A city drawn as a circle with its name centred inside."""

    name: str
    x: float
    y: float
    radius: float
    fill: str = "lightgray"
    outline: str = "black"
    outline_width: int = 1
    font_size: int | None = None
    bold: bool = False


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str = "blue"
    width: int = 2


@dataclass(frozen=True)
class Label:
    """Text whose top-left corner sits at ``(x, y)``."""

    text: str
    x: float
    y: float
    color: str = "black"
    font_size: int | None = None


@dataclass
class Scene:
    nodes: list[Node] = field(default_factory=list)
    lines: list[Line] = field(default_factory=list)
    labels: list[Label] = field(default_factory=list)


def circular_positions(
    names: Iterable[str], center_x: float, center_y: float, radius: float
) -> list[tuple[float, float]]:
    """Evenly spaced points on a circle, one per name, starting at angle 0."""
    names = list(names)
    if not names:
        return []
    step = 2 * math.pi / len(names)
    return [
        (center_x + radius * math.cos(i * step), center_y + radius * math.sin(i * step))
        for i, _ in enumerate(names)
    ]


def graph_scene(graph: Graph) -> Scene:
    """Every city on a circle, with each road and its length."""
    scene = Scene()
    if not len(graph):
        return scene
    names = list(graph.vertices)
    positions = dict(zip(names, circular_positions(names, CENTER_X, CENTER_Y, GRAPH_RADIUS)))
    for name, (x, y) in positions.items():
        scene.nodes.append(
            Node(name, x, y, GRAPH_NODE_RADIUS, fill="lightgray", outline="white",
                 font_size=20, bold=True)
        )
    for edge in graph.edges():
        if edge.source not in positions or edge.destination not in positions:
            continue
        x1, y1 = positions[edge.source]
        x2, y2 = positions[edge.destination]
        scene.lines.append(Line(x1, y1, x2, y2, color="blue", width=2))
        scene.labels.append(
            Label(str(edge.weight), (x1 + x2) / 2, (y1 + y2) / 2, color="red", font_size=20)
        )
    return scene


def neighbors_scene(graph: Graph, city: str) -> Scene:
    """A city in the middle with its direct neighbours around it."""
    scene = Scene()
    scene.nodes.append(
        Node(city, CENTER_X, CENTER_Y, NEIGHBOR_NODE_RADIUS, fill="green",
             outline="black", outline_width=2)
    )
    neighbors = graph.neighbors(city)
    points = circular_positions(neighbors, CENTER_X, CENTER_Y, NEIGHBOR_RADIUS)
    for name, (x, y) in zip(neighbors, points):
        scene.nodes.append(Node(name, x, y, NEIGHBOR_NODE_RADIUS, fill="lightgray"))
        scene.lines.append(Line(CENTER_X, CENTER_Y, x, y, color="blue", width=2))
    return scene