# citygraph

A small tool for keeping a map of cities and the roads between them. Cities
are vertices and roads are directed, weighted edges (distances in km). On top
of that graph you can run a breadth-first traversal, list every maximal
depth-first route from a city, and find the shortest path between two cities
with Dijkstra's algorithm. The map can be saved to and loaded from a plain
text file.

## Installing

```
pip install .
```

The package has no third-party dependencies. The desktop interface uses
`tkinter`, which must be available in your Python installation.

For running the tests:

```
pip install ".[test]"
pytest
```

## The desktop interface

```
citygraph
```

This opens a window (`citygraph.gui.MainWindow`) with a home page and pages
for:

- **Cities** – add, rename and delete cities (deleting asks for confirmation
  and removes every road leading to the city);
- **Roads** – add roads between two different cities, change a selected
  road's distance, or delete it;
- **Display** – draw the whole map on a circle with each road's length, or a
  single city with its direct neighbours, along with a text listing;
- **Search** – Dijkstra's shortest path between two cities, depth-first
  routes and breadth-first order from a start city.

The File menu saves the map to, and loads it from, a file chosen in a file
dialog (`vertex.txt` is offered by default). Problems such as a missing name
or a duplicate city are shown in a warning box.

## Using the library

```python
from citygraph.graph import Graph

g = Graph()
for city in ("Cairo", "Giza", "Alex"):
    g.add_vertex(city)
g.add_edge("Cairo", "Giza", 20)
g.add_edge("Giza", "Alex", 200)
g.add_edge("Cairo", "Alex", 250)

print(g.dijkstra("Cairo", "Alex"))
# Shortest path between Cairo and Alex is: 220Km
# Cairo --->Giza --->Alex
print(g.bfs("Cairo"))
print(g.dfs("Cairo"))

g.save("vertex.txt")
same = Graph.load("vertex.txt")
```

`Graph` raises `ValueError` when a city is added or renamed to a name that
already exists, and `LookupError` for unknown cities (in `update_vertex`,
`delete_vertex`, `add_edge`, `describe_neighbors`, `bfs`, `dijkstra`) and for
a road that `delete_edge` cannot find. `update_edge` returns whether any road
was changed. `neighbors`, `are_neighbors` and `edges` query the map;
`describe` and `describe_neighbors` return it as text.

`citygraph.app.CityManager` wraps a graph with the checks the interface makes
before each action (empty names, duplicate cities, roads from a city to
itself, duplicate roads) and raises `InputError` when one fails. It also
builds the text shown on the Display page (`full_graph_text`,
`neighbors_text`).

`citygraph.layout` places cities on a circle (`circular_positions`) and
describes what to draw as `Scene` objects of `Node`, `Line` and `Label`,
built by `graph_scene` and `neighbors_scene`. `citygraph.gui.draw_scene`
draws a scene on a Tk canvas.

## File format

Each city takes two lines: its name, then its outgoing roads written as
`destination--distance` entries, each followed by a space.

```
Cairo
Giza--20 Alex--250 
```

`Graph.load` raises `ValueError` for a road line that does not follow this
form.