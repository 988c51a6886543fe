import pytest

from citygraph.graph import Edge, Graph, Vertex


@pytest.fixture
def graph():
    g = Graph()
    for name in ("A", "B", "C"):
        g.add_vertex(name)
    g.add_edge("A", "B", 2)
    g.add_edge("B", "C", 3)
    g.add_edge("A", "C", 10)
    return g


def test_vertex_add_edge_appends():
    vertex = Vertex("X")
    vertex.add_edge(Edge("X", "Y", 4))
    assert vertex.edges == [Edge("X", "Y", 4)]


def test_add_vertex_and_has_vertex(graph):
    assert graph.has_vertex("A")
    assert not graph.has_vertex("Z")
    assert list(graph) == ["A", "B", "C"]


def test_add_duplicate_vertex_raises(graph):
    with pytest.raises(ValueError):
        graph.add_vertex("A")


def test_update_vertex_renames_and_redirects(graph):
    graph.update_vertex("B", "D")
    assert not graph.has_vertex("B")
    assert graph.neighbors("A") == ["D", "C"]
    assert [e.source for e in graph.vertices["D"].edges] == ["D"]
    assert graph.neighbors("D") == ["C"]
    assert all(e.source == "A" for e in graph.vertices["A"].edges)


def test_update_vertex_errors(graph):
    with pytest.raises(LookupError):
        graph.update_vertex("Z", "Y")
    with pytest.raises(ValueError):
        graph.update_vertex("A", "B")


def test_delete_vertex_removes_incoming_roads(graph):
    graph.delete_vertex("C")
    assert "C" not in graph
    assert graph.neighbors("A") == ["B"]
    assert graph.neighbors("B") == []
    with pytest.raises(LookupError):
        graph.delete_vertex("C")


def test_add_edge_to_missing_city_raises(graph):
    with pytest.raises(LookupError):
        graph.add_edge("A", "Z", 1)


def test_update_edge(graph):
    assert graph.update_edge("A", "B", 7) is True
    assert graph.vertices["A"].edges[0].weight == 7
    assert graph.update_edge("C", "A", 1) is False
    assert graph.update_edge("Z", "A", 1) is False


def test_delete_edge(graph):
    graph.delete_edge("A", "C")
    assert graph.neighbors("A") == ["B"]
    with pytest.raises(LookupError):
        graph.delete_edge("A", "C")


def test_are_neighbors_is_directed(graph):
    assert graph.are_neighbors("A", "B")
    assert not graph.are_neighbors("B", "A")
    assert not graph.are_neighbors("A", "Z")


def test_neighbors_of_missing_city_is_empty(graph):
    assert graph.neighbors("Z") == []


def test_edges_yields_all_roads(graph):
    assert [(e.source, e.destination, e.weight) for e in graph.edges()] == [
        ("A", "B", 2),
        ("A", "C", 10),
        ("B", "C", 3),
    ]


def test_describe_neighbors(graph):
    assert graph.describe_neighbors("A") == (
        "Connections from A:\n  -> B (Distance: 2km)\n  -> C (Distance: 10km)\n"
    )
    assert graph.describe_neighbors("C") == "City C has no connections."
    with pytest.raises(LookupError):
        graph.describe_neighbors("Z")


def test_describe(graph):
    assert Graph().describe() == "Graph is empty."
    text = graph.describe()
    assert text.startswith("\nGraph Contents:\n---------------\n")
    assert "City A (A): B( Destince: 2km ) C( Destince: 10km ) \n" in text
    assert "City C (C): No connections\n" in text


def test_bfs(graph):
    assert graph.bfs("A") == "BFS traversal starting from  A:\nA  B  C  "
    with pytest.raises(LookupError):
        graph.bfs("Z")


def test_dfs(graph):
    assert graph.dfs("A") == "A -> C\nA -> B\n"
    assert graph.dfs("C") == "C\n"


def test_dijkstra(graph):
    assert graph.dijkstra("A", "C") == "Shortest path between A and C is: 5Km\nA --->B --->C "
    assert graph.dijkstra("C", "A") == "there is no path between C and A\n"
    assert graph.dijkstra("A", "A").startswith("Shortest path between A and A is: 0Km\n")


def test_dijkstra_missing_city(graph):
    with pytest.raises(LookupError):
        graph.dijkstra("A", "Z")


def test_save_format(graph, tmp_path):
    path = tmp_path / "vertex.txt"
    graph.save(path)
    assert path.read_text(encoding="utf-8").splitlines() == [
        "A",
        "B--2 C--10 ",
        "B",
        "C--3 ",
        "C",
        "",
    ]


def test_save_load_round_trip(graph, tmp_path):
    path = tmp_path / "vertex.txt"
    graph.save(path)
    loaded = Graph.load(path)
    assert list(loaded) == list(graph)
    assert list(loaded.edges()) == list(graph.edges())


def test_load_names_with_spaces_and_negative_weights(tmp_path):
    g = Graph()
    g.add_vertex("New York")
    g.add_vertex("Old Town")
    g.add_edge("New York", "Old Town", -4)
    path = tmp_path / "data.txt"
    g.save(path)
    loaded = Graph.load(path)
    assert loaded.neighbors("New York") == ["Old Town"]
    assert loaded.vertices["New York"].edges[0].weight == -4


def test_load_malformed_raises(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("A\nB-x \n", encoding="utf-8")
    with pytest.raises(ValueError):
        Graph.load(path)