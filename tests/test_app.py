import pytest

from citygraph.app import CityManager, InputError
from citygraph.graph import Edge


@pytest.fixture
def manager():
    return CityManager()


@pytest.fixture
def triangle():
    m = CityManager()
    for name in ("A", "B", "C"):
        m.add_city(name)
    m.add_road("A", "B", 1)
    m.add_road("B", "C", 2)
    return m


def test_add_city_strips_whitespace(manager):
    assert manager.add_city("  Cairo ") == "Cairo"
    assert manager.cities() == ["Cairo"]


@pytest.mark.parametrize("name", ["", "   ", None])
def test_add_city_requires_name(manager, name):
    with pytest.raises(InputError, match="Please enter city name"):
        manager.add_city(name)
    assert manager.cities() == []


def test_add_city_rejects_duplicate(manager):
    manager.add_city("Cairo")
    with pytest.raises(InputError, match="City already exists!"):
        manager.add_city("Cairo")
    assert manager.cities() == ["Cairo"]


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        CityManager().add_city("")


def test_update_city_redirects_roads(manager):
    manager.add_city("A")
    manager.add_city("B")
    manager.add_road("A", "B", 5)
    assert manager.update_city("B", " C ") == "C"
    assert manager.cities() == ["A", "C"]
    assert manager.roads() == [Edge("A", "C", 5)]


def test_update_city_requires_selection(manager):
    with pytest.raises(InputError, match="Please select a city to update"):
        manager.update_city(None, "X")


def test_update_city_requires_new_name(manager):
    manager.add_city("A")
    with pytest.raises(InputError, match="Please enter new name"):
        manager.update_city("A", "  ")
    assert manager.cities() == ["A"]


def test_update_city_to_existing_name_fails(manager):
    manager.add_city("A")
    manager.add_city("B")
    with pytest.raises(ValueError):
        manager.update_city("A", "B")
    assert manager.cities() == ["A", "B"]


def test_delete_city_removes_incoming_roads(triangle):
    triangle.delete_city("B")
    assert triangle.cities() == ["A", "C"]
    assert triangle.roads() == []


def test_delete_city_requires_selection(manager):
    with pytest.raises(InputError, match="Please select a city to delete"):
        manager.delete_city("")


def test_add_road_requires_both_cities(triangle):
    with pytest.raises(InputError, match="Please select source and destination cities"):
        triangle.add_road("A", "", 3)


def test_add_road_rejects_same_city(triangle):
    with pytest.raises(InputError, match="Cannot add road between same city"):
        triangle.add_road("A", "A", 3)


def test_add_road_rejects_duplicate(triangle):
    with pytest.raises(InputError, match="Road already exists between these cities"):
        triangle.add_road("A", "B", 9)
    assert len(triangle.roads()) == 2


def test_reverse_road_is_allowed(triangle):
    triangle.add_road("B", "A", 4)
    assert Edge("B", "A", 4) in triangle.roads()


def test_update_road_changes_distance(triangle):
    assert triangle.update_road("A", "B", 7) is True
    assert Edge("A", "B", 7) in triangle.roads()


def test_update_road_requires_selection(triangle):
    with pytest.raises(InputError, match="Please select a road to update"):
        triangle.update_road(None, None, 1)


def test_delete_road(triangle):
    triangle.delete_road("A", "B")
    assert triangle.roads() == [Edge("B", "C", 2)]


def test_delete_missing_road(triangle):
    with pytest.raises(LookupError):
        triangle.delete_road("C", "A")


def test_delete_road_requires_selection(triangle):
    with pytest.raises(InputError, match="Please select a road to delete"):
        triangle.delete_road("A", None)


def test_full_graph_text(manager):
    manager.add_city("A")
    manager.add_city("B")
    manager.add_road("A", "B", 5)
    assert manager.full_graph_text() == (
        "City: A\nConnections:\n  -> B (5 km)\n\n"
        "City: B\nConnections:\n  No connections\n\n"
    )


def test_full_graph_text_empty(manager):
    assert manager.full_graph_text() == ""


def test_neighbors_text(triangle):
    assert triangle.neighbors_text("A") == "City: A\n\nNeighbors:\nB\n"


def test_neighbors_text_without_neighbors(triangle):
    assert triangle.neighbors_text("C") == "City: C\n\nNeighbors:\nNo neighboring cities"


def test_neighbors_text_requires_city(triangle):
    with pytest.raises(InputError, match="Please select a city"):
        triangle.neighbors_text("")


def test_shortest_path(triangle):
    result = triangle.shortest_path("A", "C")
    assert result.startswith("Shortest path between A and C is: 3Km\n")
    assert "A --->B --->C" in result


def test_shortest_path_requires_cities(triangle):
    with pytest.raises(InputError, match="Please select start and end cities"):
        triangle.shortest_path("A", None)


def test_shortest_path_unknown_city(triangle):
    with pytest.raises(LookupError):
        triangle.shortest_path("A", "Z")


def test_dfs_requires_start(triangle):
    with pytest.raises(InputError, match="Please select start city"):
        triangle.dfs("")
    assert triangle.dfs("A") == "A -> B -> C\n"


def test_bfs_requires_start(triangle):
    with pytest.raises(InputError, match="Please select start city"):
        triangle.bfs("")
    assert triangle.bfs("A").startswith("BFS traversal starting from  A:\n")


def test_bfs_header(triangle):
    assert triangle.bfs("A").startswith("BFS traversal starting from  A:\n")


def test_dfs_single_chain(triangle):
    assert triangle.dfs("A") == "A -> B -> C\n"


def test_save_and_load_round_trip(triangle, tmp_path):
    path = tmp_path / "vertex.txt"
    triangle.save(path)
    other = CityManager()
    other.load(path)
    assert other.cities() == triangle.cities()
    assert other.roads() == triangle.roads()