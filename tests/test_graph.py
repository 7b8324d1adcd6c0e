import pytest

from kpaths.graph import Edge, Graph

DIAMOND = "4\n(0 1 1)\n(1 3 1)\n(0 2 5)\n(2 3 1)\n(0 3 10)\n"
DIAMOND_EDGES = [(0, 1, 1), (1, 3, 1), (0, 2, 5), (2, 3, 1), (0, 3, 10)]


def _grid_graph(size):
    graph = Graph(size * size)
    for row in range(size):
        for col in range(size):
            node = row * size + col
            if col + 1 < size:
                graph.add_edge(node, node + 1, (row * 7 + col * 3) % 10 + 1)
            if row + 1 < size:
                graph.add_edge(node, node + size, (row * 5 + col * 11) % 9 + 1)
    return graph


def _assert_valid_path(graph, path, start, end):
    assert path[0] == start
    assert path[-1] == end
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        graph.edge_value(a, b)


def test_parse_reads_vertices_and_edges():
    graph = Graph.parse(DIAMOND)
    assert len(graph) == 4
    for start, end, value in DIAMOND_EDGES:
        assert graph.edge_value(start, end) == value


def test_parse_accepts_spaced_delimiters():
    graph = Graph.parse("3 ( 0 1 5 ) [1 2 3]")
    assert graph.edge_value(0, 1) == 5
    assert graph.edge_value(1, 2) == 3


def test_parse_empty_text_gives_empty_graph():
    assert len(Graph.parse("   ")) == 0


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        Graph.parse("3\n(0 x 5)\n")


def test_parse_rejects_garbage_count():
    with pytest.raises(ValueError):
        Graph.parse("abc")


def test_parse_ignores_truncated_last_record():
    graph = Graph.parse("3\n(0 1 5)\n(1 2")
    assert graph.edge_value(0, 1) == 5
    with pytest.raises(KeyError):
        graph.edge_value(1, 2)


def test_parse_rejects_duplicate_edge():
    with pytest.raises(ValueError):
        Graph.parse("2\n(0 1 5)\n(0 1 7)\n")


def test_parse_rejects_out_of_range_edge():
    with pytest.raises(IndexError):
        Graph.parse("2\n(0 2 5)\n")


def test_parse_rejects_negative_count():
    with pytest.raises(ValueError):
        Graph.parse("-3\n")


def test_from_file_round_trip(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text(DIAMOND, encoding="utf-8")
    graph = Graph.from_file(path)
    assert str(graph) == str(Graph.parse(DIAMOND))


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        Graph.from_file(tmp_path / "missing.txt")


def test_str_format():
    assert str(Graph.parse("2\n(0 1 5)\n")) == "(0 1 5)\n"


def test_remove_and_add_edge_round_trip():
    graph = Graph.parse(DIAMOND)
    removed = graph.remove_edge(0, 1)
    assert removed == [Edge(0, 1, 1)]
    with pytest.raises(KeyError):
        graph.edge_value(0, 1)
    graph.add_edge(*removed[0])
    assert graph.edge_value(0, 1) == 1


def test_remove_missing_or_out_of_range_edge_returns_nothing():
    graph = Graph.parse(DIAMOND)
    assert graph.remove_edge(3, 0) == []
    assert graph.remove_edge(0, 99) == []


def test_add_edge_out_of_range():
    with pytest.raises(IndexError):
        Graph(2).add_edge(-1, 0, 4)


def test_edge_value_errors():
    graph = Graph.parse(DIAMOND)
    with pytest.raises(IndexError):
        graph.edge_value(0, 4)
    with pytest.raises(KeyError):
        graph.edge_value(3, 0)


def test_path_value_sums_edges():
    graph = Graph.parse(DIAMOND)
    assert graph.path_value([0, 1]) == graph.edge_value(0, 1)
    assert graph.path_value([0, 2, 3]) == graph.edge_value(0, 2) + graph.edge_value(2, 3)
    assert graph.path_value([1]) == graph.path_value([])


def test_dijkstra_finds_cheapest_path():
    graph = Graph.parse(DIAMOND)
    path = graph.dijkstra(0, 3)
    assert path == [0, 1, 3]
    for other in ([0, 2, 3], [0, 3]):
        assert graph.path_value(path) <= graph.path_value(other)


def test_dijkstra_unreachable_is_empty():
    assert Graph.parse(DIAMOND).dijkstra(3, 0) == []


def test_dijkstra_same_node():
    assert Graph.parse(DIAMOND).dijkstra(2, 2) == [2]


def test_dijkstra_out_of_range():
    with pytest.raises(IndexError):
        Graph.parse(DIAMOND).dijkstra(0, 7)


def test_yen_diamond_all_paths():
    graph = Graph.parse(DIAMOND)
    assert graph.yen_ksp(0, 3, 3) == [[0, 1, 3], [0, 2, 3], [0, 3]]


def test_yen_stops_when_paths_exhausted():
    graph = Graph.parse(DIAMOND)
    paths = graph.yen_ksp(0, 3, 10)
    assert len(paths) == len(graph.yen_ksp(0, 3, 3))
    costs = [graph.path_value(p) for p in paths]
    assert costs == sorted(costs)


def test_yen_first_path_is_dijkstra():
    graph = Graph.parse(DIAMOND)
    assert graph.yen_ksp(0, 3, 1) == [graph.dijkstra(0, 3)]


def test_yen_restores_graph():
    graph = Graph.parse(DIAMOND)
    graph.yen_ksp(0, 3, 5)
    for start, end, value in DIAMOND_EDGES:
        assert graph.edge_value(start, end) == value
    assert str(graph).count("(") == len(DIAMOND_EDGES)


def test_yen_unreachable_gives_single_empty_path():
    assert Graph.parse(DIAMOND).yen_ksp(3, 0, 4) == [[]]


def test_yen_same_node():
    assert Graph.parse(DIAMOND).yen_ksp(1, 1, 3) == [[1]]


def test_yen_rejects_bad_arguments():
    graph = Graph.parse(DIAMOND)
    with pytest.raises(ValueError):
        graph.yen_ksp(0, 3, 0)
    with pytest.raises(IndexError):
        graph.yen_ksp(0, 4, 2)


@pytest.mark.parametrize("k", [1, 2, 5, 8])
def test_yen_grid_invariants(k):
    graph = _grid_graph(4)
    start, end = 0, len(graph) - 1
    paths = graph.yen_ksp(start, end, k)
    assert len(paths) == k
    assert paths[0] == graph.dijkstra(start, end)
    assert len({tuple(p) for p in paths}) == len(paths)
    for path in paths:
        _assert_valid_path(graph, path, start, end)
    assert graph.path_value(paths[0]) == min(graph.path_value(p) for p in paths)