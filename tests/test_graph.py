import networkx as nx

from graph_analysis import TransactionGraph


def _path_graph():
    G = TransactionGraph()
    G.add_edge("A", "B")
    G.add_edge("B", "C")
    G.add_edge("C", "D")
    return G


def test_add_edge_is_symmetric():
    G = TransactionGraph([("A", "B"), ("A", "C")])
    for a, b in [("A", "B"), ("A", "C")]:
        assert b in G.neighbors(a)
        assert a in G.neighbors(b)
    assert G.degree("A") == 2
    assert G.degree("B") == 1


def test_add_edge_is_idempotent():
    once = TransactionGraph([("A", "B")])
    twice = TransactionGraph([("A", "B"), ("A", "B"), ("B", "A")])
    for node in ("A", "B"):
        assert once.neighbors(node) == twice.neighbors(node)
    assert twice.number_of_edges() == 1


def test_self_loop_counts_once():
    G = TransactionGraph([("X", "X"), ("X", "Y")])
    assert G.neighbors("X") == frozenset({"X", "Y"})
    assert G.degree("X") == 2
    assert G.number_of_self_loops() == 1
    assert G.number_of_edges() == 2


def test_unknown_node_has_no_neighbors():
    G = TransactionGraph([("A", "B")])
    assert "Z" not in G
    assert G.neighbors("Z") == frozenset()
    assert G.degree("Z") == 0


def test_neighbors_returns_copy():
    G = TransactionGraph([("A", "B")])
    nbrs = G.neighbors("A")
    assert isinstance(nbrs, frozenset)
    G.add_edge("A", "C")
    assert nbrs == frozenset({"B"})


def test_degree_distribution_star():
    G = TransactionGraph([("A", "B"), ("A", "C")])
    assert G.degree_distribution() == {1: 2, 2: 1}


def test_degree_distribution_sums_to_node_count():
    G = TransactionGraph([("A", "B"), ("B", "C"), ("C", "A"), ("C", "D"), ("E", "F")])
    distribution = G.degree_distribution()
    assert sum(distribution.values()) == G.number_of_nodes() == 6
    assert list(distribution) == sorted(distribution)


def test_degree_distribution_of_empty_graph():
    assert TransactionGraph().degree_distribution() == {}


def test_distance_two_absent_node():
    assert _path_graph().neighbors_at_distance_two("Z") == 0
    assert TransactionGraph().neighbors_at_distance_two("A") == 0


def test_distance_two_on_path():
    G = _path_graph()
    assert G.neighbors_at_distance_two("A") == 1  # {C}
    # B's neighbors are A ({B}) and C ({B, D}); only the origin is dropped
    assert G.neighbors_at_distance_two("B") == 1  # {D}
    assert G.neighbors_at_distance_two("C") == 1  # {A}
    assert G.neighbors_at_distance_two("D") == 1  # {B}


def test_distance_two_counts_direct_neighbors_in_triangle():
    G = TransactionGraph([("A", "B"), ("B", "C"), ("C", "A")])
    # B and C are direct neighbors of A, but each is a neighbor of the other
    assert G.neighbors_at_distance_two("A") == 2


def test_distance_two_star():
    G = TransactionGraph([("X", f"L{i}") for i in range(4)])
    assert G.neighbors_at_distance_two("X") == 0
    assert G.neighbors_at_distance_two("L0") == 3


def test_to_networkx_is_independent_copy():
    G = _path_graph()
    nx_graph = G.to_networkx()
    assert isinstance(nx_graph, nx.Graph)
    assert nx_graph.number_of_nodes() == 4
    assert nx_graph.number_of_edges() == 3

    nx_graph.add_edge("A", "D")
    assert "D" not in G.neighbors("A")


def test_repr_reports_size():
    assert repr(_path_graph()) == "TransactionGraph(nodes=4, edges=3)"
