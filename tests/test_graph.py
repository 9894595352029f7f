from reachmark import Graph, MalformedGraphError

import networkx as nx
import pytest


def test_from_dict(chain_graph):
    assert len(chain_graph) == 4
    assert set(chain_graph) == {1, 2, 3, 4}
    assert 4 in chain_graph and 5 not in chain_graph
    assert chain_graph.successors(1) == (2,)
    assert chain_graph.successors(3) == ()
    assert chain_graph.num_edges() == 3


def test_from_dict_explicit_nodes():
    graph = Graph.from_dict({1: [2], 2: []}, nodes=[2, 1])

    assert graph.index(2) == 0
    assert graph.index(1) == 1


def test_from_edges(diamond_graph):
    assert len(diamond_graph) == 6
    assert diamond_graph.successors("d") == ("d", "a")
    assert diamond_graph.successors("f") == ()


def test_from_edges_with_isolated_nodes():
    graph = Graph.from_edges([(1, 2)], nodes=[1, 2, 3])

    assert graph.successors(3) == ()
    assert list(graph.nodes) == [1, 2, 3]


def test_successors_deduplicated():
    graph = Graph.from_dict({1: [3, 2, 3, 2], 2: [], 3: []})

    assert graph.successors(1) == (3, 2)


def test_unknown_node(chain_graph):
    with pytest.raises(MalformedGraphError) as e:
        chain_graph.successors(7)
    assert e.value.node == 7

    with pytest.raises(MalformedGraphError):
        chain_graph.index(7)


def test_successor_outside_graph():
    graph = Graph.from_dict({1: [2], 2: [3]})

    assert graph.successors(1) == (2,)
    with pytest.raises(MalformedGraphError):
        graph.successors(2)
    with pytest.raises(MalformedGraphError):
        graph.validate()


def test_undefined_successor_function():
    graph = Graph([1, 2], {1: [2]}.__getitem__)

    with pytest.raises(MalformedGraphError):
        graph.successors(2)


def test_check_nodes(chain_graph):
    chain_graph.check_nodes([1, 4])
    with pytest.raises(MalformedGraphError):
        chain_graph.check_nodes([1, 5])


def test_networkx_roundtrip(diamond_graph):
    nx_graph = diamond_graph.to_networkx()

    assert isinstance(nx_graph, nx.DiGraph)
    assert nx_graph.number_of_nodes() == 6
    assert nx_graph.number_of_edges() == diamond_graph.num_edges()
    assert nx_graph.has_edge("d", "d")

    graph = Graph.from_networkx(nx_graph)
    for node in diamond_graph:
        assert set(graph.successors(node)) == set(diamond_graph.successors(node))


def test_from_undirected_networkx():
    graph = Graph.from_networkx(nx.path_graph(3))

    assert set(graph.successors(1)) == {0, 2}
