from reachmark import Graph, ReachabilityMarker, get_frontier, get_marked_set

import networkx as nx
import pytest

graphs = {
    "small": Graph.from_networkx(
        nx.gnp_random_graph(1_000, 0.005, seed=1, directed=True)
    ),
    "medium": Graph.from_networkx(
        nx.gnp_random_graph(10_000, 0.0005, seed=1, directed=True)
    ),
    "large": Graph.from_networkx(nx.grid_2d_graph(200, 200).to_directed()),
}


@pytest.mark.parametrize("size", ["small", "medium", "large"])
@pytest.mark.parametrize("strategy", ["fifo", "lifo", "random"])
@pytest.mark.parametrize("marked_set", ["hash", "bits"])
def benchmark_marker(benchmark, size, strategy, marked_set):
    graph = graphs[size]
    roots = list(graph.nodes)[:10]

    def run_marker(graph, roots):
        marker = ReachabilityMarker(
            roots,
            frontier=get_frontier(strategy),
            marked_set=get_marked_set(marked_set, graph),
        )
        marked = marker.run_to_completion(graph)
        assert len(marked) == marker.state.marked_count

    benchmark(run_marker, graph, roots)
