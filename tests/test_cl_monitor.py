from reachmark import CLMonitor, Graph, MalformedGraphError, ReachabilityMarker

import pytest


def test_progress_counts_marked_nodes(diamond_graph):
    marker = ReachabilityMarker(["a"])
    monitor = CLMonitor(marker, total=len(diamond_graph), desc="diamond")

    marker.run_to_completion(diamond_graph)

    assert monitor.progress.n == 4
    assert monitor.closed
    assert not monitor.failed
    assert monitor.progress.desc.startswith("diamond ✔")


def test_progress_on_error():
    graph = Graph.from_dict({1: [2]})
    marker = ReachabilityMarker([1])
    monitor = CLMonitor(marker)

    with pytest.raises(MalformedGraphError):
        marker.run_to_completion(graph)

    assert monitor.failed
    assert monitor.closed
    assert monitor.progress.n == 0

    # closing again has no effect
    monitor.close()
