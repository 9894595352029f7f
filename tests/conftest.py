from reachmark import Graph

import pytest


@pytest.fixture(autouse=True)
def no_env_config(monkeypatch):
    monkeypatch.delenv("REACHMARK_CONTEXT", raising=False)


@pytest.fixture
def chain_graph():
    # 4 -> 1 -> 2 -> 3
    return Graph.from_dict({1: {2}, 2: {3}, 3: set(), 4: {1}})


@pytest.fixture
def cycle_graph():
    # 1 <-> 2
    return Graph.from_dict({1: {2}, 2: {1}})


@pytest.fixture
def disconnected_graph():
    return Graph.from_dict({1: set(), 2: set(), 3: set()})


@pytest.fixture
def diamond_graph():
    # a diamond with a self-loop on d, a back edge d -> a, and an unreachable
    # tail e -> f
    return Graph.from_edges(
        [
            ("a", "b"),
            ("a", "c"),
            ("b", "d"),
            ("c", "d"),
            ("d", "d"),
            ("d", "a"),
            ("e", "f"),
        ]
    )
