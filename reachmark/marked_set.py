from .errors import MalformedGraphError

import numpy as np


class HashMarkedSet:
    """Marked nodes kept in a hash set. Works for any hashable node without
    knowing the node universe in advance."""

    def __init__(self):
        self._nodes = set()

    def add(self, node):
        self._nodes.add(node)

    def __contains__(self, node):
        return node in self._nodes

    def __len__(self):
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)


class BitMarkedSet:
    """Marked nodes kept as a boolean array over the node index of ``graph``.

    Membership and insertion are a single array access. Iteration yields
    nodes in index order.
    """

    def __init__(self, graph):
        self.graph = graph
        self._nodes = list(graph.nodes)
        self._bits = np.zeros(len(self._nodes), dtype=bool)
        self._count = 0

    def add(self, node):
        i = self.graph.index(node)
        if not self._bits[i]:
            self._bits[i] = True
            self._count += 1

    def __contains__(self, node):
        try:
            return bool(self._bits[self.graph.index(node)])
        except MalformedGraphError:
            return False

    def __len__(self):
        return self._count

    def __iter__(self):
        return (self._nodes[i] for i in np.flatnonzero(self._bits))


def get_marked_set(name, graph=None):
    """Create an empty marked-set container: ``"hash"`` or ``"bits"``. The
    latter needs the ``graph`` to size its array."""

    if name == "hash":
        return HashMarkedSet()
    if name == "bits":
        if graph is None:
            raise ValueError("A graph is needed to create a 'bits' marked set")
        return BitMarkedSet(graph)
    raise ValueError(f"Unknown marked set {name!r}, choose 'hash' or 'bits'")
