from .errors import MalformedGraphError

import collections
import logging

import networkx as nx

logger = logging.getLogger(__name__)


class Graph:
    """A directed graph over a finite node universe, given as a successor
    function.

    Args:

        nodes (iterable of hashable):

            The node universe. Iteration order defines the index of each node
            (see :meth:`index`), which is used by bit-indexed containers.

        successors (function):

            A function that will be called as::

                successors(node)

            and returns an iterable of the direct successors of ``node``. It
            has to be total over ``nodes`` and must not change while a
            marking run uses the graph. Raising ``KeyError`` is interpreted as
            "undefined for this node".

    A ``Graph`` is never mutated after construction and can be shared by
    independent marking runs.
    """

    def __init__(self, nodes, successors):
        self._index = {}
        for node in nodes:
            if node not in self._index:
                self._index[node] = len(self._index)
        self._successors = successors

    @classmethod
    def from_dict(cls, mapping, nodes=None):
        """Create a graph from a mapping ``node -> successors``. If ``nodes``
        is not given, the keys of ``mapping`` are the node universe."""

        if nodes is None:
            nodes = mapping.keys()
        return cls(nodes, lambda node: mapping[node])

    @classmethod
    def from_edges(cls, edges, nodes=None):
        """Create a graph from ``(u, v)`` pairs. If ``nodes`` is not given,
        the node universe consists of all edge endpoints."""

        adjacency = collections.defaultdict(list)
        endpoints = []
        for u, v in edges:
            adjacency[u].append(v)
            endpoints.extend((u, v))
        if nodes is None:
            nodes = endpoints
        nodes = list(nodes)
        # every node of the universe has a (possibly empty) successor list
        adjacency = {node: adjacency.get(node, []) for node in nodes}
        logger.debug(
            "created successor lists for %d nodes from %d endpoints",
            len(adjacency),
            len(endpoints),
        )
        return cls(nodes, lambda node: adjacency[node])

    @classmethod
    def from_networkx(cls, nx_graph):
        """Wrap a ``networkx`` graph. For undirected graphs, every neighbor
        is a successor."""

        return cls(nx_graph.nodes, lambda node: nx_graph.neighbors(node))

    def to_networkx(self):
        """Return the graph as a ``networkx.DiGraph``. Consults the successor
        function of every node."""

        nx_graph = nx.DiGraph()
        nx_graph.add_nodes_from(self._index)
        for node in self._index:
            nx_graph.add_edges_from((node, s) for s in self.successors(node))
        return nx_graph

    @property
    def nodes(self):
        return self._index.keys()

    def index(self, node):
        """Get the position of ``node`` in the node universe."""

        try:
            return self._index[node]
        except KeyError:
            raise MalformedGraphError(
                f"Node {node!r} is not part of the graph", node=node
            ) from None

    def successors(self, node):
        """Get the direct successors of ``node`` as a tuple without
        duplicates, in the order the successor function produced them.

        Raises:

            MalformedGraphError:

                If ``node`` is not in the graph, the successor function is
                undefined for it, or it returns a node that is not in the
                graph.
        """

        if node not in self._index:
            raise MalformedGraphError(
                f"Node {node!r} is not part of the graph", node=node
            )

        try:
            successors = tuple(dict.fromkeys(self._successors(node)))
        except KeyError as e:
            raise MalformedGraphError(
                f"Successor function is undefined for node {node!r}", node=node
            ) from e

        for successor in successors:
            if successor not in self._index:
                raise MalformedGraphError(
                    f"Node {node!r} has successor {successor!r}, which is not "
                    "part of the graph",
                    node=node,
                )

        return successors

    def check_nodes(self, nodes):
        """Ensure that all ``nodes`` are part of the graph."""

        for node in nodes:
            if node not in self._index:
                raise MalformedGraphError(
                    f"Node {node!r} is not part of the graph", node=node
                )

    def validate(self):
        """Consult the successor function of every node, raising
        :class:`MalformedGraphError` on the first violation."""

        for node in self._index:
            self.successors(node)

    def num_edges(self):
        return sum(len(self.successors(node)) for node in self._index)

    def __contains__(self, node):
        return node in self._index

    def __iter__(self):
        return iter(self._index)

    def __len__(self):
        return len(self._index)

    def __repr__(self):
        return f"Graph with {len(self)} nodes"
