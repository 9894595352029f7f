import collections
import heapq
import random


class Frontier:
    """
    The frontier holds the nodes that have been discovered but not yet
    processed by a marking run. It has set semantics: adding a node that is
    already contained has no effect.

    Subclasses decide which node is processed next. ``peek()`` selects that
    node without removing it, ``pop()`` removes and returns it. Repeated
    calls to ``peek()`` return the same node until it is popped.
    """

    def __init__(self, nodes=()):
        self._members = set()
        for node in nodes:
            self.add(node)

    def add(self, node):
        """
        Add ``node`` to the frontier.

        returns:
            ``True`` if the node was not contained before.
        """
        if node in self._members:
            return False
        self._push(node)
        self._members.add(node)
        return True

    def check_additions(self, nodes):
        """
        Raise if any of ``nodes`` could not be added once the currently
        selected node (see ``peek()``) has been popped. Nothing is changed.
        """
        pass

    def peek(self):
        assert len(self._members) > 0, "Cannot select from an empty frontier"
        return self._peek()

    def pop(self):
        assert len(self._members) > 0, "Cannot pop from an empty frontier"
        node = self._pop()
        self._members.remove(node)
        return node

    def _push(self, node):
        raise NotImplementedError()

    def _peek(self):
        raise NotImplementedError()

    def _pop(self):
        raise NotImplementedError()

    def __contains__(self, node):
        return node in self._members

    def __len__(self):
        return len(self._members)

    def __iter__(self):
        return iter(self._members)

    def __repr__(self):
        return f"{type(self).__name__}({sorted(map(repr, self._members))})"


class FifoFrontier(Frontier):
    """Process nodes in the order they were discovered (breadth-first)."""

    def __init__(self, nodes=()):
        self._queue = collections.deque()
        super().__init__(nodes)

    def _push(self, node):
        self._queue.append(node)

    def _peek(self):
        return self._queue[0]

    def _pop(self):
        return self._queue.popleft()


class LifoFrontier(Frontier):
    """Process the most recently discovered node first (depth-first)."""

    def __init__(self, nodes=()):
        self._stack = []
        super().__init__(nodes)

    def _push(self, node):
        self._stack.append(node)

    def _peek(self):
        return self._stack[-1]

    def _pop(self):
        return self._stack.pop()


class RandomFrontier(Frontier):
    """Process nodes in uniformly random order. Pass a ``seed`` for
    reproducible runs."""

    def __init__(self, nodes=(), seed=None):
        self._random = random.Random(seed)
        self._nodes = []
        self._selected = None
        super().__init__(nodes)

    def _push(self, node):
        self._nodes.append(node)

    def _peek(self):
        if self._selected is None:
            self._selected = self._random.randrange(len(self._nodes))
        return self._nodes[self._selected]

    def _pop(self):
        self._peek()
        i, self._selected = self._selected, None
        # swap with the last element to remove in O(1)
        self._nodes[i], self._nodes[-1] = self._nodes[-1], self._nodes[i]
        return self._nodes.pop()


class PriorityFrontier(Frontier):
    """Process the node with the smallest ``key(node)`` first. Without a
    ``key``, nodes are compared directly. Ties are broken by discovery
    order."""

    def __init__(self, nodes=(), key=None):
        self._key = key if key is not None else (lambda node: node)
        self._heap = []
        self._counter = 0
        super().__init__(nodes)

    def check_additions(self, nodes):
        # heap[0] is the selected node, any other entry stays after the pop
        self._check_keys([self._key(node) for node in nodes], self._heap[1:2])

    def _push(self, node):
        key = self._key(node)
        self._check_keys([key], self._heap[:1])
        heapq.heappush(self._heap, (key, self._counter, node))
        self._counter += 1

    def _check_keys(self, keys, entries):
        # heapq leaves a half-sifted heap behind if keys are not comparable,
        # so compare them up front
        sorted(keys + [entry[0] for entry in entries])

    def _peek(self):
        return self._heap[0][2]

    def _pop(self):
        return heapq.heappop(self._heap)[2]


STRATEGIES = {
    "fifo": FifoFrontier,
    "lifo": LifoFrontier,
    "random": RandomFrontier,
    "priority": PriorityFrontier,
}


def get_frontier(name, nodes=(), **kwargs):
    """Create an empty (or pre-filled) frontier for the selection strategy
    ``name``. Extra keyword arguments are passed to the frontier class, e.g.,
    ``seed`` for ``"random"`` or ``key`` for ``"priority"``."""

    try:
        frontier_class = STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown frontier strategy {name!r}, choose one of "
            f"{sorted(STRATEGIES)}"
        ) from None
    return frontier_class(nodes, **kwargs)
