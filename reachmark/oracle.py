"""Brute-force reachability and invariant checks for marking runs.

Nothing in here is used by the marking algorithm itself. These functions
materialize the full reachable set and are meant as test oracles.
"""
from .errors import InvariantViolation
from .observer import MarkerObserver

import logging

logger = logging.getLogger(__name__)


def reachable_from(graph, nodes):
    """Compute the set of nodes reachable from ``nodes`` (including
    ``nodes`` themselves) as the least fixpoint of adding successors."""

    closure = set(nodes)
    changed = True
    while changed:
        changed = False
        for node in list(closure):
            for successor in graph.successors(node):
                if successor not in closure:
                    closure.add(successor)
                    changed = True
    return closure


def check_invariants(graph, roots, marked, frontier, reachable=None):
    """Check that a marking state is consistent with the roots it started
    from:

    1. ``marked`` and ``frontier`` contain only reachable nodes
    2. every marked node has all successors in ``marked`` or ``frontier``
    3. ``marked`` and ``frontier`` reach exactly the reachable nodes

    Raises:

        InvariantViolation: naming the first invariant that does not hold.
    """

    if reachable is None:
        reachable = reachable_from(graph, roots)
    marked = set(marked)
    frontier = set(frontier)

    spurious = (marked | frontier) - reachable
    if spurious:
        raise InvariantViolation(
            "containment",
            f"unreachable node(s) {sorted(map(repr, spurious))} in run",
        )

    active = marked | frontier
    for node in marked:
        missing = set(graph.successors(node)) - active
        if missing:
            raise InvariantViolation(
                "closure",
                f"marked node {node!r} has successor(s) "
                f"{sorted(map(repr, missing))} neither marked nor in frontier",
            )

    lost = reachable - reachable_from(graph, active)
    if lost:
        raise InvariantViolation(
            "completeness",
            f"reachable node(s) {sorted(map(repr, lost))} can no longer be "
            "reached from marked and frontier nodes",
        )


def check_marker(marker, graph, reachable=None):
    """Check the invariants on the current state of a
    `class:ReachabilityMarker`."""

    check_invariants(
        graph, marker.roots, marker.marked, marker.frontier, reachable=reachable
    )


class InvariantChecker(MarkerObserver):
    """Observer that checks the invariants of ``marker`` after each step, and
    on termination that the marked nodes are exactly the reachable ones.
    Marked nodes are also checked to never be unmarked."""

    def __init__(self, marker, graph):
        super().__init__(marker)
        self.graph = graph
        self.reachable = reachable_from(graph, marker.roots)
        self.checked_steps = 0
        self._previous_marked = marker.marked
        check_marker(marker, graph, self.reachable)

    def on_step(self, marker, result):
        marked = marker.marked
        if not self._previous_marked <= marked:
            raise InvariantViolation(
                "monotonicity",
                f"node(s) {sorted(map(repr, self._previous_marked - marked))} "
                "got unmarked",
            )
        self._previous_marked = marked

        check_marker(marker, self.graph, self.reachable)
        self.checked_steps += 1

    def on_done(self, marker):
        if marker.marked != self.reachable:
            raise InvariantViolation(
                "termination",
                f"marked {len(marker.marked)} node(s), but "
                f"{len(self.reachable)} are reachable",
            )
        logger.debug("Invariants held for all %d steps", self.checked_steps)
