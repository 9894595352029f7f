from .errors import AlreadyTerminatedError, StepLimitExceeded
from .frontier import Frontier, FifoFrontier, get_frontier
from .marked_set import HashMarkedSet
from .marker_state import MarkerState
from .observer import MarkerObservee

from typing import Hashable, Iterable, Optional, Set, Tuple, Union
import logging

logger = logging.getLogger(__name__)


class StepResult:
    """Outcome of a single :meth:`ReachabilityMarker.step`.

    Attributes:

        node (hashable):

            The node that was removed from the frontier.

        newly_marked (``bool``):

            ``True`` if ``node`` was marked by this step, ``False`` if it was
            already marked and the step was a pure removal.

        added (``tuple``):

            The successors of ``node`` that entered the frontier in this
            step, i.e., that were not in the frontier already.

        done (``bool``):

            Whether the run terminated with this step.
    """

    def __init__(self, node, newly_marked, added, done):
        self.node = node
        self.newly_marked = newly_marked
        self.added = added
        self.done = done

    def __repr__(self):
        action = "marked" if self.newly_marked else "skipped"
        return (
            f"{action} {self.node!r}, added {len(self.added)} node(s) to "
            f"frontier{' (done)' if self.done else ''}"
        )


class ReachabilityMarker(MarkerObservee):
    """Incrementally marks all nodes reachable from a set of roots.

    The marker keeps a set of ``marked`` nodes and a ``frontier`` of nodes
    still to process. Every :meth:`step` removes one node from the frontier;
    if that node is not marked yet, it gets marked and all its successors are
    added to the frontier. Once the frontier is empty, the run is ``done`` and
    ``marked`` is exactly the set of nodes reachable from the roots.

    After every step (not only at the end), ``marked`` and ``frontier``
    together reach exactly the nodes the roots reach, and every marked node
    has all its successors in ``marked`` or ``frontier``. Callers can
    therefore stop and resume stepping at any time, or interleave steps with
    their own work.

    Args:

        roots (iterable of hashable):

            The nodes to start marking from.

        frontier (`class:Frontier` or ``string``, optional):

            An empty frontier that decides in which order nodes are
            processed, or the name of a strategy (see
            :func:`reachmark.frontier.get_frontier`). Defaults to FIFO order.
            The final result does not depend on this choice.

        marked_set (optional):

            An empty container for the marked nodes, e.g., a
            `class:BitMarkedSet`. Defaults to a `class:HashMarkedSet`.
    """

    def __init__(
        self,
        roots: Iterable[Hashable],
        frontier: Union[Frontier, str, None] = None,
        marked_set=None,
    ):
        super().__init__()

        if frontier is None:
            frontier = FifoFrontier()
        elif isinstance(frontier, str):
            frontier = get_frontier(frontier)
        if marked_set is None:
            marked_set = HashMarkedSet()

        assert len(frontier) == 0, "A new run needs an empty frontier"
        assert len(marked_set) == 0, "A new run needs an empty marked set"

        self._roots = tuple(dict.fromkeys(roots))
        self._frontier = frontier
        self._marked = marked_set
        for root in self._roots:
            self._frontier.add(root)

        self.state = MarkerState()
        self.state.update_frontier_size(len(self._frontier))
        self.state.done = len(self._frontier) == 0

    @property
    def roots(self) -> Tuple[Hashable, ...]:
        return self._roots

    @property
    def marked(self) -> frozenset:
        return frozenset(self._marked)

    @property
    def frontier(self) -> frozenset:
        return frozenset(self._frontier)

    @property
    def done(self) -> bool:
        return self.state.done

    def is_marked(self, node) -> bool:
        return node in self._marked

    def step(self, graph) -> StepResult:
        """Process one node of the frontier.

        Args:

            graph (`class:Graph`):

                The graph to mark. Has to be the same for all steps of a run.

        Returns:

            `class:StepResult`

        Raises:

            AlreadyTerminatedError:

                If the run is already done.

            MalformedGraphError:

                If the successors of the selected node cannot be determined,
                or the marked set does not cover the node.

            Any error of the graph, the frontier, or the marked set leaves
            the state of the run unchanged and is reported to observers
            before it is re-raised, e.g., a ``TypeError`` of a
            `class:PriorityFrontier` whose keys cannot be compared.
        """

        if self.done:
            raise AlreadyTerminatedError(
                f"Marking run from {len(self._roots)} root(s) already "
                f"terminated after {self.state.steps} steps"
            )

        node = self._frontier.peek()

        if node in self._marked:
            self._frontier.pop()
            self.state.noop_count += 1
            result_added = ()
            newly_marked = False
            logger.debug("Node %r already marked, removed from frontier", node)
        else:
            # everything that can fail happens before the frontier changes,
            # such that a failed step leaves the run in its last valid state
            try:
                successors = graph.successors(node)
                # node itself leaves the frontier before successors are added
                result_added = tuple(
                    s for s in successors if s == node or s not in self._frontier
                )
                self._frontier.check_additions(result_added)
                self._marked.add(node)
            except Exception as e:
                logger.error("Aborting marking step at node %r: %s", node, e)
                self.notify_error(node, e)
                raise

            self._frontier.pop()
            for successor in result_added:
                self._frontier.add(successor)

            self.state.marked_count += 1
            self.state.edges_scanned += len(successors)
            newly_marked = True
            logger.debug(
                "Marked node %r, %d of %d successor(s) entered the frontier",
                node,
                len(result_added),
                len(successors),
            )

        self.state.steps += 1
        self.state.update_frontier_size(len(self._frontier))
        if len(self._frontier) == 0:
            self.state.done = True

        result = StepResult(node, newly_marked, result_added, self.done)
        self.notify_step(result)

        if self.done:
            logger.info(
                "Marking done: %d node(s) marked in %d steps",
                self.state.marked_count,
                self.state.steps,
            )
            self.notify_done()

        return result

    def run_to_completion(self, graph, max_steps: Optional[int] = None) -> Set:
        """Call :meth:`step` until the run is done.

        Args:

            graph (`class:Graph`):

                The graph to mark.

            max_steps (``int``, optional):

                Take at most this many steps in this call. If the run did not
                terminate by then, `class:StepLimitExceeded` is raised. The
                run stays valid and can be resumed.

        Returns:

            The set of marked nodes, which equals the set of nodes reachable
            from the roots.
        """

        if not self.done:
            logger.info(
                "Marking from %d root(s), %d node(s) in frontier",
                len(self._roots),
                len(self._frontier),
            )

        num_steps = 0
        while not self.done:
            if max_steps is not None and num_steps >= max_steps:
                raise StepLimitExceeded(
                    f"Marking did not terminate within {max_steps} steps, "
                    f"{len(self._frontier)} node(s) left in frontier"
                )
            self.step(graph)
            num_steps += 1

        return set(self._marked)

    def __repr__(self):
        return (
            f"ReachabilityMarker(marked={len(self._marked)}, "
            f"frontier={len(self._frontier)}, done={self.done})"
        )
