from .cl_monitor import CLMonitor
from .config import MarkerConfig
from .frontier import get_frontier
from .marked_set import get_marked_set
from .marker import ReachabilityMarker
from multiprocessing.pool import ThreadPool
import functools
import logging

logger = logging.getLogger(__name__)


def mark_reachable(
    graph,
    roots,
    strategy=None,
    marked_set=None,
    seed=None,
    progress=None,
    max_steps=None,
    config=None,
):
    """Mark all nodes of ``graph`` reachable from ``roots``.

    Args:

        graph (`class:Graph`):

            The graph to mark.

        roots (iterable of nodes):

            The nodes to start from. All of them have to be part of
            ``graph``.

        strategy (``string``, optional):

            Frontier selection strategy (``"fifo"``, ``"lifo"``,
            ``"random"``, or ``"priority"``).

        marked_set (``string``, optional):

            Container for marked nodes, ``"hash"`` or ``"bits"``.

        seed (``int``, optional):

            Seed for the ``"random"`` strategy.

        progress (``bool``, optional):

            Show a progress bar.

        max_steps (``int``, optional):

            Give up with `class:StepLimitExceeded` after this many steps.

        config (`class:MarkerConfig`, optional):

            Defaults for all arguments that are not given explicitly. If not
            given, the config is read from the ``REACHMARK_CONTEXT``
            environment variable (if set).

    Return:

        ``set``: The nodes reachable from ``roots``.
    """

    if config is None:
        config = MarkerConfig.from_env(required=False)
    if strategy is None:
        strategy = config.strategy
    if marked_set is None:
        marked_set = config.marked_set
    if seed is None:
        seed = config.seed
    if progress is None:
        progress = config.progress

    roots = list(roots)
    graph.check_nodes(roots)

    frontier_kwargs = {"seed": seed} if strategy == "random" else {}
    marker = ReachabilityMarker(
        roots,
        frontier=get_frontier(strategy, **frontier_kwargs),
        marked_set=get_marked_set(marked_set, graph),
    )
    logger.debug(
        "Marking %s from %d root(s) with strategy %s and %s marked set",
        graph,
        len(marker.roots),
        strategy,
        marked_set,
    )

    monitor = CLMonitor(marker, total=len(graph)) if progress else None
    try:
        return marker.run_to_completion(graph, max_steps=max_steps)
    finally:
        if monitor is not None:
            monitor.close()


def mark_reachable_many(graph, root_sets, num_workers=1, **kwargs):
    """Run independent markings of ``graph``, one per root set.

    The runs share ``graph`` read-only and nothing else, so they can run in
    parallel. ``kwargs`` are passed on to :func:`mark_reachable`.

    Return:

        ``list`` of ``set``: The reachable nodes for each root set, in the
        order of ``root_sets``.
    """

    root_sets = [list(roots) for roots in root_sets]
    run = functools.partial(mark_reachable, graph, **kwargs)

    logger.info(
        "Marking %d root set(s) with %d worker(s)", len(root_sets), num_workers
    )

    if num_workers <= 1:
        return [run(roots) for roots in root_sets]

    with ThreadPool(processes=num_workers) as pool:
        return pool.map(run, root_sets)
