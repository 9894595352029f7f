from .cl_monitor import CLMonitor  # noqa
from .config import MarkerConfig  # noqa
from .convenience import mark_reachable, mark_reachable_many  # noqa
from .errors import (  # noqa
    AlreadyTerminatedError,
    InvariantViolation,
    MalformedGraphError,
    MarkerError,
    StepLimitExceeded,
)
from .frontier import (  # noqa
    FifoFrontier,
    Frontier,
    LifoFrontier,
    PriorityFrontier,
    RandomFrontier,
    get_frontier,
)
from .graph import Graph  # noqa
from .marked_set import BitMarkedSet, HashMarkedSet, get_marked_set  # noqa
from .marker import ReachabilityMarker, StepResult  # noqa
from .marker_state import MarkerState  # noqa
from .observer import MarkerObservee, MarkerObserver  # noqa
