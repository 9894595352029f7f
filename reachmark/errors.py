class MarkerError(Exception):
    """Base class for all errors raised by ``reachmark``."""


class AlreadyTerminatedError(MarkerError, RuntimeError):
    """``step`` was called on a run that has already terminated."""


class MalformedGraphError(MarkerError, ValueError):
    """The graph supplier violated its contract: a node outside the node
    universe was consulted or produced, or the successor function is not
    defined for a node."""

    def __init__(self, message, node=None):
        super().__init__(message)
        self.node = node


class StepLimitExceeded(MarkerError, RuntimeError):
    """``run_to_completion`` took ``max_steps`` steps without terminating."""


class InvariantViolation(MarkerError, AssertionError):
    def __init__(self, invariant, message):
        super().__init__(f"{invariant}: {message}")
        self.invariant = invariant
