from .observer import MarkerObserver
from tqdm.auto import tqdm as tqdm_auto
import logging
import tqdm


class TqdmLoggingHandler:
    """A logging handler that uses ``tqdm.tqdm.write`` in ``emit()``, such that
    logging doesn't interfere with tqdm's progress bar.

    Heavily inspired by https://github.com/EpicWink/tqdm-logging-wrapper/
    """

    def __init__(self, handler):
        self.handler = handler

    def __getattr__(self, item):
        return getattr(self.handler, item)

    def emit(self, record):
        msg = self.handler.format(record)
        tqdm.tqdm.write(msg, file=self.handler.stream)

    handle = logging.Handler.handle


class CLMonitor(MarkerObserver):
    """Show the progress of a marking run as a progress bar of marked nodes.

    Args:

        marker (`class:ReachabilityMarker`):

            The run to observe.

        total (``int``, optional):

            Upper bound on the number of nodes that will be marked, usually
            the size of the graph. Without it, only a count is shown.

        desc (``string``, optional):

            Label of the progress bar.
    """

    def __init__(self, marker, total=None, desc="marking"):
        super().__init__(marker)
        self.desc = desc
        self.progress = tqdm_auto(
            total=total, desc=desc + " ▶", unit="nodes", leave=True
        )
        self.failed = False
        self.closed = False

        self._wrap_logging_handlers()

    def _wrap_logging_handlers(self):
        """Wrap each logging handler that has a TTY stream attached to it,
        so that logging doesn't interfere with the progress bar."""

        logger = logging.root
        for i in range(len(logger.handlers)):
            if self._is_tty_stream_handler(logger.handlers[i]):
                logger.handlers[i] = TqdmLoggingHandler(logger.handlers[i])

    def _is_tty_stream_handler(self, handler):

        return (
            not isinstance(handler, TqdmLoggingHandler)
            and hasattr(handler, "stream")
            and hasattr(handler.stream, "isatty")
            and handler.stream.isatty()
        )

    def on_step(self, marker, result):
        state = marker.state
        self.progress.set_postfix(
            {
                "⧗": state.frontier_size,
                "∅": state.noop_count,
            },
            refresh=False,
        )
        if result.newly_marked:
            self.progress.update(1)

    def on_done(self, marker):
        self.close()

    def on_error(self, marker, node, exception):
        self.failed = True
        self.close()

    def close(self):
        if self.closed:
            return
        self.closed = True
        status_symbol = " ✗" if self.failed else " ✔"
        self.progress.set_description(self.desc + status_symbol)
        self.progress.close()
