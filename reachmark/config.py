import copy
import logging
import os

logger = logging.getLogger(__name__)


class MarkerConfig:
    """Options for a marking run as string key/value pairs, which can be
    passed on through an environment variable::

        REACHMARK_CONTEXT="strategy=lifo:marked_set=bits:seed=3"

    Recognized keys are ``strategy``, ``marked_set``, ``seed``, and
    ``progress``. Use the typed accessors to read them.
    """

    ENV_VARIABLE = "REACHMARK_CONTEXT"

    DEFAULTS = {
        "strategy": "fifo",
        "marked_set": "hash",
    }

    def __init__(self, **kwargs):

        self.__dict = {}
        for k, v in kwargs.items():
            self[k] = v

    def copy(self):

        return copy.deepcopy(self)

    def to_env(self):

        return ":".join("%s=%s" % (k, v) for k, v in self.__dict.items())

    def __setitem__(self, k, v):

        k = str(k)
        v = str(v)

        if "=" in k or ":" in k:
            raise RuntimeError("Config keys must not contain = or :.")
        if "=" in v or ":" in v:
            raise RuntimeError("Config values must not contain = or :.")

        self.__dict[k] = v

    def __getitem__(self, k):

        return self.__dict[k]

    def __contains__(self, k):

        return k in self.__dict

    def get(self, k, v=None):

        return self.__dict.get(k, self.DEFAULTS.get(k, v))

    @property
    def strategy(self):
        return self.get("strategy")

    @property
    def marked_set(self):
        return self.get("marked_set")

    @property
    def seed(self):
        seed = self.get("seed")
        return int(seed) if seed is not None else None

    @property
    def progress(self):
        value = self.get("progress", "false").lower()
        if value in ("1", "true", "yes", "on"):
            return True
        if value in ("0", "false", "no", "off"):
            return False
        raise ValueError(f"Invalid value for 'progress': {value!r}")

    def __repr__(self):

        return self.to_env()

    @staticmethod
    def from_env(required=True):
        """Read the config from ``REACHMARK_CONTEXT``. If the variable is not
        set, raise a ``KeyError``, or return the default config if
        ``required`` is ``False``."""

        try:

            env = os.environ[MarkerConfig.ENV_VARIABLE]

        except KeyError:

            if not required:
                return MarkerConfig()
            logger.error(
                "%s environment variable not found!", MarkerConfig.ENV_VARIABLE
            )
            raise

        config = MarkerConfig()

        for token in env.split(":"):
            if not token:
                continue
            k, v = token.split("=")
            config[k] = v

        return config
