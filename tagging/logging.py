import logging
import sys
import traceback

from tagging import config


class DetailedErrorHandler(logging.StreamHandler):
    """
    A stream handler that follows every error record with where it was logged from and the current call stack.
    Handy when a user-supplied method logs an error from deep inside a parse.
    """

    def emit(self, record):
        super().emit(record)
        if record.levelno < logging.ERROR:
            return
        self.stream.write(f"{record.pathname}:{record.lineno}\n")
        traceback.print_stack(file=self.stream)


def setup_logging(level=None, detailed=False):
    """
    Attaches a stream handler to the ``tagging`` logger. Hosts that configure logging themselves don't need this.

    :param level: The level to log at. Defaults to ``TAG_LOG_LEVEL``.
    :param bool detailed: Whether to print stack info for error-level logs.
    :rtype: logging.Logger
    """
    logger = logging.getLogger("tagging")
    handler = DetailedErrorHandler(sys.stdout) if detailed else logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s:%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level or config.LOG_LEVEL)
    return logger
