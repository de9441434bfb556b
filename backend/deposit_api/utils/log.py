import logging
import sys

from deposit_api.config import settings


def get_logger(name: str) -> logging.Logger:
    """
    Return a module logger writing to stdout as "[name] message".
    The handler is attached once, so repeated calls are safe.
    """
    log = logging.getLogger(name)
    log.setLevel(settings.LOG_LEVEL.upper())
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter("[%(name)s] %(levelname)s %(message)s"))
        log.addHandler(h)
    return log
