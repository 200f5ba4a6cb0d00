import logging
import sys


logger = logging.getLogger("vrs")

_handler = None


def configure_logging(debug: bool):
    """
    Send vrs log records to stdout, at DEBUG level when ``debug`` is set.

    Debug output is prefixed with the module that logged it. Calling this
    again replaces the handler, so it always writes to the current stdout.
    """
    global _handler

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stdout)
    logger.addHandler(_handler)
    logger.propagate = False

    if debug:
        _handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
        logger.setLevel(logging.DEBUG)
    else:
        _handler.setFormatter(logging.Formatter("%(message)s"))
        logger.setLevel(logging.INFO)
