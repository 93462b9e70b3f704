"""Package-wide logger."""
import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger: logging.Logger = logging.getLogger("arithmetic_evaluator")

if not logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.INFO)


def set_verbose(verbose: bool) -> None:
    """Switch the package logger between DEBUG and INFO."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
