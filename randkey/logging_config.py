import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging to stderr.

    Args:
        verbose: Log randkey internals (chunk plans, timings) at DEBUG
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.INFO if verbose else logging.WARNING)

    # Keys go to stdout; keep diagnostics on stderr.
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    randkey_logger = logging.getLogger("randkey")
    randkey_logger.setLevel(logging.DEBUG if verbose else logging.NOTSET)
