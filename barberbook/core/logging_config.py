"""
Logging Configuration
=====================

Configures the root logger once per process. Module loggers obtained via
``logging.getLogger(__name__)`` inherit this handler and format.
"""
import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger with a console handler.

    Does nothing if the root logger already has handlers (e.g. when
    ``create_application`` is called repeatedly in tests or uvicorn
    configured logging first).

    Args:
        level: Logging level name ("DEBUG", "INFO", ...), case insensitive
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
