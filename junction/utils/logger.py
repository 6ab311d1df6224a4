import logging

from junction.domain import config

CONSOLE_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

def setup_logging(level: str = config.LOG_LEVEL):
    """Attach a single stderr handler to the root logger."""
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT, DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(level.upper())
    root.handlers.clear()
    root.addHandler(console)
