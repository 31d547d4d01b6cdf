import logging
import sys

LOG_FILE = "/var/log/wifi_setup.log"
FALLBACK_LOG_FILE = "/tmp/wifi_setup.log"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger() -> logging.Logger:
    logger = logging.getLogger("wifi_setup")
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    fmt = logging.Formatter(_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S")

    # /var/log is root-only on most systems
    try:
        fh = logging.FileHandler(LOG_FILE)
    except PermissionError:
        fh = logging.FileHandler(FALLBACK_LOG_FILE)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.WARNING)
    console.setFormatter(fmt)

    logger.addHandler(fh)
    logger.addHandler(console)
    return logger


def set_console_level(level: int) -> None:
    """Change the stderr threshold; the log file always gets DEBUG."""
    for handler in log.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


log = setup_logger()
