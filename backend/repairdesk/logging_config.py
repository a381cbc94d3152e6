import logging
import sys

LOGGER_NAMESPACE = "repairdesk"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a single stdout handler to the ``repairdesk`` logger namespace.
    Safe to call more than once (uvicorn reloads, test modules importing the app).
    """
    log = logging.getLogger(LOGGER_NAMESPACE)
    log.setLevel(level.upper())
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        log.addHandler(h)
    return log
