# catalog/core/logging.py
import logging
import sys
import colorlog

ACCESS_LOGGER = "catalog.access"

_LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def _stream_handler(fmt: str) -> logging.Handler:
    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(colorlog.ColoredFormatter(fmt, datefmt="%H:%M:%S", log_colors=_LOG_COLORS))
    return handler


def access_level(status_code: int) -> int:
    """Access lines are colored by outcome: 2xx/3xx INFO, 4xx WARNING, 5xx ERROR."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


def configure_logging(level=logging.INFO):
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [
        _stream_handler("%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s")
    ]

    # One short line per request ("GET /products/SKU-1001 200 1.8ms"), own handler, not duplicated on root
    access = logging.getLogger(ACCESS_LOGGER)
    access.handlers = [_stream_handler("%(asctime)s %(log_color)s%(message)s%(reset)s")]
    access.propagate = False
    access.setLevel(logging.INFO)

    # Our middleware replaces uvicorn's access log
    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)
