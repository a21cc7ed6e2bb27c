"""Runtime configuration, read from the environment."""
import logging
import os
import sys

DEFAULT_RECIPES_API_URL = "http://localhost:8080"
DEFAULT_REQUEST_TIMEOUT = 10.0

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

log = logging.getLogger(__name__)


def get_recipes_api_url() -> str:
    """Base URL of the recipes API, without a trailing slash."""
    url = os.getenv("RECIPES_API_URL") or DEFAULT_RECIPES_API_URL
    return url.rstrip("/")


def get_request_timeout() -> float:
    raw = os.getenv("RECIPES_API_TIMEOUT")
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        log.warning(f"Ignoring invalid RECIPES_API_TIMEOUT={raw!r}, using {DEFAULT_REQUEST_TIMEOUT}s")
        return DEFAULT_REQUEST_TIMEOUT
    if timeout <= 0:
        log.warning(f"Ignoring non-positive RECIPES_API_TIMEOUT={raw!r}, using {DEFAULT_REQUEST_TIMEOUT}s")
        return DEFAULT_REQUEST_TIMEOUT
    return timeout


def setup_logging() -> None:
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
